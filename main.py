import sys

from MiniSearch.main import main

if __name__ == "__main__":
    sys.exit(main())
