"""
Corpus sources producing (title, body) pairs used to populate the document store.

Two layouts are supported:
- a JSON file holding an array of objects with a "title" and a "body"
  (or "text"/"content") field;
- a directory of plain-text files, one article per file, where the first
  non-empty line is the title and the rest is the body.
"""
import json
import logging
import os
from typing import Iterator, List, Tuple

from .errors import CorpusError
from .preprocessing.document import Document

logger = logging.getLogger(__name__)

Article = Tuple[str, str]


class Corpus:
    """Base class for corpus sources."""

    def count(self) -> int:
        raise NotImplementedError()

    def __iter__(self) -> Iterator[Article]:
        raise NotImplementedError()

    def documents(self) -> Iterator[Document]:
        """Yield a Document for every article in the corpus."""
        for title, body in self:
            yield Document(title, body)


class JsonCorpus(Corpus):
    def __init__(self, path: str):
        """
        Load articles from a JSON file.

        Args:
            path: Path to a JSON array of article objects

        Raises:
            CorpusError: If the file is missing, unreadable or not an array
        """
        self.path = path
        self._articles: List[Article] = []

        if not os.path.isfile(path):
            raise CorpusError(f"Corpus file {path} not found")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CorpusError(f"Could not read corpus {path}: {e}") from e

        if not isinstance(data, list):
            raise CorpusError(f"Corpus {path} must contain a JSON array of articles")

        for i, item in enumerate(data):
            if not isinstance(item, dict):
                logger.warning("Skipping entry %d in %s: not an object", i, path)
                continue
            title = item.get("title")
            if not isinstance(title, str) or not title.strip():
                logger.warning("Skipping entry %d in %s: missing title", i, path)
                continue
            title = title.strip()
            body = item.get("body", item.get("text", item.get("content", ""))) or ""
            if not isinstance(body, str):
                logger.warning("Skipping entry %d in %s: body is not text", i, path)
                continue
            self._articles.append((title, body))

        logger.info("Read %d articles from %s", len(self._articles), path)

    def count(self) -> int:
        return len(self._articles)

    def __iter__(self) -> Iterator[Article]:
        return iter(self._articles)


class DirectoryCorpus(Corpus):
    def __init__(self, path: str, encoding: str = "utf-8"):
        """
        Read one article per file from a directory.

        Args:
            path: Directory containing article files
            encoding: Text encoding of the files

        Raises:
            CorpusError: If the directory does not exist
        """
        if not os.path.isdir(path):
            raise CorpusError(f"Corpus directory {path} not found")
        self.path = path
        self.encoding = encoding
        self._files = sorted(
            name for name in os.listdir(path)
            if os.path.isfile(os.path.join(path, name)) and not name.startswith(".")
        )

    def count(self) -> int:
        return len(self._files)

    def __iter__(self) -> Iterator[Article]:
        for name in self._files:
            file_path = os.path.join(self.path, name)
            try:
                with open(file_path, "r", encoding=self.encoding) as f:
                    text = f.read()
            except (OSError, UnicodeDecodeError) as e:
                raise CorpusError(f"Could not read article {file_path}: {e}") from e

            lines = text.splitlines()
            # Skip leading blank lines; the first real line is the title
            while lines and not lines[0].strip():
                lines.pop(0)
            if not lines:
                logger.warning("Skipping empty article file %s", file_path)
                continue
            title = lines[0].strip()
            body = "\n".join(lines[1:]).strip("\n")
            yield title, body


def load_corpus(path: str) -> Corpus:
    """
    Pick a corpus source for the given path.

    Args:
        path: JSON file or directory of article files

    Returns:
        Corpus instance

    Raises:
        CorpusError: If the path does not exist
    """
    if os.path.isdir(path):
        return DirectoryCorpus(path)
    if os.path.isfile(path):
        return JsonCorpus(path)
    raise CorpusError(f"Corpus path {path} not found")
