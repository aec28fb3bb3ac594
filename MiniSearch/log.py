import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

# Shared console for every user-facing message
console = Console()

LOGGER_NAME = "MiniSearch"


def setup_logging(level: Union[int, str] = logging.WARNING,
                  log_console: Optional[Console] = None) -> logging.Logger:
    """
    Configure the package logger to render through rich.

    Args:
        level: Logging level name or number
        log_console: Console to render to (defaults to the shared console)

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Replace handlers from earlier calls instead of stacking them
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=log_console or console,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
