"""Logging setup for TaskTabs.

A terminal UI owns stdout, so application logs go to a rotating file under
~/.tasktabs/logs. During development the Textual devtools console can be
used instead (``textual console`` + ``use_textual_handler=True``).

The level comes from the caller, then TASKTABS_LOG_LEVEL, then INFO.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


LOG_LEVEL_ENV = "TASKTABS_LOG_LEVEL"

LOG_DIR = Path.home() / ".tasktabs" / "logs"
LOG_FILE = LOG_DIR / "tasktabs.log"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5

DEFAULT_LEVEL = "INFO"


def resolve_log_level(log_level: Optional[str] = None) -> str:
    """Work out which level name to use.

    Args:
        log_level: Explicit level name, or None to read TASKTABS_LOG_LEVEL

    Returns:
        Upper-case level name; unknown names resolve to INFO
    """
    name = (log_level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LEVEL).upper()
    if not isinstance(getattr(logging, name, None), int):
        return DEFAULT_LEVEL
    return name


def _textual_handler() -> Optional[logging.Handler]:
    try:
        from textual.logging import TextualHandler
    except ImportError:
        return None
    return TextualHandler()


def setup_logging(
    log_level: Optional[str] = None,
    use_textual_handler: bool = False
) -> None:
    """Configure the root logger for the application.

    Replaces any handlers already on the root logger, so calling it twice
    does not duplicate output.

    Args:
        log_level: Level name (DEBUG, INFO, ...). Defaults to the
                   TASKTABS_LOG_LEVEL environment variable, then INFO.
        use_textual_handler: Send records to the Textual devtools console
                             instead of the log file. Falls back to the file
                             when Textual's handler cannot be imported.

    Example:
        >>> setup_logging()
        >>> setup_logging(log_level="DEBUG")
    """
    level_name = resolve_log_level(log_level)
    level = getattr(logging, level_name)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = _textual_handler() if use_textual_handler else None
    using_textual = handler is not None

    if handler is None:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            LOG_FILE,
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8"
        )

    handler.setLevel(level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.getLogger(__name__).info(
        f"Logging initialized: level={level_name}, "
        f"file={LOG_FILE}, textual_handler={using_textual}"
    )


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module.

    Args:
        name: Module name, typically __name__

    Returns:
        Logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Task added")
    """
    return logging.getLogger(name)
