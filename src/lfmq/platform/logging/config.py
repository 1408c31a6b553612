"""Where: src/lfmq/platform/logging/config.py
What: Build the ``lfmq`` logger: Rich console on stderr plus an optional rotating file.
Why: The CLI reconfigures levels and the log file after parsing arguments.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from lfmq.config.paths import default_log_file

from .handlers import RequestRichHandler


DEFAULT_LOG_FILE: Final[Path] = default_log_file()

_LOGGER_NAME: Final[str] = "lfmq"
_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_ROTATE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
_ROTATE_BACKUPS: Final[int] = 5


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the ``lfmq`` logger, replacing any handlers from a previous call.

    Request events render through ``RequestRichHandler`` on the console; the
    file receives plain lines.
    """

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console_handler = RequestRichHandler(console=Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        target = Path(log_file).expanduser().resolve()
        target.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            target,
            maxBytes=_ROTATE_MAX_BYTES,
            backupCount=_ROTATE_BACKUPS,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


# Console only until the CLI attaches the configured log file.
logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "setup_logger", "logger"]
