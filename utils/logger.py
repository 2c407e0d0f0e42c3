"""Logger setup for punch."""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from config import config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(
        name: str = "punch",
        level: Union[int, str, None] = None,
        log_dir: Optional[Path] = None,
        console: bool = False,
        persistent: bool = True,
) -> logging.Logger:
    """
    Configure and return the application logger.

    Handlers are named, so calling this repeatedly does not stack duplicates.
    A repeated call with a different log_dir moves the log file there, and
    handlers that are no longer requested are removed.

    Args:
        name: Logger name; modules log through children of it
        level: Log level, defaults to config.log_level
        log_dir: Directory for the rotating log file, defaults to config.log_dir
        console: Also log to stderr
        persistent: Write to a rotating log file

    Returns:
        The configured logger

    Raises:
        OSError: If the log directory cannot be created
    """
    logger = logging.getLogger(name)
    logger.propagate = False
    logger.setLevel(level or config.log_level)

    fmt = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)

    persistent_handler_name = f"{name}:persistent"
    current = _named_handler(logger, persistent_handler_name)
    if persistent:
        log_file = Path(log_dir or config.log_dir) / f"{name}.log"
        if current is None or current.baseFilename != os.path.abspath(log_file):
            _remove_handler(logger, current)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            persistent_handler = RotatingFileHandler(
                filename=log_file,
                maxBytes=config.log_max_bytes,
                backupCount=config.log_backup_count,
                encoding="utf-8",
                delay=True,
            )
            persistent_handler.setFormatter(fmt)
            persistent_handler.set_name(persistent_handler_name)
            logger.addHandler(persistent_handler)
    else:
        _remove_handler(logger, current)

    console_handler_name = f"{name}:console"
    current = _named_handler(logger, console_handler_name)
    if console and current is None:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(fmt)
        console_handler.set_name(console_handler_name)
        logger.addHandler(console_handler)
    elif not console:
        _remove_handler(logger, current)

    return logger


def _named_handler(logger: logging.Logger, handler_name: str) -> Optional[logging.Handler]:
    return next((h for h in logger.handlers if h.get_name() == handler_name), None)


def _remove_handler(logger: logging.Logger, handler: Optional[logging.Handler]) -> None:
    if handler is not None:
        logger.removeHandler(handler)
        handler.close()
