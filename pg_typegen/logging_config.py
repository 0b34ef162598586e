"""Logging configuration for pg_typegen.

All modules obtain their logger through :func:`get_logger` so that output
can be controlled from a single package-level logger.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "pg_typegen"

_configured = False


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """Configure the package logger.

    Repeated calls update the level of every handler and add a file
    handler for a log file not seen before.

    Args:
        level: Log level name or number.
        log_file: Optional file that receives a plain-text copy of the logs.

    Returns:
        The configured package logger.

    Raises:
        OSError: If the log file cannot be opened.
    """
    global _configured

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in logger.handlers:
        handler.setLevel(level)

    if not _configured:
        console_handler = RichHandler(
            level=level,
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)
        _configured = True

    if log_file and _find_file_handler(logger, log_file) is None:
        file_handler = logging.FileHandler(Path(log_file), encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


def _find_file_handler(
    logger: logging.Logger, log_file: Union[str, Path]
) -> Optional[logging.FileHandler]:
    target = os.path.abspath(log_file)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
            return handler
    return None


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package logger."""
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
