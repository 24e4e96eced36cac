"""Logging setup for gcspublish.

Everything logs under the ``gcspublish`` logger: the CLI configures it once
with ``setup_logging`` and modules obtain children with ``get_logger``.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from gcspublish.exceptions import ConfigurationError

PACKAGE_LOGGER = "gcspublish"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: Union[int, str], verbose: bool = False) -> int:
    """Turn a level name or number into a logging level.

    ``verbose`` always wins and selects DEBUG.

    Raises:
        ConfigurationError: If ``level`` names no logging level
    """
    if verbose:
        return logging.DEBUG
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(f"Unknown log level: {level}")
    return resolved


def setup_logging(
    level: Union[int, str] = "INFO",
    log_file: Optional[str] = None,
    verbose: bool = False,
) -> logging.Logger:
    """Configure the package logger for a CLI run.

    Handlers from a previous call are closed and replaced. The logger does
    not propagate, so upload lines are not duplicated by a host's root
    configuration.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL) or number
        log_file: Optional file that receives the same records as stdout;
            missing parent directories are created
        verbose: If True, sets level to DEBUG

    Returns:
        The configured ``gcspublish`` logger

    Example:
        >>> logger = setup_logging(verbose=True, log_file="logs/publish.log")
        >>> logger.info("Publishing started")
    """
    log_level = resolve_level(level, verbose)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, always inside the ``gcspublish`` hierarchy.

    ``get_logger(__name__)`` inside the package keeps the module name as-is;
    any other name is prefixed.

    Example:
        >>> get_logger("gcspublish.bucket.gcs_manager").name
        'gcspublish.bucket.gcs_manager'
        >>> get_logger("helpers").name
        'gcspublish.helpers'
    """
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
