"""
Logging Configuration
Sets up the 'tagcloud' logger for the demo and for scripts using the package.

Library modules only create their loggers with `logging.getLogger(__name__)`;
attaching handlers is left to the application through `setup_logging`.
"""
import logging
import os
import sys
from typing import Optional

from tagcloud.config import OUTPUT_PATH

PACKAGE_LOGGER: str = "tagcloud"
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT: str = '%H:%M:%S'


def resolve_log_path(log_file: str) -> str:
    """Relative log names go into the output directory, next to the rendered clouds."""
    if os.path.isabs(log_file):
        return log_file
    return os.path.join(OUTPUT_PATH, log_file)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> Optional[str]:
    """
    Attach a stdout handler (and optionally a file handler) to the package logger.

    Calling it again replaces the previous handlers, so a layout run started
    twice in one interpreter does not print every line twice.

    Args:
        level: Logging level (e.g. logging.DEBUG to see every placement).
        log_file: Optional log file. A relative name is resolved inside the
            output directory; missing directories are created.

    Returns:
        Absolute path of the log file, or None when logging only to stdout.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_path = None
    if log_file:
        log_path = resolve_log_path(log_file)
        directory = os.path.dirname(log_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized (level {logging.getLevelName(level)}, file: {log_path or 'none'}).")
    return log_path
