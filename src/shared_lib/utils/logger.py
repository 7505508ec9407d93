"""
Logging setup for the chart packages.

Library modules only call ``get_logger``; the command line calls
``setup_logging`` once. Console records go to stderr so that ``--json``
output on stdout stays parseable, and the log file only receives errors.
"""

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from src.shared_lib.core.settings import LOG_LEVEL, LOG_FILE

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are chatty at DEBUG
NOISY_LOGGERS = ("asyncio", "urllib3")


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    console_output: bool = True,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        level: Logging level name; defaults to LOG_LEVEL
        log_file: Error log path; defaults to LOG_FILE
        console_output: Attach a stderr handler at ``level``
        quiet: Logger names raised to WARNING

    Returns:
        The configured root logger
    """
    numeric_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    file_path = Path(log_file or LOG_FILE)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(file_path, encoding="utf-8")
    file_handler.setLevel(logging.ERROR)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    logging.captureWarnings(True)
    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ("setup_logging", "get_logger", "LOG_FORMAT")
