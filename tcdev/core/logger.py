"""Logging for tcdev: rich console output plus an optional log file.

Child processes write to our stdout, so log records go to stderr.
"""
import logging
import tempfile
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)

ROOT_LOGGER = "tcdev"
LOG_FILE = Path.home() / ".tcdev" / "tcdev.log"

_file_handler: Optional[logging.FileHandler] = None


def _level(verbose: bool) -> int:
    return logging.DEBUG if verbose else logging.INFO


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> Path:
    """Mirror every tcdev log record into a file.

    Only the first call installs a handler; later calls return the file
    already in use.

    Args:
        log_file: Target file, ~/.tcdev/tcdev.log when omitted
        verbose: Record DEBUG messages as well

    Returns:
        Path of the log file actually written
    """
    global _file_handler

    if _file_handler is not None:
        return Path(_file_handler.baseFilename)

    target = Path(log_file) if log_file else LOG_FILE
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        target = Path(tempfile.gettempdir()) / "tcdev.log"

    _file_handler = logging.FileHandler(target)
    _file_handler.setLevel(_level(verbose))
    _file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root = logging.getLogger(ROOT_LOGGER)
    root.addHandler(_file_handler)
    root.setLevel(_level(verbose))
    root.debug(f"Writing log file {target}")
    return target


def set_verbose(verbose: bool) -> None:
    """Switch every tcdev logger between INFO and DEBUG."""
    level = _level(verbose)
    logging.getLogger(ROOT_LOGGER).setLevel(level)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith(ROOT_LOGGER) and isinstance(logger, logging.Logger):
            logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` with a rich console handler attached."""
    logger = logging.getLogger(name)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
