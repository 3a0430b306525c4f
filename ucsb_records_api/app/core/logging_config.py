"""
Logging configuration for the UCSB Records API.

``setup_logging`` is called once from ``create_app`` with
``settings.log_level`` and ``settings.log_file``.  Records go to the
console and, when ``LOG_FILE`` is set, to that file as well (its
directory is created if missing).  uvicorn's own loggers are put on
the same level so that ``run.py`` output matches the application's.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def build_handlers(logfile: Optional[str] = None) -> List[logging.Handler]:
    """Return the console handler plus a file handler for ``logfile``."""
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger unless it already has handlers.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive; unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Optional path of a log file, resolved against the working
        directory.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)

    logger = logging.getLogger()
    if logger.handlers:
        # pytest and repeated create_app calls
        return
    logger.setLevel(numeric_level)
    for handler in build_handlers(logfile):
        logger.addHandler(handler)
