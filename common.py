# Shared utilities for gsloc
import os
import logging
from typing import Optional


def setup_logging(name: str, logfile: Optional[str] = None, verbose: bool = False) -> logging.Logger:
    """
    Configure and return a logger that writes to stdout and, if given, 'logfile'.

    The console handler is only added once per logger name; a file handler
    is added once per log file path, even when the logger already has handlers.
    """
    fmt = logging.Formatter('%(asctime)s %(levelname)s %(message)s')

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(fmt)
        logger.addHandler(console)

    if logfile:
        path = os.path.abspath(logfile)
        attached = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == path
            for h in logger.handlers
        )
        if not attached:
            os.makedirs(os.path.dirname(path), exist_ok=True)
            handler = logging.FileHandler(path, encoding='utf-8')
            handler.setFormatter(fmt)
            logger.addHandler(handler)

    return logger
