"""
Logging Configuration
The solver modules only emit debug records (dispatch, projections, t=0
shortcut) on their module loggers. Nothing is configured on import; an
embedding application calls `setup_logging` when it wants to see them.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the solver records of the 'heatdiffusion' package to stdout.

    Calling it again replaces the handlers of the previous call, so a redraw
    loop that reconfigures logging never duplicates lines.

    Args:
        level: Threshold for the package logger, logging.DEBUG shows every
            sampled frame.
        log_file: Optional path of a log file, truncated on each call.

    Returns:
        The 'heatdiffusion' logger.
    """
    logger = logging.getLogger("heatdiffusion")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging initialized.")
    return logger
