"""
Logging Configuration
The library only creates module loggers; an application calls setup_logging
once to see singular-curve warnings and degenerate-construction errors.
"""
import logging
from typing import Optional, TextIO


def setup_logging(level: int = logging.WARNING, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach a single stream handler to the 'curvetools' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG to follow scalar multiplication)
        stream: Where to write, sys.stderr when omitted.
    """
    logger = logging.getLogger("curvetools")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(handler)
    return logger
