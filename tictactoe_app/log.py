import sys

from loguru import logger

LOG_FORMAT = "{time:HH:mm:ss} | {level: <8} | {name}:{function} - {message}"


def configure_logging(level: str, sink=None):
    """
    Replace loguru's default sink with a single sink at `level`.
    Unknown level names fall back to INFO.

    Args:
        level: loguru level name, e.g. "DEBUG".
        sink: where to write, sys.stderr when None.
    """
    sink = sys.stderr if sink is None else sink
    logger.remove()
    try:
        logger.add(sink, level=level, format=LOG_FORMAT)
    except ValueError:
        logger.add(sink, level="INFO", format=LOG_FORMAT)
        logger.warning(f"unknown log level {level!r}, using INFO")
