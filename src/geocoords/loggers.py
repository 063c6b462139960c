"""Contains logging configuration data."""

import sys

# Logger printing formats
DEFAULT_FORMAT = "<level>{level}</level>: {message}"
DEBUG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <7}</level> | "
    "<cyan>{name}:{line}</cyan> | "
    "{message}"
)


def setup_logging(
    filename=None,
    level="DEBUG",
) -> None:
    """Configures logging to file and console.

    Parameters
    ----------
    filename : str | None
        log filename
    level : str, optional
        change default level of logging.
    """
    from loguru import logger

    logger.remove()
    logger.enable("geocoords")
    fmt = DEBUG_FORMAT if level in ("TRACE", "DEBUG") else DEFAULT_FORMAT
    logger.add(sys.stderr, level=level, format=fmt)
    if filename:
        logger.add(filename, level=level, format=DEBUG_FORMAT)
