"""
Console and file logging for applications that drive tdode systems.

Importing tdode never installs handlers. A driver that wants to see
translator selection, adapter construction and size errors calls
setup_logging() once before building its systems.
"""
import logging
import os
import sys
from typing import Optional, Union

NAMESPACE = "tdode"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, "os.PathLike[str]"]] = None,
) -> logging.Logger:
    """
    Route records of every tdode module to stdout and optionally a file.

    Repeated calls replace the handlers installed before.

    Args:
        level: Threshold as a logging constant or a name such as "debug"
        log_file: Path of a log file, overwritten on each call

    Returns:
        The configured "tdode" logger
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level {name!r}")

    logger = logging.getLogger(NAMESPACE)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging initialized.")
    return logger
