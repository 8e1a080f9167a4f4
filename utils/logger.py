import logging
from typing import Union

# Level applied to the package loggers unless set_logging_level says otherwise
LOGGING_LEVEL: int = logging.WARNING

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

PACKAGE_LOGGERS = ('genetic', 'config', 'utils')


def initialize_logger(name: str) -> logging.Logger:
    """Returns the logger for `name`; module loggers inherit their level from the package logger."""
    logging.basicConfig(format=LOG_FORMAT)
    package_logger = logging.getLogger(name.split('.')[0])
    if package_logger.level == logging.NOTSET:
        package_logger.setLevel(LOGGING_LEVEL)
    return logging.getLogger(name)


def set_logging_level(level: Union[int, str]) -> None:
    """Sets the level of all package loggers.

    Args:
        level (Union[int, str]): A logging level, either as int or by name (e.g. 'DEBUG').
    """
    global LOGGING_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    LOGGING_LEVEL = level
    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(level)
