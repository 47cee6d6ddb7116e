"""Package logger for onerm.

The ``onerm`` logger is built at import from ONERM_LOG_LEVEL and
ONERM_LOG_FILE, and rebuilt by ``config.load_settings`` once a .env file has
been read. Formula dispatch logs its fallbacks at DEBUG; table builders log
their calls through ``log_function_call``.
"""
import logging
import sys
from functools import wraps
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import log_file, log_level

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(
    name: str = "onerm",
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True,
) -> logging.Logger:
    """(Re)configure a logger, replacing and closing any handlers it had.

    ``level`` is a logging level name such as "DEBUG" or "warning".
    ``log_file`` adds a rotating file handler, creating parent directories.
    ``console`` adds a stdout handler.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10_000_000,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def env_logger() -> logging.Logger:
    """Build the package logger from the ONERM_LOG_* environment variables.

    An unknown ONERM_LOG_LEVEL leaves the logger at INFO with a warning, so
    the formula modules stay importable.
    """
    try:
        level = log_level()
    except ValueError as e:
        lg = setup_logger(log_file=log_file())
        lg.warning(f"{e}; using INFO")
        return lg
    return setup_logger(level=level, log_file=log_file())


logger = env_logger()


def log_function_call(func):
    """Log entry and exit of ``func`` at DEBUG, and any exception at ERROR."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        func_name = func.__name__
        logger.debug(f"Calling {func_name} with args={args}, kwargs={kwargs}")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"{func_name} raised {type(e).__name__}: {e}")
            raise
        logger.debug(f"{func_name} completed successfully")
        return result

    return wrapper
