"""
Centralized logging configuration for pgmodel.

Library modules only ask for loggers through :func:`get_logger`; the command
line entry point calls :func:`setup_logging` once. Behaviour is configured with
environment variables:

- ``PGMODEL_LOG_LEVEL``: level of the ``pgmodel`` logger (default ``INFO``)
- ``PGMODEL_ENV``: ``production`` switches to the structured format
- ``PGMODEL_LOG_FILE``: optional path of a rotating log file
"""

import functools
import logging
import logging.config
import os
import sys
import time
from typing import Dict, Any


def get_log_level() -> str:
    """Get log level from environment variable or default to INFO."""
    return os.getenv("PGMODEL_LOG_LEVEL", "INFO").upper()


def get_log_format() -> str:
    """Get log format based on environment."""
    env = os.getenv("PGMODEL_ENV", "development").lower()

    if env == "production":
        return "%(asctime)s | %(name)s | %(levelname)s | %(message)s | %(pathname)s:%(lineno)d"
    else:
        return "%(asctime)s | %(name)-20s | %(levelname)-8s | %(message)s"


def get_logging_config() -> Dict[str, Any]:
    """Get the logging configuration dictionary."""
    log_level = get_log_level()
    log_format = get_log_format()

    # stderr keeps stdout free for the model JSON written by the CLI
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": log_format,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": "%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "standard",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            "pgmodel": {
                "level": log_level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
        "root": {
            "level": "WARNING",
            "handlers": ["console"],
        },
    }

    log_file = os.getenv("PGMODEL_LOG_FILE")
    if log_file:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": log_level,
            "formatter": "detailed",
            "filename": log_file,
            "maxBytes": 10 * 1024 * 1024,  # 10MB
            "backupCount": 5,
        }
        config["loggers"]["pgmodel"]["handlers"].append("file")

    return config


def setup_logging() -> None:
    """Setup logging configuration for the application."""
    config = get_logging_config()
    logging.config.dictConfig(config)

    logger = logging.getLogger("pgmodel.logging")
    logger.debug("Logging configured with level: %s", get_log_level())

    if os.getenv("PGMODEL_LOG_FILE"):
        logger.info("File logging enabled: %s", os.getenv("PGMODEL_LOG_FILE"))


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Logger instance below the ``pgmodel`` hierarchy
    """
    if not name.startswith("pgmodel"):
        if name == "__main__":
            name = "pgmodel.main"
        else:
            name = f"pgmodel.{name}"

    return logging.getLogger(name)


def log_performance(logger: logging.Logger, operation: str):
    """
    Decorator to log performance timing of operations.

    Args:
        logger: Logger instance to use
        operation: Description of the operation being timed
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration = time.perf_counter() - start_time
                logger.error("Operation '%s' failed after %.3fs: %s", operation, duration, str(e))
                raise
            duration = time.perf_counter() - start_time
            logger.debug("Operation '%s' completed in %.3fs", operation, duration)
            return result

        return wrapper

    return decorator
