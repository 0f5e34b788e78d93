"""
Logging setup for the sandbox window and launcher.

Library modules only create module loggers; handlers are attached here, on
the package logger, when the application starts.
"""

import logging
import logging.config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def logging_dict(level="INFO", log_file=None):
    """dictConfig schema for the package logger."""
    level = logging.getLevelName(level) if isinstance(level, int) else level.upper()
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
            "formatter": "plain",
        },
    }
    if log_file:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": str(log_file),
            "mode": "w",
            "encoding": "utf-8",
            "formatter": "plain",
        }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"plain": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT}},
        "handlers": handlers,
        "loggers": {
            "wave_interference": {"level": level, "handlers": list(handlers)},
        },
    }


def setup_logging(level="INFO", log_file=None):
    """Configure the package logger; calling it again replaces the handlers."""
    logging.config.dictConfig(logging_dict(level, log_file))
    logger = logging.getLogger("wave_interference")
    logger.debug("Logging configured at %s", logging.getLevelName(logger.level))
    return logger
