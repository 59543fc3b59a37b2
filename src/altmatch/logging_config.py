"""Logging setup for altmatch.

The library only creates loggers under the ``altmatch`` namespace; handlers are
installed by :func:`setup_logging`, which the command line interface calls.
"""
from __future__ import annotations

import logging
import logging.config
import os

ROOT_LOGGER = "altmatch"
LOG_LEVEL_ENV = "ALTMATCH_LOG_LEVEL"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def default_log_level() -> str:
    level = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    # unknown names in the environment fall back instead of failing dictConfig
    return level if level in LOG_LEVELS else "WARNING"


def setup_logging(log_level: str | None = None, log_file: str | None = None) -> None:
    """Configure console (stderr) and optional file logging for ``altmatch``.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL; defaults to
            ``$ALTMATCH_LOG_LEVEL`` or WARNING
        log_file: optional path that receives DEBUG output as well
    """
    level = (log_level or default_log_level()).upper()
    config: dict[str, object] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {"format": "%(levelname)s - %(name)s - %(message)s"},
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "simple",
                "stream": "ext://sys.stderr",
            }
        },
        "loggers": {
            ROOT_LOGGER: {"level": level, "handlers": ["console"], "propagate": False},
        },
    }
    if log_file:
        config["handlers"]["file"] = {  # type: ignore[index]
            "class": "logging.FileHandler",
            "level": "DEBUG",
            "formatter": "detailed",
            "filename": log_file,
            "encoding": "utf8",
        }
        config["loggers"][ROOT_LOGGER]["handlers"].append("file")  # type: ignore[index]
        config["loggers"][ROOT_LOGGER]["level"] = "DEBUG"  # type: ignore[index]
    logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the ``altmatch`` namespace.

    Module names that already start with ``altmatch`` are used unchanged.
    """
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
