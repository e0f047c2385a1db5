from __future__ import annotations

import logging
import logging.config


def setup_logging(level: str = "INFO", request_log: bool = False):
    level = level.upper()
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                        "datefmt": "%H:%M:%S"},
        },
        "handlers": {
            "console": {"class": "logging.StreamHandler", "formatter": "default"},
        },
        "loggers": {
            "werkzeug": {"level": ("INFO" if request_log else "WARNING"),
                         "handlers": ["console"], "propagate": False},
        },
        "root": {"level": level, "handlers": ["console"]},
    })
