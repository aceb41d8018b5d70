import logging
import logging.config


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure console logging for the ``grenloc`` package."""

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": "DEBUG" if debug else "WARNING",
                "formatter": "standard",
                "stream": "ext://sys.stderr",
            }
        },
        "loggers": {
            "grenloc": {"level": "DEBUG" if debug else "INFO"},
            "urllib3": {"level": "INFO" if debug else "WARNING"},
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    }

    logging.config.dictConfig(logging_config)

    return logging.getLogger("grenloc")
