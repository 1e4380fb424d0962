"""Process-wide logging setup, called once from the app lifespan.

Application loggers ("app.*", including the "app.access" request log) write
to stdout at DEBUG when DEBUG is set, otherwise INFO. uvicorn's own access
log is silenced because RequestLoggingMiddleware already logs every request
with its request id. SQL statements only appear with DATABASE_ECHO.
"""

import logging.config

from app.core.config import get_settings


def setup_logging() -> None:
    settings = get_settings()
    level = "DEBUG" if settings.debug else "INFO"
    loggers = {"uvicorn.access": {"level": "WARNING"}}
    if not settings.database_echo:
        # echo=True installs its own handler on this logger
        loggers["sqlalchemy.engine"] = {"level": "WARNING"}
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "plain": {"format": "%(asctime)s %(levelname)-7s %(name)s: %(message)s"},
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "plain",
                },
            },
            "root": {"level": level, "handlers": ["stdout"]},
            "loggers": loggers,
        }
    )
