import logging
from typing import ClassVar, TextIO

from pydantic import ValidationError

from skycast.config import WeatherEnv

LIBRARY_NAME = "skycast"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(LIBRARY_NAME)
logger.addHandler(logging.NullHandler())


def configure_logging(level: str = "WARNING", stream: TextIO | None = None) -> None:
    """Send skycast logs at `level` or above to `stream` (stderr by default)."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    lib_logger = logging.getLogger(LIBRARY_NAME)
    lib_logger.handlers.clear()
    lib_logger.setLevel(log_level)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    lib_logger.addHandler(handler)


def _level_from_env() -> str:
    try:
        return WeatherEnv().skycast_log_level
    except ValidationError:
        return "WARNING"


configure_logging(_level_from_env())


class LoggingMixin:
    """Gives each subclass a `skycast.<ClassName>` logger."""

    logger: ClassVar[logging.Logger]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.logger = logging.getLogger(f"{LIBRARY_NAME}.{cls.__name__}")
