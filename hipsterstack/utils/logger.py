"""Logging setup shared by the app factory and the HTTP clients."""
import logging
from logging import Logger
from hipsterstack.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [{app}] %(name)s - %(message)s"

# urllib3 logs every pooled connection at DEBUG; keep it at WARNING or above.
_QUIET_LOGGERS = ("urllib3",)

def level_for(name: str) -> int:
    """Numeric level for a name like "DEBUG"; unknown names fall back to INFO."""
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO

def configure_logging(settings: Settings) -> None:
    """Configure root logging, tagging every line with the app name."""
    level = level_for(settings.log_level)
    logging.basicConfig(level=level, format=LOG_FORMAT.format(app=settings.app_name))
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

def get_logger(name: str) -> Logger:
    return logging.getLogger(name)
