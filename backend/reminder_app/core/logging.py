from logging import basicConfig, getLogger

from .config import settings

basicConfig(level=settings.log_level.upper())
logger = getLogger("reminder-app")
logger.setLevel(settings.log_level.upper())
