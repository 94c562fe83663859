"""Configuration management for the production plan package."""
import logging
import os
from pathlib import Path
from typing import Final, Optional

from dotenv import load_dotenv

from prodplan.utilities.constants import LOGGER_NAME

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Logging
LOG_LEVEL: Final[str] = os.getenv('PRODPLAN_LOG_LEVEL', 'WARNING').upper()
LOG_FORMAT: Final[str] = os.getenv('PRODPLAN_LOG_FORMAT', '%(asctime)s %(levelname)s %(name)s: %(message)s')


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the package logger (once) and set its level."""
    logger = logging.getLogger(LOGGER_NAME)
    if not any(h.get_name() == LOGGER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(LOGGER_NAME)
        logger.addHandler(handler)
    logger.setLevel((level or LOG_LEVEL).upper())
    return logger
