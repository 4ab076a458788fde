"""Environment configuration and logging setup for Mondo App Connect."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

LOGGER_NAME = "mondoconnect"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings:
    """Client settings read from the environment.

    A ``.env`` file in the working directory is loaded first, without
    overriding variables that are already set.
    """

    def __init__(self, env_file: Optional[Path] = None):
        env_path = env_file or Path.cwd() / ".env"
        if env_path.exists():
            load_dotenv(env_path)

        self.access_token: str = os.getenv("MONDO_ACCESS_TOKEN", "")
        self.host: Optional[str] = os.getenv("MONDO_HOST") or None

        # Logging
        self.log_level: str = os.getenv("MONDO_LOG_LEVEL", "WARNING")

        # Transport timeout; None keeps the httpx default
        timeout = os.getenv("MONDO_TIMEOUT_S")
        self.timeout_s: Optional[float] = float(timeout) if timeout else None


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a stream handler to the package logger (once) and set its level."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
