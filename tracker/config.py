"""
Configuration management for the Calorie Tracker client.

This module centralizes environment variable loading from the .env file at project root.
It should be imported early by the Streamlit entry point (streamlit_app/app.py) so that
.env is loaded before any other code reads environment variables.

When no .env exists (e.g. in a container), load_dotenv() is a no-op and the
platform environment variables are used instead.

Environment Variables:
- BACKEND_URL: Optional, base URL of the entries backend (defaults to http://localhost:8000)
- REQUEST_TIMEOUT_SECONDS: Optional, per-request timeout in seconds (defaults to 10)
- LOG_LEVEL: Optional, level for the "tracker" logger (defaults to INFO)
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_BACKEND_URL = "http://localhost:8000"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_LEVEL = "INFO"

LOGGER_NAME = "tracker"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    The project root is located by going up from this file's location
    (tracker/config.py -> project root). Safe to call multiple times.
    """
    this_file = Path(__file__).resolve()
    project_root = this_file.parent.parent
    env_path = project_root / ".env"

    # override=False means existing env vars take precedence
    load_dotenv(env_path, override=False)


# Load .env file on module import
load_env_file()


class BackendConfig:
    """Configuration for the entries REST backend."""

    @staticmethod
    def get_backend_url() -> str:
        """
        Get the backend API base URL.

        Returns:
            Backend URL string with trailing slash removed.
            Defaults to http://localhost:8000 for local development.
        """
        url = os.getenv("BACKEND_URL") or DEFAULT_BACKEND_URL
        return url.rstrip("/")

    @staticmethod
    def get_request_timeout() -> float:
        """
        Get the timeout applied to every backend request.

        Returns:
            Timeout in seconds. Missing, non-numeric or non-positive values
            fall back to the default of 10 seconds.
        """
        raw = os.getenv("REQUEST_TIMEOUT_SECONDS")
        if not raw:
            return DEFAULT_REQUEST_TIMEOUT_SECONDS
        try:
            timeout = float(raw)
        except ValueError:
            return DEFAULT_REQUEST_TIMEOUT_SECONDS
        if timeout <= 0:
            return DEFAULT_REQUEST_TIMEOUT_SECONDS
        return timeout


class LoggingConfig:
    """Configuration for application logging."""

    @staticmethod
    def get_log_level() -> int:
        """
        Get the log level for the tracker logger.

        Returns:
            A logging level constant. Unknown names fall back to INFO.
        """
        name = (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
        level = logging.getLevelName(name)
        if isinstance(level, int):
            return level
        return logging.INFO


def configure_logging() -> None:
    """Configure the tracker logger with a single stream handler."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(LoggingConfig.get_log_level())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
