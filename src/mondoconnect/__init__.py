"""Mondo App Connect: typed async client for the App Connect REST API."""

from .client import DEFAULT_HOST, ClientConfig, MondoAppConnect, create_config, create_host
from .common.errors import HttpError, ValidationError

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_HOST",
    "ClientConfig",
    "MondoAppConnect",
    "create_config",
    "create_host",
    "HttpError",
    "ValidationError",
    "__version__",
]
