"""Apps: schema and read-only resource operations."""

from .resources import (
    PATH,
    AppResources,
    build_app_item_url,
    build_app_listing_url,
    get_app,
    list_apps,
    parse_app_item_response,
    parse_app_listing_response,
)
from .schema import App, AppHandle, AppReference, InsertAppPayload, UpdateAppPayload

__all__ = [
    "PATH",
    "AppResources",
    "build_app_item_url",
    "build_app_listing_url",
    "get_app",
    "list_apps",
    "parse_app_item_response",
    "parse_app_listing_response",
    "App",
    "AppHandle",
    "AppReference",
    "InsertAppPayload",
    "UpdateAppPayload",
]
