"""App objects: schema and read-only resource operations."""

from .resources import (
    ITEM_PATH,
    AppObjectResources,
    build_app_object_item_url,
    build_app_object_listing_url,
    get_app_object,
    list_app_objects,
    parse_app_object_item_response,
    parse_app_object_listing_response,
)
from .schema import (
    AppObject,
    AppObjectHandle,
    AppObjectReference,
    InsertAppObjectPayload,
    UpdateAppObjectPayload,
)

__all__ = [
    "ITEM_PATH",
    "AppObjectResources",
    "build_app_object_item_url",
    "build_app_object_listing_url",
    "get_app_object",
    "list_app_objects",
    "parse_app_object_item_response",
    "parse_app_object_listing_response",
    "AppObject",
    "AppObjectHandle",
    "AppObjectReference",
    "InsertAppObjectPayload",
    "UpdateAppObjectPayload",
]
