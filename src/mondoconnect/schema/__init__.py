"""Schema building blocks shared by every resource."""

from .base import (
    HANDLE_PATTERN,
    Handle,
    HandleOrReference,
    HandleReference,
    ResourceModel,
    WebUrl,
    normalize_handle_reference,
    normalize_url_with_tokens,
)
from .collection import Collection, PaginationCollection
from .dates import IsoDatetime, to_iso_string
from .pagination import Pagination, PaginationArg, PaginationInput

__all__ = [
    "HANDLE_PATTERN",
    "Handle",
    "HandleOrReference",
    "HandleReference",
    "ResourceModel",
    "WebUrl",
    "normalize_handle_reference",
    "normalize_url_with_tokens",
    "Collection",
    "PaginationCollection",
    "IsoDatetime",
    "to_iso_string",
    "Pagination",
    "PaginationArg",
    "PaginationInput",
]
