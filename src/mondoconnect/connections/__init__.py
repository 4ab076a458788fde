"""Connections: schema and resource operations."""

from .resources import (
    PATH,
    ConnectionResources,
    associate_connection,
    build_connection_item_url,
    build_connection_listing_url,
    dissociate_connection,
    list_connections,
    parse_connection_item_response,
    parse_connection_listing_response,
    parse_connection_upsert_payload,
)
from .schema import (
    Connection,
    Entity,
    EntityReference,
    ExpandedApp,
    ExpandedAppObject,
    ExpandedEntity,
    Source,
    Target,
    UpsertConnectionPayload,
)

__all__ = [
    "PATH",
    "ConnectionResources",
    "associate_connection",
    "build_connection_item_url",
    "build_connection_listing_url",
    "dissociate_connection",
    "list_connections",
    "parse_connection_item_response",
    "parse_connection_listing_response",
    "parse_connection_upsert_payload",
    "Connection",
    "Entity",
    "EntityReference",
    "ExpandedApp",
    "ExpandedAppObject",
    "ExpandedEntity",
    "Source",
    "Target",
    "UpsertConnectionPayload",
]
