"""Configurations: schema and resource operations."""

from .resources import (
    PATH,
    ConfigurationResources,
    associate_configuration,
    build_configuration_item_url,
    build_configuration_listing_url,
    dissociate_configuration,
    list_configurations,
    parse_configuration_identifiers,
    parse_configuration_item_response,
    parse_configuration_listing_response,
    parse_configuration_upsert_payload,
)
from .schema import (
    Configuration,
    ConfigurationEntity,
    ConfigurationIdentifiers,
    ConfigurationStatus,
    EntityIdentifier,
    JoinType,
    UpsertConfigurationEntity,
    UpsertConfigurationPayload,
)

__all__ = [
    "PATH",
    "ConfigurationResources",
    "associate_configuration",
    "build_configuration_item_url",
    "build_configuration_listing_url",
    "dissociate_configuration",
    "list_configurations",
    "parse_configuration_identifiers",
    "parse_configuration_item_response",
    "parse_configuration_listing_response",
    "parse_configuration_upsert_payload",
    "Configuration",
    "ConfigurationEntity",
    "ConfigurationIdentifiers",
    "ConfigurationStatus",
    "EntityIdentifier",
    "JoinType",
    "UpsertConfigurationEntity",
    "UpsertConfigurationPayload",
]
