"""Configuration resources under /v1/configurations."""

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

import httpx

from ..common.operations import (
    delete_item_with_authorization,
    list_items_with_authorization,
    put_item_with_authorization,
)
from ..common.utils import build_url, parse_egress_schema, parse_ingress_schema
from ..schema import PaginationArg, PaginationCollection
from .schema import Configuration, ConfigurationIdentifiers, UpsertConfigurationPayload

if TYPE_CHECKING:
    from ..client import MondoAppConnect

PATH = "/v1/configurations"

# Only {"app": <handle>} is understood by the API
ConfigurationListingFilter = Mapping[str, Any]
UpsertConfigurationInput = Union[UpsertConfigurationPayload, Mapping[str, Any]]
ConfigurationIdentifiersInput = Union[ConfigurationIdentifiers, Mapping[str, Any]]


class ConfigurationResources:
    """Configuration operations bound to a client instance."""

    def __init__(self, instance: "MondoAppConnect"):
        self.instance = instance

    async def list_items(
        self,
        filter: Optional[ConfigurationListingFilter] = None,
        pagination: PaginationArg = None,
    ) -> PaginationCollection[Configuration]:
        return await list_configurations(self.instance, filter, pagination)

    async def associate_item(self, item: UpsertConfigurationInput) -> Configuration:
        return await associate_configuration(self.instance, item)

    async def dissociate_item(
        self, item: ConfigurationIdentifiersInput
    ) -> Optional[Configuration]:
        return await dissociate_configuration(self.instance, item)


def build_configuration_listing_url(
    instance: "MondoAppConnect",
    filter: Optional[ConfigurationListingFilter] = None,
    pagination: PaginationArg = None,
) -> httpx.URL:
    return build_url(instance.host, PATH, pagination, filter)


def build_configuration_item_url(instance: "MondoAppConnect") -> httpx.URL:
    return build_url(instance.host, PATH)


def parse_configuration_listing_response(data: Any) -> PaginationCollection[Configuration]:
    return parse_egress_schema(PaginationCollection[Configuration], data)


def parse_configuration_item_response(data: Any) -> Configuration:
    return parse_egress_schema(Configuration, data)


def parse_configuration_upsert_payload(data: Any) -> UpsertConfigurationPayload:
    return parse_ingress_schema(UpsertConfigurationPayload, data)


def parse_configuration_identifiers(data: Any) -> ConfigurationIdentifiers:
    return parse_ingress_schema(ConfigurationIdentifiers, data)


async def list_configurations(
    instance: "MondoAppConnect",
    filter: Optional[ConfigurationListingFilter] = None,
    pagination: PaginationArg = None,
) -> PaginationCollection[Configuration]:
    """List configurations, optionally only those involving one app."""
    return parse_configuration_listing_response(
        await list_items_with_authorization(
            build_configuration_listing_url(instance, filter, pagination),
            instance.authorizer,
            instance.transport,
        )
    )


async def associate_configuration(
    instance: "MondoAppConnect", item: UpsertConfigurationInput
) -> Configuration:
    """Create or update the configuration between two app objects.

    Missing ``status`` and ``join`` values take their defaults
    (``enabled`` and ``one``).
    """
    payload = parse_configuration_upsert_payload(item)
    return parse_configuration_item_response(
        await put_item_with_authorization(
            build_configuration_item_url(instance),
            instance.authorizer,
            payload.to_payload(),
            instance.transport,
        )
    )


async def dissociate_configuration(
    instance: "MondoAppConnect", item: ConfigurationIdentifiersInput
) -> Optional[Configuration]:
    payload = parse_configuration_identifiers(item)
    data = await delete_item_with_authorization(
        build_configuration_item_url(instance),
        instance.authorizer,
        payload.to_payload(),
        instance.transport,
    )
    if data is None:
        return None
    return parse_configuration_item_response(data)
