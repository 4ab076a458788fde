"""Connection resources: list, associate and dissociate targets of a source."""

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

import httpx

from ..common.operations import (
    delete_item_with_authorization,
    list_items_with_authorization,
    put_item_with_authorization,
)
from ..common.utils import build_url, parse_egress_schema, parse_ingress_schema
from ..schema import PaginationArg, PaginationCollection
from .schema import Connection, Source, UpsertConnectionPayload

if TYPE_CHECKING:
    from ..client import MondoAppConnect

PATH = "/v1/connections"

SourceArg = Union[Source, Mapping[str, Any]]
UpsertConnectionInput = Union[UpsertConnectionPayload, Mapping[str, Any]]
# Partial target: any of app, object, id
ConnectionFilter = Mapping[str, Any]


class ConnectionResources:
    """Connection operations bound to a client instance."""

    def __init__(self, instance: "MondoAppConnect"):
        self.instance = instance

    @staticmethod
    def build_item_path(source: SourceArg) -> str:
        source = parse_ingress_schema(Source, source)
        return "/".join([PATH, source.app, source.object, source.id])

    async def list_items(
        self,
        source: SourceArg,
        filter: Optional[ConnectionFilter] = None,
        pagination: PaginationArg = None,
    ) -> PaginationCollection[Connection]:
        return await list_connections(self.instance, source, filter, pagination)

    async def associate_item(self, source: SourceArg, item: UpsertConnectionInput) -> Connection:
        return await associate_connection(self.instance, source, item)

    async def dissociate_item(
        self, source: SourceArg, item: UpsertConnectionInput
    ) -> Optional[Connection]:
        return await dissociate_connection(self.instance, source, item)


def build_connection_listing_url(
    instance: "MondoAppConnect",
    source: SourceArg,
    filter: Optional[ConnectionFilter] = None,
    pagination: PaginationArg = None,
) -> httpx.URL:
    return build_url(
        instance.host, ConnectionResources.build_item_path(source), pagination, filter
    )


def build_connection_item_url(instance: "MondoAppConnect", source: SourceArg) -> httpx.URL:
    return build_url(instance.host, ConnectionResources.build_item_path(source))


def parse_connection_listing_response(data: Any) -> PaginationCollection[Connection]:
    return parse_egress_schema(PaginationCollection[Connection], data)


def parse_connection_item_response(data: Any) -> Connection:
    return parse_egress_schema(Connection, data)


def parse_connection_upsert_payload(data: Any) -> UpsertConnectionPayload:
    return parse_ingress_schema(UpsertConnectionPayload, data)


async def list_connections(
    instance: "MondoAppConnect",
    source: SourceArg,
    filter: Optional[ConnectionFilter] = None,
    pagination: PaginationArg = None,
) -> PaginationCollection[Connection]:
    """List the targets connected to ``source``, optionally filtered."""
    return parse_connection_listing_response(
        await list_items_with_authorization(
            build_connection_listing_url(instance, source, filter, pagination),
            instance.authorizer,
            instance.transport,
        )
    )


async def associate_connection(
    instance: "MondoAppConnect", source: SourceArg, item: UpsertConnectionInput
) -> Connection:
    """Connect ``item`` to ``source``.

    The item is validated before anything is sent.

    Raises:
        pydantic.ValidationError: If ``item`` is not a valid target
        HttpError: If the API rejects the request
    """
    url = build_connection_item_url(instance, source)
    payload = parse_connection_upsert_payload(item)
    return parse_connection_item_response(
        await put_item_with_authorization(
            url, instance.authorizer, payload.to_payload(), instance.transport
        )
    )


async def dissociate_connection(
    instance: "MondoAppConnect", source: SourceArg, item: UpsertConnectionInput
) -> Optional[Connection]:
    """Remove the connection between ``source`` and ``item``.

    Returns None when the API answers without a body.
    """
    url = build_connection_item_url(instance, source)
    payload = parse_connection_upsert_payload(item)
    data = await delete_item_with_authorization(
        url, instance.authorizer, payload.to_payload(), instance.transport
    )
    if data is None:
        return None
    return parse_connection_item_response(data)
