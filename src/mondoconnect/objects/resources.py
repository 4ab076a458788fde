"""App object resources: read-only listing and lookup under an app."""

from typing import TYPE_CHECKING, Any

import httpx

from ..apps.resources import PATH as APP_PATH
from ..apps.schema import AppHandle
from ..common.operations import get_item_with_authorization, list_items_with_authorization
from ..common.utils import build_url, parse_egress_schema
from ..schema import PaginationArg, PaginationCollection
from .schema import AppObject, AppObjectHandle

if TYPE_CHECKING:
    from ..client import MondoAppConnect

ITEM_PATH = "objects"


class AppObjectResources:
    """App object operations bound to a client instance."""

    def __init__(self, instance: "MondoAppConnect"):
        self.instance = instance

    @staticmethod
    def build_listing_path(app: AppHandle) -> str:
        return "/".join([APP_PATH, app, ITEM_PATH])

    @staticmethod
    def build_item_path(app: AppHandle, object: AppObjectHandle) -> str:
        return "/".join([AppObjectResources.build_listing_path(app), object])

    async def list_items(
        self, app: AppHandle, pagination: PaginationArg = None
    ) -> PaginationCollection[AppObject]:
        return await list_app_objects(self.instance, app, pagination)

    async def get_item(self, app: AppHandle, object: AppObjectHandle) -> AppObject:
        return await get_app_object(self.instance, app, object)


def build_app_object_listing_url(
    instance: "MondoAppConnect", app: AppHandle, pagination: PaginationArg = None
) -> httpx.URL:
    return build_url(instance.host, AppObjectResources.build_listing_path(app), pagination)


def build_app_object_item_url(
    instance: "MondoAppConnect", app: AppHandle, object: AppObjectHandle
) -> httpx.URL:
    return build_url(instance.host, AppObjectResources.build_item_path(app, object))


def parse_app_object_listing_response(data: Any) -> PaginationCollection[AppObject]:
    return parse_egress_schema(PaginationCollection[AppObject], data)


def parse_app_object_item_response(data: Any) -> AppObject:
    return parse_egress_schema(AppObject, data)


async def list_app_objects(
    instance: "MondoAppConnect", app: AppHandle, pagination: PaginationArg = None
) -> PaginationCollection[AppObject]:
    """List the objects an app exposes."""
    return parse_app_object_listing_response(
        await list_items_with_authorization(
            build_app_object_listing_url(instance, app, pagination),
            instance.authorizer,
            instance.transport,
        )
    )


async def get_app_object(
    instance: "MondoAppConnect", app: AppHandle, object: AppObjectHandle
) -> AppObject:
    return parse_app_object_item_response(
        await get_item_with_authorization(
            build_app_object_item_url(instance, app, object),
            instance.authorizer,
            instance.transport,
        )
    )
