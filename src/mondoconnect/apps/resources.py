"""App resources: read-only listing and lookup under /v1/apps."""

from typing import TYPE_CHECKING, Any

import httpx

from ..common.operations import get_item_with_authorization, list_items_with_authorization
from ..common.utils import build_url, parse_egress_schema
from ..schema import PaginationArg, PaginationCollection
from .schema import App, AppHandle

if TYPE_CHECKING:
    from ..client import MondoAppConnect

PATH = "/v1/apps"


class AppResources:
    """App operations bound to a client instance."""

    def __init__(self, instance: "MondoAppConnect"):
        self.instance = instance

    @staticmethod
    def build_listing_path() -> str:
        return PATH

    @staticmethod
    def build_item_path(app: AppHandle) -> str:
        return "/".join([PATH, app])

    async def list_items(self, pagination: PaginationArg = None) -> PaginationCollection[App]:
        return await list_apps(self.instance, pagination)

    async def get_item(self, app: AppHandle) -> App:
        return await get_app(self.instance, app)


def build_app_listing_url(instance: "MondoAppConnect", pagination: PaginationArg = None) -> httpx.URL:
    return build_url(instance.host, AppResources.build_listing_path(), pagination)


def build_app_item_url(instance: "MondoAppConnect", app: AppHandle) -> httpx.URL:
    return build_url(instance.host, AppResources.build_item_path(app))


def parse_app_listing_response(data: Any) -> PaginationCollection[App]:
    return parse_egress_schema(PaginationCollection[App], data)


def parse_app_item_response(data: Any) -> App:
    return parse_egress_schema(App, data)


async def list_apps(
    instance: "MondoAppConnect", pagination: PaginationArg = None
) -> PaginationCollection[App]:
    """List apps visible to the access token."""
    return parse_app_listing_response(
        await list_items_with_authorization(
            build_app_listing_url(instance, pagination),
            instance.authorizer,
            instance.transport,
        )
    )


async def get_app(instance: "MondoAppConnect", app: AppHandle) -> App:
    """Fetch one app by handle."""
    return parse_app_item_response(
        await get_item_with_authorization(
            build_app_item_url(instance, app),
            instance.authorizer,
            instance.transport,
        )
    )
