"""App and app object CLI commands.

- apps list: List apps
- apps get: Show one app
- objects list: List the objects of an app
- objects get: Show one app object
"""

from typing import Optional

import typer
from typer import Context, Typer

from .app import app, echo_payload, get_client, pagination_option, run_request

apps_app = Typer(help="Browse apps")
app.add_typer(apps_app, name="apps")

objects_app = Typer(help="Browse app objects")
app.add_typer(objects_app, name="objects")


@apps_app.command(name="list")
def apps_list(
    ctx: Context,
    page_size: Optional[int] = typer.Option(None, "--page-size", help="Items per page"),
    next_token: Optional[str] = typer.Option(None, "--next-token", help="Page token"),
):
    """List apps.

    Examples:
        mondo apps list
        mondo apps list --page-size 10
    """
    client = get_client(ctx)
    echo_payload(run_request(client.apps.list_items(pagination_option(page_size, next_token))))


@apps_app.command(name="get")
def apps_get(
    ctx: Context,
    handle: str = typer.Argument(..., help="App handle"),
):
    """Show one app."""
    client = get_client(ctx)
    echo_payload(run_request(client.apps.get_item(handle)))


@objects_app.command(name="list")
def objects_list(
    ctx: Context,
    app_handle: str = typer.Argument(..., help="App handle"),
    page_size: Optional[int] = typer.Option(None, "--page-size", help="Items per page"),
    next_token: Optional[str] = typer.Option(None, "--next-token", help="Page token"),
):
    """List the objects of an app.

    Examples:
        mondo objects list test-app
    """
    client = get_client(ctx)
    echo_payload(
        run_request(client.objects.list_items(app_handle, pagination_option(page_size, next_token)))
    )


@objects_app.command(name="get")
def objects_get(
    ctx: Context,
    app_handle: str = typer.Argument(..., help="App handle"),
    object_handle: str = typer.Argument(..., help="Object handle"),
):
    """Show one app object."""
    client = get_client(ctx)
    echo_payload(run_request(client.objects.get_item(app_handle, object_handle)))
