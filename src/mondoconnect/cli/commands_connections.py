"""Connection and configuration CLI commands.

- connections list: List targets connected to a source record
- configurations list: List configurations, optionally for one app
"""

from typing import Any, Dict, Optional

import typer
from typer import Context, Typer

from .app import app, echo_payload, get_client, pagination_option, run_request

connections_app = Typer(help="Browse connections between records")
app.add_typer(connections_app, name="connections")

configurations_app = Typer(help="Browse connection configurations")
app.add_typer(configurations_app, name="configurations")


@connections_app.command(name="list")
def connections_list(
    ctx: Context,
    app_handle: str = typer.Argument(..., help="Source app handle"),
    object_handle: str = typer.Argument(..., help="Source object handle"),
    record_id: str = typer.Argument(..., help="Source record id"),
    target_app: Optional[str] = typer.Option(None, "--target-app", help="Only this target app"),
    target_object: Optional[str] = typer.Option(
        None, "--target-object", help="Only this target object"
    ),
    page_size: Optional[int] = typer.Option(None, "--page-size", help="Items per page"),
    next_token: Optional[str] = typer.Option(None, "--next-token", help="Page token"),
):
    """List targets connected to a source record.

    Examples:
        mondo connections list test-app test-object 123
        mondo connections list test-app test-object 123 --target-app other-app
    """
    client = get_client(ctx)
    source = {"app": app_handle, "object": object_handle, "id": record_id}
    filters: Dict[str, Any] = {"app": target_app, "object": target_object}
    echo_payload(
        run_request(
            client.connections.list_items(
                source, filters, pagination_option(page_size, next_token)
            )
        )
    )


@configurations_app.command(name="list")
def configurations_list(
    ctx: Context,
    app_handle: Optional[str] = typer.Option(None, "--app", help="Only configurations for this app"),
    page_size: Optional[int] = typer.Option(None, "--page-size", help="Items per page"),
    next_token: Optional[str] = typer.Option(None, "--next-token", help="Page token"),
):
    """List configurations."""
    client = get_client(ctx)
    filters = {"app": app_handle} if app_handle else None
    echo_payload(
        run_request(
            client.configurations.list_items(filters, pagination_option(page_size, next_token))
        )
    )
