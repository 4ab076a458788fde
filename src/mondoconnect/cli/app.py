"""CLI app setup and common utilities.

This module creates the main Typer app and the helpers every command
uses: client construction from options/environment, running a request,
and printing wire payloads as JSON.
"""

import asyncio
import json
from typing import Any, Awaitable, Optional

import typer
from pydantic import ValidationError as SchemaValidationError
from typer import Context, Typer

from ..client import MondoAppConnect
from ..common.errors import HttpError, ValidationError
from ..common.transport import HTTPXTransport, Transport
from ..config import Settings, configure_logging
from ..schema import Pagination

app = Typer(
    name="mondo",
    help="Mondo App Connect: browse apps, objects, connections and configurations.",
)


class CLIState:
    """Shared state object for CLI commands.

    ``transport`` may be preset (tests pass ``obj=CLIState(...)``);
    otherwise an HTTPXTransport is built from the settings.
    """

    def __init__(self, transport: Optional[Transport] = None):
        self.transport = transport
        self.access_token: str = ""
        self.host: Optional[str] = None
        self.timeout_s: Optional[float] = None


@app.callback()
def init_app(
    ctx: Context,
    token: Optional[str] = typer.Option(
        None, "--token", "-t", help="Access token (default: MONDO_ACCESS_TOKEN)"
    ),
    host: Optional[str] = typer.Option(
        None, "--host", help="API base URL (default: MONDO_HOST or production)"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (default: MONDO_LOG_LEVEL or WARNING)"
    ),
):
    """Resolve credentials and logging before any command runs."""
    settings = Settings()
    configure_logging(log_level or settings.log_level)

    state = ctx.ensure_object(CLIState)
    state.access_token = token or settings.access_token
    state.host = host or settings.host
    state.timeout_s = settings.timeout_s


def get_client(ctx: Context) -> MondoAppConnect:
    """Build a client from the resolved CLI state.

    Raises:
        typer.Exit: If the token is missing or the configuration is invalid
    """
    state: CLIState = ctx.ensure_object(CLIState)
    if not state.access_token:
        typer.echo("❌ No access token: pass --token or set MONDO_ACCESS_TOKEN", err=True)
        raise typer.Exit(1)

    try:
        return MondoAppConnect(
            access_token=state.access_token,
            host=state.host,
            transport=state.transport or HTTPXTransport(timeout=state.timeout_s),
        )
    except ValueError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1)


def pagination_option(page_size: Optional[int], next_token: Optional[str]) -> Optional[Pagination]:
    if page_size is None and next_token is None:
        return None
    return Pagination(page_size=page_size, next_token=next_token)


def run_request(request: Awaitable[Any]) -> Any:
    """Run one API call, turning failures into exit code 1."""
    try:
        return asyncio.run(request)
    except HttpError as e:
        echo_error(e)
        raise typer.Exit(1)
    except SchemaValidationError as e:
        echo_error(ValidationError.from_schema_error(e))
        raise typer.Exit(1)


def echo_error(error: HttpError) -> None:
    """Print an error and, for validation errors, one line per field."""
    typer.echo(f"❌ {error.message} (status {error.status_code}, {error.type})", err=True)
    for name, message in getattr(error, "fields", {}).items():
        typer.echo(f"   {name}: {message}", err=True)


def echo_payload(result: Any) -> None:
    """Print a model (or None) as indented JSON."""
    payload = result.to_payload() if result is not None else None
    typer.echo(json.dumps(payload, indent=2))
