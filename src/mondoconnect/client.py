"""Client entry point.

MondoAppConnect holds the validated configuration (host, access token),
the authorizer derived from it, and the transport used for every call.
Resource modules read these three attributes and never modify them.
"""

from functools import cached_property
from typing import TYPE_CHECKING, Annotated, Any, Dict, Optional

import httpx
from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field, StringConstraints
from pydantic import ValidationError as SchemaValidationError

from .common.authorization import AccessTokenAuth, Authorizer
from .common.transport import HTTPXTransport, Transport
from .config import Settings

if TYPE_CHECKING:
    from .apps.resources import AppResources
    from .configurations.resources import ConfigurationResources
    from .connections.resources import ConnectionResources
    from .objects.resources import AppObjectResources

DEFAULT_HOST = "https://dxnh0yagb1.execute-api.us-east-1.amazonaws.com"


class HostConfig(BaseModel):
    host: AnyHttpUrl = Field(default=DEFAULT_HOST, validate_default=True)


class ClientConfig(HostConfig):
    """Validated, immutable client configuration."""

    model_config = ConfigDict(frozen=True)

    access_token: Annotated[str, StringConstraints(strict=True, min_length=1)] = Field(repr=False)


def _host_kwargs(host: Optional[str]) -> Dict[str, Any]:
    return {} if host is None else {"host": host}


def create_host(host: Optional[str] = None) -> httpx.URL:
    """Validate a host URL, falling back to the production endpoint.

    Raises:
        ValueError: If the host is not an http(s) URL
    """
    try:
        return httpx.URL(str(HostConfig(**_host_kwargs(host)).host))
    except SchemaValidationError as e:
        raise ValueError(f"Invalid host: {e}") from e


def create_config(access_token: str, host: Optional[str] = None) -> ClientConfig:
    """Validate client configuration.

    Raises:
        ValueError: If the token is empty or the host is malformed
    """
    try:
        return ClientConfig(access_token=access_token, **_host_kwargs(host))
    except SchemaValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e


class MondoAppConnect:
    """Mondo App Connect API client.

    Usage:
        client = MondoAppConnect(access_token="...")
        apps = await client.apps.list_items()
    """

    def __init__(
        self,
        access_token: str,
        host: Optional[str] = None,
        transport: Optional[Transport] = None,
        authorizer: Optional[Authorizer] = None,
    ):
        """Initialize the client.

        Args:
            access_token: API access token (required, non-empty)
            host: API base URL (default: production endpoint)
            transport: HTTP transport (default: HTTPXTransport)
            authorizer: Overrides the access-token authorizer

        Raises:
            ValueError: On invalid configuration
        """
        self.config = create_config(access_token, host)
        self.authorizer: Authorizer = authorizer or AccessTokenAuth(
            access_token=self.config.access_token
        )
        self.transport: Transport = transport or HTTPXTransport()

    @classmethod
    def from_env(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[Transport] = None,
    ) -> "MondoAppConnect":
        """Build a client from MONDO_* environment variables.

        Raises:
            ValueError: If MONDO_ACCESS_TOKEN is not set
        """
        settings = settings or Settings()
        if not settings.access_token:
            raise ValueError("MONDO_ACCESS_TOKEN environment variable is required")
        return cls(
            access_token=settings.access_token,
            host=settings.host,
            transport=transport or HTTPXTransport(timeout=settings.timeout_s),
        )

    @property
    def host(self) -> httpx.URL:
        """Base URL every resource path is resolved against."""
        return httpx.URL(str(self.config.host))

    @cached_property
    def apps(self) -> "AppResources":
        from .apps.resources import AppResources

        return AppResources(self)

    @cached_property
    def objects(self) -> "AppObjectResources":
        from .objects.resources import AppObjectResources

        return AppObjectResources(self)

    @cached_property
    def connections(self) -> "ConnectionResources":
        from .connections.resources import ConnectionResources

        return ConnectionResources(self)

    @cached_property
    def configurations(self) -> "ConfigurationResources":
        from .configurations.resources import ConfigurationResources

        return ConfigurationResources(self)

    def __repr__(self) -> str:
        return f"MondoAppConnect(host={str(self.config.host)!r})"
