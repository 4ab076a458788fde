"""Authorization strategies applied to outgoing requests.

An authorizer receives the fully built request right before dispatch and
returns the request to send. Strategies:
- NoAuth: identity, returns the request untouched
- AccessTokenAuth: sets the ``authorization`` header to the raw token
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Protocol, runtime_checkable

from .transport import OutgoingRequest

AUTHORIZATION_HEADER = "authorization"


@runtime_checkable
class Authorizer(Protocol):
    """Protocol for anything that can authorize a request."""

    def apply(self, request: OutgoingRequest) -> OutgoingRequest:
        ...


@dataclass(frozen=True)
class NoAuth:
    """No authorization."""

    def apply(self, request: OutgoingRequest) -> OutgoingRequest:
        return request


@dataclass(frozen=True)
class AccessTokenAuth:
    """Access token sent verbatim in the ``authorization`` header.

    The API expects the bare token, so no ``Bearer`` prefix is added.
    An empty token behaves like NoAuth.
    """

    access_token: str = field(default="", repr=False)

    def is_configured(self) -> bool:
        """Check if a token is set."""
        return bool(self.access_token)

    def get_headers(self) -> Dict[str, str]:
        """Get the authorization header."""
        if not self.is_configured():
            return {}
        return {AUTHORIZATION_HEADER: self.access_token}

    def apply(self, request: OutgoingRequest) -> OutgoingRequest:
        """Return a copy of ``request`` with the authorization header set."""
        if not self.is_configured():
            return request
        headers = dict(request.headers)
        headers.update(self.get_headers())
        return replace(request, headers=headers)
