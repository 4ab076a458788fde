"""Outgoing request type and the HTTP transport seam.

Operations build an OutgoingRequest, hand it to the authorizer, then
pass the result to a Transport. The default transport is a thin httpx
wrapper; tests substitute DummyTransport or an httpx.MockTransport.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol, Union, runtime_checkable

import httpx

USER_AGENT = "mondo-app-connect-python/0.1"


@dataclass
class OutgoingRequest:
    """Method, headers and body of a request about to be sent.

    Header names are lowercase. ``body`` is already JSON-encoded, or None
    when the request carries no body.
    """

    method: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None


@runtime_checkable
class Transport(Protocol):
    """Anything able to send an OutgoingRequest and return the response."""

    async def send(self, url: httpx.URL, request: OutgoingRequest) -> httpx.Response:
        ...


class HTTPXTransport:
    """Send requests with httpx.

    Without an injected client, every request opens and closes its own
    ``httpx.AsyncClient``, so no connection pool outlives a call.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[Union[float, httpx.Timeout]] = None,
        user_agent: str = USER_AGENT,
    ):
        """Initialize the transport.

        Args:
            client: Pre-configured client to reuse (caller owns its lifecycle)
            timeout: Timeout for self-managed clients; None keeps httpx's default
            user_agent: User-Agent header added when the request has none
        """
        self._client = client
        self.timeout = timeout
        self.user_agent = user_agent

    def _build_headers(self, request: OutgoingRequest) -> Dict[str, str]:
        headers = {"user-agent": self.user_agent}
        headers.update(request.headers)
        return headers

    async def send(self, url: httpx.URL, request: OutgoingRequest) -> httpx.Response:
        """Send one request. httpx errors propagate to the caller."""
        headers = self._build_headers(request)

        if self._client is not None:
            return await self._client.request(
                request.method,
                url,
                headers=headers,
                content=request.body,
            )

        client_kwargs = {} if self.timeout is None else {"timeout": self.timeout}
        async with httpx.AsyncClient(**client_kwargs) as client:
            return await client.request(
                request.method,
                url,
                headers=headers,
                content=request.body,
            )
