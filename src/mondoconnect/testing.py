"""Test helpers: an in-memory transport and valid wire payloads.

DummyTransport implements the Transport protocol without making any
network calls. It can be configured to:
- Return canned JSON (or raw) bodies with any status code
- Raise transport errors such as httpx.ConnectError
- Record every request for later assertions

TestDataFactory returns fresh, valid wire payloads for each resource.
"""

from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Dict, List, Optional, Union

import httpx

from .common.transport import OutgoingRequest


@dataclass
class DummyResponse:
    """Canned response for DummyTransport.

    ``content`` wins over ``data`` when both are set; with neither the
    response has an empty body.
    """

    data: Any = None
    status: int = 200
    content: Optional[Union[str, bytes]] = None
    error: Optional[Exception] = None


class DummyTransport:
    """Transport returning queued responses in order.

    Once the queue is empty, ``default`` is returned for every request.
    """

    def __init__(self, *responses: DummyResponse, default: Optional[DummyResponse] = None):
        self._responses: Deque[DummyResponse] = deque(responses)
        self._default = default or DummyResponse()
        self._call_log: List[Dict[str, Any]] = []

    def set_response(self, response: DummyResponse) -> None:
        """Queue a response for the next request."""
        self._responses.append(response)

    def clear_responses(self) -> None:
        self._responses.clear()

    def _log_call(self, url: httpx.URL, request: OutgoingRequest) -> None:
        self._call_log.append({
            "url": url,
            "method": request.method,
            "headers": dict(request.headers),
            "body": request.body,
        })

    def get_call_log(self) -> List[Dict[str, Any]]:
        """Get log of all requests sent."""
        return self._call_log.copy()

    def clear_call_log(self) -> None:
        self._call_log.clear()

    def was_called(self, method: Optional[str] = None) -> bool:
        """Check if any request (or one with ``method``) was sent."""
        return self.call_count(method) > 0

    def call_count(self, method: Optional[str] = None) -> int:
        return sum(1 for call in self._call_log if method is None or call["method"] == method)

    @property
    def last_call(self) -> Dict[str, Any]:
        """Most recent request. Raises IndexError when nothing was sent."""
        return self._call_log[-1]

    async def send(self, url: httpx.URL, request: OutgoingRequest) -> httpx.Response:
        self._log_call(url, request)
        response = self._responses.popleft() if self._responses else self._default

        if response.error is not None:
            raise response.error

        http_request = httpx.Request(request.method, url)
        if response.content is not None:
            return httpx.Response(response.status, content=response.content, request=http_request)
        if response.data is not None:
            return httpx.Response(response.status, json=response.data, request=http_request)
        return httpx.Response(response.status, request=http_request)


class TestDataFactory:
    """Valid wire payloads, rebuilt on every call so tests can mutate them."""

    __test__ = False  # not a pytest test class

    @staticmethod
    def valid_app() -> Dict[str, Any]:
        return {
            "handle": "test-app",
            "name": "Test App",
            "avatar": "https://example.com/avatar.png",
            "createdAt": "2024-01-01T00:00:00.000Z",
            "updatedAt": "2024-01-02T00:00:00.000Z",
        }

    @staticmethod
    def valid_app_object() -> Dict[str, Any]:
        return {
            "handle": "test-object",
            "name": "Test Object",
            "app": {"handle": "test-app", "name": "Test App"},
            "url": "https://example.com/object/{{id}}",
            "createdAt": "2024-01-01T00:00:00.000Z",
            "updatedAt": "2024-01-02T00:00:00.000Z",
        }

    @staticmethod
    def valid_connection() -> Dict[str, Any]:
        return {
            "app": {"handle": "test-app", "name": "Test App"},
            "object": {"handle": "test-object", "name": "Test Object"},
            "id": "test-id-123",
            "updatedAt": "2024-01-01T00:00:00.000Z",
            "inferred": False,
        }

    @staticmethod
    def valid_configuration() -> Dict[str, Any]:
        return {
            "source": {
                "app": {"handle": "source-app", "name": "Source App"},
                "object": {"handle": "source-object", "name": "Source Object"},
                "join": "one",
            },
            "target": {
                "app": {"handle": "target-app", "name": "Target App"},
                "object": {"handle": "target-object", "name": "Target Object"},
                "join": "many",
            },
            "status": "enabled",
            "updatedAt": "2024-01-01T00:00:00.000Z",
        }

    @staticmethod
    def valid_insert_app_payload() -> Dict[str, Any]:
        return {
            "handle": "new-app",
            "name": "New App",
            "avatar": "https://example.com/new-avatar.png",
        }

    @staticmethod
    def valid_update_app_payload() -> Dict[str, Any]:
        return {
            "name": "Updated App Name",
            "avatar": "https://example.com/updated-avatar.png",
        }

    @staticmethod
    def valid_insert_app_object_payload() -> Dict[str, Any]:
        return {
            "handle": "new-object",
            "name": "New Object",
            "url": "https://example.com/new-object/{{id}}",
        }

    @staticmethod
    def valid_update_app_object_payload() -> Dict[str, Any]:
        return {
            "name": "Updated Object Name",
            "url": "https://example.com/updated-object/{{id}}",
        }

    @staticmethod
    def valid_upsert_connection_payload() -> Dict[str, Any]:
        return {"app": "target-app", "object": "target-object", "id": "target-id-456"}

    @staticmethod
    def valid_upsert_configuration_payload() -> Dict[str, Any]:
        return {
            "source": {"app": "source-app", "object": "source-object", "join": "one"},
            "target": {"app": "target-app", "object": "target-object", "join": "many"},
            "status": "enabled",
        }

    @staticmethod
    def valid_configuration_identifiers() -> Dict[str, Any]:
        return {
            "source": {"app": "source-app", "object": "source-object"},
            "target": {"app": "target-app", "object": "target-object"},
        }

    @staticmethod
    def valid_client_config() -> Dict[str, Any]:
        return {"access_token": "test-access-token-123", "host": "https://api.test.example.com"}

    @staticmethod
    def paginated(*items: Dict[str, Any], next_token: Optional[str] = None) -> Dict[str, Any]:
        """Wrap items in a list envelope."""
        envelope: Dict[str, Any] = {"items": list(items)}
        if next_token is not None:
            envelope["pagination"] = {"nextToken": next_token}
        return envelope
