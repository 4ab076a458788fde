"""Authorized HTTP operations (list/get/put/delete).

Each operation:
1. Builds the request (method, default headers, optional JSON body)
2. Passes it through the authorizer right before dispatch
3. Sends it via the transport
4. Returns the parsed JSON body, or raises a normalized HttpError

No retries, no timeouts beyond the transport's own, no caching.
Schema validation of the result happens one layer up, in the resource
modules.
"""

import json
import logging
from typing import Any, Optional

import httpx

from .authorization import Authorizer
from .errors import HttpError
from .transport import HTTPXTransport, OutgoingRequest, Transport
from .utils import (
    default_mutation_request_headers,
    default_request_headers,
    json_body,
    response_to_http_error,
    to_http_error,
)

logger = logging.getLogger(__name__)


def _encode_body(item: Any) -> Optional[str]:
    """JSON-encode a payload; None means no body at all."""
    if item is None:
        return None
    return json.dumps(item)


async def _dispatch(
    url: httpx.URL,
    authorization: Authorizer,
    request: OutgoingRequest,
    transport: Optional[Transport],
) -> httpx.Response:
    """Authorize, send, and raise for non-2xx responses."""
    transport = transport or HTTPXTransport()
    try:
        response = await transport.send(url, authorization.apply(request))
    except HttpError:
        raise
    except Exception as e:
        # transports other than httpx raise their own exception types
        logger.debug(f"{request.method} {url} failed: {type(e).__name__}: {e}")
        raise HttpError() from e

    if not response.is_success:
        raise response_to_http_error(response)
    return response


def _read_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise to_http_error(e) from e


async def list_items_with_authorization(
    url: httpx.URL,
    authorization: Authorizer,
    transport: Optional[Transport] = None,
) -> Any:
    """GET a listing and return its raw JSON body."""
    logger.debug(f"List items: {url}")
    request = OutgoingRequest(method="GET", headers=default_request_headers())
    response = await _dispatch(url, authorization, request, transport)
    return _read_json(response)


async def get_item_with_authorization(
    url: httpx.URL,
    authorization: Authorizer,
    transport: Optional[Transport] = None,
) -> Any:
    """GET a single item and return its raw JSON body."""
    logger.debug(f"GET item: {url}")
    request = OutgoingRequest(method="GET", headers=default_request_headers())
    response = await _dispatch(url, authorization, request, transport)
    return _read_json(response)


async def put_item_with_authorization(
    url: httpx.URL,
    authorization: Authorizer,
    item: Any = None,
    transport: Optional[Transport] = None,
) -> Any:
    """PUT (upsert) an item.

    A None item sends no body at all rather than the string "null".
    """
    logger.debug(f"PUT item: {url} {item!r}")
    request = OutgoingRequest(
        method="PUT",
        headers=default_mutation_request_headers(),
        body=_encode_body(item),
    )
    response = await _dispatch(url, authorization, request, transport)
    return _read_json(response)


async def delete_item_with_authorization(
    url: httpx.URL,
    authorization: Authorizer,
    item: Any = None,
    transport: Optional[Transport] = None,
) -> Any:
    """DELETE (dissociate) an item.

    The content-type header is only sent along with a body. A successful
    response without a JSON body returns None.
    """
    logger.debug(f"DELETE item: {url} {item!r}")
    headers = default_request_headers() if item is None else default_mutation_request_headers()
    request = OutgoingRequest(method="DELETE", headers=headers, body=_encode_body(item))
    response = await _dispatch(url, authorization, request, transport)
    return json_body(response)
