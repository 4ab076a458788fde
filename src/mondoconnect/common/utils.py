"""Request/response helpers shared by every resource module.

- URL building: base + path, pagination and filter query parameters
- Default request headers
- Error normalization: responses and arbitrary exceptions to HttpError
- Schema parsing for inbound (egress) and outbound (ingress) payloads
"""

import logging
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel

from ..schema.pagination import Pagination, PaginationArg
from .errors import (
    AUTHORIZATION_STATUS_CODES,
    UNKNOWN_ERROR_MESSAGE,
    UNKNOWN_ERROR_TYPE,
    HttpError,
    ValidationError,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

JSON_CONTENT_TYPE = "application/json"
UNAUTHORIZED_MESSAGE = "Unauthorized"
AUTHORIZATION_ERROR_TYPE = "authorization"


# =============================================================================
# Headers
# =============================================================================


def default_request_headers() -> Dict[str, str]:
    """Headers for read requests."""
    return {"accept": JSON_CONTENT_TYPE}


def default_mutation_request_headers() -> Dict[str, str]:
    """Headers for requests that carry a JSON body."""
    return {"accept": JSON_CONTENT_TYPE, "content-type": JSON_CONTENT_TYPE}


# =============================================================================
# URL building
# =============================================================================


def add_pagination_to_url(
    url: httpx.URL, pagination: PaginationArg = None
) -> httpx.URL:
    """Append ``pagination[pageSize]`` and ``pagination[nextToken]``.

    None values are skipped, never serialized as empty or "null".
    """
    if pagination is None:
        return url
    if isinstance(pagination, Pagination):
        values = {"pageSize": pagination.page_size, "nextToken": pagination.next_token}
    else:
        values = {
            "pageSize": pagination.get("pageSize", pagination.get("page_size")),
            "nextToken": pagination.get("nextToken", pagination.get("next_token")),
        }

    for name in ("pageSize", "nextToken"):
        value = values[name]
        if value is not None:
            url = url.copy_add_param(f"pagination[{name}]", str(value))
    return url


def add_filters_to_url(
    url: httpx.URL, filters: Optional[Mapping[str, Any]] = None
) -> httpx.URL:
    """Append ``filter[<key>]=<value>`` for every non-None filter entry."""
    if not filters:
        return url
    for key, value in filters.items():
        if value is not None:
            url = url.copy_add_param(f"filter[{key}]", str(value))
    return url


def build_url(
    base: Union[str, httpx.URL],
    path: str,
    pagination: PaginationArg = None,
    filters: Optional[Mapping[str, Any]] = None,
) -> httpx.URL:
    """Resolve ``path`` against ``base`` then add pagination and filters.

    Query parameters are appended in a fixed order: pagination first,
    then filters in mapping order.
    """
    url = httpx.URL(str(base)).join(path)
    return add_filters_to_url(add_pagination_to_url(url, pagination), filters)


# =============================================================================
# Error normalization
# =============================================================================


def json_body(response: httpx.Response) -> Optional[Any]:
    """Parsed JSON body, or None when the body is not JSON."""
    try:
        return response.json()
    except ValueError:
        return None


def response_to_http_error(response: httpx.Response) -> HttpError:
    """Map a failed response to HttpError or ValidationError.

    The body is read as ``{error, error_description, fields?}``; a body
    that is not a JSON object is treated as empty, and a ``fields`` value
    that is not an object is ignored.
    """
    status_code = response.status_code
    body = json_body(response)
    if not isinstance(body, dict):
        body = {}

    error_type = body.get("error")
    description = body.get("error_description")
    logger.debug(f"HTTP error response: {status_code} {error_type}")

    if status_code in AUTHORIZATION_STATUS_CODES:
        return HttpError(
            description or UNAUTHORIZED_MESSAGE,
            status_code=status_code,
            type=error_type or AUTHORIZATION_ERROR_TYPE,
        )

    if isinstance(body.get("fields"), dict):
        return ValidationError(
            description or UNKNOWN_ERROR_MESSAGE,
            status_code=status_code,
            type=error_type or UNKNOWN_ERROR_TYPE,
            fields=body["fields"],
        )

    return HttpError(
        description or UNKNOWN_ERROR_MESSAGE,
        status_code=status_code,
        type=error_type or UNKNOWN_ERROR_TYPE,
    )


def to_http_error(error: Any) -> HttpError:
    """Coerce anything raised into an HttpError.

    HttpError instances are returned as-is. Exceptions and objects with a
    ``message`` keep their message; anything else gets the generic one.
    """
    if isinstance(error, HttpError):
        return error

    message = getattr(error, "message", None)
    if message is None and isinstance(error, Mapping):
        message = error.get("message")
    if message is None and isinstance(error, BaseException):
        message = str(error)

    if isinstance(message, str) and message:
        return HttpError(message)
    return HttpError()


# =============================================================================
# Schema parsing
# =============================================================================


def parse_egress_schema(model: Type[M], data: Any) -> M:
    """Validate data received from the API.

    Raises:
        pydantic.ValidationError: If the payload does not match ``model``
    """
    return model.model_validate(data)


def parse_ingress_schema(model: Type[M], data: Any) -> M:
    """Validate caller input before it is sent.

    Already-built model instances pass through untouched.

    Raises:
        pydantic.ValidationError: If the input does not match ``model``
    """
    if isinstance(data, model):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True)
    return model.model_validate(data)
