"""Request pipeline shared by every resource: authorization, transport,
URL building, HTTP operations and error normalization."""

from .authorization import AUTHORIZATION_HEADER, AccessTokenAuth, Authorizer, NoAuth
from .errors import UNKNOWN_ERROR_MESSAGE, HttpError, ValidationError
from .operations import (
    delete_item_with_authorization,
    get_item_with_authorization,
    list_items_with_authorization,
    put_item_with_authorization,
)
from .transport import HTTPXTransport, OutgoingRequest, Transport
from .utils import (
    add_filters_to_url,
    add_pagination_to_url,
    build_url,
    default_mutation_request_headers,
    default_request_headers,
    json_body,
    parse_egress_schema,
    parse_ingress_schema,
    response_to_http_error,
    to_http_error,
)

__all__ = [
    "AUTHORIZATION_HEADER",
    "AccessTokenAuth",
    "Authorizer",
    "NoAuth",
    "UNKNOWN_ERROR_MESSAGE",
    "HttpError",
    "ValidationError",
    "delete_item_with_authorization",
    "get_item_with_authorization",
    "list_items_with_authorization",
    "put_item_with_authorization",
    "HTTPXTransport",
    "OutgoingRequest",
    "Transport",
    "add_filters_to_url",
    "add_pagination_to_url",
    "build_url",
    "default_mutation_request_headers",
    "default_request_headers",
    "json_body",
    "parse_egress_schema",
    "parse_ingress_schema",
    "response_to_http_error",
    "to_http_error",
]
