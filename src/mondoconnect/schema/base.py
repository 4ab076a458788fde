"""Shared schema building blocks.

Models hold the internal shape (datetime, URL objects, snake_case
attributes). ``to_payload()`` produces the wire shape (ISO-8601 strings,
plain URL strings, camelCase keys). Validation accepts either shape.
"""

from typing import Annotated, Any, Dict

import httpx
from pydantic import (
    AnyUrl,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    PlainSerializer,
    StringConstraints,
)
from pydantic.alias_generators import to_camel

# kebab-case (test-app, app123) or camelCase starting lowercase (testApp)
HANDLE_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$|^[a-z][a-zA-Z0-9]+$"

Handle = Annotated[str, StringConstraints(strict=True, pattern=HANDLE_PATTERN)]


def normalize_url_with_tokens(url: Any) -> str:
    """Stringify a URL, restoring ``{{``/``}}`` template tokens.

    URL parsing percent-encodes braces, which would break templates such
    as ``https://example.com/object/{{id}}``.
    """
    return str(url).replace("%7B%7B", "{{").replace("%7D%7D", "}}")


def _coerce_url_input(value: Any) -> Any:
    if isinstance(value, httpx.URL):
        return str(value)
    return value


WebUrl = Annotated[
    AnyUrl,
    BeforeValidator(_coerce_url_input),
    PlainSerializer(normalize_url_with_tokens, return_type=str, when_used="json"),
]


class ResourceModel(BaseModel):
    """Base for every API data shape.

    Unknown keys are dropped, attributes are snake_case and the wire
    names are camelCase.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation; absent optional fields are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class HandleReference(ResourceModel):
    """Canonical ``{"handle": ...}`` reference to an app or object."""

    handle: Handle


def normalize_handle_reference(value: Any) -> Any:
    """Turn a bare handle string into ``{"handle": value}``.

    Mappings and models are reduced to their ``handle`` so that full
    references (handle plus name) are accepted too.
    """
    if isinstance(value, str):
        return {"handle": value}
    if isinstance(value, BaseModel) and hasattr(value, "handle"):
        return {"handle": value.handle}
    return value


HandleOrReference = Annotated[HandleReference, BeforeValidator(normalize_handle_reference)]
