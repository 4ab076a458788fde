"""App object data shapes.

An app object is a type of record exposed by an app (a contact, an
invoice, ...). Its optional ``url`` may carry ``{{id}}`` style template
tokens, which survive serialization unencoded.
"""

from typing import Optional

from pydantic import StrictStr

from ..apps.schema import AppReference
from ..schema import Handle, IsoDatetime, ResourceModel, WebUrl

AppObjectHandle = Handle


class AppObjectReference(ResourceModel):
    handle: Handle
    name: StrictStr


class AppObject(AppObjectReference):
    """App object as returned by the API, with its owning app."""

    app: AppReference
    url: Optional[WebUrl] = None
    created_at: IsoDatetime
    updated_at: IsoDatetime


class InsertAppObjectPayload(AppObjectReference):
    url: Optional[WebUrl] = None


class UpdateAppObjectPayload(ResourceModel):
    """Partial update; a null ``url`` is dropped rather than sent."""

    name: Optional[StrictStr] = None
    url: Optional[WebUrl] = None
