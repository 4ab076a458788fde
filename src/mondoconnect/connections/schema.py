"""Connection data shapes.

A connection links one concrete record (``app``/``object``/``id``) to
another. Sources and targets are addressed by bare handles; the API
answers with expanded entities carrying names, avatars and URLs.
"""

from typing import Optional

from pydantic import StrictBool, StrictStr

from ..apps.schema import AppReference
from ..objects.schema import AppObjectReference
from ..schema import Handle, HandleOrReference, HandleReference, IsoDatetime, ResourceModel, WebUrl


class Entity(ResourceModel):
    """A record addressed by app handle, object handle and record id."""

    app: Handle
    object: Handle
    id: StrictStr


Source = Entity
Target = Entity


class EntityReference(ResourceModel):
    """Same record, with app and object given as ``{"handle": ...}``."""

    id: StrictStr
    app: HandleReference
    object: HandleReference


class ExpandedApp(AppReference):
    avatar: Optional[WebUrl] = None


class ExpandedAppObject(AppObjectReference):
    url: Optional[WebUrl] = None


class ExpandedEntity(ResourceModel):
    id: StrictStr
    app: ExpandedApp
    object: ExpandedAppObject


class Connection(ExpandedEntity):
    """Connected target as returned by the API."""

    updated_at: IsoDatetime
    inferred: Optional[StrictBool] = None


class UpsertConnectionPayload(ResourceModel):
    """Target to associate or dissociate.

    ``app`` and ``object`` accept a bare handle or a reference and are
    always sent as ``{"handle": ...}``.
    """

    app: HandleOrReference
    object: HandleOrReference
    id: StrictStr
