"""App data shapes.

App is what the API returns; InsertAppPayload and UpdateAppPayload are
what a caller would send to create or edit one.
"""

from typing import Any, Dict, Optional

from pydantic import StrictStr

from ..schema import Handle, IsoDatetime, ResourceModel, WebUrl

AppHandle = Handle


class AppReference(ResourceModel):
    """Minimal app identity embedded in other resources."""

    handle: Handle
    name: StrictStr


class App(AppReference):
    avatar: Optional[WebUrl] = None
    created_at: IsoDatetime
    updated_at: IsoDatetime


class InsertAppPayload(AppReference):
    avatar: Optional[WebUrl] = None


class UpdateAppPayload(ResourceModel):
    """Partial update. ``avatar=None`` given explicitly clears the avatar."""

    name: Optional[StrictStr] = None
    avatar: Optional[WebUrl] = None

    def to_payload(self) -> Dict[str, Any]:
        # keep explicit nulls, drop fields that were never set
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
