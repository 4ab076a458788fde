"""Pagination cursor sent with list requests and echoed in list responses."""

from typing import Any, Mapping, Optional, Union

from pydantic import StrictFloat, StrictInt, StrictStr

from .base import ResourceModel

# Plain mapping form accepted wherever a Pagination is, e.g. {"pageSize": 10}
PaginationInput = Mapping[str, Any]


class Pagination(ResourceModel):
    """Page size (string or number) and opaque next-page token."""

    page_size: Optional[Union[StrictStr, StrictInt, StrictFloat]] = None
    next_token: Optional[StrictStr] = None


PaginationArg = Optional[Union[Pagination, PaginationInput]]
