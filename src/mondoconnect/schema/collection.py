"""List response envelopes: ``{items: [...], pagination?: {...}}``."""

from typing import Generic, List, Optional, TypeVar

from .base import ResourceModel
from .pagination import Pagination

T = TypeVar("T")


class Collection(ResourceModel, Generic[T]):
    items: List[T]


class PaginationCollection(Collection[T], Generic[T]):
    """Collection plus the server's pagination cursor, if any."""

    pagination: Optional[Pagination] = None
