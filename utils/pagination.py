"""
Page-number pagination with clamped parameters.

``page < 1`` becomes 1, ``pageSize < 1`` becomes the endpoint default and
``pageSize > max`` becomes the endpoint maximum. Values that are not integers
fall back to the defaults.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence


@dataclass(frozen=True)
class PageRequest:
    page: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass
class Page:
    items: List[Any]
    page: int
    page_size: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.page_size) if self.page_size else 0

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    def pagination(self) -> Dict[str, Any]:
        return {
            "currentPage": self.page,
            "pageSize": self.page_size,
            "totalItems": self.total_items,
            "totalPages": self.total_pages,
            "hasPreviousPage": self.has_previous_page,
            "hasNextPage": self.has_next_page,
        }

    def to_dict(self, items: Sequence[Any] = None) -> Dict[str, Any]:
        """Envelope ``data`` payload; pass serialized items to replace the raw ones."""
        return {"items": list(self.items if items is None else items), "pagination": self.pagination()}


def _to_int(value, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def clamp_page(page, page_size, default_size: int = 10, max_size: int = 50) -> PageRequest:
    page = _to_int(page, 1)
    page_size = _to_int(page_size, default_size)

    if page < 1:
        page = 1
    if page_size < 1:
        page_size = default_size
    if page_size > max_size:
        page_size = max_size
    return PageRequest(page=page, page_size=page_size)


def page_request_from_query(query_params, default_size: int = 10, max_size: int = 50) -> PageRequest:
    """Read ``page`` and ``pageSize`` (``page_size`` also accepted) from a query dict."""
    page_size = query_params.get("pageSize", query_params.get("page_size"))
    return clamp_page(query_params.get("page"), page_size, default_size, max_size)


def paginate(queryset_or_list, page_request: PageRequest) -> Page:
    """Slice a queryset or list into a Page without clamping the page to the last one."""
    if isinstance(queryset_or_list, (list, tuple)):
        total = len(queryset_or_list)
    else:
        total = queryset_or_list.count()
    start = page_request.offset
    items = list(queryset_or_list[start : start + page_request.page_size])
    return Page(items=items, page=page_request.page, page_size=page_request.page_size, total_items=total)
