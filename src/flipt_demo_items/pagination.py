"""Page-based pagination."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

MIN_PER_PAGE = 1
MAX_PER_PAGE = 100
DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 20


def _positive_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= 1 else default


@dataclass
class PageRequest:
    """Page request with 1-based page number."""

    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @classmethod
    def from_params(
        cls, params: Mapping[str, str], per_page: int = DEFAULT_PER_PAGE
    ) -> PageRequest:
        """Build from "page" and "per_page" params, falling back to defaults."""
        size = _positive_int(params.get("per_page"), per_page)
        if size > MAX_PER_PAGE:
            size = per_page
        return cls(page=_positive_int(params.get("page"), DEFAULT_PAGE), per_page=size)


@dataclass
class PageResponse(Generic[T]):
    """Page response with total count."""

    items: list[T]
    total: int
    page: int
    per_page: int
    total_pages: int

    @classmethod
    def create(cls, items: list[T], total: int, req: PageRequest) -> PageResponse[T]:
        total_pages = math.ceil(total / req.per_page) if req.per_page > 0 else 0
        return cls(
            items=items,
            total=total,
            page=req.page,
            per_page=req.per_page,
            total_pages=total_pages,
        )
