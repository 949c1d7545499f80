from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any


DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10
DEFAULT_MAX_PER_PAGE = 200

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def parse_leading_int(raw: Any) -> int | None:
    """
    Parse an integer the way query strings are usually read by web clients:
    leading whitespace and sign allowed, digits up to the first non-digit.

    "12abc" -> 12, "1.9" -> 1, "abc" -> None, None -> None
    """
    if raw is None or isinstance(raw, bool):
        return None
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return None
    return int(match.group(1))


@dataclass(frozen=True, slots=True)
class PageRequest:
    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE

    @classmethod
    def sanitize(
        cls,
        page: Any = None,
        per_page: Any = None,
        max_per_page: int = DEFAULT_MAX_PER_PAGE,
    ) -> PageRequest:
        """
        Build a page request from raw values; never fails.

        - page: positive integer, else 1
        - per_page: positive integer, else 10, then clamped to max_per_page
        """
        page_num = parse_leading_int(page)
        if page_num is None or page_num < 1:
            page_num = DEFAULT_PAGE

        per_page_num = parse_leading_int(per_page)
        if per_page_num is None or per_page_num < 1:
            per_page_num = DEFAULT_PER_PAGE
        per_page_num = min(per_page_num, max_per_page)

        return cls(page=page_num, per_page=per_page_num)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


@dataclass(frozen=True, slots=True)
class Pagination:
    """Pagination envelope attached to every list response."""

    resource: str
    page: int
    per_page: int
    total: int
    total_pages: int
    next_page: int | None = None
    prev_page: int | None = None

    @classmethod
    def for_page(cls, resource: str, paging: PageRequest, total: int) -> Pagination:
        total_pages = max(1, math.ceil(total / paging.per_page))
        return cls(
            resource=resource,
            page=paging.page,
            per_page=paging.per_page,
            total=total,
            total_pages=total_pages,
            next_page=paging.page + 1 if paging.page < total_pages else None,
            prev_page=paging.page - 1 if paging.page > 1 else None,
        )

    @classmethod
    def single_page(cls, resource: str, total: int) -> Pagination:
        """Envelope for resources that are always returned whole."""
        return cls(
            resource=resource,
            page=1,
            per_page=total,
            total=total,
            total_pages=1,
        )
