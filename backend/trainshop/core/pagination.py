"""Pagination — page count and page slicing with silent clamping.

Invariants:
    - count_pages(total, size) == max(1, ceil(total / size)): zero matches still
      report one (empty) page
    - The served page number is always within [1, number_of_pages]
    - Out-of-range requests (0, negative, beyond the last page) are clamped, never rejected

Design Decisions:
    - Minimum of one page (not zero): the clamped page number stays a valid page
      index even for empty results, so callers never special-case "no pages"
"""

import math
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def count_pages(total: int, page_size: int) -> int:
    """Number of pages needed for `total` items, at least 1."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return max(1, math.ceil(total / page_size))


def clamp_page_number(page_number: int, number_of_pages: int) -> int:
    return min(max(page_number, 1), number_of_pages)


def paginate(
    rows: Iterable[T], page_number: int, page_size: int,
) -> tuple[list[T], int, int]:
    """Slice one page out of `rows`.

    Returns (items, effective_page_number, number_of_pages).
    """
    materialized = list(rows)
    number_of_pages = count_pages(len(materialized), page_size)
    page = clamp_page_number(page_number, number_of_pages)
    start = (page - 1) * page_size
    return materialized[start:start + page_size], page, number_of_pages
