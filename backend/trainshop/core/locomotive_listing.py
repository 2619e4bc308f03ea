"""Locomotive Listing — compose search, filters, ordering and pagination into one page.

Invariants:
    - Stage order is fixed: search → tag/scale/epoch/control/loco type filters → order → paginate
    - Each stage is a no-op when its criterion is empty
    - Never raises for empty results; raises InvalidOrderByError for a bad order key
"""

from collections.abc import Iterable
from typing import TypeVar

from trainshop.core.entity_protocols import ListingRow
from trainshop.core.locomotive_search import (
    filter_by, order_locomotives_by, search_for,
)
from trainshop.core.pagination import paginate
from trainshop.core.query_options import QueryOptions

Row = TypeVar("Row", bound=ListingRow)


def get_page(
    rows: Iterable[Row], query_options: QueryOptions, page_size: int,
) -> tuple[list[Row], int, int]:
    """Return (items, effective_page_number, number_of_pages) for the query."""
    shaped = search_for(rows, query_options.search_string)
    shaped = filter_by(shaped, query_options.filter_options)
    ordered = order_locomotives_by(shaped, query_options.order_by)
    return paginate(ordered, query_options.page_number, page_size)
