"""Locomotive Search — search, filter and order list rows without IO.

Invariants:
    - Pure functions: no IO, no async, no DB
    - search_for / filter_by_tag / filter_by are lazy (generators) and preserve input order
    - An empty criterion is a no-op: the input iterable is returned as-is
    - Search is case-insensitive (str.casefold) substring matching; sub-terms are
      OR'd together and across name + railway company name
    - order_locomotives_by validates the key before yielding anything and uses a
      stable sort for every key (sorted() stays stable with reverse=True)

Design Decisions:
    - Rows typed as ListingRow protocol: works on ListLocomotiveDto or any row shape
    - Absent railway company never matches a search term and sorts first ascending,
      last descending
    - String keys compared casefolded so ordering agrees with search semantics
"""

from collections.abc import Callable, Iterable, Iterator
from decimal import Decimal
from typing import Any, TypeVar

from trainshop.core.domain_types import OrderByOptions
from trainshop.core.entity_protocols import ListingRow
from trainshop.core.errors import InvalidOrderByError
from trainshop.core.query_options import FilterOptions

Row = TypeVar("Row", bound=ListingRow)


def _split_search_terms(search_string: str | None) -> list[str]:
    """Whitespace-separated, casefolded, empty sub-terms dropped."""
    if not search_string:
        return []
    return [term.casefold() for term in search_string.split()]


def _matches_any(value: str | None, terms: list[str]) -> bool:
    if value is None:
        return False
    folded = value.casefold()
    return any(term in folded for term in terms)


def search_for(rows: Iterable[Row], search_string: str | None) -> Iterable[Row]:
    """Keep rows whose name or railway company contains any search term.

    "BR 218 DB" searches for "BR", "218" and "DB".
    """
    terms = _split_search_terms(search_string)
    if not terms:
        return rows
    return (
        row for row in rows
        if _matches_any(row.name, terms)
        or _matches_any(row.railway_company_name, terms)
    )


def _keep_members(
    rows: Iterable[Row], attribute: str, allowed: frozenset,
) -> Iterable[Row]:
    if not allowed:
        return rows
    return (row for row in rows if getattr(row, attribute) in allowed)


def filter_by_tag(rows: Iterable[Row], tags: Iterable[str]) -> Iterable[Row]:
    """Keep rows tagged with one of `tags`; empty tags → unchanged."""
    return _keep_members(rows, "tag", frozenset(tags))


def filter_by(rows: Iterable[Row], filter_options: FilterOptions) -> Iterable[Row]:
    """Apply tag, scale, epoch, control and loco type filters in that order."""
    rows = filter_by_tag(rows, filter_options.tags)
    rows = _keep_members(rows, "scale", filter_options.scales)
    rows = _keep_members(rows, "epoch", filter_options.epochs)
    rows = _keep_members(rows, "control", filter_options.controls)
    return _keep_members(rows, "loco_type", filter_options.loco_types)


def _name_key(row: ListingRow) -> str:
    return row.name.casefold()


def _price_key(row: ListingRow) -> Decimal:
    return row.price


def _railway_company_key(row: ListingRow) -> tuple[bool, str]:
    name = row.railway_company_name
    return (name is not None, (name or "").casefold())


_ORDERINGS: dict[OrderByOptions, tuple[Callable[[Any], Any], bool]] = {
    OrderByOptions.BY_NAME_ASC: (_name_key, False),
    OrderByOptions.BY_NAME_DESC: (_name_key, True),
    OrderByOptions.BY_PRICE_ASC: (_price_key, False),
    OrderByOptions.BY_PRICE_DESC: (_price_key, True),
    OrderByOptions.BY_RAILWAY_COMPANY_ASC: (_railway_company_key, False),
    OrderByOptions.BY_RAILWAY_COMPANY_DESC: (_railway_company_key, True),
}


def _resolve_order(order_by: object) -> OrderByOptions:
    if isinstance(order_by, OrderByOptions):
        return order_by
    try:
        return OrderByOptions(order_by)
    except ValueError:
        raise InvalidOrderByError(order_by) from None


def order_locomotives_by(
    rows: Iterable[Row], order_by: OrderByOptions | str,
) -> Iterator[Row]:
    """Order rows by one of OrderByOptions. Raises InvalidOrderByError otherwise."""
    key, descending = _ORDERINGS[_resolve_order(order_by)]
    return iter(sorted(rows, key=key, reverse=descending))
