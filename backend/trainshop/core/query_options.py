"""Query Options — the caller-supplied bundle of search term, filter sets, order key, page.

Invariants:
    - Every filter set defaults to empty; empty means "no filter", never "exclude all"
    - page_number defaults to 1 and is clamped later, never validated here
    - Frozen: options are values, safe to share across concurrent calls

Design Decisions:
    - Plain dataclasses in core (not pydantic): the shaper is pure and framework-free;
      the API layer builds these from bound query parameters
"""

from dataclasses import dataclass, field

from trainshop.core.domain_types import (
    Control, Epoch, LocoType, OrderByOptions, Scale, TagId,
)


@dataclass(frozen=True)
class FilterOptions:
    """Membership filters — each one is skipped when empty."""
    tags: frozenset[TagId] = field(default_factory=frozenset)
    scales: frozenset[Scale] = field(default_factory=frozenset)
    epochs: frozenset[Epoch] = field(default_factory=frozenset)
    controls: frozenset[Control] = field(default_factory=frozenset)
    loco_types: frozenset[LocoType] = field(default_factory=frozenset)


@dataclass(frozen=True)
class QueryOptions:
    """Everything the list page needs to shape one request."""
    search_string: str | None = None
    filter_options: FilterOptions = field(default_factory=FilterOptions)
    # Raw strings allowed; order_locomotives_by rejects anything not in OrderByOptions
    order_by: OrderByOptions | str = OrderByOptions.BY_NAME_ASC
    page_number: int = 1
