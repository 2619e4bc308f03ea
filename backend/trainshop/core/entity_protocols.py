"""Capability Protocols — structural field-access contracts for catalogue entities.

Invariants:
    - Core NEVER imports ORM models — mappers and shapers see entities only through these
    - Each protocol names exactly the fields one mapping pairing reads or writes
    - Optional relationships are typed `X | None`; absence is part of the contract

Design Decisions:
    - Protocol over ABC: structural subtyping, ORM models satisfy them without
      inheriting anything (ADR: no virtual-dispatch layering)
    - Field groups mirror the column mixins in models/catalogue_columns.py
"""

from datetime import date
from decimal import Decimal
from typing import Protocol

from trainshop.core.domain_types import (
    Control, Epoch, ImageId, LocoType, ProductId, Scale, TagId,
)


class ImageLike(Protocol):
    id: ImageId | None
    url: str | None


class StockStatusLike(Protocol):
    amount: int
    next_stock: date | None


class CountryLike(Protocol):
    name: str


class RailwayCompanyLike(Protocol):
    name: str
    country: CountryLike | None


class ProductLike(Protocol):
    """Fields shared by every product."""
    id: ProductId | None
    name: str
    description: str | None
    price: Decimal
    tag_id: TagId | None
    images: list[ImageLike]
    stock_status: StockStatusLike | None


class ModelItemLike(Protocol):
    scale: Scale
    epoch: Epoch


class RollingStockLike(Protocol):
    length: float
    num_of_axles: int
    railway_company_id: int | None
    railway_company: RailwayCompanyLike | None


class LocomotiveLike(ProductLike, ModelItemLike, RollingStockLike, Protocol):
    """Concrete locomotive record — all four field groups combined."""
    control: Control
    loco_type: LocoType
    auto_coupling: bool
    num_of_driven_axles: int
    digital_decoder_id: int | None


class ListingRow(Protocol):
    """Row shape the query shaper filters and orders (ListLocomotiveDto satisfies it)."""
    name: str
    price: Decimal
    tag: TagId | None
    scale: Scale
    epoch: Epoch
    control: Control
    loco_type: LocoType
    railway_company_name: str | None
