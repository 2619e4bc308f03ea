"""Locomotive Schemas — read and write transfer shapes for the catalogue API.

Invariants:
    - Read DTOs (List/Details) are flat projections; optional relationships are None, never ""/0
    - Write DTOs carry only caller-supplied fields plus ids of reused sub-resources
    - AddLocomotiveDto: name non-empty after strip, price >= 0
    - EditLocomotiveDto carries locomotive-specific fields only (partial update)

Design Decisions:
    - Pydantic over dataclasses: the same models validate request bodies and
      serialize responses (ADR: schemas are API contracts, models are persistence)
    - Domain enums from core/ used for enumerated fields
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from trainshop.core.domain_types import (
    Control, Epoch, ImageId, LocoType, ProductId, Scale, TagId,
)


# --- Shared pieces -----------------------------------------------------------

class ImageDto(BaseModel):
    """Attached image; id is set for stored or reused images, url once known."""
    id: ImageId | None = None
    url: str | None = None


class AddImageDto(BaseModel):
    """New image attached by url."""
    url: str = Field(min_length=1, max_length=2000)


class StockStatusDto(BaseModel):
    """Quantity on hand and next restock date."""
    amount: int = Field(ge=0)
    next_stock: date | None = None


# --- Read shapes --------------------------------------------------------------

class ListLocomotiveDto(BaseModel):
    """One row of the locomotive list page."""
    id: ProductId | None = None  # None only for a locomotive not yet saved
    name: str
    price: Decimal
    images: list[ImageDto] = []
    tag: TagId | None = None
    stock_status: StockStatusDto | None = None
    scale: Scale
    epoch: Epoch
    railway_company_name: str | None = None
    control: Control
    loco_type: LocoType


class DetailsLocomotiveDto(ListLocomotiveDto):
    """Everything shown on a locomotive's detail page."""
    description: str | None = None
    length: float
    num_of_axles: int
    railway_company_country_name: str | None = None
    auto_coupling: bool
    num_of_driven_axles: int


class LocomotivePage(BaseModel):
    """One page of the filtered, ordered locomotive list."""
    items: list[ListLocomotiveDto]
    page_number: int
    number_of_pages: int


# --- Write shapes -------------------------------------------------------------

class AddLocomotiveDto(BaseModel):
    """New locomotive — product, model item, rolling stock and locomotive fields."""
    # Product
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    tag: TagId | None = None
    stock_status: StockStatusDto
    reused_images: list[ImageId] = []
    added_images: list[AddImageDto] = []

    # Model item
    scale: Scale
    epoch: Epoch

    # Rolling stock
    length: float = Field(ge=0)
    num_of_axles: int = Field(ge=0)
    railway_company_id: int | None = None

    # Locomotive
    control: Control
    loco_type: LocoType
    auto_coupling: bool = False
    num_of_driven_axles: int = Field(0, ge=0)
    digital_decoder_id: int | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class EditLocomotiveDto(BaseModel):
    """Partial update — locomotive-specific fields only."""
    id: ProductId
    control: Control
    loco_type: LocoType
    auto_coupling: bool = False
    num_of_driven_axles: int = Field(0, ge=0)
    digital_decoder_id: int | None = None
