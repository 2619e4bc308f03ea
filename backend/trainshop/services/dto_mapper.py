"""DTO Mapper — field-by-field projection between catalogue entities and transfer shapes.

Invariants:
    - Pure: builds transient ORM objects and DTOs, never touches a session
    - map_images(None) == [] and map_stock_status(None) is None
    - Added images: reused ids first (input order), then new urls (input order)
    - Edit mapping only touches id, control, loco type, auto coupling, driven axles
      and decoder; never images, stock status, price or name
    - Unset tag / railway company / country map to None, never raise

Design Decisions:
    - Free functions over capability protocols (core/entity_protocols.py) instead of
      generic methods on a base class: any object with the field group can be mapped
    - Reused images become id-only Image records; the service swaps them for the
      stored rows before flushing (mapping stays free of IO)
"""

from collections.abc import Sequence
from typing import TypeVar

from trainshop.core.entity_protocols import (
    ImageLike, LocomotiveLike, ModelItemLike, ProductLike, RollingStockLike,
    StockStatusLike,
)
from trainshop.models.image import Image
from trainshop.models.stock_status import StockStatus
from trainshop.schemas.locomotive import (
    AddLocomotiveDto, DetailsLocomotiveDto, EditLocomotiveDto, ImageDto,
    ListLocomotiveDto, StockStatusDto,
)

P = TypeVar("P", bound=ProductLike)
M = TypeVar("M", bound=ModelItemLike)
R = TypeVar("R", bound=RollingStockLike)
L = TypeVar("L", bound=LocomotiveLike)


# ─── General ─────────────────────────────────────────────────────

def map_images(images: Sequence[ImageLike] | None) -> list[ImageDto]:
    """Map images to ImageDto, keeping order. None (nothing attached) → []."""
    if images is None:
        return []
    return [ImageDto(id=image.id, url=image.url) for image in images]


def map_stock_status(stock_status: StockStatusLike | None) -> StockStatusDto | None:
    """None means stock is not tracked, which is different from amount == 0."""
    if stock_status is None:
        return None
    return StockStatusDto(
        amount=stock_status.amount, next_stock=stock_status.next_stock,
    )


# ─── Add ─────────────────────────────────────────────────────────

def map_product_properties(product: P, properties: AddLocomotiveDto) -> P:
    """Copy product fields, rebuild images and stock status."""
    product.name = properties.name
    product.description = properties.description
    product.price = properties.price
    product.tag_id = properties.tag
    product.images = (
        [Image(id=image_id) for image_id in properties.reused_images]
        + [Image(url=image.url) for image in properties.added_images]
    )
    product.stock_status = StockStatus(
        amount=properties.stock_status.amount,
        next_stock=properties.stock_status.next_stock,
    )
    return product


def map_model_item_properties(model_item: M, properties: AddLocomotiveDto) -> M:
    model_item.scale = properties.scale
    model_item.epoch = properties.epoch
    return model_item


def map_rolling_stock_properties(rolling_stock: R, properties: AddLocomotiveDto) -> R:
    rolling_stock.length = properties.length
    rolling_stock.num_of_axles = properties.num_of_axles
    rolling_stock.railway_company_id = properties.railway_company_id
    return rolling_stock


def map_locomotive_properties(locomotive: L, properties: AddLocomotiveDto) -> L:
    locomotive.control = properties.control
    locomotive.loco_type = properties.loco_type
    locomotive.auto_coupling = properties.auto_coupling
    locomotive.num_of_driven_axles = properties.num_of_driven_axles
    locomotive.digital_decoder_id = properties.digital_decoder_id
    return locomotive


def apply_add_locomotive_properties(locomotive: L, properties: AddLocomotiveDto) -> L:
    """Populate a new locomotive from every field group of the add DTO."""
    map_product_properties(locomotive, properties)
    map_model_item_properties(locomotive, properties)
    map_rolling_stock_properties(locomotive, properties)
    return map_locomotive_properties(locomotive, properties)


# ─── Edit ────────────────────────────────────────────────────────

def map_edit_locomotive_properties(locomotive: L, properties: EditLocomotiveDto) -> L:
    """Partial update limited to locomotive-specific fields."""
    locomotive.id = properties.id
    locomotive.control = properties.control
    locomotive.loco_type = properties.loco_type
    locomotive.auto_coupling = properties.auto_coupling
    locomotive.num_of_driven_axles = properties.num_of_driven_axles
    locomotive.digital_decoder_id = properties.digital_decoder_id
    return locomotive


# ─── Select ──────────────────────────────────────────────────────

def to_list_dto(locomotive: LocomotiveLike) -> ListLocomotiveDto:
    company = locomotive.railway_company
    return ListLocomotiveDto(
        id=locomotive.id,
        name=locomotive.name,
        price=locomotive.price,
        images=map_images(locomotive.images),
        tag=locomotive.tag_id,
        stock_status=map_stock_status(locomotive.stock_status),
        scale=locomotive.scale,
        epoch=locomotive.epoch,
        railway_company_name=company.name if company is not None else None,
        control=locomotive.control,
        loco_type=locomotive.loco_type,
    )


def to_details_dto(locomotive: LocomotiveLike) -> DetailsLocomotiveDto:
    company = locomotive.railway_company
    country = company.country if company is not None else None
    return DetailsLocomotiveDto(
        id=locomotive.id,
        name=locomotive.name,
        description=locomotive.description,
        price=locomotive.price,
        images=map_images(locomotive.images),
        tag=locomotive.tag_id,
        stock_status=map_stock_status(locomotive.stock_status),
        scale=locomotive.scale,
        epoch=locomotive.epoch,
        length=locomotive.length,
        num_of_axles=locomotive.num_of_axles,
        railway_company_name=company.name if company is not None else None,
        railway_company_country_name=country.name if country is not None else None,
        control=locomotive.control,
        loco_type=locomotive.loco_type,
        auto_coupling=locomotive.auto_coupling,
        num_of_driven_axles=locomotive.num_of_driven_axles,
    )
