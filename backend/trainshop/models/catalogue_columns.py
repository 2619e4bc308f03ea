"""Catalogue Column Groups — independent field groups composed into concrete product tables.

Invariants:
    - Each mixin owns one field group: product, model item, rolling stock, locomotive
    - Mixins carry columns only; relationships live on the concrete model
    - Enum columns store the enum .value (not the member name)

Design Decisions:
    - Column mixins over joined/single-table inheritance: one flat row per leaf
      type, no polymorphic loading (ADR: composition over virtual-dispatch layering)
    - native_enum=False: VARCHAR + CHECK, portable across PostgreSQL and SQLite
"""

from decimal import Decimal
from enum import Enum as PyEnum

from sqlalchemy import Boolean, Enum, Float, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from trainshop.core.domain_types import Control, Epoch, LocoType, Scale


def enum_column(enum_cls: type[PyEnum]) -> Enum:
    """SQLAlchemy Enum type persisting member values."""
    return Enum(
        enum_cls,
        values_callable=lambda members: [m.value for m in members],
        native_enum=False,
        length=20,
    )


class ProductColumns:
    """Fields every product has."""
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    tag_id: Mapped[str | None] = mapped_column(
        String(50), ForeignKey("tags.id", ondelete="SET NULL"), nullable=True,
    )


class ModelItemColumns:
    """Fields of a scale model."""
    scale: Mapped[Scale] = mapped_column(enum_column(Scale), nullable=False)
    epoch: Mapped[Epoch] = mapped_column(enum_column(Epoch), nullable=False)


class RollingStockColumns:
    """Fields of anything that runs on rails."""
    length: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    num_of_axles: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    railway_company_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("railway_companies.id", ondelete="SET NULL"),
        nullable=True,
    )


class LocomotiveColumns:
    """Fields specific to powered rolling stock."""
    control: Mapped[Control] = mapped_column(enum_column(Control), nullable=False)
    loco_type: Mapped[LocoType] = mapped_column(enum_column(LocoType), nullable=False)
    auto_coupling: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    num_of_driven_axles: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    digital_decoder_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("digital_decoders.id", ondelete="SET NULL"),
        nullable=True,
    )
