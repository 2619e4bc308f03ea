"""Locomotive ORM — concrete product row composed of all four catalogue field groups.

Invariants:
    - price >= 0 and name non-empty (CHECK constraints)
    - images and stock_status are owned (cascade delete-orphan)
    - tag, railway_company and digital decoder are referenced, never owned
    - Every relationship is eager (selectin) so async listing never lazy-loads

Design Decisions:
    - images kept in list order via ordering_list("position"): the caller's order
      (reused ids first, then new urls) survives a reload
"""

from typing import Optional

from sqlalchemy import CheckConstraint
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import Mapped, relationship

from trainshop.db.base import Base
from trainshop.models.catalogue_columns import (
    LocomotiveColumns, ModelItemColumns, ProductColumns, RollingStockColumns,
)


class Locomotive(
    ProductColumns, ModelItemColumns, RollingStockColumns, LocomotiveColumns, Base,
):
    """Locomotive entity — the only product type sold by the storefront API."""
    __tablename__ = "locomotives"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_locomotives_price_non_negative"),
        CheckConstraint("length(name) > 0", name="ck_locomotives_name_non_empty"),
    )

    # Relationships
    tag: Mapped[Optional["Tag"]] = relationship("Tag", lazy="selectin")
    images: Mapped[list["Image"]] = relationship(
        "Image", back_populates="product",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="Image.position", collection_class=ordering_list("position"),
    )
    stock_status: Mapped[Optional["StockStatus"]] = relationship(
        "StockStatus", back_populates="product", uselist=False,
        cascade="all, delete-orphan", lazy="selectin",
    )
    railway_company: Mapped[Optional["RailwayCompany"]] = relationship(
        "RailwayCompany", lazy="selectin",
    )
    digital_decoder: Mapped[Optional["DigitalDecoder"]] = relationship(
        "DigitalDecoder", lazy="selectin",
    )
