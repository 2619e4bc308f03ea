"""StockStatus ORM — quantity on hand and next restock date, owned 1:1 by a product.

Invariants:
    - product_id is unique (one record per product)
    - amount >= 0
    - A product without a row is "not tracked", distinct from amount == 0
"""

from datetime import date

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trainshop.db.base import Base


class StockStatus(Base):
    __tablename__ = "stock_statuses"
    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_stock_statuses_amount_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("locomotives.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    next_stock: Mapped[date | None] = mapped_column(Date, nullable=True)

    product: Mapped["Locomotive"] = relationship(
        "Locomotive", back_populates="stock_status",
    )
