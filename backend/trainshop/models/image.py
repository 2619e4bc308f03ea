"""Image ORM — product picture, attachable by id (reuse) or by url (new).

Invariants:
    - url is non-nullable once persisted
    - product_id is nullable: an image may exist before or after any product owns it
    - position is the index within the owning product's image list (set by ordering_list)
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trainshop.db.base import Base


class Image(Base):
    """Image entity — a url with an optional owning product."""
    __tablename__ = "images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    url: Mapped[str] = mapped_column(String(2000), nullable=False)
    product_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("locomotives.id", ondelete="SET NULL"), nullable=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    product: Mapped[Optional["Locomotive"]] = relationship(
        "Locomotive", back_populates="images",
    )
