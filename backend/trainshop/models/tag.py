"""Tag & DigitalDecoder ORM — small lookup tables referenced by products.

Invariants:
    - Tag.id is the label itself ("diesel", "sale", ...): filters match on it directly
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from trainshop.db.base import Base


class Tag(Base):
    __tablename__ = "tags"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)


class DigitalDecoder(Base):
    __tablename__ = "digital_decoders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
