"""RailwayCompany & Country ORM — operators referenced by rolling stock.

Invariants:
    - Every company belongs to exactly one country
    - Companies are referenced, never owned, by rolling stock

Design Decisions:
    - Country in the same file: it exists only to name a company's home country
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trainshop.db.base import Base


class Country(Base):
    __tablename__ = "countries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)


class RailwayCompany(Base):
    """Railway operator, e.g. DB or Union Pacific."""
    __tablename__ = "railway_companies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    country_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("countries.id"), nullable=False,
    )

    country: Mapped[Country] = relationship(Country, lazy="selectin")
