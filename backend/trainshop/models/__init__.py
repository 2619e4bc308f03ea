"""ORM Models — SQLAlchemy declarative models for the catalogue.

Invariants:
    - All models inherit from Base (db/base.py)
    - Locomotive is the aggregate root; images and stock status belong to it

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from trainshop.models.locomotive import Locomotive  # noqa: F401
from trainshop.models.image import Image  # noqa: F401
from trainshop.models.stock_status import StockStatus  # noqa: F401
from trainshop.models.railway_company import Country, RailwayCompany  # noqa: F401
from trainshop.models.tag import DigitalDecoder, Tag  # noqa: F401
