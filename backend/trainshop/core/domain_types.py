"""Domain Types — enumerated catalogue attributes and identity wrappers.

Invariants:
    - ProductId, ImageId wrap ints; TagId wraps the tag label string
    - All enumerated catalogue attributes are str Enums — no raw string matching
    - OrderByOptions lists exactly the six supported orderings

Design Decisions:
    - str Enums: serialize to JSON and bind from query strings without custom
      converters (ADR: FastAPI/pydantic handle them natively)
    - Enum values double as DB values (SQLAlchemy Enum stores .value via values_callable)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", int)
ImageId = NewType("ImageId", int)
TagId = NewType("TagId", str)


# ─── Catalogue Enums ─────────────────────────────────────────────

class Scale(str, Enum):
    """Model railway scale (gauge ratio)."""
    Z = "Z"
    N = "N"
    TT = "TT"
    H0 = "H0"
    S = "S"
    O = "O"  # noqa: E741
    G = "G"


class Epoch(str, Enum):
    """Historical railway era the model represents."""
    I = "I"  # noqa: E741
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"
    VI = "VI"


class Control(str, Enum):
    """How the locomotive is driven on the layout."""
    ANALOG = "analog"
    DIGITAL = "digital"
    DIGITAL_SOUND = "digital_sound"


class LocoType(str, Enum):
    """Traction type of the prototype."""
    STEAM = "steam"
    DIESEL = "diesel"
    ELECTRIC = "electric"
    RAILCAR = "railcar"


class OrderByOptions(str, Enum):
    """Supported list orderings."""
    BY_NAME_ASC = "name_asc"
    BY_NAME_DESC = "name_desc"
    BY_PRICE_ASC = "price_asc"
    BY_PRICE_DESC = "price_desc"
    BY_RAILWAY_COMPANY_ASC = "railway_company_asc"
    BY_RAILWAY_COMPANY_DESC = "railway_company_desc"
