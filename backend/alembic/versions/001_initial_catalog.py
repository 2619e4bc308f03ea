"""Initial catalogue — tags, countries, railway companies, decoders, locomotives, images, stock.

Revision ID: 001_initial_catalog
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial_catalog"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _enum(name: str, *values: str) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, length=20)


def upgrade() -> None:
    op.create_table(
        "tags",
        sa.Column("id", sa.String(50), primary_key=True),
    )

    op.create_table(
        "countries",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
    )

    op.create_table(
        "railway_companies",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("country_id", sa.Integer, sa.ForeignKey("countries.id"), nullable=False),
    )

    op.create_table(
        "digital_decoders",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
    )

    op.create_table(
        "locomotives",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        # Product
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column(
            "tag_id", sa.String(50),
            sa.ForeignKey("tags.id", ondelete="SET NULL"), nullable=True,
        ),
        # Model item
        sa.Column("scale", _enum("scale", "Z", "N", "TT", "H0", "S", "O", "G"), nullable=False),
        sa.Column("epoch", _enum("epoch", "I", "II", "III", "IV", "V", "VI"), nullable=False),
        # Rolling stock
        sa.Column("length", sa.Float, nullable=False),
        sa.Column("num_of_axles", sa.Integer, nullable=False),
        sa.Column(
            "railway_company_id", sa.Integer,
            sa.ForeignKey("railway_companies.id", ondelete="SET NULL"), nullable=True,
        ),
        # Locomotive
        sa.Column(
            "control", _enum("control", "analog", "digital", "digital_sound"),
            nullable=False,
        ),
        sa.Column(
            "loco_type", _enum("locotype", "steam", "diesel", "electric", "railcar"),
            nullable=False,
        ),
        sa.Column("auto_coupling", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("num_of_driven_axles", sa.Integer, nullable=False),
        sa.Column(
            "digital_decoder_id", sa.Integer,
            sa.ForeignKey("digital_decoders.id", ondelete="SET NULL"), nullable=True,
        ),
        sa.CheckConstraint("price >= 0", name="ck_locomotives_price_non_negative"),
        sa.CheckConstraint("length(name) > 0", name="ck_locomotives_name_non_empty"),
    )

    op.create_table(
        "images",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("url", sa.String(2000), nullable=False),
        sa.Column(
            "product_id", sa.Integer,
            sa.ForeignKey("locomotives.id", ondelete="SET NULL"), nullable=True,
        ),
        sa.Column("position", sa.Integer, nullable=False, server_default="0"),
    )

    op.create_table(
        "stock_statuses",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "product_id", sa.Integer,
            sa.ForeignKey("locomotives.id", ondelete="CASCADE"),
            nullable=False, unique=True,
        ),
        sa.Column("amount", sa.Integer, nullable=False),
        sa.Column("next_stock", sa.Date, nullable=True),
        sa.CheckConstraint("amount >= 0", name="ck_stock_statuses_amount_non_negative"),
    )

    op.create_index("ix_locomotives_tag_id", "locomotives", ["tag_id"])
    op.create_index("ix_images_product_id", "images", ["product_id"])


def downgrade() -> None:
    op.drop_index("ix_images_product_id", table_name="images")
    op.drop_index("ix_locomotives_tag_id", table_name="locomotives")
    op.drop_table("stock_statuses")
    op.drop_table("images")
    op.drop_table("locomotives")
    op.drop_table("digital_decoders")
    op.drop_table("railway_companies")
    op.drop_table("countries")
    op.drop_table("tags")
