"""create products and type tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _child_id() -> sa.Column:
    return sa.Column(
        "id",
        sa.Integer(),
        sa.ForeignKey("products.id", ondelete="CASCADE"),
        primary_key=True,
    )


def upgrade() -> None:
    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("sku", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("type", sa.String(length=16), nullable=False),
        sa.UniqueConstraint("sku", name="uq_products_sku"),
        sa.CheckConstraint("type IN ('dvd', 'book', 'furniture')", name="ck_products_type"),
        sa.CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
    )
    op.create_table(
        "dvd_products",
        _child_id(),
        sa.Column("size", sa.Integer(), nullable=False),
    )
    op.create_table(
        "book_products",
        _child_id(),
        sa.Column("weight", sa.Numeric(10, 2), nullable=False),
    )
    op.create_table(
        "furniture_products",
        _child_id(),
        sa.Column("height", sa.Integer(), nullable=False),
        sa.Column("width", sa.Integer(), nullable=False),
        sa.Column("length", sa.Integer(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("furniture_products")
    op.drop_table("book_products")
    op.drop_table("dvd_products")
    op.drop_table("products")
