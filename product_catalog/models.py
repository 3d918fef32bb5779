from decimal import Decimal

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from product_catalog.core.db import Base

# Discriminator values; every value has exactly one child table below.
PRODUCT_TYPES = ("dvd", "book", "furniture")

_type_check = "type IN ({})".format(", ".join(f"'{t}'" for t in PRODUCT_TYPES))


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        UniqueConstraint("sku", name="uq_products_sku"),
        CheckConstraint(_type_check, name="ck_products_type"),
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sku: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    type: Mapped[str] = mapped_column(String(16), nullable=False)


# Child tables share the parent's id: the primary key is also the foreign key.


class DvdAttributes(Base):
    __tablename__ = "dvd_products"

    id: Mapped[int] = mapped_column(ForeignKey("products.id", ondelete="CASCADE"), primary_key=True)
    size: Mapped[int] = mapped_column(Integer, nullable=False)


class BookAttributes(Base):
    __tablename__ = "book_products"

    id: Mapped[int] = mapped_column(ForeignKey("products.id", ondelete="CASCADE"), primary_key=True)
    weight: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)


class FurnitureAttributes(Base):
    __tablename__ = "furniture_products"

    id: Mapped[int] = mapped_column(ForeignKey("products.id", ondelete="CASCADE"), primary_key=True)
    height: Mapped[int] = mapped_column(Integer, nullable=False)
    width: Mapped[int] = mapped_column(Integer, nullable=False)
    length: Mapped[int] = mapped_column(Integer, nullable=False)
