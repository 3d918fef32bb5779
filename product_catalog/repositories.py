"""Persistence for products stored with class-table inheritance.

``products`` holds the common columns; each type's columns live in its own
child table whose primary key is the parent's id. Reads join the parent with
every child table at once and let the type registry pick the relevant columns.
"""

from __future__ import annotations

import dataclasses
from typing import Iterable, Optional

from sqlalchemy import Select, delete, select
from sqlalchemy.engine import Row
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from product_catalog.core.errors import CatalogIntegrityError, DuplicateSkuError, UnknownProductTypeError
from product_catalog.core.logging import get_logger
from product_catalog.entities import ProductEntity
from product_catalog.models import Product
from product_catalog.registry import bindings, lookup

logger = get_logger(__name__)


def _joined_select() -> Select:
    columns = [Product.id, Product.sku, Product.name, Product.price, Product.type]
    for binding in bindings():
        columns.extend(getattr(binding.child_model, name) for name in binding.attribute_names)

    stmt = select(*columns).select_from(Product)
    for binding in bindings():
        model = binding.child_model
        stmt = stmt.outerjoin(model, model.id == Product.id)
    return stmt


def _hydrate(row: Row) -> ProductEntity:
    data = row._mapping
    try:
        binding = lookup(data["type"])
    except UnknownProductTypeError as exc:
        raise CatalogIntegrityError(f"Product {data['id']} has unknown type {data['type']!r}") from exc
    return binding.hydrate(data)


def find_all(db: Session) -> list[ProductEntity]:
    rows = db.execute(_joined_select().order_by(Product.id.asc())).all()
    return [_hydrate(row) for row in rows]


def find_by_id(db: Session, product_id: int) -> Optional[ProductEntity]:
    row = db.execute(_joined_select().where(Product.id == product_id)).first()
    return _hydrate(row) if row is not None else None


def find_by_sku(db: Session, sku: str) -> Optional[ProductEntity]:
    row = db.execute(_joined_select().where(Product.sku == sku)).first()
    return _hydrate(row) if row is not None else None


def sku_exists(db: Session, sku: str) -> bool:
    return db.execute(select(Product.id).where(Product.sku == sku).limit(1)).first() is not None


SKU_CONSTRAINT = "uq_products_sku"


def _is_sku_violation(exc: IntegrityError) -> bool:
    # psycopg reports the violated constraint by name; SQLite only names the column.
    constraint = getattr(getattr(exc.orig, "diag", None), "constraint_name", None)
    if constraint:
        return constraint == SKU_CONSTRAINT
    return "products.sku" in str(exc.orig)


def save_product(db: Session, product: ProductEntity) -> ProductEntity:
    """
    Insert ``product`` into ``products`` and its child table in one transaction.

    The sku pre-check only avoids a pointless write; the unique constraint is
    what decides, so a violation raised by the insert is reported the same way.
    Returns a copy of ``product`` carrying the generated id.
    """
    binding = lookup(product.type)

    if sku_exists(db, product.sku):
        db.rollback()
        raise DuplicateSkuError(product.sku)

    try:
        parent = Product(sku=product.sku, name=product.name, price=product.price, type=binding.tag)
        db.add(parent)
        db.flush()

        db.add(binding.child_model(id=parent.id, **product.attributes()))
        db.flush()
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if _is_sku_violation(exc):
            raise DuplicateSkuError(product.sku) from exc
        raise
    except Exception:
        db.rollback()
        raise

    logger.info("Product saved", extra={"productId": parent.id, "sku": product.sku, "type": binding.tag})
    return dataclasses.replace(product, id=parent.id)


def _delete_where(db: Session, condition) -> int:
    try:
        result = db.execute(delete(Product).where(condition).execution_options(synchronize_session=False))
        db.commit()
    except Exception:
        db.rollback()
        raise
    return result.rowcount


def delete_by_ids(db: Session, ids: Iterable[int]) -> int:
    """Delete products by id; child rows go with them (ON DELETE CASCADE)."""
    ids = list(ids)
    if not ids:
        return 0
    return _delete_where(db, Product.id.in_(ids))


def delete_by_skus(db: Session, skus: Iterable[str]) -> int:
    skus = list(skus)
    if not skus:
        return 0
    return _delete_where(db, Product.sku.in_(skus))
