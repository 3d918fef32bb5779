from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from sqlalchemy.orm import Session

from product_catalog import repositories
from product_catalog.core.logging import get_logger
from product_catalog.entities import ProductEntity
from product_catalog.factory import build
from product_catalog.validation import validate

logger = get_logger(__name__)


def create_product(db: Session, payload: Mapping[str, Any]) -> ProductEntity:
    """Validate ``payload``, build the matching entity and persist it."""
    validated = validate(payload, payload.get("type"))
    product = build(validated)
    return repositories.save_product(db, product)


def delete_products(
    db: Session,
    ids: Optional[Sequence[int]] = None,
    skus: Optional[Sequence[str]] = None,
) -> int:
    deleted = 0
    if ids:
        deleted += repositories.delete_by_ids(db, ids)
    if skus:
        deleted += repositories.delete_by_skus(db, skus)

    logger.info("Products deleted", extra={"ids": list(ids or []), "skus": list(skus or []), "deleted": deleted})
    return deleted
