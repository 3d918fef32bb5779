from typing import Any, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from product_catalog import repositories, services
from product_catalog.core.deps import get_db, get_json_body
from product_catalog.core.errors import NotFoundError, ValidationError
from product_catalog.schemas import DeleteResult, ErrorResponse, ProductRead, ValidationErrorResponse
from product_catalog.validation import parse_integer

router = APIRouter(tags=["products"])

_MISSING_IDS = "Please provide an array of IDs to delete."
_BAD_SKUS = "Please provide an array of SKUs to delete."


@router.get("/products", response_model=list[ProductRead])
def http_list_products(db: Session = Depends(get_db)):
    return [ProductRead.from_entity(p) for p in repositories.find_all(db)]


@router.get(
    "/products/{product_id}",
    response_model=ProductRead,
    responses={404: {"model": ErrorResponse}},
)
def http_get_product(product_id: int, db: Session = Depends(get_db)):
    item = repositories.find_by_id(db, product_id)
    if item is None:
        raise NotFoundError("Product not found")
    return ProductRead.from_entity(item)


@router.post(
    "/products",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ValidationErrorResponse},
    },
)
def http_create_product(body: dict[str, Any] = Depends(get_json_body), db: Session = Depends(get_db)):
    return ProductRead.from_entity(services.create_product(db, body))


def _delete_targets(body: dict[str, Any]) -> tuple[Optional[list[int]], Optional[list[str]]]:
    raw_ids = body.get("ids")
    raw_skus = body.get("skus")
    if raw_ids is None and raw_skus is None:
        raise ValidationError({"ids": _MISSING_IDS})

    errors: dict[str, str] = {}
    ids: Optional[list[int]] = None
    skus: Optional[list[str]] = None

    if raw_ids is not None:
        try:
            if not isinstance(raw_ids, list):
                raise ValueError("ids must be a list")
            ids = [parse_integer(i) for i in raw_ids]
        except ValueError:
            errors["ids"] = _MISSING_IDS

    if raw_skus is not None:
        if isinstance(raw_skus, list) and all(isinstance(s, str) for s in raw_skus):
            skus = raw_skus
        else:
            errors["skus"] = _BAD_SKUS

    if errors:
        raise ValidationError(errors)
    return ids, skus


@router.delete(
    "/products",
    response_model=DeleteResult,
    responses={400: {"model": ErrorResponse}, 422: {"model": ValidationErrorResponse}},
)
def http_delete_products(body: dict[str, Any] = Depends(get_json_body), db: Session = Depends(get_db)):
    ids, skus = _delete_targets(body)
    return DeleteResult(deleted=services.delete_products(db, ids=ids, skus=skus))
