from typing import Optional

from pydantic import BaseModel

from product_catalog.entities import ProductEntity


class ProductRead(BaseModel):
    id: int
    sku: str
    name: str
    price: float
    type: str
    specific_attribute: str

    @classmethod
    def from_entity(cls, product: ProductEntity) -> "ProductRead":
        data = product.to_dict()
        data["price"] = float(product.price)
        return cls(**data)


class DeleteResult(BaseModel):
    message: str = "Products deleted successfully."
    deleted: int


class ErrorResponse(BaseModel):
    error: str
    message: str
    requestId: Optional[str] = None


class ValidationErrorResponse(BaseModel):
    message: str = "Validation failed"
    errors: dict[str, str]
