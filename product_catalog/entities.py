"""In-memory product entities.

One concrete class per product type. The type-specific columns of each class
are listed in ``attribute_names``; that is the bag written to (and read back
from) the type's child table.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar, Optional


def _format_decimal(value: Decimal) -> str:
    # 1.20 -> "1.2", 2.00 -> "2", 100 -> "100"
    return format(Decimal(str(value)).normalize(), "f")


@dataclass(kw_only=True)
class ProductEntity(ABC):
    type: ClassVar[str]
    attribute_names: ClassVar[tuple[str, ...]] = ()

    sku: str
    name: str
    price: Decimal
    id: Optional[int] = None

    def __post_init__(self) -> None:
        for field in ("price",) + self.attribute_names:
            value = getattr(self, field)
            if value < 0:
                raise ValueError(f"{field.capitalize()} cannot be negative: {value!r}")

    def attributes(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.attribute_names}

    @property
    @abstractmethod
    def specific_attribute(self) -> str:
        """Human readable summary of the type-specific attributes."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "sku": self.sku,
            "name": self.name,
            "price": self.price,
            "type": self.type,
            "specific_attribute": self.specific_attribute,
        }


@dataclass(kw_only=True)
class DvdProduct(ProductEntity):
    type: ClassVar[str] = "dvd"
    attribute_names: ClassVar[tuple[str, ...]] = ("size",)

    size: int

    @property
    def specific_attribute(self) -> str:
        return f"Size: {self.size} MB"


@dataclass(kw_only=True)
class BookProduct(ProductEntity):
    type: ClassVar[str] = "book"
    attribute_names: ClassVar[tuple[str, ...]] = ("weight",)

    weight: Decimal

    @property
    def specific_attribute(self) -> str:
        return f"Weight: {_format_decimal(self.weight)} KG"


@dataclass(kw_only=True)
class FurnitureProduct(ProductEntity):
    type: ClassVar[str] = "furniture"
    attribute_names: ClassVar[tuple[str, ...]] = ("height", "width", "length")

    height: int
    width: int
    length: int

    @property
    def specific_attribute(self) -> str:
        return f"Dimension: {self.height}x{self.width}x{self.length}"
