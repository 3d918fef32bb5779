"""Type registry: the one place that knows which product types exist.

Each type tag is bound to its attribute rules (used by validation), its entity
class (used by the factory and by hydration) and its child table model (used
by the repository). Adding a product type means adding one binding here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from product_catalog.core.errors import CatalogIntegrityError, UnknownProductTypeError
from product_catalog.entities import BookProduct, DvdProduct, FurnitureProduct, ProductEntity
from product_catalog.models import BookAttributes, DvdAttributes, FurnitureAttributes

INTEGER = "integer"
DECIMAL = "decimal"


@dataclass(frozen=True)
class AttributeRule:
    name: str
    kind: str


@dataclass(frozen=True)
class TypeBinding:
    tag: str
    entity_cls: type[ProductEntity]
    child_model: type
    rules: tuple[AttributeRule, ...]

    @property
    def attribute_names(self) -> tuple[str, ...]:
        return tuple(rule.name for rule in self.rules)

    @property
    def child_table(self) -> str:
        return self.child_model.__tablename__

    def hydrate(self, row: Mapping[str, Any]) -> ProductEntity:
        """
        Build an entity from a row of the joined products query.

        Only this type's child columns are read; the other child tables'
        columns are NULL for this row and ignored.
        """
        missing = [name for name in self.attribute_names if row.get(name) is None]
        if missing:
            raise CatalogIntegrityError(
                f"Product {row.get('id')} of type {self.tag!r} has no {self.child_table} row"
            )

        return self.entity_cls(
            id=row["id"],
            sku=row["sku"],
            name=row["name"],
            price=row["price"],
            **{name: row[name] for name in self.attribute_names},
        )


_BINDINGS: dict[str, TypeBinding] = {
    binding.tag: binding
    for binding in (
        TypeBinding(
            tag="dvd",
            entity_cls=DvdProduct,
            child_model=DvdAttributes,
            rules=(AttributeRule("size", INTEGER),),
        ),
        TypeBinding(
            tag="book",
            entity_cls=BookProduct,
            child_model=BookAttributes,
            rules=(AttributeRule("weight", DECIMAL),),
        ),
        TypeBinding(
            tag="furniture",
            entity_cls=FurnitureProduct,
            child_model=FurnitureAttributes,
            rules=(
                AttributeRule("height", INTEGER),
                AttributeRule("width", INTEGER),
                AttributeRule("length", INTEGER),
            ),
        ),
    )
}


def lookup(type_tag: Any) -> TypeBinding:
    """Return the binding for ``type_tag`` (case-insensitive, surrounding blanks ignored)."""
    if not isinstance(type_tag, str):
        raise UnknownProductTypeError(type_tag)

    binding = _BINDINGS.get(type_tag.strip().lower())
    if binding is None:
        raise UnknownProductTypeError(type_tag)
    return binding


def registered_types() -> list[str]:
    return list(_BINDINGS)


def bindings() -> list[TypeBinding]:
    return list(_BINDINGS.values())
