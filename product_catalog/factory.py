from product_catalog.entities import ProductEntity
from product_catalog.registry import lookup
from product_catalog.validation import ValidatedFields


def build(validated: ValidatedFields) -> ProductEntity:
    """Create the entity for already validated input (no id yet)."""
    binding = lookup(validated.type)
    return binding.entity_cls(
        sku=validated.sku,
        name=validated.name,
        price=validated.price,
        **validated.attributes,
    )
