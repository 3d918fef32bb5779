"""Input validation for product creation.

Common fields are checked first, then the type-specific fields declared by the
type's registry binding. Every violation is collected (one message per field,
first failing rule wins) and raised together as a ``ValidationError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Mapping

from product_catalog.core.errors import UnknownProductTypeError, ValidationError
from product_catalog.registry import DECIMAL, INTEGER, lookup

REQUIRED = "Please, submit required data"
WRONG_TYPE = "Please, provide the data of indicated type"
INVALID_TYPE = "Invalid product type specified"


@dataclass(frozen=True)
class ValidatedFields:
    type: str
    sku: str
    name: str
    price: Decimal
    attributes: dict[str, Any] = field(default_factory=dict)


def negative_message(field_name: str) -> str:
    return f"{field_name.capitalize()} cannot be negative"


# Column limits: NUMERIC(10, 2) and a 32-bit INTEGER.
DECIMAL_LIMIT = Decimal("100000000")
CENT = Decimal("0.01")
INTEGER_MAX = 2**31 - 1


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_finite(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise ValueError("booleans are not numbers")
    if isinstance(value, float):
        value = str(value)
    if isinstance(value, str):
        value = value.strip()
    if not isinstance(value, (int, str, Decimal)):
        raise ValueError(f"not a number: {value!r}")

    try:
        number = Decimal(value)
    except InvalidOperation as exc:
        raise ValueError(f"not a number: {value!r}") from exc
    if not number.is_finite():
        raise ValueError(f"not a finite number: {value!r}")
    return number


def parse_decimal(value: Any) -> Decimal:
    """Parse a JSON number or numeric string with at most two decimal places."""
    number = _parse_finite(value)
    # Magnitude first: quantize on an unbounded exponent would overflow.
    if number.copy_abs() >= DECIMAL_LIMIT:
        raise ValueError(f"out of range: {value!r}")
    if number != number.quantize(CENT):
        raise ValueError(f"more than two decimal places: {value!r}")
    return number


def parse_integer(value: Any) -> int:
    number = _parse_finite(value)
    if number.copy_abs() > INTEGER_MAX:
        raise ValueError(f"out of range: {value!r}")
    if number != number.to_integral_value():
        raise ValueError(f"not an integer: {value!r}")
    return int(number)


_PARSERS: dict[str, Callable[[Any], Any]] = {
    INTEGER: parse_integer,
    DECIMAL: parse_decimal,
}


def _check_string(data: Mapping[str, Any], name: str, errors: dict[str, str], out: dict[str, Any]) -> None:
    value = data.get(name)
    if _is_blank(value):
        errors[name] = REQUIRED
    elif not isinstance(value, str):
        errors[name] = WRONG_TYPE
    else:
        out[name] = value.strip()


def _check_number(
    data: Mapping[str, Any],
    name: str,
    parse: Callable[[Any], Any],
    errors: dict[str, str],
    out: dict[str, Any],
) -> None:
    value = data.get(name)
    if _is_blank(value):
        errors[name] = REQUIRED
        return
    try:
        number = parse(value)
    except ValueError:
        errors[name] = WRONG_TYPE
        return
    if number < 0:
        errors[name] = negative_message(name)
        return
    out[name] = number


def validate(data: Mapping[str, Any], type_tag: Any) -> ValidatedFields:
    """
    Validate ``data`` as a product of type ``type_tag``.

    A missing or unknown type fails immediately with a single ``type`` error;
    otherwise all field errors are reported at once.
    """
    if _is_blank(type_tag):
        raise ValidationError({"type": REQUIRED})
    try:
        binding = lookup(type_tag)
    except UnknownProductTypeError:
        raise ValidationError({"type": INVALID_TYPE}) from None

    errors: dict[str, str] = {}
    common: dict[str, Any] = {}
    _check_string(data, "sku", errors, common)
    _check_string(data, "name", errors, common)
    _check_number(data, "price", parse_decimal, errors, common)

    attributes: dict[str, Any] = {}
    for rule in binding.rules:
        _check_number(data, rule.name, _PARSERS[rule.kind], errors, attributes)

    if errors:
        raise ValidationError(errors)

    return ValidatedFields(
        type=binding.tag,
        sku=common["sku"],
        name=common["name"],
        price=common["price"],
        attributes=attributes,
    )
