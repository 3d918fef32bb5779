"""Error taxonomy for the catalog.

Business outcomes (validation, duplicate sku, not found, bad request) are
raised by the domain layers and turned into JSON responses by the handlers
registered in ``product_catalog.main``. Anything else is an internal error.
"""

from __future__ import annotations

from typing import Mapping


class CatalogError(Exception):
    """Base class for every error raised by the catalog."""

    code = "catalog_error"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    """One or more field-level problems in user input."""

    code = "validation_error"
    status_code = 422

    def __init__(self, errors: Mapping[str, str], message: str = "Validation failed") -> None:
        super().__init__(message)
        self.errors = dict(errors)


class DuplicateSkuError(CatalogError):
    code = "duplicate_sku"
    status_code = 409

    def __init__(self, sku: str) -> None:
        super().__init__(f"SKU '{sku}' already exists.")
        self.sku = sku


class NotFoundError(CatalogError):
    code = "not_found"
    status_code = 404


class UnknownProductTypeError(NotFoundError):
    code = "unknown_product_type"

    def __init__(self, type_tag: object) -> None:
        super().__init__(f"No product type registered for {type_tag!r}")
        self.type_tag = type_tag


class BadRequestError(CatalogError):
    code = "bad_request"
    status_code = 400


class CatalogIntegrityError(CatalogError):
    """Stored data breaks an invariant (e.g. a product row without its child row)."""

    code = "internal_server_error"
    status_code = 500
