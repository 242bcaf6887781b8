"""Product business-rule errors.

Returned (not raised) by ``CatalogService`` inside a ``ServiceResult``.
The API layer maps each ``ErrorKind`` to an HTTP status.
"""

from __future__ import annotations

from uuid import UUID

from modules.core.results import ErrorKind, ServiceError


def product_already_exists(name: str, brand: str) -> ServiceError:
    """A product with the same name already exists for this brand."""
    return ServiceError(
        kind=ErrorKind.ALREADY_EXISTS,
        message=f"A product named '{name}' already exists for brand '{brand}'.",
    )


def product_not_found(id: str | UUID) -> ServiceError:
    return ServiceError(
        kind=ErrorKind.NOT_FOUND,
        message=f"Product {id} not found.",
    )
