"""Catalog service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- A (name, brand) pair is unique across the catalog.
- Update, price update and delete require the product to exist.

Rule violations are returned as ``ServiceResult`` errors; only unexpected
failures raise.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, List
from uuid import UUID

import structlog
from django.db import IntegrityError, transaction

from modules.core.results import ServiceResult, service_err, service_ok
from modules.products.errors import product_already_exists, product_not_found
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import PageQueryDTO, ProductInputDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class CatalogService:
    """Application service for the product catalog.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    Holds no state of its own besides the repository.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, query: PageQueryDTO) -> List[Product]:
        """Return one page of products in insertion order.

        An empty list means the page is past the end of the catalog.
        """
        return self._repo.list_page(query.page, query.page_size)

    def get_product(self, id: str | UUID) -> ServiceResult[Product]:
        product = self._repo.get_by_id(id)
        if product is None:
            return service_err(product_not_found(id))
        return service_ok(product)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def insert_product(self, dto: ProductInputDTO) -> ServiceResult[Product]:
        """Create a new product unless its (name, brand) is already taken."""
        log = logger.bind(name=dto.name, brand=dto.brand)

        if self._repo.get_by_name_and_brand(dto.name, dto.brand) is not None:
            log.warning("product.duplicate")
            return service_err(product_already_exists(dto.name, dto.brand))

        product = Product(name=dto.name, brand=dto.brand, price=dto.price)
        try:
            product = self._repo.save(product)
        except IntegrityError:
            # A concurrent insert won the race for the same pair.
            log.warning("product.duplicate", source="storage")
            return service_err(product_already_exists(dto.name, dto.brand))

        log.info("product.inserted", product_id=str(product.id))
        return service_ok(product)

    @transaction.atomic
    def update_product(self, id: str | UUID, dto: ProductInputDTO) -> ServiceResult[Product]:
        """Replace name, brand and price of an existing product."""
        log = logger.bind(product_id=str(id))

        product = self._repo.get_by_id(id)
        if product is None:
            log.warning("product.not_found", operation="update")
            return service_err(product_not_found(id))

        other = self._repo.get_by_name_and_brand(dto.name, dto.brand)
        if other is not None and other.id != product.id:
            log.warning("product.duplicate", name=dto.name, brand=dto.brand)
            return service_err(product_already_exists(dto.name, dto.brand))

        product.name = dto.name
        product.brand = dto.brand
        product.price = dto.price
        try:
            product = self._repo.save(product)
        except IntegrityError:
            log.warning("product.duplicate", source="storage")
            return service_err(product_already_exists(dto.name, dto.brand))

        log.info("product.updated")
        return service_ok(product)

    @transaction.atomic
    def update_price(self, id: str | UUID, price: Decimal) -> ServiceResult[Product]:
        """Replace only the price of an existing product."""
        log = logger.bind(product_id=str(id))

        product = self._repo.get_by_id(id)
        if product is None:
            log.warning("product.not_found", operation="update_price")
            return service_err(product_not_found(id))

        old_price = product.price
        product.price = price
        product = self._repo.save(product)
        log.info("product.price_updated", old_price=str(old_price), new_price=str(price))
        return service_ok(product)

    @transaction.atomic
    def delete_product(self, id: str | UUID) -> ServiceResult[None]:
        """Permanently remove a product."""
        if not self._repo.delete(id):
            logger.warning("product.not_found", product_id=str(id), operation="delete")
            return service_err(product_not_found(id))
        logger.info("product.deleted", product_id=str(id))
        return service_ok()
