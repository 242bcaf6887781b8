"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Look-ups follow the Null Object pattern: they return ``None`` instead of
raising, and the Service Layer decides what a missing entity means.
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str | UUID) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_name_and_brand(self, name: str, brand: str) -> Optional[Product]:
        return Product.objects.filter(name=name, brand=brand).first()

    def list_page(self, page: int, page_size: int) -> List[Product]:
        """Slice one page out of the insertion-ordered product table.

        Pages past the last row come back empty without querying with an
        offset the database may not be able to represent.
        """
        offset = (page - 1) * page_size
        if offset >= Product.objects.count():
            return []
        return list(Product.objects.order_by("created_at", "id")[offset : offset + page_size])

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product.

        The savepoint keeps an ``IntegrityError`` from poisoning the
        caller's transaction.
        """
        entity.save()
        return entity

    @transaction.atomic
    def delete(self, id: str | UUID) -> bool:
        """Permanently delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` otherwise.
        """
        try:
            deleted, _ = Product.objects.filter(id=id).delete()
        except (ValueError, ValidationError):
            return False
        return bool(deleted)
