"""Product repository interface.

Extends ``IRepository[Product]`` with the look-up required by the
(name, brand) uniqueness rule.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate.

    ``save`` must raise ``django.db.IntegrityError`` when the (name, brand)
    pair is already taken by another product, so the service can detect a
    duplicate that slipped past its own check.
    """

    @abstractmethod
    def get_by_name_and_brand(self, name: str, brand: str) -> Optional["Product"]:
        """Retrieve the product with exactly this name and brand."""
