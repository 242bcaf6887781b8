"""Product model with (name, brand) uniqueness.

Business rules implemented:
- A (name, brand) pair identifies at most one product (UNIQUE constraint).
- Price lies between 1 and 1000 inclusive (CHECK constraint).
- Deletion is permanent.
"""

from __future__ import annotations

from django.core.validators import (
    MaxValueValidator,
    MinLengthValidator,
    MinValueValidator,
)
from django.db import models

from modules.core.models import BaseModel
from modules.products.constants import (
    BRAND_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX,
    PRICE_MAX_DIGITS,
    PRICE_MIN,
)


class Product(BaseModel):
    """Sellable catalog item.

    The ``(name, brand)`` UNIQUE constraint is what makes concurrent inserts
    safe: the service checks for duplicates first, and the database rejects
    whichever writer loses the race.
    """

    name = models.CharField(
        max_length=NAME_MAX_LENGTH,
        validators=[MinLengthValidator(NAME_MIN_LENGTH)],
    )
    brand = models.CharField(max_length=BRAND_MAX_LENGTH)
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        validators=[MinValueValidator(PRICE_MIN), MaxValueValidator(PRICE_MAX)],
    )

    class Meta:
        db_table = "products"
        ordering = ["created_at", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["name", "brand"],
                name="products_name_brand_uniq",
            ),
            models.CheckConstraint(
                condition=models.Q(price__gte=PRICE_MIN) & models.Q(price__lte=PRICE_MAX),
                name="products_price_range",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.brand})"
