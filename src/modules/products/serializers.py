"""Product DRF serializers for API output and schema generation.

Input is validated by the Pydantic DTOs in ``dtos.py``; the serializers
only render ``Product`` instances and describe request bodies for the
OpenAPI schema.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.constants import (
    BRAND_MAX_LENGTH,
    BRAND_MIN_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX,
    PRICE_MAX_DIGITS,
    PRICE_MIN,
)
from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = ["id", "name", "brand", "price", "created_at", "updated_at"]
        read_only_fields = fields


class ProductInputSerializer(serializers.Serializer):
    """Request body of POST /products and PUT /products/{id} (schema only)."""

    name = serializers.CharField(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    brand = serializers.CharField(min_length=BRAND_MIN_LENGTH, max_length=BRAND_MAX_LENGTH)
    price = serializers.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        min_value=PRICE_MIN,
        max_value=PRICE_MAX,
    )
