"""Product DRF serializers for RPC output.

The serializer operates at the Interface layer (Celery tasks).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product record."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "available",
        ]
        read_only_fields = ["id", "available"]
