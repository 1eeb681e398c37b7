"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views) and is
read-only.  Incoming bodies are parsed into the Pydantic
``ProductInput`` from ``dtos.py`` and validated by the Service Layer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Output serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "color",
            "price",
            "stock_quantity",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
