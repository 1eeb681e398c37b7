"""Product model for the catalog.

Invariants kept at the database level:
- ``price`` is never negative (check constraint).
- ``stock_quantity`` is never negative (``PositiveIntegerField``).

A non-empty ``name`` is enforced by the service layer before saving.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Catalog product aggregate root."""

    name = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True, default=None)  # noqa: DJ01
    color = models.CharField(  # noqa: DJ01
        max_length=64, null=True, blank=True, default=None
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    stock_quantity = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "products"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["name"], name="products_name_idx"),
            models.Index(fields=["color"], name="products_color_idx"),
            models.Index(fields=["price"], name="products_price_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"
