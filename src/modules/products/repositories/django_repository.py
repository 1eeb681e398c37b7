"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
or ``False`` instead of raising HTTP-level exceptions; the Service Layer
decides how to translate a missing result into an API response.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

import structlog

from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def find_all(self) -> Optional[List[Product]]:
        """Return every product, or ``None`` if the database is unavailable."""
        try:
            return list(Product.objects.all())
        except DatabaseError:
            logger.exception("product.find_all_failed")
            return None

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info("product.saved", product_id=str(entity.id))
        return entity

    def exists_by_id(self, id: str) -> bool:
        """``False`` for unknown ids and for ids that are not valid UUIDs."""
        try:
            return Product.objects.filter(id=id).exists()
        except (ValueError, ValidationError):
            return False

    @transaction.atomic
    def delete_by_id(self, id: str) -> None:
        """Hard-delete a product.  A missing id is a no-op."""
        try:
            deleted, _ = Product.objects.filter(id=id).delete()
        except (ValueError, ValidationError):
            deleted = 0
        logger.info("product.hard_deleted", product_id=str(id), rows=deleted)

    def find_by_name(self, name: str) -> List[Product]:
        return list(Product.objects.filter(name=name))

    def find_by_price_between(
        self, min_price: Decimal, max_price: Decimal
    ) -> List[Product]:
        return list(Product.objects.filter(price__range=(min_price, max_price)))

    def find_by_color(self, color: str) -> List[Product]:
        return list(Product.objects.filter(color=color))
