"""Product repository interface.

Extends ``IRepository[Product]`` with the catalog look-ups used by
``ProductService``.  Each look-up returns a possibly empty list; the
service decides whether an empty result is an error.
"""

from __future__ import annotations

from abc import abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def find_by_name(self, name: str) -> List[Product]:
        """Products whose name matches exactly."""

    @abstractmethod
    def find_by_price_between(
        self, min_price: Decimal, max_price: Decimal
    ) -> List[Product]:
        """Products priced within ``[min_price, max_price]`` (inclusive)."""

    @abstractmethod
    def find_by_color(self, color: str) -> List[Product]:
        """Products whose color matches exactly."""
