"""Product service layer (Use Cases).

Orchestrates validation, mapping and persistence for the Product
aggregate, delegating storage to the injected ``IProductRepository``.

Rules enforced here:
- Input is validated before any repository call; a rejected input never
  reaches the repository.
- Delete checks existence first and only then deletes.  The two calls
  are not atomic at this layer: a concurrent delete in between is left
  to the repository, which treats a missing id as a no-op.
- Look-ups that match nothing raise ``ProductNotFound`` instead of
  returning an empty list.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional, Union

import structlog

from modules.products.exceptions import (
    InvalidProductInput,
    ProductNotFound,
    ProductRetrievalFailed,
)
from modules.products.models import Product
from modules.products.validators import (
    Violation,
    check_color,
    check_id,
    check_name,
    check_price_range,
    validate_product_input,
)

if TYPE_CHECKING:
    from modules.products.dtos import ProductInput
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def _reject(violation: Optional[Violation], **context) -> None:
    if violation is not None:
        logger.warning(
            "product.invalid_input",
            field=violation.field,
            code=violation.code,
            **context,
        )
        raise InvalidProductInput(violation)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    The service borrows the repository and holds no other state.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: ProductInput) -> Product:
        """Validate ``dto`` and persist it as a new product.

        Raises:
            InvalidProductInput: blank name, negative price or negative stock.
        """
        _reject(validate_product_input(dto), operation="create")

        product = Product(
            name=dto.name,
            description=dto.description,
            color=dto.color,
            price=dto.price,
            stock_quantity=dto.stock_quantity,
        )
        product = self._repo.save(product)
        logger.info("product.created", product_id=str(product.id))
        return product

    def delete_product(self, id: Optional[str]) -> None:
        """Delete an existing product.

        Raises:
            InvalidProductInput: if ``id`` is blank.
            ProductNotFound: if no product has this id.
        """
        _reject(check_id(id), operation="delete")

        if not self._repo.exists_by_id(id):
            logger.warning("product.not_found", product_id=id)
            raise ProductNotFound(f"Product not found with id: {id}", key=id)

        self._repo.delete_by_id(id)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product; an empty catalog is a valid result.

        Raises:
            ProductRetrievalFailed: if the repository could not fetch.
        """
        products = self._repo.find_all()
        if products is None:
            logger.error("product.retrieval_failed")
            raise ProductRetrievalFailed()
        return products

    def find_by_name(self, name: Optional[str]) -> List[Product]:
        _reject(check_name(name), operation="find_by_name")

        products = self._repo.find_by_name(name)
        if not products:
            logger.info("product.not_found", name=name)
            raise ProductNotFound(f"No products found with name: {name}", key=name)
        return products

    def find_by_price_range(
        self,
        min_price: Union[Decimal, int, float],
        max_price: Union[Decimal, int, float],
    ) -> List[Product]:
        """Products priced within ``[min_price, max_price]``.

        Raises:
            InvalidProductInput: negative bound or ``min_price > max_price``.
            ProductNotFound: if nothing is priced in the range.
        """
        _reject(
            check_price_range(min_price, max_price),
            operation="find_by_price_range",
        )

        products = self._repo.find_by_price_between(min_price, max_price)
        if not products:
            logger.info(
                "product.not_found",
                min_price=str(min_price),
                max_price=str(max_price),
            )
            raise ProductNotFound(
                f"No products found within price range: {min_price} - {max_price}",
                key=(min_price, max_price),
            )
        return products

    def find_by_color(self, color: Optional[str]) -> List[Product]:
        _reject(check_color(color), operation="find_by_color")

        products = self._repo.find_by_color(color)
        if not products:
            logger.info("product.not_found", color=color)
            raise ProductNotFound(
                f"No products found with color: {color}", key=color
            )
        return products
