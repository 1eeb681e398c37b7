"""Product validation rules.

Pure, stateless checks applied by ``ProductService`` before any
repository call.  Each rule returns ``None`` when the value is valid or
a ``Violation`` describing the first problem found.  Violations are
module-level constants, so callers can compare by identity or by
``code`` instead of matching message text.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from modules.products.dtos import ProductInput

Number = Union[Decimal, int, float]


@dataclass(frozen=True)
class Violation:
    """A failed validation rule: offending field, stable code, display message."""

    field: str
    code: str
    message: str


NAME_REQUIRED = Violation(
    "name", "name_required", "Product name cannot be null or empty."
)
PRICE_NEGATIVE = Violation(
    "price", "price_negative", "Product price cannot be negative."
)
STOCK_NEGATIVE = Violation(
    "stock_quantity", "stock_negative", "Stock quantity cannot be negative."
)
ID_REQUIRED = Violation("id", "id_required", "Product ID cannot be null or empty.")
COLOR_REQUIRED = Violation(
    "color", "color_required", "Product color cannot be null or empty."
)
PRICE_RANGE_NEGATIVE = Violation(
    "price_range", "price_range_negative", "Price values cannot be negative."
)
PRICE_RANGE_INVERTED = Violation(
    "price_range",
    "price_range_inverted",
    "minPrice cannot be greater than maxPrice.",
)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def check_name(name: Optional[str]) -> Optional[Violation]:
    if _is_blank(name):
        return NAME_REQUIRED
    return None


def check_price(price: Number) -> Optional[Violation]:
    if price < 0:
        return PRICE_NEGATIVE
    return None


def check_stock_quantity(stock_quantity: int) -> Optional[Violation]:
    if stock_quantity < 0:
        return STOCK_NEGATIVE
    return None


def check_id(id: Optional[str]) -> Optional[Violation]:
    if _is_blank(id):
        return ID_REQUIRED
    return None


def check_color(color: Optional[str]) -> Optional[Violation]:
    if _is_blank(color):
        return COLOR_REQUIRED
    return None


def check_price_range(min_price: Number, max_price: Number) -> Optional[Violation]:
    """Negative bounds are reported before an inverted range."""
    if min_price < 0 or max_price < 0:
        return PRICE_RANGE_NEGATIVE
    if min_price > max_price:
        return PRICE_RANGE_INVERTED
    return None


def validate_product_input(dto: ProductInput) -> Optional[Violation]:
    """Run the creation rules in order (name, price, stock); first failure wins."""
    return (
        check_name(dto.name)
        or check_price(dto.price)
        or check_stock_quantity(dto.stock_quantity)
    )
