"""Product domain exceptions.

Raised by the Service Layer when input is rejected or a lookup comes
back empty.  The API layer (Views) catches these and translates them
into appropriate HTTP responses.
"""

from __future__ import annotations

from typing import Any

from modules.products.validators import Violation


class ProductError(Exception):
    """Base class for every error raised by ``ProductService``."""


class InvalidProductInput(ProductError):
    """Caller-supplied data failed a validation rule.

    The repository is never touched when this is raised.  The structured
    ``violation`` is kept on the instance; ``str(exc)`` is its message.
    """

    def __init__(self, violation: Violation) -> None:
        super().__init__(violation.message)
        self.violation = violation

    @property
    def field(self) -> str:
        return self.violation.field

    @property
    def code(self) -> str:
        return self.violation.code


class ProductNotFound(ProductError):
    """A lookup or delete targeted a key with no matching product.

    ``key`` is the id, name, color or ``(min_price, max_price)`` searched.
    """

    def __init__(self, message: str, key: Any = None) -> None:
        super().__init__(message)
        self.key = key


class ProductRetrievalFailed(ProductError):
    """The repository could not produce a result for an unconditional query."""

    def __init__(self, message: str = "Failed to retrieve products.") -> None:
        super().__init__(message)
