"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

``ProductInput`` coerces types and enforces the storage bounds of the
``products`` table (10 digits / 2 places for ``price``, a 32-bit signed
``stock_quantity``).  Business rules (non-empty name, non-negative price
and stock) are checked by the service through
``modules.products.validators`` so that a rejected input never reaches
the repository and always carries a structured violation.

``stock_quantity`` is also accepted as ``stockQuantity``.  Unknown keys
are rejected.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

MAX_STOCK_QUANTITY = 2_147_483_647


class ProductInput(BaseModel):
    """Immutable product creation payload, unchecked against business rules."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: Optional[str] = None
    description: Optional[str] = None
    color: Optional[str] = None
    price: Decimal = Field(Decimal("0"), max_digits=10, decimal_places=2)
    stock_quantity: int = Field(
        0,
        le=MAX_STOCK_QUANTITY,
        validation_alias=AliasChoices("stock_quantity", "stockQuantity"),
    )
