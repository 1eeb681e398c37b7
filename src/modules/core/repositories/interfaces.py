"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    def find_all(self) -> Optional[List[T]]:
        """Return every entity, or ``None`` when the store is unavailable."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity, assigning its id if absent."""

    @abstractmethod
    def exists_by_id(self, id: str) -> bool:
        """Return ``True`` when an entity with the given id exists."""

    @abstractmethod
    def delete_by_id(self, id: str) -> None:
        """Remove an entity by id.  Missing ids are implementation-defined."""
