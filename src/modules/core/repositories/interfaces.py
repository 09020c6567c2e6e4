"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Writes are two-phase: ``add`` / ``update`` / ``delete`` only *stage* a
change; nothing reaches storage until ``save_changes`` commits every
staged change as one unit.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar

from modules.core.specifications import BaseSpecification

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``).
    """

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @abstractmethod
    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None``."""

    @abstractmethod
    def get_all(self) -> List[T]:
        """Return every entity, unordered."""

    @abstractmethod
    def list(self, spec: BaseSpecification[T]) -> List[T]:
        """Return the entities matching ``spec`` in the order it declares."""

    @abstractmethod
    def first(self, spec: BaseSpecification[T]) -> Optional[T]:
        """Return the first entity matching ``spec``, or ``None``."""

    @abstractmethod
    def count(self, spec: Optional[BaseSpecification[T]] = None) -> int:
        """Count the entities matching ``spec`` (all entities when omitted)."""

    @abstractmethod
    def page(
        self, spec: BaseSpecification[T], page_number: int, page_size: int
    ) -> List[T]:
        """Return one 1-based page of ``list(spec)``."""

    # ------------------------------------------------------------------
    # Staged writes
    # ------------------------------------------------------------------

    @abstractmethod
    def add(self, entity: T) -> T:
        """Stage ``entity`` for insertion."""

    @abstractmethod
    def update(self, entity: T) -> T:
        """Stage ``entity`` for update."""

    @abstractmethod
    def delete(self, entity: T) -> None:
        """Stage ``entity`` for removal."""

    @property
    @abstractmethod
    def has_pending_changes(self) -> bool:
        """``True`` while staged changes await ``save_changes``."""

    @abstractmethod
    def save_changes(self) -> int:
        """Atomically commit all staged changes; return how many were written."""
