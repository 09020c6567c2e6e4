"""Django ORM implementation of the generic repository.

Translates a ``BaseSpecification`` into a QuerySet and keeps a per-instance
list of staged writes that ``save_changes`` flushes inside a single
``transaction.atomic()`` block.

Error handling follows the Null Object pattern for reads: ``get_by_id``
returns ``None`` instead of raising for missing or malformed IDs.  Storage
errors raised while committing propagate unchanged to the caller.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple, Type, TypeVar

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.core.repositories.interfaces import IRepository
from modules.core.specifications import BaseSpecification

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=models.Model)

ADD = "add"
UPDATE = "update"
DELETE = "delete"


class DjangoRepository(IRepository[T]):
    """Generic repository over a single Django model.

    Subclasses set ``model`` and, optionally, ``entity_name`` (the prefix of
    log events).  Instances are cheap and must not be shared between
    requests: staged changes live on the instance.
    """

    model: Type[T]
    entity_name: str = "entity"

    def __init__(self) -> None:
        self._pending: List[Tuple[str, T]] = []

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an entity by primary key.

        Returns ``None`` for non-existent or invalid IDs (e.g. ``"abc"``).
        """
        try:
            return self.model.objects.filter(pk=id).first()
        except (TypeError, ValueError, ValidationError):
            return None

    def get_all(self) -> List[T]:
        return list(self.model.objects.all())

    def list(self, spec: BaseSpecification[T]) -> List[T]:
        return list(self._apply_specification(spec))

    def first(self, spec: BaseSpecification[T]) -> Optional[T]:
        return self._apply_specification(spec).first()

    def count(self, spec: Optional[BaseSpecification[T]] = None) -> int:
        queryset = self.model.objects.all()
        if spec is not None and spec.criteria is not None:
            queryset = queryset.filter(spec.criteria)
        return queryset.count()

    def page(
        self, spec: BaseSpecification[T], page_number: int, page_size: int
    ) -> List[T]:
        if page_number < 1:
            raise ValueError("page_number must be >= 1.")
        if page_size < 1:
            raise ValueError("page_size must be >= 1.")
        offset = (page_number - 1) * page_size
        return list(self._apply_specification(spec)[offset : offset + page_size])

    def _apply_specification(self, spec: BaseSpecification[T]) -> models.QuerySet:
        """Build the QuerySet: filter, then ascending sort, else descending.

        Ties on the sort key are broken by primary key so pages are stable.
        """
        queryset = self.model.objects.all()
        if spec.criteria is not None:
            queryset = queryset.filter(spec.criteria)
        if spec.order_by is not None:
            queryset = queryset.order_by(spec.order_by, "pk")
        elif spec.order_by_descending is not None:
            queryset = queryset.order_by(f"-{spec.order_by_descending}", "pk")
        return queryset

    # ------------------------------------------------------------------
    # Staged writes
    # ------------------------------------------------------------------

    def add(self, entity: T) -> T:
        self._stage(ADD, entity)
        return entity

    def update(self, entity: T) -> T:
        self._stage(UPDATE, entity)
        return entity

    def delete(self, entity: T) -> None:
        self._stage(DELETE, entity)

    @property
    def has_pending_changes(self) -> bool:
        return bool(self._pending)

    def save_changes(self) -> int:
        """Write every staged change in one transaction.

        Returns the number of changes written.  On failure the transaction
        is rolled back and the staged changes are kept.
        """
        if not self._pending:
            return 0
        with transaction.atomic():
            for action, entity in self._pending:
                if action == ADD:
                    entity.save(force_insert=True)
                elif action == UPDATE:
                    entity.save(force_update=True)
                else:
                    entity.delete()
        written = len(self._pending)
        self._pending.clear()
        logger.info(f"{self.entity_name}.changes_saved", count=written)
        return written

    def _stage(self, action: str, entity: T) -> None:
        self._pending.append((action, entity))
        logger.debug(
            f"{self.entity_name}.staged",
            action=action,
            entity_id=entity.pk,
        )
