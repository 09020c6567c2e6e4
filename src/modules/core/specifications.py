"""Specification pattern primitives.

A specification bundles a filter predicate (a Django ``Q`` tree) with an
optional single sort key.  The same object drives two evaluators:

- ``DjangoRepository`` translates it into a QuerySet (``filter`` +
  ``order_by``).
- ``BaseSpecification.is_satisfied_by`` / ``evaluate`` walk the ``Q`` tree
  in memory with ``matches``, so business rules can be checked without a
  database.

Specifications compose with ``&``, ``|`` and ``~``.  The composite keeps
the ordering of the left-hand operand.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, TypeVar

from django.db.models import Q

T = TypeVar("T")

# Matches nothing: ``pk__in=[]`` short-circuits to an empty result in the ORM.
MATCH_NOTHING = Q(pk__in=[])


# ---------------------------------------------------------------------------
# In-memory matcher
# ---------------------------------------------------------------------------


def _fold(value: Any) -> str:
    return str(value).casefold()


def _ordered(compare: Callable[[Any, Any], bool]) -> Callable[[Any, Any], bool]:
    def lookup(field: Any, value: Any) -> bool:
        return field is not None and compare(field, value)

    return lookup


_LOOKUPS: Dict[str, Callable[[Any, Any], bool]] = {
    "exact": operator.eq,
    "iexact": lambda field, value: field is not None and _fold(field) == _fold(value),
    "contains": lambda field, value: field is not None and str(value) in str(field),
    "icontains": lambda field, value: field is not None
    and _fold(value) in _fold(field),
    "in": lambda field, value: field in value,
    "gt": _ordered(operator.gt),
    "gte": _ordered(operator.ge),
    "lt": _ordered(operator.lt),
    "lte": _ordered(operator.le),
    "isnull": lambda field, value: (field is None) == bool(value),
}


def _match_lookup(entity: Any, key: str, value: Any) -> bool:
    parts = key.split("__")
    lookup = parts.pop() if len(parts) > 1 and parts[-1] in _LOOKUPS else "exact"
    field = entity
    for name in parts:
        field = getattr(field, name)
    return _LOOKUPS[lookup](field, value)


def matches(criteria: Q, entity: Any) -> bool:
    """Evaluate a ``Q`` tree against a single object.

    Supports the look-ups in ``_LOOKUPS`` plus the ``AND`` / ``OR`` / ``XOR``
    connectors and negation.  An empty ``Q()`` matches everything.
    """
    results = [
        matches(child, entity) if isinstance(child, Q) else _match_lookup(entity, *child)
        for child in criteria.children
    ]
    if criteria.connector == Q.OR:
        outcome = any(results)
    elif criteria.connector == Q.XOR:
        outcome = sum(results) % 2 == 1
    else:
        outcome = all(results)
    return not outcome if criteria.negated else outcome


# ---------------------------------------------------------------------------
# Specifications
# ---------------------------------------------------------------------------


class BaseSpecification(Generic[T]):
    """Filter predicate plus at most one sort key.

    ``criteria`` is fixed at construction.  Subclasses declare their sort
    key from ``__init__`` via ``_apply_order_by`` or
    ``_apply_order_by_descending``; there are no public setters.
    """

    def __init__(self, criteria: Optional[Q] = None) -> None:
        self._criteria = criteria
        self._order_by: Optional[str] = None
        self._order_by_descending: Optional[str] = None

    @property
    def criteria(self) -> Optional[Q]:
        """Filter predicate, or ``None`` to match every entity."""
        return self._criteria

    @property
    def order_by(self) -> Optional[str]:
        return self._order_by

    @property
    def order_by_descending(self) -> Optional[str]:
        return self._order_by_descending

    def _apply_order_by(self, field: str) -> None:
        if self._order_by_descending is not None:
            raise ValueError("Specification already sorts in descending order.")
        self._order_by = field

    def _apply_order_by_descending(self, field: str) -> None:
        if self._order_by is not None:
            raise ValueError("Specification already sorts in ascending order.")
        self._order_by_descending = field

    # ------------------------------------------------------------------
    # In-memory evaluation
    # ------------------------------------------------------------------

    def is_satisfied_by(self, entity: T) -> bool:
        if self._criteria is None:
            return True
        return matches(self._criteria, entity)

    def evaluate(self, entities: Iterable[T]) -> List[T]:
        """Filter and sort ``entities`` the way the ORM adapter would."""
        result = [entity for entity in entities if self.is_satisfied_by(entity)]
        if self._order_by is not None:
            result.sort(key=operator.attrgetter(self._order_by))
        elif self._order_by_descending is not None:
            result.sort(key=operator.attrgetter(self._order_by_descending), reverse=True)
        return result

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def __and__(self, other: BaseSpecification[T]) -> CompositeSpecification[T]:
        if self._criteria is None:
            criteria = other.criteria
        elif other.criteria is None:
            criteria = self._criteria
        else:
            criteria = self._criteria & other.criteria
        return CompositeSpecification(criteria, ordered_like=self)

    def __or__(self, other: BaseSpecification[T]) -> CompositeSpecification[T]:
        if self._criteria is None or other.criteria is None:
            criteria = None
        else:
            criteria = self._criteria | other.criteria
        return CompositeSpecification(criteria, ordered_like=self)

    def __invert__(self) -> CompositeSpecification[T]:
        criteria = MATCH_NOTHING if self._criteria is None else ~self._criteria
        return CompositeSpecification(criteria, ordered_like=self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(criteria={self._criteria!r}, "
            f"order_by={self._order_by!r}, "
            f"order_by_descending={self._order_by_descending!r})"
        )


class CompositeSpecification(BaseSpecification[T]):
    """Result of combining specifications; copies the sort key of ``ordered_like``."""

    def __init__(
        self, criteria: Optional[Q], ordered_like: BaseSpecification[T]
    ) -> None:
        super().__init__(criteria)
        if ordered_like.order_by is not None:
            self._apply_order_by(ordered_like.order_by)
        elif ordered_like.order_by_descending is not None:
            self._apply_order_by_descending(ordered_like.order_by_descending)
