"""Customer query specifications.

Each class fixes its predicate in ``__init__`` and declares its sort key
there; instances are immutable afterwards and can be passed to any
``IRepository[Customer]`` or evaluated in memory.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from django.db.models import Q

from modules.core.specifications import BaseSpecification
from modules.customers.models import Customer


class AllCustomersSpecification(BaseSpecification[Customer]):
    """Every customer, ordered by last name."""

    def __init__(self) -> None:
        super().__init__()
        self._apply_order_by("last_name")


class ActiveCustomersSpecification(BaseSpecification[Customer]):
    """Active customers, ordered by last name."""

    def __init__(self) -> None:
        super().__init__(Q(is_active=True))
        self._apply_order_by("last_name")


class InactiveCustomersSpecification(BaseSpecification[Customer]):
    """Inactive customers, ordered by last name."""

    def __init__(self) -> None:
        super().__init__(Q(is_active=False))
        self._apply_order_by("last_name")


class CustomersByNameSpecification(BaseSpecification[Customer]):
    """Customers whose first or last name contains ``search_term``.

    Matching is case-insensitive.  An empty term matches every customer;
    callers that want to reject blank searches must do so before building
    the specification.
    """

    def __init__(self, search_term: str) -> None:
        super().__init__(
            Q(first_name__icontains=search_term) | Q(last_name__icontains=search_term)
        )
        self._apply_order_by("last_name")


class CustomersCreatedAfterSpecification(BaseSpecification[Customer]):
    """Customers created at or after ``moment``, newest first."""

    def __init__(self, moment: datetime) -> None:
        super().__init__(Q(created_at__gte=moment))
        self._apply_order_by_descending("created_at")


class CustomerWithFullNameSpecification(BaseSpecification[Customer]):
    """Customers named exactly ``first_name last_name`` (case-insensitive)."""

    def __init__(
        self, first_name: str, last_name: str, exclude_id: Optional[int] = None
    ) -> None:
        criteria = Q(first_name__iexact=first_name, last_name__iexact=last_name)
        if exclude_id is not None:
            criteria &= ~Q(pk=exclude_id)
        super().__init__(criteria)
