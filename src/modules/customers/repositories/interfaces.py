"""Customer repository interface.

Extends ``IRepository[Customer]`` with the customer look-ups the
service layer needs, each backed by a specification.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def get_active_customers(self) -> List[Customer]:
        """Active customers ordered by last name."""

    @abstractmethod
    def get_inactive_customers(self) -> List[Customer]:
        """Inactive customers ordered by last name."""

    @abstractmethod
    def search_by_name(self, search_term: str) -> List[Customer]:
        """Customers whose first or last name contains ``search_term``."""

    @abstractmethod
    def get_customers_paged(
        self, page_number: int, page_size: int, active_only: bool = True
    ) -> List[Customer]:
        """One page of customers ordered by last name."""

    @abstractmethod
    def get_customer_count(self, active_only: bool = True) -> int:
        """Number of (active) customers."""

    @abstractmethod
    def customer_exists(
        self, first_name: str, last_name: str, exclude_id: Optional[int] = None
    ) -> bool:
        """Whether another customer already carries this full name."""
