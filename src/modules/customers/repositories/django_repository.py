"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` on top of the generic
``DjangoRepository``: every customer look-up is expressed as a
specification and run through ``list`` / ``page`` / ``count``.
"""

from __future__ import annotations

from typing import List, Optional

from modules.core.repositories.django_repository import DjangoRepository
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository
from modules.customers.specifications import (
    ActiveCustomersSpecification,
    AllCustomersSpecification,
    CustomersByNameSpecification,
    CustomerWithFullNameSpecification,
    InactiveCustomersSpecification,
)


class CustomerDjangoRepository(DjangoRepository[Customer], ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    model = Customer
    entity_name = "customer"

    def get_active_customers(self) -> List[Customer]:
        return self.list(ActiveCustomersSpecification())

    def get_inactive_customers(self) -> List[Customer]:
        return self.list(InactiveCustomersSpecification())

    def search_by_name(self, search_term: str) -> List[Customer]:
        return self.list(CustomersByNameSpecification(search_term))

    def get_customers_paged(
        self, page_number: int, page_size: int, active_only: bool = True
    ) -> List[Customer]:
        spec = (
            ActiveCustomersSpecification()
            if active_only
            else AllCustomersSpecification()
        )
        return self.page(spec, page_number, page_size)

    def get_customer_count(self, active_only: bool = True) -> int:
        if active_only:
            return self.count(ActiveCustomersSpecification())
        return self.count()

    def customer_exists(
        self, first_name: str, last_name: str, exclude_id: Optional[int] = None
    ) -> bool:
        spec = CustomerWithFullNameSpecification(first_name, last_name, exclude_id)
        return self.first(spec) is not None
