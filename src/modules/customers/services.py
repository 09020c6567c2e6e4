"""Customer service layer (Use Cases).

Orchestrates the Customer use-cases, delegating persistence to the
injected ``ICustomerRepository``.  Every write follows the same two
steps: stage the change on the repository, then ``save_changes``.

Failure semantics:
- Read misses return ``None`` (or ``False`` for activate/deactivate/delete).
- A missing update target raises ``CustomerNotFound``.
- Storage errors propagate unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.customers.dtos import CustomerOutputDTO, PagedResult
from modules.customers.exceptions import CustomerNotFound
from modules.customers.models import Customer
from modules.customers.specifications import (
    ActiveCustomersSpecification,
    AllCustomersSpecification,
    CustomersByNameSpecification,
    CustomersCreatedAfterSpecification,
    InactiveCustomersSpecification,
)

if TYPE_CHECKING:
    from modules.core.specifications import BaseSpecification
    from modules.customers.dtos import (
        CreateCustomerDTO,
        CustomerSearchDTO,
        UpdateCustomerDTO,
    )
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_customer_by_id(self, id: int) -> Optional[Customer]:
        return self._repo.get_by_id(id)

    def get_active_customers(self) -> List[Customer]:
        return self._repo.get_active_customers()

    def get_inactive_customers(self) -> List[Customer]:
        return self._repo.get_inactive_customers()

    def search_customers(self, search_term: str) -> List[Customer]:
        """Customers whose first or last name contains ``search_term``.

        An empty term matches every customer.
        """
        return self._repo.search_by_name(search_term)

    def search_customers_paged(
        self, criteria: CustomerSearchDTO
    ) -> PagedResult[CustomerOutputDTO]:
        """Combine the optional criteria into one specification and page it."""
        spec: BaseSpecification[Customer] = AllCustomersSpecification()
        if criteria.search_term:
            spec = CustomersByNameSpecification(criteria.search_term) & spec
        if criteria.is_active is True:
            spec = spec & ActiveCustomersSpecification()
        elif criteria.is_active is False:
            spec = spec & InactiveCustomersSpecification()
        if criteria.created_after is not None:
            spec = spec & CustomersCreatedAfterSpecification(criteria.created_after)

        customers = self._repo.page(spec, criteria.page_number, criteria.page_size)
        return PagedResult[CustomerOutputDTO](
            items=[CustomerOutputDTO.from_entity(c) for c in customers],
            page_number=criteria.page_number,
            page_size=criteria.page_size,
            total_count=self._repo.count(spec),
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Create a customer; the returned entity carries its assigned id."""
        customer = Customer(
            first_name=dto.first_name.strip(),
            last_name=dto.last_name.strip(),
            is_active=dto.is_active,
        )
        self._repo.add(customer)
        self._repo.save_changes()
        logger.info("customer.created", customer_id=customer.id)
        return customer

    def update_customer(self, dto: UpdateCustomerDTO) -> Customer:
        """Overwrite every field of an existing customer.

        Raises:
            CustomerNotFound: if no customer has ``dto.id``.
        """
        customer = self._repo.get_by_id(dto.id)
        if customer is None:
            logger.warning("customer.update_target_missing", customer_id=dto.id)
            raise CustomerNotFound(dto.id)

        customer.update_name(dto.first_name.strip(), dto.last_name.strip())
        customer.is_active = dto.is_active
        self._repo.update(customer)
        self._repo.save_changes()
        logger.info("customer.updated", customer_id=customer.id)
        return customer

    def activate_customer(self, id: int) -> bool:
        customer = self._repo.get_by_id(id)
        if customer is None:
            return False
        customer.activate()
        self._repo.update(customer)
        self._repo.save_changes()
        logger.info("customer.activated", customer_id=id)
        return True

    def deactivate_customer(self, id: int) -> bool:
        """Soft delete: keep the row, clear the active flag."""
        customer = self._repo.get_by_id(id)
        if customer is None:
            return False
        customer.deactivate()
        self._repo.update(customer)
        self._repo.save_changes()
        logger.info("customer.deactivated", customer_id=id)
        return True

    def delete_customer(self, id: int) -> bool:
        """Permanently remove a customer; ``False`` if it does not exist."""
        customer = self._repo.get_by_id(id)
        if customer is None:
            return False
        self._repo.delete(customer)
        self._repo.save_changes()
        logger.info("customer.deleted", customer_id=id)
        return True
