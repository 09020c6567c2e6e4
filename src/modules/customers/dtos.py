"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Views) and the
Service layer.  DTOs are immutable (``frozen=True``) and accept either
snake_case names or the camelCase aliases used on the wire.

- ``CreateCustomerDTO`` / ``UpdateCustomerDTO``: write inputs; names are
  trimmed and must not be blank.
- ``CustomerSearchDTO``: filter + pagination criteria.
- ``CustomerOutputDTO`` / ``PagedResult``: paged read output.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from modules.customers.models import Customer

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
NAME_MAX_LENGTH = 100

ItemT = TypeVar("ItemT")


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateCustomerDTO(_CamelModel):
    """Immutable DTO for customer creation requests.

    Whitespace around names is stripped before validation, so ``"  "``
    is rejected as blank.
    """

    first_name: str = Field(max_length=NAME_MAX_LENGTH)
    last_name: str = Field(max_length=NAME_MAX_LENGTH)
    is_active: bool = True

    @field_validator("first_name", "last_name")
    @classmethod
    def require_name(cls, v: str) -> str:
        if not v:
            raise ValueError("First name and last name are required.")
        return v


class UpdateCustomerDTO(CreateCustomerDTO):
    """Immutable DTO for full customer updates (PUT semantics)."""

    id: int


class CustomerSearchDTO(_CamelModel):
    """Search and pagination criteria.

    Every filter is optional; a blank ``search_term`` means "no name
    filter". A naive ``created_after`` is read as UTC. Pages are 1-based.
    """

    search_term: Optional[str] = None
    is_active: Optional[bool] = None
    created_after: Optional[datetime] = None
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)

    @field_validator("created_after")
    @classmethod
    def assume_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class CustomerOutputDTO(_CamelModel):
    """Immutable DTO for customer API responses."""

    id: int
    first_name: str
    last_name: str
    full_name: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, customer: Customer) -> CustomerOutputDTO:
        """Build an output DTO from a Customer model instance."""
        return cls(
            id=customer.id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            full_name=customer.full_name,
            is_active=customer.is_active,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )


class PagedResult(_CamelModel, Generic[ItemT]):
    """One page of results plus the totals a client needs to paginate."""

    items: List[ItemT]
    page_number: int
    page_size: int
    total_count: int

    @computed_field(alias="totalPages")
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @computed_field(alias="hasPreviousPage")
    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @computed_field(alias="hasNextPage")
    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages
