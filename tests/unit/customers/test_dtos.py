"""Unit tests for Customer DTOs.

Covers:
- CreateCustomerDTO / UpdateCustomerDTO: trimming, blank-name rejection,
  camelCase aliases, frozen immutability.
- CustomerSearchDTO: defaults and bounds.
- CustomerOutputDTO / PagedResult: entity mapping and page arithmetic.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from modules.customers.dtos import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    CreateCustomerDTO,
    CustomerOutputDTO,
    CustomerSearchDTO,
    PagedResult,
    UpdateCustomerDTO,
)
from modules.customers.specifications import CustomersCreatedAfterSpecification

pytestmark = pytest.mark.unit


class TestCreateCustomerDTO:
    def test_trims_names(self):
        dto = CreateCustomerDTO(first_name="  John ", last_name="\tSmith\n")
        assert (dto.first_name, dto.last_name) == ("John", "Smith")

    def test_is_active_defaults_true(self):
        assert CreateCustomerDTO(first_name="A", last_name="B").is_active is True

    def test_accepts_camel_case_aliases(self):
        dto = CreateCustomerDTO.model_validate(
            {"firstName": "Ann", "lastName": "Lee", "isActive": False}
        )
        assert dto.first_name == "Ann"
        assert dto.is_active is False

    @pytest.mark.parametrize("first, last", [("", "Smith"), ("John", "   ")])
    def test_blank_names_rejected(self, first, last):
        with pytest.raises(ValidationError, match="First name and last name are required"):
            CreateCustomerDTO(first_name=first, last_name=last)

    def test_name_too_long_rejected(self):
        with pytest.raises(ValidationError):
            CreateCustomerDTO(first_name="x" * 101, last_name="Smith")

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError):
            CreateCustomerDTO(first_name=None, last_name="Smith")

    def test_is_immutable(self):
        dto = CreateCustomerDTO(first_name="A", last_name="B")
        with pytest.raises(ValidationError):
            dto.first_name = "Changed"


class TestUpdateCustomerDTO:
    def test_requires_id(self):
        with pytest.raises(ValidationError):
            UpdateCustomerDTO(first_name="A", last_name="B")

    def test_inherits_name_rules(self):
        with pytest.raises(ValidationError):
            UpdateCustomerDTO(id=1, first_name=" ", last_name="B")

    def test_valid(self):
        dto = UpdateCustomerDTO(id="3", first_name="A ", last_name="B", is_active=False)
        assert dto.id == 3
        assert dto.first_name == "A"


class TestCustomerSearchDTO:
    def test_defaults(self):
        dto = CustomerSearchDTO()
        assert dto.search_term is None
        assert dto.is_active is None
        assert dto.created_after is None
        assert (dto.page_number, dto.page_size) == (1, DEFAULT_PAGE_SIZE)

    def test_parses_query_string_values(self):
        dto = CustomerSearchDTO(
            is_active="true",
            created_after="2024-01-01T00:00:00Z",
            page_number="2",
            page_size="5",
        )
        assert dto.is_active is True
        assert dto.created_after.year == 2024
        assert (dto.page_number, dto.page_size) == (2, 5)

    @pytest.mark.parametrize("value", ["2024-01-01", "2024-01-01T00:00:00"])
    def test_naive_created_after_is_utc(self, value):
        dto = CustomerSearchDTO(created_after=value)
        assert dto.created_after == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_aware_created_after_is_kept(self):
        dto = CustomerSearchDTO(created_after="2024-01-01T05:00:00+05:00")
        assert dto.created_after.utcoffset() == timedelta(hours=5)

    def test_created_after_usable_in_memory(self, make_customer):
        customer = make_customer(save=False)
        customer.created_at = datetime(2024, 6, 1, tzinfo=timezone.utc)
        spec = CustomersCreatedAfterSpecification(
            CustomerSearchDTO(created_after="2024-01-01").created_after
        )
        assert spec.is_satisfied_by(customer)

    @pytest.mark.parametrize(
        "field, value",
        [("page_number", 0), ("page_size", 0), ("page_size", MAX_PAGE_SIZE + 1)],
    )
    def test_bounds(self, field, value):
        with pytest.raises(ValidationError):
            CustomerSearchDTO(**{field: value})


class TestCustomerOutputDTO:
    def test_from_entity(self, make_customer):
        customer = make_customer(first_name="Ann", last_name="Lee", is_active=False)
        dto = CustomerOutputDTO.from_entity(customer)
        assert dto.id == customer.id
        assert dto.full_name == "Ann Lee"
        assert dto.is_active is False
        assert dto.created_at == customer.created_at

    def test_dumps_camel_case(self, make_customer):
        dto = CustomerOutputDTO.from_entity(make_customer())
        data = dto.model_dump(mode="json", by_alias=True)
        assert {"id", "firstName", "lastName", "fullName", "isActive", "createdAt", "updatedAt"} == set(data)


class TestPagedResult:
    @pytest.mark.parametrize(
        "page_number, page_size, total, pages, has_prev, has_next",
        [
            (1, 10, 0, 0, False, False),
            (1, 10, 10, 1, False, False),
            (1, 10, 11, 2, False, True),
            (2, 10, 11, 2, True, False),
        ],
    )
    def test_page_arithmetic(self, page_number, page_size, total, pages, has_prev, has_next):
        result = PagedResult[int](
            items=[], page_number=page_number, page_size=page_size, total_count=total
        )
        assert result.total_pages == pages
        assert result.has_previous_page is has_prev
        assert result.has_next_page is has_next

    def test_dump_includes_computed_fields(self):
        result = PagedResult[int](items=[1, 2], page_number=1, page_size=2, total_count=3)
        data = result.model_dump(by_alias=True)
        assert data == {
            "items": [1, 2],
            "pageNumber": 1,
            "pageSize": 2,
            "totalCount": 3,
            "totalPages": 2,
            "hasPreviousPage": False,
            "hasNextPage": True,
        }
