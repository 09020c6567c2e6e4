from __future__ import annotations

import pytest
from rest_framework.test import APIClient

from modules.customers.models import Customer


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def make_customer():
    """Factory persisting a Customer with sane defaults."""

    def _make(save: bool = True, **overrides) -> Customer:
        defaults = {"first_name": "John", "last_name": "Doe", "is_active": True}
        defaults.update(overrides)
        customer = Customer(**defaults)
        if save:
            customer.save()
        return customer

    return _make


@pytest.fixture()
def seeded_customers(make_customer):
    """Five customers: three active, two inactive, shuffled last names."""
    return [
        make_customer(first_name="John", last_name="Smith", is_active=True),
        make_customer(first_name="Bob", last_name="Williams", is_active=False),
        make_customer(first_name="Alice", last_name="Brown", is_active=True),
        make_customer(first_name="Diana", last_name="Miller", is_active=False),
        make_customer(first_name="Charlie", last_name="Davis", is_active=True),
    ]
