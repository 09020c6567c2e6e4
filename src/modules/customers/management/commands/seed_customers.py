from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository

DEMO_CUSTOMERS = [
    ("John", "Smith", True),
    ("Jane", "Johnson", True),
    ("Bob", "Williams", False),
    ("Alice", "Brown", True),
    ("Charlie", "Davis", True),
    ("Diana", "Miller", False),
    ("Edward", "Wilson", True),
    ("Fiona", "Moore", True),
]


class Command(BaseCommand):
    help = "Seed the customers table with demo data (skipped if it has rows)."

    def handle(self, *args, **options):
        repo = CustomerDjangoRepository()
        if repo.count() > 0:
            self.stdout.write("Customers already present, nothing to seed.")
            return

        for first_name, last_name, is_active in DEMO_CUSTOMERS:
            repo.add(
                Customer(first_name=first_name, last_name=last_name, is_active=is_active)
            )
        written = repo.save_changes()

        self.stdout.write(self.style.SUCCESS(f"Seeded {written} customers."))
