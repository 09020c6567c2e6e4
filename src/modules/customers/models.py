"""Customer entity.

Identity is the integer primary key assigned by the database on insert.
First and last name are required; ``is_active`` doubles as the soft-delete
flag used by the active / inactive specifications.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel


class Customer(TimestampedModel):
    """Customer aggregate root."""

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = "customers"
        indexes = [
            models.Index(fields=["is_active"], name="customers_active_idx"),
            models.Index(fields=["last_name"], name="customers_last_name_idx"),
            models.Index(
                fields=["first_name", "last_name"], name="customers_full_name_idx"
            ),
        ]

    # ------------------------------------------------------------------
    # Behaviour
    # ------------------------------------------------------------------

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    def update_name(self, first_name: str, last_name: str) -> None:
        self.first_name = first_name
        self.last_name = last_name

    def __str__(self) -> str:
        return f"{self.full_name} (#{self.pk})"
