"""Customer domain exceptions.

Raised by the Service Layer when a write targets a customer that does not
exist.  Read misses are not errors: they come back as ``None`` / ``False``.
The API layer (Views) catches these and translates them into HTTP 404.
"""

from __future__ import annotations


class CustomerNotFound(Exception):
    """The customer targeted by a write operation does not exist."""

    def __init__(self, customer_id: object) -> None:
        super().__init__(f"Customer with ID {customer_id} not found.")
        self.customer_id = customer_id
