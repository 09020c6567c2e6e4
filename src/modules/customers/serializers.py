"""Customer DRF serializers for API output.

The serializer operates at the Interface layer (API Views) and only
renders responses.  Input validation lives in the Pydantic DTOs from
``dtos.py``; business logic lives in the Service Layer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    """Read-only camelCase representation of a Customer."""

    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)
    fullName = serializers.CharField(source="full_name", read_only=True)
    isActive = serializers.BooleanField(source="is_active", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Customer
        fields = [
            "id",
            "firstName",
            "lastName",
            "fullName",
            "isActive",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["id"]
