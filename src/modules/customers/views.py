"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Input is validated by the Pydantic DTOs before it reaches the service;
domain exceptions are caught and translated into HTTP status codes.
The view never swallows generic exceptions.
"""

from __future__ import annotations

from django.conf import settings
from django.urls import reverse
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.customers.dtos import (
    MAX_PAGE_SIZE,
    CreateCustomerDTO,
    CustomerSearchDTO,
    UpdateCustomerDTO,
)
from modules.customers.exceptions import CustomerNotFound
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerSerializer
from modules.customers.services import CustomerService


def _not_found() -> Response:
    return Response(
        {"detail": "Customer not found."},
        status=status.HTTP_404_NOT_FOUND,
    )


def _bad_request(detail: str) -> Response:
    return Response({"detail": detail}, status=status.HTTP_400_BAD_REQUEST)


class CustomerViewSet(GenericViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    A fresh repository is built per request, so staged changes are never
    shared.  Does **not** extend ``ModelViewSet``: all ORM access goes
    through the service/repository layer.
    """

    # Schema introspection only; data access goes through the service.
    queryset = Customer.objects.none()
    serializer_class = CustomerSerializer
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/customers"""
        customers = self._service.get_active_customers()
        return Response(CustomerSerializer(customers, many=True).data)

    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /api/customers/{pk}"""
        customer = self._service.get_customer_by_id(int(pk))
        if customer is None:
            return _not_found()
        return Response(CustomerSerializer(customer).data)

    @action(detail=False, methods=["get"])
    def search(self, request: Request) -> Response:
        """GET /api/customers/search?term=..."""
        term = request.query_params.get("term", "")
        if not term.strip():
            return _bad_request("Search term is required.")
        customers = self._service.search_customers(term)
        return Response(CustomerSerializer(customers, many=True).data)

    @action(detail=False, methods=["get"])
    def inactive(self, request: Request) -> Response:
        """GET /api/customers/inactive"""
        customers = self._service.get_inactive_customers()
        return Response(CustomerSerializer(customers, many=True).data)

    @action(detail=False, methods=["get"])
    def query(self, request: Request) -> Response:
        """GET /api/customers/query?searchTerm=&isActive=&createdAfter=&pageNumber=&pageSize="""
        params = request.query_params
        try:
            criteria = CustomerSearchDTO(
                search_term=params.get("searchTerm"),
                is_active=params.get("isActive"),
                created_after=params.get("createdAfter"),
                page_number=params.get("pageNumber", 1),
                page_size=params.get(
                    "pageSize", min(settings.DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE)
                ),
            )
        except PydanticValidationError as exc:
            return _bad_request(str(exc))

        result = self._service.search_customers_paged(criteria)
        return Response(result.model_dump(mode="json", by_alias=True))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/customers"""
        try:
            dto = CreateCustomerDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _bad_request(str(exc))

        customer = self._service.create_customer(dto)
        return Response(
            CustomerSerializer(customer).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": reverse("customer-detail", kwargs={"pk": customer.id})},
        )

    def update(self, request: Request, pk: str) -> Response:
        """PUT /api/customers/{pk}"""
        try:
            dto = UpdateCustomerDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _bad_request(str(exc))

        if dto.id != int(pk):
            return _bad_request("Route ID does not match request body ID.")

        try:
            customer = self._service.update_customer(dto)
        except CustomerNotFound:
            return _not_found()
        return Response(CustomerSerializer(customer).data)

    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /api/customers/{pk}"""
        if not self._service.delete_customer(int(pk)):
            return _not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["post"])
    def activate(self, request: Request, pk: str) -> Response:
        """POST /api/customers/{pk}/activate"""
        if not self._service.activate_customer(int(pk)):
            return _not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["post"])
    def deactivate(self, request: Request, pk: str) -> Response:
        """POST /api/customers/{pk}/deactivate"""
        if not self._service.deactivate_customer(int(pk)):
            return _not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)
