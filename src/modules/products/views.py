"""Product API views.

Exposes the ``CatalogService`` via HTTP using a DRF ViewSet.
Input is validated by the DTO functions before the service is invoked;
``ServiceResult`` errors are translated into HTTP status codes here.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exception_handler import VALIDATION_ERROR, error_item, error_response
from modules.core.results import ErrorKind, ServiceResult
from modules.products.dtos import (
    validate_page_query,
    validate_price,
    validate_product_input,
)
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductInputSerializer, ProductSerializer
from modules.products.services import CatalogService

UUID_PATTERN = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

STATUS_BY_ERROR_KIND = {
    ErrorKind.ALREADY_EXISTS: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def _validation_failed(violations) -> Response:
    return error_response(
        [violation.as_error() for violation in violations],
        status.HTTP_400_BAD_REQUEST,
        error_type=VALIDATION_ERROR,
    )


def _service_failed(result: ServiceResult) -> Response:
    error = result.error
    return error_response(
        [error_item(error.kind.value, error.message)],
        STATUS_BY_ERROR_KIND[error.kind],
    )


class ProductViewSet(GenericViewSet):
    """ViewSet for the product catalog.

    Uses ``CatalogService`` with ``ProductDjangoRepository`` (DIP).
    Every route works on UUID identifiers; anything else is a 404 from
    the router.
    """

    serializer_class = ProductSerializer
    pagination_class = None
    lookup_value_regex = UUID_PATTERN

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CatalogService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        parameters=[
            OpenApiParameter("page", int, description="1-based page number (default 1)."),
            OpenApiParameter(
                "page_size", int, description="Items per page, 1-50 (default 5). Alias: pageSize."
            ),
        ],
        responses={200: ProductSerializer(many=True), 204: None},
    )
    def list(self, request: Request) -> Response:
        """GET /api/v1/products"""
        query, violations = validate_page_query(request.query_params)
        if violations:
            return _validation_failed(violations)

        products = self._service.list_products(query)
        if not products:
            return Response(status=status.HTTP_204_NO_CONTENT)
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(responses={200: ProductSerializer, 204: None})
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}"""
        result = self._service.get_product(pk)
        if not result.ok:
            return Response(status=status.HTTP_204_NO_CONTENT)
        return Response(ProductSerializer(result.value).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=ProductInputSerializer, responses={200: ProductSerializer})
    def create(self, request: Request) -> Response:
        """POST /api/v1/products"""
        dto, violations = validate_product_input(request.data)
        if violations:
            return _validation_failed(violations)

        result = self._service.insert_product(dto)
        if not result.ok:
            return _service_failed(result)
        return Response(ProductSerializer(result.value).data, status=status.HTTP_200_OK)

    @extend_schema(request=ProductInputSerializer, responses={200: ProductSerializer})
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}"""
        dto, violations = validate_product_input(request.data)
        if violations:
            return _validation_failed(violations)

        result = self._service.update_product(pk, dto)
        if not result.ok:
            return _service_failed(result)
        return Response(ProductSerializer(result.value).data)

    @extend_schema(request=None, responses={200: ProductSerializer})
    @action(
        detail=True,
        methods=["patch"],
        url_path=r"price/(?P<price>[0-9]+(?:\.[0-9]+)?)",
        url_name="price",
    )
    def update_price(
        self, request: Request, pk: str | None = None, price: str | None = None
    ) -> Response:
        """PATCH /api/v1/products/{pk}/price/{price}"""
        new_price, violations = validate_price(price)
        if violations:
            return _validation_failed(violations)

        result = self._service.update_price(pk, new_price)
        if not result.ok:
            return _service_failed(result)
        return Response(ProductSerializer(result.value).data)

    @extend_schema(responses={200: None})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}"""
        result = self._service.delete_product(pk)
        if not result.ok:
            return _service_failed(result)
        return Response(status=status.HTTP_200_OK)
