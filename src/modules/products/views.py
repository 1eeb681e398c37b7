"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into HTTP status codes:

- ``InvalidProductInput``    -> 400 (with ``field`` and ``code``)
- ``ProductNotFound``        -> 404
- ``ProductRetrievalFailed`` -> 500

The view never swallows generic exceptions.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import ProductInput
from modules.products.exceptions import (
    InvalidProductInput,
    ProductNotFound,
    ProductRetrievalFailed,
)
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


def _invalid_input(exc: InvalidProductInput) -> Response:
    return Response(
        {"detail": str(exc), "field": exc.field, "code": exc.code},
        status=status.HTTP_400_BAD_REQUEST,
    )


def _not_found(exc: ProductNotFound) -> Response:
    return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)


def _parse_price(raw: str | None) -> Decimal | None:
    if raw is None:
        return None
    try:
        value = Decimal(raw)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


class ProductViewSet(GenericViewSet):
    """ViewSet for the catalog endpoints.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    pagination_class = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Create / Destroy
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        try:
            products = self._service.list_products()
        except ProductRetrievalFailed as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(ProductSerializer(products, many=True).data)

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        data = request.data
        if not isinstance(data, dict):
            return Response(
                {"detail": "Request body must be a JSON object."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            dto = ProductInput.model_validate(data)
        except (PydanticValidationError, ValueError) as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            product = self._service.create_product(dto)
        except InvalidProductInput as exc:
            return _invalid_input(exc)

        out = ProductSerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}"""
        try:
            self._service.delete_product(pk)
        except InvalidProductInput as exc:
            return _invalid_input(exc)
        except ProductNotFound as exc:
            return _not_found(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Look-ups
    # ------------------------------------------------------------------

    @action(detail=False, methods=["get"], url_path=r"name/(?P<name>[^/]+)")
    def by_name(self, request: Request, name: str | None = None) -> Response:
        """GET /api/products/name/{name}"""
        try:
            products = self._service.find_by_name(name)
        except InvalidProductInput as exc:
            return _invalid_input(exc)
        except ProductNotFound as exc:
            return _not_found(exc)
        return Response(ProductSerializer(products, many=True).data)

    @action(detail=False, methods=["get"], url_path=r"color/(?P<color>[^/]+)")
    def by_color(self, request: Request, color: str | None = None) -> Response:
        """GET /api/products/color/{color}"""
        try:
            products = self._service.find_by_color(color)
        except InvalidProductInput as exc:
            return _invalid_input(exc)
        except ProductNotFound as exc:
            return _not_found(exc)
        return Response(ProductSerializer(products, many=True).data)

    @action(detail=False, methods=["get"], url_path="price")
    def by_price(self, request: Request) -> Response:
        """GET /api/products/price?minPrice=&maxPrice="""
        min_price = _parse_price(request.query_params.get("minPrice"))
        max_price = _parse_price(request.query_params.get("maxPrice"))
        if min_price is None or max_price is None:
            return Response(
                {"detail": "Query parameters 'minPrice' and 'maxPrice' must be numbers."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            products = self._service.find_by_price_range(min_price, max_price)
        except InvalidProductInput as exc:
            return _invalid_input(exc)
        except ProductNotFound as exc:
            return _not_found(exc)
        return Response(ProductSerializer(products, many=True).data)
