"""Order API views.

Exposes the ``OrderPlacementService`` via HTTP using DRF ViewSets.
The service returns ``Success``/``Failure`` values; the view maps each
error kind to an HTTP status and renders the error code as a
localized message.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.filters import OrderingFilter
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.orders.constants import OrderErrorKind
from modules.orders.errors import render_error_message
from modules.orders.filters import OrderHistoryFilter
from modules.orders.models import OrderHistory
from modules.orders.repositories.django_repository import OrderHistoryDjangoRepository
from modules.orders.serializers import OrderHistorySerializer, PlaceOrderSerializer
from modules.orders.services import OrderPlacementService
from modules.products.repositories.django_repository import ProductDjangoRepository

ERROR_STATUS = {
    OrderErrorKind.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    OrderErrorKind.INSUFFICIENT_STOCK: status.HTTP_409_CONFLICT,
    OrderErrorKind.PRODUCT_NOT_FOUND: status.HTTP_409_CONFLICT,
    OrderErrorKind.TRANSACTION_FAILED: status.HTTP_409_CONFLICT,
}


class OrderViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for order history listing and order placement.

    Uses ``OrderPlacementService`` with injected repositories (DIP).
    """

    queryset = OrderHistory.objects.select_related("product")
    serializer_class = OrderHistorySerializer
    filterset_class = OrderHistoryFilter
    ordering_fields = ["ordered_at", "quantity"]
    ordering = ["-ordered_at", "-id"]
    filter_backends = [DjangoFilterBackend, OrderingFilter]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderPlacementService(
            product_repository=ProductDjangoRepository(),
            order_history_repository=OrderHistoryDjangoRepository(),
        )

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/

        Returns 201 on success, 400 for an invalid request and 409 when
        the order cannot be fulfilled.
        """
        serializer = PlaceOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = self._service.place_order(
            product_id=data.get("product_id"),
            quantity=data.get("quantity"),
        )
        if result.is_success:
            return Response(status=status.HTTP_201_CREATED)

        error = result.error
        return Response(
            {"detail": render_error_message(error), **error.as_dict()},
            status=ERROR_STATUS[error.kind],
        )
