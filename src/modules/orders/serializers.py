"""Order DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).
Business rules live in the Service Layer; the create serializer only
accepts the raw fields so that range checks report through the
order request contract.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.models import OrderHistory


class PlaceOrderSerializer(serializers.Serializer):
    """Raw order request; values are validated by ``OrderRequestContract``."""

    product_id = serializers.JSONField(required=False, allow_null=True)
    quantity = serializers.JSONField(required=False, allow_null=True)


class OrderHistorySerializer(serializers.ModelSerializer):
    """Read serializer for order history with the product name."""

    product_name = serializers.CharField(source="product.name", read_only=True)

    class Meta:
        model = OrderHistory
        fields = [
            "id",
            "product_id",
            "product_name",
            "quantity",
            "ordered_at",
            "created_at",
        ]
        read_only_fields = fields
