import django_filters

from modules.orders.models import OrderHistory


class OrderHistoryFilter(django_filters.FilterSet):
    product = django_filters.NumberFilter(field_name="product_id")
    start_date = django_filters.DateFilter(field_name="ordered_at", lookup_expr="date__gte")
    end_date = django_filters.DateFilter(field_name="ordered_at", lookup_expr="date__lte")

    class Meta:
        model = OrderHistory
        fields = ["product", "start_date", "end_date"]
