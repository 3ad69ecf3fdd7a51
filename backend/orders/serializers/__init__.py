from .order_serializers import (
    OrderSerializer,
    OrderItemSerializer,
    OrderItemInputSerializer,
    OrderCreateSerializer,
    TelegramOrderCreateSerializer,
    DashboardStatsSerializer,
)
from .status_serializers import UpdateOrderStatusSerializer

__all__ = [
    'OrderSerializer',
    'OrderItemSerializer',
    'OrderItemInputSerializer',
    'OrderCreateSerializer',
    'TelegramOrderCreateSerializer',
    'DashboardStatsSerializer',
    'UpdateOrderStatusSerializer',
]
