"""
Orders services package.

- OrderService: order creation and the status lifecycle
- DashboardStatsService: admin dashboard aggregates
"""

from .order_service import OrderService, OrderLine
from .stats_service import DashboardStatsService

__all__ = [
    'OrderService',
    'OrderLine',
    'DashboardStatsService',
]
