"""
Orders views package - modular view layer with mixins.
"""

from .order_viewset import OrderViewSet
from .dashboard import DashboardStatsView

__all__ = [
    'OrderViewSet',
    'DashboardStatsView',
]
