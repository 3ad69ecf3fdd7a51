"""
Dashboard statistics tests.
"""
import pytest
from datetime import timedelta
from decimal import Decimal

from django.utils import timezone
from rest_framework import status

from orders.models import Order
from orders.owners import AuthenticatedOwner, ChannelOwner
from orders.services import DashboardStatsService


def _place(order_service, owner, item, quantity=1):
    return order_service.create_order(items=[{'menu_item_id': item.id, 'quantity': quantity}], owner=owner)


@pytest.mark.django_db
class TestDashboardStatsService:
    """Aggregates over today and the last 30 days"""

    def test_empty_store(self):
        stats = DashboardStatsService.get_stats()

        assert stats == {
            'today_orders': 0,
            'today_revenue': Decimal('0.00'),
            'active_users': 0,
            'average_order': Decimal('0.00'),
        }

    def test_today_counts_and_revenue(self, order_service, customer_user, item_a, item_b):
        _place(order_service, AuthenticatedOwner(customer_user.pk), item_a)      # 8.99 + 2.99
        _place(order_service, AuthenticatedOwner(customer_user.pk), item_b)      # 3.99 + 2.99
        cancelled = _place(order_service, ChannelOwner('900'), item_a)
        order_service.set_status(cancelled.id, 'cancelled')

        stats = DashboardStatsService.get_stats()

        assert stats['today_orders'] == 3
        assert stats['today_revenue'] == Decimal('18.96')
        assert stats['active_users'] == 2
        assert stats['average_order'] == Decimal('9.48')

    def test_old_orders_only_count_in_window(self, order_service, customer_user, other_customer, item_a):
        recent = _place(order_service, AuthenticatedOwner(customer_user.pk), item_a)
        stale = _place(order_service, AuthenticatedOwner(other_customer.pk), item_a)
        Order.objects.filter(pk=recent.pk).update(created_at=timezone.now() - timedelta(days=3))
        Order.objects.filter(pk=stale.pk).update(created_at=timezone.now() - timedelta(days=45))

        stats = DashboardStatsService.get_stats()

        assert stats['today_orders'] == 0
        assert stats['today_revenue'] == Decimal('0.00')
        assert stats['active_users'] == 1
        assert stats['average_order'] == Decimal('11.98')


@pytest.mark.django_db
class TestDashboardStatsAPI:
    """GET /api/dashboard/stats/"""

    def test_admin_gets_stats(self, admin_client, customer_order):
        response = admin_client.get('/api/dashboard/stats/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['today_orders'] == 1
        assert response.data['today_revenue'] == '24.96'
        assert response.data['active_users'] == 1
        assert response.data['average_order'] == '24.96'

    def test_customer_is_forbidden(self, customer_client):
        response = customer_client.get('/api/dashboard/stats/')

        assert response.status_code == status.HTTP_403_FORBIDDEN
