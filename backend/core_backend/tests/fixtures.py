"""
Shared test fixtures for all backend tests.

This module provides reusable pytest fixtures for common test objects
like users, menu items, orders and an order service wired to fakes.
"""
import itertools

import pytest
from decimal import Decimal
from rest_framework.test import APIClient

from users.models import User
from products.models import Category, MenuItem
from orders.calculators import DeliveryFeePolicy
from orders.owners import AuthenticatedOwner, ChannelOwner
from orders.services import OrderService


# ============================================================================
# USER FIXTURES
# ============================================================================

@pytest.fixture
def admin_user(db):
    """Administrator who manages the menu and moves orders through the kitchen"""
    return User.objects.create_user(
        email='admin@durgerking.test',
        password='password123',
        first_name='Ada',
        is_admin=True,
        is_staff=True,
    )


@pytest.fixture
def customer_user(db):
    """Regular signed-in customer"""
    return User.objects.create_user(
        email='customer@example.com',
        password='password123',
        first_name='Casey',
    )


@pytest.fixture
def other_customer(db):
    """A second customer, for ownership checks"""
    return User.objects.create_user(
        email='other@example.com',
        password='password123',
    )


@pytest.fixture
def telegram_user(db):
    """Customer known only through Telegram"""
    return User.objects.create_user(
        telegram_user_id='777000111',
        telegram_username='durger_fan',
        first_name='Tele',
    )


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def api_client():
    """Unauthenticated DRF client"""
    return APIClient()


@pytest.fixture
def authenticated_client():
    """Factory returning a client authenticated as the given user"""
    def _client(user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client
    return _client


@pytest.fixture
def admin_client(authenticated_client, admin_user):
    return authenticated_client(admin_user)


@pytest.fixture
def customer_client(authenticated_client, customer_user):
    return authenticated_client(customer_user)


# ============================================================================
# MENU FIXTURES
# ============================================================================

@pytest.fixture
def category(db):
    return Category.objects.create(name='Burgers', emoji='🍔', slug='burgers', sort_order=1)


@pytest.fixture
def item_a(category):
    """Menu item priced 8.99"""
    return MenuItem.objects.create(name='Classic Burger', price=Decimal('8.99'), category=category)


@pytest.fixture
def item_b(category):
    """Menu item priced 3.99"""
    return MenuItem.objects.create(name='French Fries', price=Decimal('3.99'), category=category)


@pytest.fixture
def item_ten(category):
    """Menu item priced 10.00, handy for hitting the free delivery threshold"""
    return MenuItem.objects.create(name='Family Box', price=Decimal('10.00'), category=category)


# ============================================================================
# ORDER FIXTURES
# ============================================================================

class RecordingDispatcher:
    """Notification dispatcher that records calls instead of sending them"""

    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail

    def notify(self, chat_id, order_number, status):
        self.calls.append((chat_id, order_number, status))
        if self.fail:
            raise RuntimeError('Telegram is down')
        return True


class SequenceNumberGenerator:
    """Deterministic order numbers; ``numbers`` are handed out first"""

    def __init__(self, numbers=(), prefix='TST'):
        self._queued = list(numbers)
        self._counter = itertools.count(1)
        self.prefix = prefix

    def next(self):
        if self._queued:
            return self._queued.pop(0)
        return f'{self.prefix}{next(self._counter):06d}'


@pytest.fixture
def dispatcher():
    return RecordingDispatcher()


@pytest.fixture
def fee_policy():
    """The out-of-box delivery tier: 2.99, free from 25.00"""
    return DeliveryFeePolicy(fee=Decimal('2.99'), free_threshold=Decimal('25.00'))


@pytest.fixture
def order_service(dispatcher, fee_policy):
    return OrderService(
        dispatcher=dispatcher,
        number_generator=SequenceNumberGenerator(),
        fee_policy=fee_policy,
    )


@pytest.fixture
def customer_order(order_service, customer_user, item_a, item_b):
    """Pending order owned by customer_user: 2 x 8.99 + 1 x 3.99"""
    return order_service.create_order(
        items=[
            {'menu_item_id': item_a.id, 'quantity': 2},
            {'menu_item_id': item_b.id, 'quantity': 1},
        ],
        owner=AuthenticatedOwner(customer_user.pk),
    )


@pytest.fixture
def telegram_order(order_service, telegram_user, item_a):
    """Pending order placed from Telegram, with a chat to notify"""
    return order_service.create_order(
        items=[{'menu_item_id': item_a.id, 'quantity': 1}],
        owner=ChannelOwner(telegram_user.telegram_user_id),
        telegram_chat_id=telegram_user.telegram_user_id,
    )
