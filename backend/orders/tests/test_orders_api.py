"""
Orders API Integration Tests

Tests the complete request/response cycle for order endpoints including:
- Authentication and ownership rules
- Serializer validation and the error contract
- Telegram checkout without sign-in
- Administrator-only status changes
"""
import pytest
from decimal import Decimal
from unittest import mock

from rest_framework import status

from core_backend.tests.fixtures import RecordingDispatcher
from orders.models import Order, OrderItem
from orders.services import OrderService
from users.models import User


@pytest.fixture
def recording_dispatcher():
    """Route notifications from API-created services into a recorder"""
    recorder = RecordingDispatcher()
    with mock.patch('notifications.services.TelegramNotificationService', return_value=recorder):
        yield recorder


@pytest.mark.django_db
class TestCreateOrderAPI:
    """POST /api/orders/"""

    def test_create_order(self, customer_client, customer_user, item_a, item_b):
        response = customer_client.post('/api/orders/', {
            'items': [
                {'menu_item_id': item_a.id, 'quantity': 2},
                {'menu_item_id': item_b.id, 'quantity': 1, 'special_instructions': 'Extra salt'},
            ],
            'customer_notes': 'Leave at the door',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        data = response.data
        assert data['status'] == 'pending'
        assert data['subtotal'] == '21.97'
        assert data['delivery_fee'] == '2.99'
        assert data['total'] == '24.96'
        assert data['order_number']
        assert data['owner'] == {'kind': 'user', 'id': customer_user.pk}
        assert len(data['items']) == 2
        assert Order.objects.get(pk=data['id']).user == customer_user

    def test_requires_authentication(self, api_client, item_a):
        response = api_client.post('/api/orders/', {
            'items': [{'menu_item_id': item_a.id}],
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['kind'] == 'authorization'
        assert Order.objects.count() == 0

    def test_empty_items_returns_validation_error(self, customer_client):
        response = customer_client.post('/api/orders/', {'items': []}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['kind'] == 'validation'
        assert Order.objects.count() == 0

    def test_unknown_item_returns_validation_error(self, customer_client, item_a):
        response = customer_client.post('/api/orders/', {
            'items': [{'menu_item_id': item_a.id}, {'menu_item_id': 424242}],
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['kind'] == 'validation'
        assert '424242' in response.data['message']
        assert Order.objects.count() == 0
        assert OrderItem.objects.count() == 0

    def test_zero_quantity_rejected_by_schema(self, customer_client, item_a):
        response = customer_client.post('/api/orders/', {
            'items': [{'menu_item_id': item_a.id, 'quantity': 0}],
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['kind'] == 'validation'

    def test_non_numeric_item_id_rejected(self, customer_client):
        response = customer_client.post('/api/orders/', {
            'items': [{'menu_item_id': 'burger'}],
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['kind'] == 'validation'

    def test_client_totals_do_not_override_server_prices(self, customer_client, item_a):
        response = customer_client.post('/api/orders/', {
            'items': [{'menu_item_id': item_a.id}],
            'subtotal': '0.01',
            'delivery_fee': '0.00',
            'total': '0.01',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['total'] == '11.98'

    def test_conflict_maps_to_409(self, customer_client, item_a):
        from core_backend.exceptions import ConflictError

        with mock.patch.object(OrderService, 'create_order', side_effect=ConflictError()):
            response = customer_client.post('/api/orders/', {
                'items': [{'menu_item_id': item_a.id}],
            }, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['kind'] == 'conflict'


@pytest.mark.django_db
class TestTelegramOrderAPI:
    """POST /api/orders/telegram/"""

    def test_create_telegram_order_without_sign_in(self, api_client, item_a):
        response = api_client.post('/api/orders/telegram/', {
            'telegram_user_id': '5550001',
            'username': 'hungry_hippo',
            'first_name': 'Harper',
            'items': [{'menu_item_id': item_a.id, 'quantity': 3}],
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['owner'] == {'kind': 'channel', 'id': '5550001'}
        assert response.data['telegram_chat_id'] == '5550001'
        assert response.data['subtotal'] == '26.97'
        assert response.data['delivery_fee'] == '0.00'

        user = User.objects.get(telegram_user_id='5550001')
        assert user.telegram_username == 'hungry_hippo'
        assert user.first_name == 'Harper'

    def test_explicit_chat_id_is_kept(self, api_client, item_a):
        response = api_client.post('/api/orders/telegram/', {
            'telegram_user_id': '5550001',
            'telegram_chat_id': '-100200300',
            'items': [{'menu_item_id': item_a.id}],
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['telegram_chat_id'] == '-100200300'

    def test_missing_telegram_user_id_rejected(self, api_client, item_a):
        response = api_client.post('/api/orders/telegram/', {
            'items': [{'menu_item_id': item_a.id}],
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['kind'] == 'validation'
        assert Order.objects.count() == 0


@pytest.mark.django_db
class TestOrderVisibility:
    """Listing and retrieving orders"""

    def test_customer_lists_only_own_orders(self, authenticated_client, other_customer, customer_order, telegram_order):
        response = authenticated_client(other_customer).get('/api/orders/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data == []

    def test_customer_sees_own_order(self, customer_client, customer_order, telegram_order):
        response = customer_client.get('/api/orders/')

        assert [order['order_number'] for order in response.data] == [customer_order.order_number]

    def test_linked_telegram_user_sees_channel_orders(self, authenticated_client, telegram_user, telegram_order):
        response = authenticated_client(telegram_user).get('/api/orders/')

        assert [order['id'] for order in response.data] == [str(telegram_order.id)]

    def test_admin_lists_all_and_filters_by_status(self, admin_client, order_service, customer_order, telegram_order):
        order_service.set_status(telegram_order.id, 'preparing')

        everything = admin_client.get('/api/orders/')
        preparing = admin_client.get('/api/orders/', {'status': 'preparing'})

        assert len(everything.data) == 2
        assert [order['id'] for order in preparing.data] == [str(telegram_order.id)]

    def test_owner_can_retrieve(self, customer_client, customer_order):
        response = customer_client.get(f'/api/orders/{customer_order.id}/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['order_number'] == customer_order.order_number
        assert response.data['items'][0]['price'] == '8.99'

    def test_other_customer_cannot_retrieve(self, authenticated_client, other_customer, customer_order):
        response = authenticated_client(other_customer).get(f'/api/orders/{customer_order.id}/')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['kind'] == 'authorization'

    def test_admin_can_retrieve_any(self, admin_client, telegram_order):
        response = admin_client.get(f'/api/orders/{telegram_order.id}/')

        assert response.status_code == status.HTTP_200_OK

    def test_unknown_order_is_not_found(self, admin_client):
        response = admin_client.get('/api/orders/not-an-order/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['kind'] == 'not_found'


@pytest.mark.django_db
class TestOrderStatusAPI:
    """POST/PUT /api/orders/<id>/status/"""

    def test_admin_moves_order_and_customer_is_notified(self, admin_client, telegram_order, recording_dispatcher):
        response = admin_client.post(f'/api/orders/{telegram_order.id}/status/', {'status': 'preparing'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'preparing'
        assert recording_dispatcher.calls == [
            (telegram_order.telegram_chat_id, telegram_order.order_number, 'preparing'),
        ]

    def test_put_is_accepted(self, admin_client, customer_order, recording_dispatcher):
        response = admin_client.put(f'/api/orders/{customer_order.id}/status/', {'status': 'cancelled'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert Order.objects.get(pk=customer_order.pk).status == 'cancelled'

    def test_customer_cannot_change_status(self, customer_client, customer_order):
        response = customer_client.post(f'/api/orders/{customer_order.id}/status/', {'status': 'preparing'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['kind'] == 'authorization'
        customer_order.refresh_from_db()
        assert customer_order.status == 'pending'

    def test_invalid_transition_is_validation_error(self, admin_client, customer_order, recording_dispatcher):
        Order.objects.filter(pk=customer_order.pk).update(status='completed')

        response = admin_client.post(f'/api/orders/{customer_order.id}/status/', {'status': 'preparing'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['kind'] == 'validation'
        assert response.data['details'] == {'current_status': 'completed', 'requested_status': 'preparing'}

    def test_pending_order_can_go_straight_to_ready(self, admin_client, customer_order, recording_dispatcher):
        response = admin_client.post(f'/api/orders/{customer_order.id}/status/', {'status': 'ready'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'ready'

    def test_unknown_status_value_rejected(self, admin_client, customer_order):
        response = admin_client.post(f'/api/orders/{customer_order.id}/status/', {'status': 'lost'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['kind'] == 'validation'

    def test_missing_order_is_not_found(self, admin_client, recording_dispatcher):
        response = admin_client.post(
            '/api/orders/00000000-0000-0000-0000-000000000000/status/',
            {'status': 'preparing'},
            format='json',
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['kind'] == 'not_found'
        assert recording_dispatcher.calls == []
