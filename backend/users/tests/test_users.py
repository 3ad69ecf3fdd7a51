"""
Identity and staff tests.
"""
import pytest

from rest_framework import status

from users.models import Staff, User
from users.services import UserService


@pytest.mark.django_db
class TestUserManager:

    def test_create_user_with_email(self):
        user = User.objects.create_user(email='Someone@Example.COM', password='s3cret-pass')

        assert user.email == 'Someone@example.com'
        assert user.check_password('s3cret-pass')
        assert not user.is_admin

    def test_telegram_user_needs_no_email_or_password(self):
        first = User.objects.create_user(telegram_user_id='1')
        second = User.objects.create_user(telegram_user_id='2')

        assert first.email is None and second.email is None
        assert not first.has_usable_password()

    def test_create_superuser_is_admin(self):
        user = User.objects.create_superuser(email='root@example.com', password='pw')

        assert user.is_admin and user.is_staff and user.is_superuser


@pytest.mark.django_db
class TestUpsertTelegramUser:
    """Recording channel identities"""

    def test_creates_user(self):
        user = UserService.upsert_telegram_user(12345, username='durger', first_name='Dee')

        assert user.telegram_user_id == '12345'
        assert user.telegram_username == 'durger'
        assert not user.has_usable_password()

    def test_updates_only_supplied_fields(self):
        UserService.upsert_telegram_user('12345', username='durger', first_name='Dee', last_name='King')

        user = UserService.upsert_telegram_user('12345', username='', first_name='Dana')

        assert User.objects.filter(telegram_user_id='12345').count() == 1
        assert user.telegram_username == 'durger'
        assert user.first_name == 'Dana'
        assert user.last_name == 'King'

    def test_get_by_telegram_id(self, telegram_user):
        assert UserService.get_by_telegram_id(777000111) == telegram_user
        assert UserService.get_by_telegram_id('nope') is None


@pytest.mark.django_db
class TestIdentityAPI:

    def test_current_user(self, customer_client, customer_user):
        response = customer_client.get('/api/auth/user/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == customer_user.email
        assert response.data['is_admin'] is False

    def test_current_user_requires_authentication(self, api_client):
        response = api_client.get('/api/auth/user/')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['kind'] == 'authorization'

    def test_token_obtain(self, api_client, customer_user):
        response = api_client.post('/api/auth/token/', {
            'email': 'customer@example.com',
            'password': 'password123',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['access']}")
        assert api_client.get('/api/auth/user/').data['id'] == customer_user.pk

    def test_register_telegram_identity(self, api_client):
        created = api_client.post('/api/auth/telegram/', {
            'telegram_user_id': '31337', 'username': 'eleet', 'first_name': 'Leet',
        }, format='json')
        refreshed = api_client.post('/api/auth/telegram/', {
            'telegram_user_id': '31337', 'last_name': 'Hacker',
        }, format='json')

        assert created.status_code == status.HTTP_201_CREATED
        assert refreshed.status_code == status.HTTP_200_OK
        assert refreshed.data['telegram_username'] == 'eleet'
        assert refreshed.data['last_name'] == 'Hacker'

    def test_admin_lists_users(self, admin_client, customer_user, telegram_user):
        response = admin_client.get('/api/users/')

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 3

    def test_customer_cannot_list_users(self, customer_client):
        response = customer_client.get('/api/users/')

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestStaffAPI:
    """Staff directory with soft delete"""

    def test_create_and_archive_staff(self, admin_client):
        created = admin_client.post('/api/staff/', {
            'name': 'Sam Griddle', 'email': 'sam@durgerking.test', 'role': 'kitchen',
        }, format='json')
        staff_id = created.data['id']

        deleted = admin_client.delete(f'/api/staff/{staff_id}/')

        assert created.status_code == status.HTTP_201_CREATED
        assert deleted.status_code == status.HTTP_204_NO_CONTENT
        assert not Staff.objects.filter(pk=staff_id).exists()
        assert Staff.objects.with_archived().get(pk=staff_id).is_archived

        listing = admin_client.get('/api/staff/', {'include_archived': 'true'})
        assert [row['id'] for row in listing.data] == [staff_id]

        restored = admin_client.post(f'/api/staff/{staff_id}/unarchive/')
        assert restored.status_code == status.HTTP_200_OK
        assert restored.data['is_active'] is True

    def test_blank_email_is_stored_as_null(self, admin_client):
        admin_client.post('/api/staff/', {'name': 'A', 'email': '', 'role': 'delivery'}, format='json')
        response = admin_client.post('/api/staff/', {'name': 'B', 'email': '', 'role': 'delivery'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Staff.objects.filter(email__isnull=True).count() == 2

    def test_filter_by_role(self, admin_client):
        Staff.objects.create(name='Kit', role=Staff.Role.KITCHEN)
        Staff.objects.create(name='Del', role=Staff.Role.DELIVERY)

        response = admin_client.get('/api/staff/', {'role': 'delivery'})

        assert [row['name'] for row in response.data] == ['Del']

    def test_customer_forbidden(self, customer_client):
        assert customer_client.get('/api/staff/').status_code == status.HTTP_403_FORBIDDEN
