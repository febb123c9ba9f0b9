import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        username='testuser',
        email='testuser@example.com',
        password='TestPass123!',
        name='Test',
        surname='User',
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        username='inactive',
        email='inactive@example.com',
        password='TestPass123!',
        name='Inactive',
        surname='User',
        is_active=False,
    )


@pytest.fixture
def authenticated_client(user):
    """Return an authenticated API client using JWT."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def registration_data():
    """Valid registration payload."""
    return {
        'username': 'newuser',
        'password': 'secret1',
        'name': 'New',
        'surname': 'User',
        'email': 'newuser@example.com',
    }
