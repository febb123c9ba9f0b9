import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.pubs.models import Pub
from apps.reviews.models import Review, ReviewLike


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def review_user(db):
    """Create and return a test user for reviews."""
    return User.objects.create_user(
        username='reviewer',
        email='reviewer@example.com',
        password='TestPass123!',
        name='Pub',
        surname='Reviewer',
    )


@pytest.fixture
def review_other_user(db):
    """Create and return another test user for reviews."""
    return User.objects.create_user(
        username='review_other',
        email='review_other@example.com',
        password='TestPass123!',
        name='Other',
        surname='Reviewer',
    )


@pytest.fixture
def review_auth_client(review_user):
    """Return API client authenticated as review user."""
    return _client_for(review_user)


@pytest.fixture
def review_other_client(review_other_user):
    """Return API client authenticated as other user."""
    return _client_for(review_other_user)


@pytest.fixture
def review_pub(db):
    """Create and return a pub for reviews."""
    return Pub.objects.create(
        title='The Red Lion',
        short_description='Traditional English pub',
    )


@pytest.fixture
def review_another_pub(db):
    """Create and return another pub for reviews."""
    return Pub.objects.create(
        title='The Crown & Anchor',
        short_description='Modern gastropub',
    )


@pytest.fixture
def review(db, review_user, review_pub):
    """Review by review_user on review_pub, inserted directly."""
    return Review.objects.create(
        pub=review_pub,
        user=review_user,
        content='Great selection of local ales and a warm fire.',
        rate=4,
    )


@pytest.fixture
def other_review(db, review_other_user, review_pub):
    """Review by the other user on the same pub."""
    return Review.objects.create(
        pub=review_pub,
        user=review_other_user,
        content='Decent pub, a bit crowded on Fridays.',
        rate=3,
    )


@pytest.fixture
def liked_review(review, review_other_user):
    """``review`` liked once by the other user."""
    ReviewLike.objects.create(review=review, user=review_other_user)
    review.like_count = 1
    review.save(update_fields=['like_count'])
    return review


@pytest.fixture
def valid_content():
    return 'Friendly staff, good beer and a quiet back room.'
