import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from apps.accounts.models import User
from apps.pubs.models import Pub
from apps.reviews.models import Review, ReviewLike


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def pub_user(db):
    """Create and return a user who writes reviews."""
    return User.objects.create_user(
        username='pubgoer',
        email='pubgoer@example.com',
        password='TestPass123!',
        name='Pub',
        surname='Goer',
    )


@pytest.fixture
def pub_other_user(db):
    """Create and return a second reviewer."""
    return User.objects.create_user(
        username='regular',
        email='regular@example.com',
        password='TestPass123!',
        name='Regular',
        surname='Patron',
    )


@pytest.fixture
def pub(db):
    """Create and return a pub without reviews."""
    return Pub.objects.create(
        title='The Red Lion',
        short_description='Traditional English pub',
        long_description='A traditional British pub with great atmosphere and local ales',
        menu_url='https://redlion.example.com/menu',
        image_url='https://redlion.example.com/image.jpg',
    )


@pytest.fixture
def rated_pubs(db):
    """Three pubs with fixed ratings, created in this order."""
    return [
        Pub.objects.create(title='The Red Lion', rating=Decimal('4.5')),
        Pub.objects.create(title='The Crown & Anchor', rating=Decimal('3.8')),
        Pub.objects.create(title='The Old Oak', rating=Decimal('4.2')),
    ]


@pytest.fixture
def make_review(pub_user):
    """Factory inserting a review row directly, bypassing the services."""
    def _make(pub, rate, user=None):
        return Review.objects.create(
            pub=pub,
            user=user or pub_user,
            content='Decent pints and a friendly landlord.',
            rate=rate,
        )
    return _make


@pytest.fixture
def liked_review(pub, pub_user, pub_other_user, make_review):
    """Review on ``pub`` liked once by the other user."""
    review = make_review(pub, 4)
    ReviewLike.objects.create(review=review, user=pub_other_user)
    review.like_count = 1
    review.save(update_fields=['like_count'])
    return review
