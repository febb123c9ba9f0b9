"""Pub management service - staff-side create and delete."""

import logging
from uuid import UUID

from django.db import transaction

from apps.reviews.models import Review, ReviewLike
from ..models import Pub
from .exceptions import PubNotFoundError

logger = logging.getLogger(__name__)


@transaction.atomic
def create_pub(
    *,
    title: str,
    short_description: str = '',
    long_description: str = '',
    menu_url: str = '',
    image_url: str = '',
) -> Pub:
    """
    Create a pub with no reviews and a zero rating.

    Returns:
        Created Pub instance
    """
    pub = Pub.objects.create(
        title=title,
        short_description=short_description,
        long_description=long_description,
        menu_url=menu_url,
        image_url=image_url,
    )
    logger.info("Created pub %s (%s)", pub.title, pub.id)
    return pub


@transaction.atomic
def delete_pub(*, pub_id: UUID) -> None:
    """
    Delete a pub together with its reviews and their likes.

    Children are removed explicitly, leaves first, in the same
    transaction as the pub itself.

    Args:
        pub_id: UUID of pub to delete

    Raises:
        PubNotFoundError: If pub doesn't exist
    """
    try:
        pub = Pub.objects.select_for_update().get(id=pub_id)
    except Pub.DoesNotExist:
        raise PubNotFoundError(f"Pub not found with id: {pub_id}")

    likes_deleted, _ = ReviewLike.objects.filter(review__pub_id=pub_id).delete()
    reviews_deleted, _ = Review.objects.filter(pub_id=pub_id).delete()
    pub.delete()

    logger.info(
        "Deleted pub %s with %d review(s) and %d like(s)",
        pub_id, reviews_deleted, likes_deleted,
    )
