"""Review like service - like/unlike and per-viewer liked annotation."""

import logging
from typing import Iterable, Optional
from uuid import UUID

from django.contrib.auth import get_user_model
from django.db import transaction, IntegrityError
from django.db.models import F

from apps.accounts.services.exceptions import UserNotFoundError
from apps.reviews.models import Review, ReviewLike
from .exceptions import ReviewNotFoundError, AlreadyLikedError, NotLikedError

User = get_user_model()

logger = logging.getLogger(__name__)


def has_liked(*, review_id: UUID, user_id: Optional[UUID]) -> bool:
    """Whether the user liked the review. Anonymous viewers never have."""
    if user_id is None:
        return False
    return ReviewLike.objects.filter(review_id=review_id, user_id=user_id).exists()


def get_liked_review_ids(*, user_id: UUID) -> set[UUID]:
    """All review ids the user has liked, in one query."""
    return set(
        ReviewLike.objects
        .filter(user_id=user_id)
        .values_list('review_id', flat=True)
    )


def annotate_liked(reviews: Iterable[Review], *, viewer_id: Optional[UUID]) -> list[Review]:
    """
    Set ``is_liked_by_current_user`` on each review for the given viewer.

    The viewer's liked set is fetched once and shared by the whole batch.

    Returns:
        The reviews as an evaluated list
    """
    reviews = list(reviews)
    liked_ids = get_liked_review_ids(user_id=viewer_id) if viewer_id is not None else set()

    for review in reviews:
        review.is_liked_by_current_user = review.id in liked_ids

    return reviews


def _get_review(review_id: UUID) -> Review:
    try:
        return Review.objects.select_related('user', 'pub').get(id=review_id)
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")


@transaction.atomic
def like_review(*, review_id: UUID, user_id: UUID) -> Review:
    """
    Like a review on behalf of a user.

    The like row and the counter increment commit together. A duplicate
    that slips past the existence check (two concurrent requests) hits
    the (review, user) unique constraint and is reported the same way.

    Args:
        review_id: UUID of review to like
        user_id: UUID of liking user

    Returns:
        Review with refreshed like_count, annotated as liked

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UserNotFoundError: If user doesn't exist
        AlreadyLikedError: If user already liked this review
    """
    review = _get_review(review_id)

    if not User.objects.filter(id=user_id).exists():
        raise UserNotFoundError("User not found")

    if ReviewLike.objects.filter(review_id=review_id, user_id=user_id).exists():
        raise AlreadyLikedError("You have already liked this review")

    try:
        with transaction.atomic():
            ReviewLike.objects.create(review_id=review_id, user_id=user_id)
    except IntegrityError:
        raise AlreadyLikedError("You have already liked this review")

    Review.objects.filter(id=review_id).update(like_count=F('like_count') + 1)
    review.refresh_from_db(fields=['like_count'])

    logger.info("User %s liked review %s (likes=%d)", user_id, review_id, review.like_count)

    review.is_liked_by_current_user = True
    return review


@transaction.atomic
def unlike_review(*, review_id: UUID, user_id: UUID) -> Review:
    """
    Remove a user's like from a review.

    The counter is decremented but never drops below zero.

    Args:
        review_id: UUID of review to unlike
        user_id: UUID of user removing the like

    Returns:
        Review with refreshed like_count, annotated as not liked

    Raises:
        ReviewNotFoundError: If review doesn't exist
        NotLikedError: If user hasn't liked this review
    """
    review = _get_review(review_id)

    deleted, _ = ReviewLike.objects.filter(review_id=review_id, user_id=user_id).delete()
    if not deleted:
        raise NotLikedError("You haven't liked this review")

    updated = (
        Review.objects
        .filter(id=review_id, like_count__gt=0)
        .update(like_count=F('like_count') - 1)
    )
    if not updated:
        logger.warning("like_count for review %s already at zero, not decremented", review_id)
    review.refresh_from_db(fields=['like_count'])

    logger.info("User %s unliked review %s (likes=%d)", user_id, review_id, review.like_count)

    review.is_liked_by_current_user = False
    return review
