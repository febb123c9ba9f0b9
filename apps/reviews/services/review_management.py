"""Review management service - CRUD operations for reviews."""

import logging
from django.db import transaction
from django.contrib.auth import get_user_model
from uuid import UUID
from typing import Optional

from apps.accounts.services.exceptions import UserNotFoundError
from apps.pubs.models import Pub
from apps.pubs.services import update_pub_rating
from apps.pubs.services.exceptions import PubNotFoundError
from apps.reviews.models import Review, ReviewLike
from .exceptions import (
    ReviewNotFoundError,
    InvalidRateError,
    InvalidContentError,
)
from .review_likes import annotate_liked, has_liked

User = get_user_model()

logger = logging.getLogger(__name__)

MIN_RATE = 0
MAX_RATE = 5
MIN_CONTENT_LENGTH = 10
MAX_CONTENT_LENGTH = 5000

OWNED_REVIEW_NOT_FOUND = "Review not found or you don't have permission to modify it"


def _validate_review_input(content: str, rate: int) -> None:
    if not (MIN_RATE <= rate <= MAX_RATE):
        raise InvalidRateError(f"Rate must be between {MIN_RATE} and {MAX_RATE}")

    if not content or not content.strip():
        raise InvalidContentError("Content is required")

    if not (MIN_CONTENT_LENGTH <= len(content) <= MAX_CONTENT_LENGTH):
        raise InvalidContentError(
            f"Content must be between {MIN_CONTENT_LENGTH} and {MAX_CONTENT_LENGTH} characters"
        )


def _get_owned_review(review_id: UUID, user_id: UUID) -> Review:
    # Id and owner in one predicate: someone else's review looks exactly like a missing one
    try:
        return (
            Review.objects
            .select_for_update()
            .get(id=review_id, user_id=user_id)
        )
    except Review.DoesNotExist:
        raise ReviewNotFoundError(OWNED_REVIEW_NOT_FOUND)


@transaction.atomic
def create_review(
    *,
    author_id: UUID,
    pub_id: UUID,
    content: str,
    rate: int,
) -> Review:
    """
    Create a new review for a pub.

    This operation:
    1. Validates rate and content
    2. Checks author exists and locks the pub row
    3. Creates the review with like_count=0
    4. Recomputes the pub's rating in the same transaction

    Args:
        author_id: UUID of the reviewing user
        pub_id: UUID of the pub being reviewed
        content: Review text (10-5000 characters)
        rate: Rate from 0 to 5

    Returns:
        Created Review instance, annotated as not liked

    Raises:
        InvalidRateError: If rate not in 0-5 range
        InvalidContentError: If content blank or wrong length
        UserNotFoundError: If author doesn't exist
        PubNotFoundError: If pub doesn't exist
    """
    _validate_review_input(content, rate)

    try:
        author = User.objects.get(id=author_id)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")

    # Row lock taken before the child insert so concurrent creates queue here
    try:
        pub = Pub.objects.select_for_update().get(id=pub_id)
    except Pub.DoesNotExist:
        raise PubNotFoundError("Pub not found")

    review = Review.objects.create(
        user=author,
        pub=pub,
        content=content,
        rate=rate,
        like_count=0,
    )

    update_pub_rating(pub_id=pub.id)
    logger.info("User %s reviewed pub %s with rate %d", author.id, pub.id, rate)

    # Nobody can have liked a review that did not exist a moment ago
    review.is_liked_by_current_user = False
    return review


def get_review_by_id(*, review_id: UUID, viewer_id: Optional[UUID] = None) -> Review:
    """
    Retrieve a review by ID.

    Args:
        review_id: UUID of review
        viewer_id: UUID of the requesting user, None when anonymous

    Returns:
        Review instance annotated with the viewer's like state

    Raises:
        ReviewNotFoundError: If review doesn't exist
    """
    try:
        review = Review.objects.select_related('user', 'pub').get(id=review_id)
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")

    review.is_liked_by_current_user = has_liked(review_id=review.id, user_id=viewer_id)
    return review


def get_all_reviews(*, viewer_id: Optional[UUID] = None) -> list[Review]:
    """All reviews, annotated for the viewer."""
    queryset = Review.objects.select_related('user', 'pub')
    return annotate_liked(queryset, viewer_id=viewer_id)


def get_pub_reviews(*, pub_id: UUID, viewer_id: Optional[UUID] = None) -> list[Review]:
    """Reviews of one pub, annotated for the viewer. Unknown pub gives an empty list."""
    queryset = Review.objects.filter(pub_id=pub_id).select_related('user', 'pub')
    return annotate_liked(queryset, viewer_id=viewer_id)


def get_user_reviews(*, user_id: UUID, viewer_id: Optional[UUID] = None) -> list[Review]:
    """Reviews written by one user, annotated for the viewer."""
    queryset = Review.objects.filter(user_id=user_id).select_related('user', 'pub')
    return annotate_liked(queryset, viewer_id=viewer_id)


@transaction.atomic
def update_review(
    *,
    review_id: UUID,
    user_id: UUID,
    content: str,
    rate: int,
) -> Review:
    """
    Replace content and rate of the requester's own review.

    Identity, author, pub and like_count are kept.

    Args:
        review_id: UUID of review to update
        user_id: UUID of requester (must be author)
        content: New review text
        rate: New rate (0-5)

    Returns:
        Updated Review instance annotated with the requester's like state

    Raises:
        ReviewNotFoundError: If review doesn't exist or isn't the requester's
        InvalidRateError: If rate not in 0-5 range
        InvalidContentError: If content blank or wrong length
    """
    review = _get_owned_review(review_id, user_id)

    _validate_review_input(content, rate)

    review.content = content
    review.rate = rate
    review.save(update_fields=['content', 'rate', 'updated_at'])

    update_pub_rating(pub_id=review.pub_id)
    logger.info("User %s updated review %s (rate=%d)", user_id, review.id, rate)

    review = Review.objects.select_related('user', 'pub').get(id=review.id)
    review.is_liked_by_current_user = has_liked(review_id=review.id, user_id=user_id)
    return review


@transaction.atomic
def delete_review(*, review_id: UUID, user_id: UUID) -> None:
    """
    Delete the requester's own review and its likes.

    Args:
        review_id: UUID of review to delete
        user_id: UUID of requester (must be author)

    Raises:
        ReviewNotFoundError: If review doesn't exist or isn't the requester's
    """
    review = _get_owned_review(review_id, user_id)

    # Captured before the row disappears
    pub_id = review.pub_id

    ReviewLike.objects.filter(review_id=review.id).delete()
    review.delete()

    update_pub_rating(pub_id=pub_id)
    logger.info("User %s deleted review %s of pub %s", user_id, review_id, pub_id)
