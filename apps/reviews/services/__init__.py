"""
Reviews services - Business logic layer.

This package contains all business operations for the reviews app:
- Review CRUD operations (each write recomputes the pub rating)
- Likes and per-viewer liked annotation
"""

from .review_management import (
    create_review,
    get_review_by_id,
    get_all_reviews,
    get_pub_reviews,
    get_user_reviews,
    update_review,
    delete_review,
)

from .review_likes import (
    like_review,
    unlike_review,
    has_liked,
    get_liked_review_ids,
    annotate_liked,
)

# Domain Exceptions
from .exceptions import (
    ReviewsServiceError,
    ReviewNotFoundError,
    InvalidRateError,
    InvalidContentError,
    AlreadyLikedError,
    NotLikedError,
)

__all__ = [
    # Review Management Services
    'create_review',
    'get_review_by_id',
    'get_all_reviews',
    'get_pub_reviews',
    'get_user_reviews',
    'update_review',
    'delete_review',
    # Like Services
    'like_review',
    'unlike_review',
    'has_liked',
    'get_liked_review_ids',
    'annotate_liked',
    # Exceptions
    'ReviewsServiceError',
    'ReviewNotFoundError',
    'InvalidRateError',
    'InvalidContentError',
    'AlreadyLikedError',
    'NotLikedError',
]
