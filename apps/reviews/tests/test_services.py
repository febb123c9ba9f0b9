"""
Service layer tests for reviews app.

Tests all service functions for:
- Review Management (create, get, list, update, delete)
- Pub rating recomputation triggered by review writes
- Likes (like, unlike, counter, duplicate protection)
- Per-viewer liked annotation
"""

import pytest
from decimal import Decimal
from uuid import uuid4
from unittest.mock import patch
from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from apps.accounts.services.exceptions import UserNotFoundError
from apps.core.exceptions import ErrorKind
from apps.pubs.models import Pub
from apps.pubs.services.exceptions import PubNotFoundError
from apps.reviews.models import Review, ReviewLike
from apps.reviews.services import (
    create_review,
    get_review_by_id,
    get_all_reviews,
    get_pub_reviews,
    get_user_reviews,
    update_review,
    delete_review,
    like_review,
    unlike_review,
    get_liked_review_ids,
)
from apps.reviews.services.exceptions import (
    ReviewNotFoundError,
    InvalidRateError,
    InvalidContentError,
    AlreadyLikedError,
    NotLikedError,
)


# ============================================================================
# REVIEW MANAGEMENT TESTS
# ============================================================================

@pytest.mark.django_db
class TestCreateReview:
    """Test review creation and its rating side effect."""

    def test_create_review_success(self, review_user, review_pub, valid_content):
        review = create_review(
            author_id=review_user.id,
            pub_id=review_pub.id,
            content=valid_content,
            rate=5,
        )

        assert review.id is not None
        assert review.user == review_user
        assert review.pub == review_pub
        assert review.content == valid_content
        assert review.rate == 5
        assert review.like_count == 0
        assert review.is_liked_by_current_user is False

    def test_first_review_sets_pub_rating(self, review_user, review_pub, valid_content):
        create_review(author_id=review_user.id, pub_id=review_pub.id, content=valid_content, rate=3)

        review_pub.refresh_from_db()
        assert review_pub.rating == Decimal('3.0')

    def test_rating_is_mean_of_all_reviews(self, review_user, review_other_user, review_pub, valid_content):
        create_review(author_id=review_user.id, pub_id=review_pub.id, content=valid_content, rate=5)
        create_review(author_id=review_other_user.id, pub_id=review_pub.id, content=valid_content, rate=4)

        review_pub.refresh_from_db()
        assert review_pub.rating == Decimal('4.5')

    def test_three_reviews_mean(self, review_user, review_pub, valid_content):
        for rate in (5, 3, 4):
            create_review(author_id=review_user.id, pub_id=review_pub.id, content=valid_content, rate=rate)

        review_pub.refresh_from_db()
        assert review_pub.rating == Decimal('4.0')

    def test_same_user_may_review_twice(self, review_user, review_pub, valid_content):
        create_review(author_id=review_user.id, pub_id=review_pub.id, content=valid_content, rate=1)
        create_review(author_id=review_user.id, pub_id=review_pub.id, content=valid_content, rate=2)

        assert Review.objects.filter(user=review_user, pub=review_pub).count() == 2

    def test_pub_row_locked_before_review_insert(self, review_user, review_pub, valid_content):
        calls = []
        real_lock = QuerySet.select_for_update
        real_create = QuerySet.create

        def record_lock(qs, *args, **kwargs):
            calls.append(('lock', qs.model))
            return real_lock(qs, *args, **kwargs)

        def record_create(qs, **kwargs):
            calls.append(('create', qs.model))
            return real_create(qs, **kwargs)

        with patch.object(QuerySet, 'select_for_update', autospec=True, side_effect=record_lock), \
                patch.object(QuerySet, 'create', autospec=True, side_effect=record_create):
            create_review(author_id=review_user.id, pub_id=review_pub.id, content=valid_content, rate=4)

        assert calls.index(('lock', Pub)) < calls.index(('create', Review))

    def test_missing_pub(self, review_user, valid_content):
        with pytest.raises(PubNotFoundError) as exc:
            create_review(author_id=review_user.id, pub_id=uuid4(), content=valid_content, rate=4)

        assert exc.value.kind is ErrorKind.NOT_FOUND
        assert Review.objects.count() == 0

    def test_missing_author(self, review_pub, valid_content):
        with pytest.raises(UserNotFoundError):
            create_review(author_id=uuid4(), pub_id=review_pub.id, content=valid_content, rate=4)

    @pytest.mark.parametrize('rate', [-1, 6])
    def test_rate_out_of_range(self, review_user, review_pub, valid_content, rate):
        with pytest.raises(InvalidRateError) as exc:
            create_review(author_id=review_user.id, pub_id=review_pub.id, content=valid_content, rate=rate)

        assert "between 0 and 5" in str(exc.value)

    @pytest.mark.parametrize('rate', [0, 5])
    def test_rate_bounds_accepted(self, review_user, review_pub, valid_content, rate):
        review = create_review(author_id=review_user.id, pub_id=review_pub.id, content=valid_content, rate=rate)

        assert review.rate == rate

    def test_content_too_short(self, review_user, review_pub):
        with pytest.raises(InvalidContentError):
            create_review(author_id=review_user.id, pub_id=review_pub.id, content='Too short', rate=3)

    def test_content_too_long(self, review_user, review_pub):
        with pytest.raises(InvalidContentError):
            create_review(author_id=review_user.id, pub_id=review_pub.id, content='x' * 5001, rate=3)

    def test_blank_content(self, review_user, review_pub):
        with pytest.raises(InvalidContentError) as exc:
            create_review(author_id=review_user.id, pub_id=review_pub.id, content=' ' * 20, rate=3)

        assert "required" in str(exc.value)


@pytest.mark.django_db
class TestGetReview:

    def test_anonymous_never_liked(self, liked_review):
        review = get_review_by_id(review_id=liked_review.id)

        assert review.id == liked_review.id
        assert review.is_liked_by_current_user is False

    def test_viewer_who_liked(self, liked_review, review_other_user):
        review = get_review_by_id(review_id=liked_review.id, viewer_id=review_other_user.id)

        assert review.is_liked_by_current_user is True

    def test_viewer_who_did_not_like(self, liked_review, review_user):
        review = get_review_by_id(review_id=liked_review.id, viewer_id=review_user.id)

        assert review.is_liked_by_current_user is False

    def test_not_found(self):
        with pytest.raises(ReviewNotFoundError) as exc:
            get_review_by_id(review_id=uuid4())

        assert str(exc.value) == "Review not found"


@pytest.mark.django_db
class TestListReviews:
    """Bulk listing with liked annotation."""

    def test_all_reviews(self, review, other_review):
        reviews = get_all_reviews()

        assert {r.id for r in reviews} == {review.id, other_review.id}
        assert all(r.is_liked_by_current_user is False for r in reviews)

    def test_liked_flag_matches_viewer_likes(self, review, other_review, review_other_user):
        ReviewLike.objects.create(review=review, user=review_other_user)

        reviews = {r.id: r for r in get_all_reviews(viewer_id=review_other_user.id)}

        assert reviews[review.id].is_liked_by_current_user is True
        assert reviews[other_review.id].is_liked_by_current_user is False

    def test_liked_lookup_is_single_query(self, review, other_review, review_other_user, django_assert_num_queries):
        ReviewLike.objects.create(review=review, user=review_other_user)

        # One query for the reviews, one for the viewer's liked ids
        with django_assert_num_queries(2):
            reviews = get_all_reviews(viewer_id=review_other_user.id)
            [(r.user.username, r.pub.title) for r in reviews]

    def test_anonymous_skips_like_lookup(self, review, other_review, django_assert_num_queries):
        with django_assert_num_queries(1):
            get_all_reviews(viewer_id=None)

    def test_by_pub(self, review, other_review, review_another_pub, review_user):
        elsewhere = Review.objects.create(
            pub=review_another_pub,
            user=review_user,
            content='Different pub entirely, nice garden.',
            rate=2,
        )

        reviews = get_pub_reviews(pub_id=review_another_pub.id)

        assert [r.id for r in reviews] == [elsewhere.id]

    def test_by_pub_unknown_pub_is_empty(self, review):
        assert get_pub_reviews(pub_id=uuid4()) == []

    def test_by_user(self, review, other_review, review_user, review_other_user):
        ReviewLike.objects.create(review=review, user=review_other_user)

        reviews = get_user_reviews(user_id=review_user.id, viewer_id=review_other_user.id)

        assert [r.id for r in reviews] == [review.id]
        assert reviews[0].is_liked_by_current_user is True

    def test_liked_ids(self, review, other_review, review_user):
        ReviewLike.objects.create(review=other_review, user=review_user)

        assert get_liked_review_ids(user_id=review_user.id) == {other_review.id}


@pytest.mark.django_db
class TestUpdateReview:

    def test_update_success(self, liked_review, review_user, review_pub):
        updated = update_review(
            review_id=liked_review.id,
            user_id=review_user.id,
            content='Changed my mind, the beer has gone downhill.',
            rate=2,
        )

        assert updated.id == liked_review.id
        assert updated.content == 'Changed my mind, the beer has gone downhill.'
        assert updated.rate == 2
        assert updated.like_count == 1
        review_pub.refresh_from_db()
        assert review_pub.rating == Decimal('2.0')

    def test_update_reports_requester_like_state(self, review, review_user, valid_content):
        ReviewLike.objects.create(review=review, user=review_user)

        updated = update_review(review_id=review.id, user_id=review_user.id, content=valid_content, rate=4)

        assert updated.is_liked_by_current_user is True

    def test_update_recomputes_with_other_reviews(self, review, other_review, review_user, review_pub, valid_content):
        update_review(review_id=review.id, user_id=review_user.id, content=valid_content, rate=5)

        review_pub.refresh_from_db()
        assert review_pub.rating == Decimal('4.0')

    def test_non_owner_same_error_as_missing(self, review, review_other_user, valid_content):
        with pytest.raises(ReviewNotFoundError) as not_owner:
            update_review(review_id=review.id, user_id=review_other_user.id, content=valid_content, rate=1)
        with pytest.raises(ReviewNotFoundError) as missing:
            update_review(review_id=uuid4(), user_id=review_other_user.id, content=valid_content, rate=1)

        assert str(not_owner.value) == str(missing.value)
        assert type(not_owner.value) is type(missing.value)
        review.refresh_from_db()
        assert review.rate == 4

    def test_invalid_rate_leaves_review_untouched(self, review, review_user, valid_content):
        with pytest.raises(InvalidRateError):
            update_review(review_id=review.id, user_id=review_user.id, content=valid_content, rate=9)

        review.refresh_from_db()
        assert review.rate == 4


@pytest.mark.django_db
class TestDeleteReview:

    def test_delete_last_review_resets_rating(self, review_user, review_pub, valid_content):
        review = create_review(author_id=review_user.id, pub_id=review_pub.id, content=valid_content, rate=5)

        delete_review(review_id=review.id, user_id=review_user.id)

        assert not Review.objects.filter(id=review.id).exists()
        review_pub.refresh_from_db()
        assert review_pub.rating == Decimal('0.0')

    def test_delete_recomputes_from_remaining(self, review, other_review, review_user, review_pub):
        delete_review(review_id=review.id, user_id=review_user.id)

        review_pub.refresh_from_db()
        assert review_pub.rating == Decimal('3.0')

    def test_delete_removes_likes(self, liked_review, review_user):
        delete_review(review_id=liked_review.id, user_id=review_user.id)

        assert not ReviewLike.objects.filter(review_id=liked_review.id).exists()

    def test_non_owner_same_error_as_missing(self, review, review_other_user):
        with pytest.raises(ReviewNotFoundError) as not_owner:
            delete_review(review_id=review.id, user_id=review_other_user.id)
        with pytest.raises(ReviewNotFoundError) as missing:
            delete_review(review_id=uuid4(), user_id=review_other_user.id)

        assert str(not_owner.value) == str(missing.value)
        assert Review.objects.filter(id=review.id).exists()


# ============================================================================
# LIKE TESTS
# ============================================================================

@pytest.mark.django_db
class TestLikeReview:

    def test_like_increments_count(self, review, review_other_user):
        liked = like_review(review_id=review.id, user_id=review_other_user.id)

        assert liked.like_count == 1
        assert liked.is_liked_by_current_user is True
        assert ReviewLike.objects.filter(review=review, user=review_other_user).exists()

    def test_like_does_not_touch_rating(self, review_user, review_other_user, review_pub, valid_content):
        review = create_review(author_id=review_user.id, pub_id=review_pub.id, content=valid_content, rate=3)

        like_review(review_id=review.id, user_id=review_other_user.id)

        review_pub.refresh_from_db()
        assert review_pub.rating == Decimal('3.0')

    def test_double_like_is_conflict(self, review, review_other_user):
        like_review(review_id=review.id, user_id=review_other_user.id)

        with pytest.raises(AlreadyLikedError) as exc:
            like_review(review_id=review.id, user_id=review_other_user.id)

        assert exc.value.kind is ErrorKind.CONFLICT
        review.refresh_from_db()
        assert review.like_count == 1
        assert ReviewLike.objects.filter(review=review).count() == 1

    def test_author_may_like_own_review(self, review, review_user):
        liked = like_review(review_id=review.id, user_id=review_user.id)

        assert liked.like_count == 1

    def test_missing_review(self, review_user):
        with pytest.raises(ReviewNotFoundError):
            like_review(review_id=uuid4(), user_id=review_user.id)

    def test_missing_user(self, review):
        with pytest.raises(UserNotFoundError):
            like_review(review_id=review.id, user_id=uuid4())

    def test_database_rejects_duplicate_like_rows(self, liked_review, review_other_user):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                ReviewLike.objects.create(review=liked_review, user=review_other_user)


@pytest.mark.django_db
class TestUnlikeReview:

    def test_unlike_decrements_count(self, liked_review, review_other_user):
        unliked = unlike_review(review_id=liked_review.id, user_id=review_other_user.id)

        assert unliked.like_count == 0
        assert unliked.is_liked_by_current_user is False
        assert not ReviewLike.objects.filter(review=liked_review).exists()

    def test_unlike_without_like(self, review, review_other_user):
        with pytest.raises(NotLikedError) as exc:
            unlike_review(review_id=review.id, user_id=review_other_user.id)

        assert str(exc.value) == "You haven't liked this review"
        assert exc.value.kind is ErrorKind.NOT_FOUND

    def test_unlike_missing_review(self, review_user):
        with pytest.raises(ReviewNotFoundError):
            unlike_review(review_id=uuid4(), user_id=review_user.id)

    def test_count_never_negative(self, review, review_other_user):
        # Like row exists but the counter already says zero
        ReviewLike.objects.create(review=review, user=review_other_user)

        unliked = unlike_review(review_id=review.id, user_id=review_other_user.id)

        assert unliked.like_count == 0
        review.refresh_from_db()
        assert review.like_count == 0

    def test_like_again_after_unlike(self, liked_review, review_other_user):
        unlike_review(review_id=liked_review.id, user_id=review_other_user.id)
        liked = like_review(review_id=liked_review.id, user_id=review_other_user.id)

        assert liked.like_count == 1
