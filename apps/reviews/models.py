# ==========================================
# apps/reviews/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid


class Review(models.Model):
    """A user's written review and 0-5 rate for a pub."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='reviews')
    pub = models.ForeignKey('pubs.Pub', on_delete=models.CASCADE, related_name='reviews')
    content = models.TextField()
    rate = models.PositiveSmallIntegerField(validators=[MinValueValidator(0), MaxValueValidator(5)])
    # Kept in step with ReviewLike rows by the like/unlike services
    like_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'reviews'
        indexes = [
            models.Index(fields=['pub', 'created_at'], name='reviews_pub_created_idx'),
            models.Index(fields=['user', 'created_at'], name='reviews_user_created_idx'),
            models.Index(fields=['created_at'], name='reviews_created_at_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user.username} - {self.pub.title} ({self.rate}★)"


class ReviewLike(models.Model):
    """Fact that a user liked a review."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    review = models.ForeignKey(Review, on_delete=models.CASCADE, related_name='likes')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='review_likes')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'review_likes'
        constraints = [
            models.UniqueConstraint(fields=['review', 'user'], name='unique_review_like'),
        ]
        indexes = [
            models.Index(fields=['user'], name='review_likes_user_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user.username} likes {self.review_id}"
