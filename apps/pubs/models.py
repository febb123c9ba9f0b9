# ==========================================
# apps/pubs/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid


class Pub(models.Model):
    """A venue that users review."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200, db_index=True)
    short_description = models.CharField(max_length=500, blank=True)
    long_description = models.TextField(blank=True)
    menu_url = models.URLField(max_length=500, blank=True)
    image_url = models.URLField(max_length=500, blank=True)
    # Derived from reviews; written only by update_pub_rating
    rating = models.DecimalField(
        max_digits=2,
        decimal_places=1,
        default=Decimal('0.0'),
        validators=[MinValueValidator(Decimal('0.0')), MaxValueValidator(Decimal('5.0'))],
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'pubs'
        indexes = [
            models.Index(fields=['rating'], name='pubs_rating_idx'),
            models.Index(fields=['created_at'], name='pubs_created_at_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.title} ({self.rating})"
