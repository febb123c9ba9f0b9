from django.contrib import admin
from .models import Pub
from .services import delete_pub


@admin.register(Pub)
class PubAdmin(admin.ModelAdmin):
    """
    Admin interface for Pubs.

    Rating is derived from reviews and therefore read-only. Deletes go
    through the pub service so reviews and likes are removed first.
    """

    list_display = ['title', 'rating', 'review_count', 'created_at', 'updated_at']
    search_fields = ['title', 'short_description']
    readonly_fields = ['rating', 'created_at', 'updated_at']
    ordering = ['title']

    fieldsets = (
        ('Basic Information', {
            'fields': ('title', 'short_description', 'long_description')
        }),
        ('Links', {
            'fields': ('menu_url', 'image_url')
        }),
        ('Statistics', {
            'fields': ('rating', 'created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    def review_count(self, obj):
        """Number of reviews for the pub."""
        return obj.reviews.count()
    review_count.short_description = 'Reviews'

    def delete_model(self, request, obj):
        delete_pub(pub_id=obj.id)

    def delete_queryset(self, request, queryset):
        for pub_id in queryset.values_list('id', flat=True):
            delete_pub(pub_id=pub_id)
