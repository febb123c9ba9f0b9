from django.contrib import admin
from .models import Review, ReviewLike
from .services import delete_review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    """
    Admin interface for Reviews.

    Rate and like count are read-only here since changing them outside
    the service layer would leave the pub rating stale. Deletes go
    through the review service on behalf of the author.
    """

    list_display = [
        'get_pub_title',
        'user',
        'rate',
        'like_count',
        'created_at'
    ]
    list_filter = [
        'rate',
        'created_at',
    ]
    search_fields = [
        'pub__title',
        'user__username',
        'content'
    ]
    readonly_fields = ['user', 'pub', 'rate', 'like_count', 'created_at', 'updated_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('pub', 'user', 'rate', 'like_count')
        }),
        ('Review Content', {
            'fields': ('content',)
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_pub_title(self, obj):
        """Display pub title in list."""
        return obj.pub.title
    get_pub_title.short_description = 'Pub'
    get_pub_title.admin_order_field = 'pub__title'

    def get_queryset(self, request):
        """Optimize query with select_related."""
        qs = super().get_queryset(request)
        return qs.select_related('user', 'pub')

    def has_add_permission(self, request):
        return False

    def delete_model(self, request, obj):
        delete_review(review_id=obj.id, user_id=obj.user_id)

    def delete_queryset(self, request, queryset):
        for review_id, user_id in queryset.values_list('id', 'user_id'):
            delete_review(review_id=review_id, user_id=user_id)


@admin.register(ReviewLike)
class ReviewLikeAdmin(admin.ModelAdmin):
    """Read-only view of review likes."""

    list_display = ['user', 'review', 'created_at']
    search_fields = ['user__username', 'review__pub__title']
    readonly_fields = ['user', 'review', 'created_at']
    ordering = ['-created_at']

    def get_queryset(self, request):
        """Optimize query with select_related."""
        qs = super().get_queryset(request)
        return qs.select_related('user', 'review', 'review__pub')

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
