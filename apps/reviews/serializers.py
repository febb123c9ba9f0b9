from rest_framework import serializers
from .models import Review


class ReviewSerializer(serializers.ModelSerializer):
    """
    Review view returned by every review endpoint.

    ``is_liked_by_current_user`` is set on the instance by the service
    layer for the requesting viewer.
    """

    user_id = serializers.UUIDField(read_only=True)
    username = serializers.CharField(source='user.username', read_only=True)
    pub_id = serializers.UUIDField(read_only=True)
    pub_title = serializers.CharField(source='pub.title', read_only=True)
    is_liked_by_current_user = serializers.BooleanField(read_only=True, default=False)

    class Meta:
        model = Review
        fields = [
            'id',
            'user_id',
            'username',
            'pub_id',
            'pub_title',
            'content',
            'rate',
            'like_count',
            'created_at',
            'updated_at',
            'is_liked_by_current_user',
        ]
        read_only_fields = fields


class ReviewUpdateSerializer(serializers.Serializer):
    """Input for replacing a review's content and rate."""

    content = serializers.CharField(min_length=10, max_length=5000)
    rate = serializers.IntegerField(min_value=0, max_value=5)


class ReviewCreateSerializer(ReviewUpdateSerializer):
    """Input for creating a review."""

    pub_id = serializers.UUIDField()
