from rest_framework import serializers
from .models import Pub


class PubSerializer(serializers.ModelSerializer):
    """Public pub view."""

    class Meta:
        model = Pub
        fields = [
            'id',
            'title',
            'short_description',
            'long_description',
            'menu_url',
            'image_url',
            'rating',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields
