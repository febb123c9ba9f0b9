from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'name',
            'surname',
            'created_at',
            'last_login',
        ]
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    """
    Input for user registration.

    Uniqueness of username and email is left to the service so that
    duplicates surface as 409 instead of a field error.
    """

    username = serializers.CharField(min_length=3, max_length=50)
    password = serializers.CharField(
        write_only=True,
        min_length=6,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    name = serializers.CharField(max_length=100)
    surname = serializers.CharField(max_length=100)
    email = serializers.EmailField(max_length=255)


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    username = serializers.CharField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class AuthResponseSerializer(serializers.Serializer):
    """Token payload returned by register and login."""

    token = serializers.CharField()
    refresh = serializers.CharField()
    account_id = serializers.UUIDField()
    username = serializers.CharField()
