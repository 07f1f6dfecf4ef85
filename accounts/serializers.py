"""
Accounts app serializers

Serializers for User model and authentication.
"""
from django.contrib.auth import authenticate
from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for User model.

    Exposes user details including AI usage counters.
    """

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'first_name',
            'last_name',
            'tokens_used',
            'words_used',
        ]
        read_only_fields = fields


class LoginSerializer(serializers.Serializer):
    """
    Validate username/password credentials.

    The authenticated user is exposed as `validated_data['user']`.
    """

    username = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False, write_only=True)

    def validate(self, attrs):
        user = authenticate(
            request=self.context.get('request'),
            username=attrs['username'],
            password=attrs['password'],
        )
        if user is None:
            raise serializers.ValidationError('Invalid credentials.', code='authorization')
        attrs['user'] = user
        return attrs
