"""
Profiles app serializers

Serializers for CareerProfile model.
"""
from rest_framework import serializers
from .models import CareerProfile


def empty_profile():
    """Representation returned while no profile has been saved yet."""
    return {
        'id': None,
        'personal_info': {},
        'positioning': {},
        'value_propositions': [],
        'professional_mission': '',
        'unique_selling_points': [],
        'created_at': None,
        'updated_at': None,
    }


class CareerProfileSerializer(serializers.ModelSerializer):
    """
    Serializer for CareerProfile.

    personal_info and positioning are free-form objects; the list fields
    only accept strings.
    """

    value_propositions = serializers.ListField(
        child=serializers.CharField(allow_blank=False), required=False
    )
    unique_selling_points = serializers.ListField(
        child=serializers.CharField(allow_blank=False), required=False
    )

    class Meta:
        model = CareerProfile
        fields = [
            'id',
            'personal_info',
            'positioning',
            'value_propositions',
            'professional_mission',
            'unique_selling_points',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_personal_info(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError('personal_info must be an object.')
        links = value.get('links')
        if links is not None and not isinstance(links, dict):
            raise serializers.ValidationError('personal_info.links must be an object.')
        return value

    def validate_positioning(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError('positioning must be an object.')
        by_role = value.get('by_role')
        if by_role is not None and not isinstance(by_role, dict):
            raise serializers.ValidationError('positioning.by_role must be an object.')
        return value
