"""
Experience app serializers

Serializers for Experience model.
"""
from rest_framework import serializers
from .models import Experience


class AchievementSerializer(serializers.Serializer):
    description = serializers.CharField()
    metrics = serializers.CharField(required=False, allow_blank=True)
    impact = serializers.CharField(required=False, allow_blank=True)
    keywords = serializers.ListField(child=serializers.CharField(), required=False)


class ExperienceSerializer(serializers.ModelSerializer):
    """
    Serializer for Experience.

    company, location, title, start_date, role_types, responsibilities and
    technologies are required on create. end_date may be omitted or null for
    a current position but never precedes start_date.
    """

    role_types = serializers.ListField(child=serializers.CharField())
    responsibilities = serializers.ListField(child=serializers.CharField())
    technologies = serializers.ListField(child=serializers.CharField())
    achievements = AchievementSerializer(many=True, required=False)
    organizations = serializers.ListField(child=serializers.CharField(), required=False)
    cross_functional = serializers.ListField(child=serializers.CharField(), required=False)
    is_current = serializers.BooleanField(read_only=True)

    class Meta:
        model = Experience
        fields = [
            'id',
            'company',
            'title',
            'location',
            'industry',
            'start_date',
            'end_date',
            'is_current',
            'role_types',
            'responsibilities',
            'achievements',
            'technologies',
            'organizations',
            'cross_functional',
            'featured',
            'display_order',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate(self, attrs):
        start_date = attrs.get('start_date', getattr(self.instance, 'start_date', None))
        end_date = attrs.get('end_date', getattr(self.instance, 'end_date', None))
        if start_date and end_date and end_date < start_date:
            raise serializers.ValidationError(
                {'end_date': 'end_date cannot be earlier than start_date.'}
            )
        return attrs
