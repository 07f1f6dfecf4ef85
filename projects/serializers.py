"""
Projects app serializers
"""
from rest_framework import serializers
from .models import Project


class ProjectLinkSerializer(serializers.Serializer):
    url = serializers.URLField()
    link_text = serializers.CharField(required=False, allow_blank=True)
    type = serializers.CharField(required=False, allow_blank=True)


class ProjectSerializer(serializers.ModelSerializer):
    """
    Serializer for Project.

    name, type, overview, technologies and role_types are required on create.
    """

    technologies = serializers.ListField(child=serializers.CharField())
    role_types = serializers.ListField(child=serializers.CharField())
    keywords = serializers.ListField(child=serializers.CharField(), required=False)
    links = ProjectLinkSerializer(many=True, required=False)

    class Meta:
        model = Project
        fields = [
            'id',
            'name',
            'type',
            'date',
            'featured',
            'overview',
            'challenge',
            'approach',
            'outcome',
            'impact',
            'technologies',
            'keywords',
            'links',
            'role_types',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
