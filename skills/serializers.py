"""
Skills app serializers
"""
from rest_framework import serializers
from .models import KeywordCategory, Skill


class SkillSerializer(serializers.ModelSerializer):

    role_relevance = serializers.ListField(child=serializers.CharField(), required=False)
    tags = serializers.ListField(child=serializers.CharField(), required=False)
    keywords = serializers.ListField(child=serializers.CharField(), required=False)
    rating = serializers.IntegerField(min_value=1, max_value=5, required=False)
    years_of_experience = serializers.FloatField(min_value=0, required=False)

    class Meta:
        model = Skill
        fields = [
            'id',
            'name',
            'category',
            'role_relevance',
            'level',
            'rating',
            'years_of_experience',
            'tags',
            'keywords',
            'featured',
            'display_order',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class KeywordTermSerializer(serializers.Serializer):
    primary = serializers.CharField()
    alternatives = serializers.ListField(child=serializers.CharField(), required=False)
    frequency = serializers.IntegerField(min_value=0, required=False)
    context = serializers.CharField(required=False, allow_blank=True)


class KeywordCategorySerializer(serializers.ModelSerializer):

    terms = KeywordTermSerializer(many=True)

    class Meta:
        model = KeywordCategory
        fields = ['id', 'category', 'role_type', 'terms', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']
