"""
Education app serializers
"""
from rest_framework import serializers
from .models import Education


class EducationSerializer(serializers.ModelSerializer):

    relevant_coursework = serializers.ListField(child=serializers.CharField(), required=False)
    graduation_year = serializers.IntegerField(min_value=1900, max_value=2100)

    class Meta:
        model = Education
        fields = [
            'id',
            'institution',
            'degree',
            'field',
            'graduation_year',
            'relevant_coursework',
            'display_order',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
