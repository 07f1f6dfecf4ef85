"""
Jobs app serializers

Request payloads for the job agent endpoints.
"""
from rest_framework import serializers

from .services import JOB_TYPE_CONFIGS


class JobInfoSerializer(serializers.Serializer):
    """
    The job being applied for. Unknown job types are accepted and fall back
    to the technical writer configuration.
    """

    description = serializers.CharField()
    job_type = serializers.CharField()
    company = serializers.CharField(required=False, allow_blank=True, default='')
    title = serializers.CharField(required=False, allow_blank=True, default='')


class DraftRequestSerializer(serializers.Serializer):
    """
    Generate a new draft, or revise a prior one with feedback.
    """

    ACTION_CHOICES = ('generate', 'revise')

    action = serializers.ChoiceField(choices=ACTION_CHOICES, default='generate')
    job_info = JobInfoSerializer()
    additional_context = serializers.CharField(required=False, allow_blank=True, default='')
    prior_draft = serializers.CharField(required=False, allow_blank=True, default='')
    feedback = serializers.CharField(required=False, allow_blank=True, default='')

    def validate(self, attrs):
        if attrs['action'] == 'revise':
            if not attrs.get('prior_draft'):
                raise serializers.ValidationError({'prior_draft': 'A prior draft is required to revise.'})
            if not attrs.get('feedback'):
                raise serializers.ValidationError({'feedback': 'Feedback is required to revise.'})
        return attrs


class QuestionRequestSerializer(DraftRequestSerializer):
    question = serializers.CharField()


class ScrapeRequestSerializer(serializers.Serializer):
    url = serializers.URLField()


def job_type_choices():
    return [{'value': key, **config.to_dict()} for key, config in JOB_TYPE_CONFIGS.items()]
