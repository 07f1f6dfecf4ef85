"""
Assistant app serializers

Request validation for the context and completion endpoints.
"""
from rest_framework import serializers

from . import constants
from .services import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE


class ContextRequestSerializer(serializers.Serializer):
    """
    Input for POST /api/assistant/context/.

    role_type is not checked against the known role types; unknown values are
    passed through to the prompt as-is.
    """

    collection = serializers.ChoiceField(choices=constants.COLLECTIONS)
    item_id = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    role_type = serializers.CharField(required=False, allow_blank=True, default=constants.DEFAULT_ROLE_TYPE)
    field = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    compress = serializers.BooleanField(required=False, default=False)


class MessageSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=["user", "assistant", "system"])
    content = serializers.CharField(allow_blank=True, trim_whitespace=False)


class CompletionOptionsSerializer(serializers.Serializer):
    stream = serializers.BooleanField(required=False, default=False)
    max_tokens = serializers.IntegerField(required=False, min_value=1, default=DEFAULT_MAX_TOKENS)
    temperature = serializers.FloatField(required=False, min_value=0.0, max_value=2.0, default=DEFAULT_TEMPERATURE)
    model = serializers.CharField(required=False, allow_blank=True)


class ProfileSummarySerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    positioning = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    value_props = serializers.ListField(child=serializers.CharField(allow_blank=True), required=False)
    mission = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class CurrentItemSerializer(serializers.Serializer):
    """The experience or project under edit; only the fields the prompt reads."""

    company = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    title = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    name = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    type = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    technologies = serializers.ListField(
        child=serializers.CharField(allow_blank=True), required=False, allow_null=True
    )
    responsibilities = serializers.ListField(
        child=serializers.CharField(allow_blank=True), required=False, allow_null=True
    )


class SkillSummarySerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    featured = serializers.BooleanField(required=False, default=False)


class KeywordTermSerializer(serializers.Serializer):
    primary = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class KeywordCategorySerializer(serializers.Serializer):
    terms = KeywordTermSerializer(many=True, required=False)


class RelatedContextSerializer(serializers.Serializer):
    skills = SkillSummarySerializer(many=True, required=False)
    keywords = KeywordCategorySerializer(many=True, required=False)
    recent_experiences = serializers.ListField(child=serializers.DictField(), required=False)
    related_projects = serializers.ListField(child=serializers.DictField(), required=False)
    related_experiences = serializers.ListField(child=serializers.DictField(), required=False)


class EditingContextSerializer(serializers.Serializer):
    collection = serializers.ChoiceField(choices=constants.COLLECTIONS)
    role_type = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    field = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class AssistantContextSerializer(serializers.Serializer):
    """An AI context as returned by /api/assistant/context/."""

    profile_summary = ProfileSummarySerializer(required=False, allow_null=True)
    current_item = CurrentItemSerializer(required=False, allow_null=True)
    related_context = RelatedContextSerializer(required=False, allow_null=True)
    editing_context = EditingContextSerializer()


class AssistantRequestSerializer(serializers.Serializer):
    """
    Input for POST /api/assistant/.

    {
      "messages": [{"role": "user", "content": "..."}],
      "context": {... as returned by /api/assistant/context/ ...},
      "options": {"stream": false, "max_tokens": 1000, "temperature": 0.7}
    }
    """

    messages = MessageSerializer(many=True, allow_empty=False)
    context = AssistantContextSerializer()
    options = CompletionOptionsSerializer(required=False)
