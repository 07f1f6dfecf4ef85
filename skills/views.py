"""
Skills app views

ViewSets for skills and ATS keyword categories.
"""
from rest_framework import viewsets

from careeradmin.querysets import parse_bool

from .models import KeywordCategory, Skill
from .serializers import KeywordCategorySerializer, SkillSerializer


class SkillViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Skill.

    List filters: role_type (matched against role_relevance), featured,
    category, search (name substring).
    """

    serializer_class = SkillSerializer

    def get_queryset(self):
        queryset = Skill.objects.all()
        if self.action != 'list':
            return queryset

        params = self.request.query_params

        featured = parse_bool(params.get('featured'))
        if featured is not None:
            queryset = queryset.featured(featured)

        category = params.get('category')
        if category:
            queryset = queryset.filter(category__iexact=category)

        search = params.get('search')
        if search:
            queryset = queryset.filter(name__icontains=search)

        return queryset.with_role_type(params.get('role_type'))


class KeywordCategoryViewSet(viewsets.ModelViewSet):
    """ViewSet for KeywordCategory, filterable by role_type."""

    serializer_class = KeywordCategorySerializer

    def get_queryset(self):
        queryset = KeywordCategory.objects.all()
        role_type = self.request.query_params.get('role_type')
        if self.action == 'list' and role_type:
            queryset = queryset.filter(role_type=role_type)
        return queryset
