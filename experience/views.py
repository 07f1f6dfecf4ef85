"""
Experience app views

ViewSet for Experience management.
"""
from django.db.models import Q
from rest_framework import viewsets

from careeradmin.querysets import parse_bool, parse_limit

from .models import Experience
from .serializers import ExperienceSerializer


class ExperienceViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Experience.

    List filters (query string):
    - role_type: only experiences tagged with this role type
    - featured: true/false
    - company: case-insensitive substring match
    - search: matches company, title or industry
    - limit: return at most this many, applied after the other filters
    """

    serializer_class = ExperienceSerializer

    def get_queryset(self):
        queryset = Experience.objects.all()
        if self.action != 'list':
            return queryset

        params = self.request.query_params

        featured = parse_bool(params.get('featured'))
        if featured is not None:
            queryset = queryset.featured(featured)

        company = params.get('company')
        if company:
            queryset = queryset.filter(company__icontains=company)

        search = params.get('search')
        if search:
            queryset = queryset.filter(
                Q(company__icontains=search)
                | Q(title__icontains=search)
                | Q(industry__icontains=search)
            )

        queryset = queryset.with_role_type(params.get('role_type'))

        limit = parse_limit(params.get('limit'))
        if limit:
            queryset = queryset[:limit]
        return queryset
