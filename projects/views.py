"""
Projects app views

ViewSet for Project management.
"""
from django.db.models import Q
from rest_framework import viewsets

from careeradmin.querysets import parse_bool, parse_limit

from .models import Project
from .serializers import ProjectSerializer


class ProjectViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Project.

    List filters: role_type, type, featured, search (name/overview
    substring) and limit, which is applied last.
    """

    serializer_class = ProjectSerializer

    def get_queryset(self):
        queryset = Project.objects.all()
        if self.action != 'list':
            return queryset

        params = self.request.query_params

        project_type = params.get('type')
        if project_type:
            queryset = queryset.filter(type=project_type)

        featured = parse_bool(params.get('featured'))
        if featured is not None:
            queryset = queryset.featured(featured)

        search = params.get('search')
        if search:
            queryset = queryset.filter(Q(name__icontains=search) | Q(overview__icontains=search))

        queryset = queryset.with_role_type(params.get('role_type'))

        limit = parse_limit(params.get('limit'))
        if limit:
            queryset = queryset[:limit]
        return queryset
