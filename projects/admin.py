from django.contrib import admin
from .models import Project


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    """Admin interface for Project."""

    list_display = ['name', 'type', 'date', 'featured']
    list_filter = ['type', 'featured']
    search_fields = ['name', 'overview']
    readonly_fields = ['created_at', 'updated_at']
