from django.contrib import admin
from .models import Experience


@admin.register(Experience)
class ExperienceAdmin(admin.ModelAdmin):
    """Admin interface for Experience."""

    list_display = ['title', 'company', 'start_date', 'end_date', 'featured', 'display_order']
    list_filter = ['featured', 'industry']
    search_fields = ['company', 'title', 'industry']
    readonly_fields = ['created_at', 'updated_at']
