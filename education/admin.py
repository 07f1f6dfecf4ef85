from django.contrib import admin
from .models import Education


@admin.register(Education)
class EducationAdmin(admin.ModelAdmin):
    list_display = ['degree', 'field', 'institution', 'graduation_year', 'display_order']
    search_fields = ['institution', 'degree', 'field']
    readonly_fields = ['created_at', 'updated_at']
