from django.contrib import admin
from .models import KeywordCategory, Skill


@admin.register(Skill)
class SkillAdmin(admin.ModelAdmin):
    """Admin interface for Skill."""

    list_display = ['name', 'category', 'level', 'rating', 'featured', 'display_order']
    list_filter = ['category', 'level', 'featured']
    search_fields = ['name', 'category']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(KeywordCategory)
class KeywordCategoryAdmin(admin.ModelAdmin):
    """Admin interface for KeywordCategory."""

    list_display = ['category', 'role_type', 'updated_at']
    list_filter = ['role_type']
    search_fields = ['category']
    readonly_fields = ['created_at', 'updated_at']
