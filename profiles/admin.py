from django.contrib import admin
from .models import CareerProfile


@admin.register(CareerProfile)
class CareerProfileAdmin(admin.ModelAdmin):
    """Admin interface for the CareerProfile singleton."""

    list_display = ['__str__', 'professional_mission', 'updated_at']
    readonly_fields = ['created_at', 'updated_at']

    def has_add_permission(self, request):
        return not CareerProfile.objects.exists()
