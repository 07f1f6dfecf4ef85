"""
Assistant app URLs
"""
from django.urls import path

from .views import AssistantContextView, AssistantView

urlpatterns = [
    path('', AssistantView.as_view(), name='assistant'),
    path('context/', AssistantContextView.as_view(), name='assistant-context'),
]
