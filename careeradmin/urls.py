"""
URL configuration for careeradmin project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from accounts.views import UserViewSet
from education.views import EducationViewSet
from experience.views import ExperienceViewSet
from projects.views import ProjectViewSet
from skills.views import KeywordCategoryViewSet, SkillViewSet

# Create router and register viewsets
router = DefaultRouter()
router.register(r'users', UserViewSet, basename='user')
router.register(r'experiences', ExperienceViewSet, basename='experience')
router.register(r'skills', SkillViewSet, basename='skill')
router.register(r'keywords', KeywordCategoryViewSet, basename='keyword')
router.register(r'projects', ProjectViewSet, basename='project')
router.register(r'education', EducationViewSet, basename='education')

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include(router.urls)),
    path('api/auth/', include('accounts.urls')),
    path('api/profile/', include('profiles.urls')),
    path('api/assistant/', include('assistant.urls')),
    path('api/job-agent/', include('jobs.urls')),
    path('api-auth/', include('rest_framework.urls')),
]
