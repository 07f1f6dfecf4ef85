"""
Projects app models

Project model for portfolio case studies.

Expected JSON shape for links:
[
  {"url": "https://github.com/...", "link_text": "Source", "type": "github"}
]
"""
from django.db import models

from careeradmin.querysets import RoleTaggedQuerySet


class Project(models.Model):
    """
    A portfolio project written up as a short case study.
    """

    class Type(models.TextChoices):
        TECHNICAL_WRITING = 'technical_writing', 'Technical Writing'
        SOFTWARE_ENGINEERING = 'software_engineering', 'Software Engineering'
        LEADERSHIP = 'leadership', 'Leadership'
        HYBRID = 'hybrid', 'Hybrid'

    name = models.CharField(max_length=255)
    type = models.CharField(max_length=32, choices=Type.choices)
    date = models.DateField(null=True, blank=True)
    featured = models.BooleanField(default=False)

    overview = models.TextField()
    challenge = models.TextField(blank=True)
    approach = models.TextField(blank=True)
    outcome = models.TextField(blank=True)
    impact = models.TextField(blank=True)

    technologies = models.JSONField(default=list, blank=True)
    keywords = models.JSONField(default=list, blank=True)
    links = models.JSONField(default=list, blank=True)
    role_types = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = RoleTaggedQuerySet.as_manager()

    def __str__(self):
        return self.name

    class Meta:
        ordering = ['-date', '-created_at', 'id']
        verbose_name = 'Project'
        verbose_name_plural = 'Projects'
