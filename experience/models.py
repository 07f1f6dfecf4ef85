"""
Experience app models

Experience model for one position in the work history.

Expected JSON shape for achievements:
[
  {
    "description": "Cut onboarding time for new API consumers",
    "metrics": "40%",
    "impact": "Fewer support tickets in the first quarter",
    "keywords": ["developer experience", "onboarding"]
  }
]
"""
from django.db import models

from careeradmin.querysets import RoleTaggedQuerySet


class Experience(models.Model):
    """
    A single position.

    end_date left empty means the position is current. role_types tags the
    target roles this experience supports; responsibilities and technologies
    are plain string lists.
    """

    company = models.CharField(max_length=255)
    title = models.CharField(max_length=255)
    location = models.CharField(max_length=255)
    industry = models.CharField(max_length=255, blank=True)
    start_date = models.DateField()
    end_date = models.DateField(null=True, blank=True)

    role_types = models.JSONField(default=list, blank=True)
    responsibilities = models.JSONField(default=list, blank=True)
    achievements = models.JSONField(default=list, blank=True)
    technologies = models.JSONField(default=list, blank=True)
    organizations = models.JSONField(default=list, blank=True)
    cross_functional = models.JSONField(default=list, blank=True)

    featured = models.BooleanField(default=False)
    display_order = models.IntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = RoleTaggedQuerySet.as_manager()

    def __str__(self):
        return f"{self.title} at {self.company}"

    @property
    def is_current(self) -> bool:
        return self.end_date is None

    class Meta:
        ordering = ['-start_date', 'display_order', 'id']
        verbose_name = 'Experience'
        verbose_name_plural = 'Experiences'
