"""
Profiles app models

CareerProfile singleton holding personal info, positioning statements and
value propositions.

Expected JSON shapes:
    personal_info: {"name": "...", "email": "...", "phone": "...", "location": "...",
                    "links": {"portfolio": "...", "github": "...", "linkedin": "..."}}
    positioning:   {"current": "...", "by_role": {"technical_writer": "...", ...}}
"""
from django.db import models


class CareerProfile(models.Model):
    """
    The one career profile of this installation.

    At most one row exists. `load()` returns it or None; an absent profile
    is treated as empty by every reader.
    """

    SINGLETON_PK = 1

    personal_info = models.JSONField(default=dict, blank=True)
    positioning = models.JSONField(default=dict, blank=True)
    value_propositions = models.JSONField(default=list, blank=True)
    professional_mission = models.TextField(blank=True)
    unique_selling_points = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return (self.personal_info or {}).get('name') or 'Career profile'

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_PK
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        return cls.objects.filter(pk=cls.SINGLETON_PK).first()

    class Meta:
        verbose_name = 'Career Profile'
        verbose_name_plural = 'Career Profile'
