"""
Skills app models

Skill rows are flat: one row per skill with its category as a plain field.
KeywordCategory groups ATS terms for a role type.

Expected JSON shape for KeywordCategory.terms:
[
  {"primary": "API documentation", "alternatives": ["API docs"], "frequency": 12, "context": "..."}
]
"""
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from careeradmin.querysets import RelevanceTaggedQuerySet


class Skill(models.Model):
    """
    A single skill with a proficiency label and a 1-5 rating.
    """

    class Level(models.TextChoices):
        EXPERT = 'expert', 'Expert'
        ADVANCED = 'advanced', 'Advanced'
        INTERMEDIATE = 'intermediate', 'Intermediate'
        BEGINNER = 'beginner', 'Beginner'

    name = models.CharField(max_length=255)
    category = models.CharField(max_length=255, blank=True)
    role_relevance = models.JSONField(default=list, blank=True)
    level = models.CharField(max_length=20, choices=Level.choices, default=Level.INTERMEDIATE)
    rating = models.PositiveSmallIntegerField(
        default=3,
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    years_of_experience = models.FloatField(default=0)
    tags = models.JSONField(default=list, blank=True)
    keywords = models.JSONField(default=list, blank=True)
    featured = models.BooleanField(default=False)
    display_order = models.IntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = RelevanceTaggedQuerySet.as_manager()

    def __str__(self):
        return self.name

    class Meta:
        ordering = ['display_order', 'category', 'name', 'id']
        verbose_name = 'Skill'
        verbose_name_plural = 'Skills'


class KeywordCategory(models.Model):
    """
    ATS keyword terms for one category of one role type.
    """

    category = models.CharField(max_length=255)
    role_type = models.CharField(max_length=64, blank=True, db_index=True)
    terms = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.category} ({self.role_type or 'any role'})"

    class Meta:
        ordering = ['category', 'id']
        verbose_name = 'Keyword Category'
        verbose_name_plural = 'Keyword Categories'
