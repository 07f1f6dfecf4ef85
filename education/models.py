"""
Education app models
"""
from django.db import models


class Education(models.Model):
    """A degree or certificate with the coursework worth mentioning."""

    institution = models.CharField(max_length=255)
    degree = models.CharField(max_length=255)
    field = models.CharField(max_length=255)
    graduation_year = models.PositiveSmallIntegerField()
    relevant_coursework = models.JSONField(default=list, blank=True)
    display_order = models.IntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.degree}, {self.institution}"

    class Meta:
        ordering = ['display_order', '-graduation_year', 'id']
        verbose_name = 'Education'
        verbose_name_plural = 'Education'
