"""
Accounts app models

Custom User model with counters for the AI features.
"""
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Owner of the career data.

    tokens_used and words_used accumulate over every writing assistant and
    job agent response returned to this user.
    """

    tokens_used = models.PositiveIntegerField(default=0)
    words_used = models.PositiveIntegerField(default=0)

    def __str__(self):
        return self.username

    def record_usage(self, *, tokens: int = 0, words: int = 0) -> None:
        """
        Add one completion's token and word counts in a single UPDATE, then
        reload the counters on this instance.
        """
        increments = {}
        if tokens > 0:
            increments["tokens_used"] = models.F("tokens_used") + tokens
        if words > 0:
            increments["words_used"] = models.F("words_used") + words
        if not increments:
            return
        type(self).objects.filter(pk=self.pk).update(**increments)
        self.refresh_from_db(fields=list(increments))

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'
