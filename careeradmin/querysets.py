"""
Shared queryset helpers for the career record apps.

Role tags are stored as JSON lists, and not every database backend can query
inside them, so membership is resolved in Python and folded back into a
primary key filter. Ordering, slicing and further filters keep working.
"""
from django.db import models


class RoleTaggedQuerySet(models.QuerySet):
    """QuerySet for models carrying a JSON list of role type tags."""

    role_field = "role_types"

    def with_role_type(self, role_type):
        if not role_type:
            return self
        matching = [
            pk
            for pk, roles in self.values_list("pk", self.role_field)
            if role_type in (roles or [])
        ]
        return self.filter(pk__in=matching)

    def featured(self, flag=True):
        return self.filter(featured=flag)


class RelevanceTaggedQuerySet(RoleTaggedQuerySet):
    role_field = "role_relevance"


def parse_bool(value):
    """Read a query-string flag; anything unrecognised means "no filter"."""
    if value is None:
        return None
    lowered = str(value).strip().lower()
    if lowered in ("1", "true", "yes"):
        return True
    if lowered in ("0", "false", "no"):
        return False
    return None


def parse_limit(value):
    try:
        limit = int(value)
    except (TypeError, ValueError):
        return None
    return limit if limit > 0 else None
