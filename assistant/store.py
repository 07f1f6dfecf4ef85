"""
Assistant app record store

Read-only access to career records for the context assembler and the job
agent. Records come back as plain dicts in the shape the CRUD API returns.

Two implementations:
- ORMRecordStore reads through the Django models and DRF serializers.
- InMemoryRecordStore holds normalized documents, e.g. a JSON export read
  through `assistant.schema` before it is imported.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from education.models import Education
from education.serializers import EducationSerializer
from experience.models import Experience
from experience.serializers import ExperienceSerializer
from profiles.models import CareerProfile
from profiles.serializers import CareerProfileSerializer
from projects.models import Project
from projects.serializers import ProjectSerializer
from skills.models import KeywordCategory, Skill
from skills.serializers import KeywordCategorySerializer, SkillSerializer

from . import constants, schema

logger = logging.getLogger(__name__)


class RecordStore:
    """
    Interface consumed by the assistant pipeline.

    Implementations may raise on backend failures; callers decide how to
    degrade.
    """

    def get_profile(self) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    def get_item(self, collection: str, item_id) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    def list_experiences(self, role_type=None, featured=None, limit=None) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def list_skills(self, role_type=None, featured=None) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def list_keywords(self, role_type=None) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def list_projects(self, role_type=None, featured=None, limit=None) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def list_education(self) -> List[Dict[str, Any]]:
        raise NotImplementedError


class ORMRecordStore(RecordStore):
    """RecordStore backed by the Django ORM."""

    REGISTRY = {
        constants.EXPERIENCES: (Experience, ExperienceSerializer),
        constants.SKILLS: (Skill, SkillSerializer),
        constants.KEYWORDS: (KeywordCategory, KeywordCategorySerializer),
        constants.PROJECTS: (Project, ProjectSerializer),
        constants.EDUCATION: (Education, EducationSerializer),
    }

    def _render(self, collection: str, queryset) -> List[Dict[str, Any]]:
        _model, serializer_class = self.REGISTRY[collection]
        return [dict(item) for item in serializer_class(queryset, many=True).data]

    def get_profile(self) -> Optional[Dict[str, Any]]:
        profile = CareerProfile.load()
        if profile is None:
            return None
        return dict(CareerProfileSerializer(profile).data)

    def get_item(self, collection: str, item_id) -> Optional[Dict[str, Any]]:
        if collection not in self.REGISTRY:
            return None
        model, serializer_class = self.REGISTRY[collection]
        try:
            instance = model.objects.filter(pk=int(item_id)).first()
        except (TypeError, ValueError):
            return None
        if instance is None:
            return None
        return dict(serializer_class(instance).data)

    def list_experiences(self, role_type=None, featured=None, limit=None):
        queryset = Experience.objects.with_role_type(role_type)
        if featured is not None:
            queryset = queryset.featured(featured)
        if limit:
            queryset = queryset[:limit]
        return self._render(constants.EXPERIENCES, queryset)

    def list_skills(self, role_type=None, featured=None):
        queryset = Skill.objects.with_role_type(role_type)
        if featured is not None:
            queryset = queryset.featured(featured)
        return self._render(constants.SKILLS, queryset)

    def list_keywords(self, role_type=None):
        queryset = KeywordCategory.objects.all()
        if role_type:
            queryset = queryset.filter(role_type=role_type)
        return self._render(constants.KEYWORDS, queryset)

    def list_projects(self, role_type=None, featured=None, limit=None):
        queryset = Project.objects.with_role_type(role_type)
        if featured is not None:
            queryset = queryset.featured(featured)
        if limit:
            queryset = queryset[:limit]
        return self._render(constants.PROJECTS, queryset)

    def list_education(self):
        return self._render(constants.EDUCATION, Education.objects.all())


class InMemoryRecordStore(RecordStore):
    """
    RecordStore over in-memory documents, kept in source order.

    Raw documents are normalized on construction, so legacy exports can be
    read directly.
    """

    ROLE_FIELDS = {
        constants.EXPERIENCES: "role_types",
        constants.PROJECTS: "role_types",
        constants.SKILLS: "role_relevance",
    }

    def __init__(self, documents: Optional[Dict[str, Any]] = None):
        documents = documents or {}
        profile = documents.get(constants.PROFILE)
        if isinstance(profile, list):
            profile = profile[0] if profile else None
        self.profile = schema.normalize_profile(profile) if profile else None
        self.records: Dict[str, List[Dict[str, Any]]] = {
            collection: schema.normalize_many(collection, documents.get(collection) or [])
            for collection in constants.ITEM_COLLECTIONS
        }
        for collection, records in self.records.items():
            for position, record in enumerate(records, start=1):
                if record.get("id") is None:
                    record["id"] = str(position)

    def _filter(self, collection: str, role_type=None, featured=None, limit=None):
        records: Iterable[Dict[str, Any]] = self.records[collection]
        role_field = self.ROLE_FIELDS.get(collection)
        if role_type and role_field:
            records = [r for r in records if role_type in (r.get(role_field) or [])]
        if featured is not None:
            records = [r for r in records if bool(r.get("featured")) == featured]
        records = [dict(r) for r in records]
        return records[:limit] if limit else records

    def get_profile(self):
        return dict(self.profile) if self.profile is not None else None

    def get_item(self, collection, item_id):
        for record in self.records.get(collection, []):
            if str(record.get("id")) == str(item_id):
                return dict(record)
        return None

    def list_experiences(self, role_type=None, featured=None, limit=None):
        return self._filter(constants.EXPERIENCES, role_type, featured, limit)

    def list_skills(self, role_type=None, featured=None):
        return self._filter(constants.SKILLS, role_type, featured)

    def list_keywords(self, role_type=None):
        records = self.records[constants.KEYWORDS]
        if role_type:
            records = [r for r in records if r.get("role_type") == role_type]
        return [dict(r) for r in records]

    def list_projects(self, role_type=None, featured=None, limit=None):
        return self._filter(constants.PROJECTS, role_type, featured, limit)

    def list_education(self):
        return self._filter(constants.EDUCATION)
