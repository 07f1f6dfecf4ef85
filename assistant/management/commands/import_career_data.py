"""
Load a JSON export of the old document store into the record apps.

    python manage.py import_career_data export.json [--replace] [--dry-run]

The export is an object keyed by collection name. Every document is passed
through the schema normalizers and then validated by the resource's DRF
serializer, so legacy shapes land in the current schema.
"""
import json
import logging

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from education.serializers import EducationSerializer
from experience.serializers import ExperienceSerializer
from profiles.models import CareerProfile
from profiles.serializers import CareerProfileSerializer
from projects.serializers import ProjectSerializer
from skills.serializers import KeywordCategorySerializer, SkillSerializer

from assistant import constants
from assistant import schema
from assistant.store import InMemoryRecordStore

logger = logging.getLogger(__name__)

COLLECTION_ALIASES = {
    "profile": constants.PROFILE,
    "profiles": constants.PROFILE,
    "careerprofiles": constants.PROFILE,
    "experiences": constants.EXPERIENCES,
    "skills": constants.SKILLS,
    "keywords": constants.KEYWORDS,
    "keywordcategories": constants.KEYWORDS,
    "projects": constants.PROJECTS,
    "education": constants.EDUCATION,
    "educations": constants.EDUCATION,
}

SERIALIZERS = {
    constants.EXPERIENCES: ExperienceSerializer,
    constants.SKILLS: SkillSerializer,
    constants.KEYWORDS: KeywordCategorySerializer,
    constants.PROJECTS: ProjectSerializer,
    constants.EDUCATION: EducationSerializer,
}


class Command(BaseCommand):
    help = "Import a career data JSON export, migrating legacy document shapes."

    def add_arguments(self, parser):
        parser.add_argument("path", help="Path to the JSON export")
        parser.add_argument(
            "--replace",
            action="store_true",
            help="Delete existing records of each imported collection first",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Validate the export without writing anything",
        )

    def handle(self, *args, **options):
        try:
            with open(options["path"], encoding="utf-8") as handle:
                export = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            raise CommandError(f"Could not read {options['path']}: {exc}") from exc

        if not isinstance(export, dict):
            raise CommandError("The export must be a JSON object keyed by collection name.")

        documents = {}
        for key, value in export.items():
            collection = COLLECTION_ALIASES.get(key.lower())
            if collection is None:
                self.stderr.write(f"Skipping unknown collection '{key}'")
                continue
            documents.setdefault(collection, [])
            documents[collection].extend(value if isinstance(value, list) else [value])

        with transaction.atomic():
            counts = {}
            for collection, raw_documents in documents.items():
                counts[collection] = self._import_collection(collection, raw_documents, options["replace"])

            if options["dry_run"]:
                transaction.set_rollback(True)

        for collection, count in counts.items():
            self.stdout.write(f"{collection}: {count}")
        if options["dry_run"]:
            self._preview(InMemoryRecordStore(documents))
        verb = "Validated" if options["dry_run"] else "Imported"
        self.stdout.write(self.style.SUCCESS(f"{verb} {sum(counts.values())} records."))

    def _preview(self, store):
        """Show what each target role would draw on once the export is imported."""
        personal_info = (store.get_profile() or {}).get("personal_info") or {}
        self.stdout.write(f"Preview for {personal_info.get('name') or 'an empty profile'}:")
        for role_type in constants.ROLE_TYPES:
            self.stdout.write(
                f"  {role_type}: "
                f"{len(store.list_experiences(role_type=role_type))} experiences, "
                f"{len(store.list_skills(role_type=role_type))} skills, "
                f"{len(store.list_projects(role_type=role_type))} projects"
            )

    def _import_collection(self, collection, raw_documents, replace):
        records = schema.normalize_many(collection, raw_documents)

        if collection == constants.PROFILE:
            if not records:
                return 0
            if replace:
                CareerProfile.objects.all().delete()
            self._save(CareerProfileSerializer, collection, records[0], instance=CareerProfile.load())
            return 1

        serializer_class = SERIALIZERS[collection]
        if replace:
            serializer_class.Meta.model.objects.all().delete()
        for record in records:
            self._save(serializer_class, collection, record)
        return len(records)

    def _save(self, serializer_class, collection, record, instance=None):
        record = {key: value for key, value in record.items() if key != "id"}
        serializer = serializer_class(instance, data=record)
        if not serializer.is_valid():
            label = record.get("name") or record.get("company") or record.get("institution") or ""
            raise CommandError(f"Invalid {collection} record {label!r}: {serializer.errors}")
        serializer.save()
        logger.info("Imported %s record %s", collection, serializer.instance.pk)
