from django.test import SimpleTestCase

from assistant.context import build_context, compress_context, estimate_token_count
from assistant.store import InMemoryRecordStore

from .fixtures import career_documents


class FailingProfileStore(InMemoryRecordStore):
    def get_profile(self):
        raise ConnectionError("database unavailable")


class FailingSkillsStore(InMemoryRecordStore):
    def list_skills(self, role_type=None, featured=None):
        raise ConnectionError("skills collection unavailable")


class BuildContextTests(SimpleTestCase):
    """Context assembly over an in-memory store."""

    def setUp(self) -> None:
        self.store = InMemoryRecordStore(career_documents())

    def test_positioning_for_requested_role(self) -> None:
        context = build_context(self.store, "experiences", item_id="1", role_type="software_engineer")
        self.assertEqual(context["profile_summary"]["name"], "Jane Doe")
        self.assertEqual(context["profile_summary"]["positioning"], "Senior backend engineer")

    def test_positioning_falls_back_to_current(self) -> None:
        context = build_context(self.store, "experiences", item_id="3", role_type="technical_writer")
        self.assertEqual(context["profile_summary"]["positioning"], "General positioning")

    def test_profile_summary_keeps_three_value_props(self) -> None:
        context = build_context(self.store, "education")
        self.assertEqual(
            context["profile_summary"]["value_props"],
            ["Ships reliable APIs", "Mentors juniors", "Writes clear docs"],
        )
        self.assertEqual(context["profile_summary"]["mission"], "Make complex systems understandable")

    def test_skills_without_item_get_featured_experiences(self) -> None:
        context = build_context(self.store, "skills", role_type="software_engineer")
        self.assertIsNone(context["current_item"])
        self.assertEqual(list(context["related_context"]), ["related_experiences"])
        related = context["related_context"]["related_experiences"]
        self.assertEqual([e["company"] for e in related], ["Company 1", "Company 2", "Company 5"])
        self.assertTrue(all("software_engineer" in e["role_types"] for e in related))

    def test_experience_context_excludes_current_item(self) -> None:
        context = build_context(self.store, "experiences", item_id="1", role_type="software_engineer")
        related = context["related_context"]
        self.assertEqual(context["current_item"]["company"], "Company 1")
        self.assertEqual([s["name"] for s in related["skills"]], ["Python", "Go"])
        self.assertEqual([k["category"] for k in related["keywords"]], ["Backend"])
        siblings = related["recent_experiences"]
        self.assertLessEqual(len(siblings), 2)
        self.assertNotIn("1", [s["id"] for s in siblings])
        self.assertNotIn("recent_experiences", build_context(self.store, "projects")["related_context"])

    def test_project_context_has_related_projects(self) -> None:
        context = build_context(self.store, "projects", item_id="1", role_type="software_engineer")
        related = context["related_context"]
        self.assertEqual([p["name"] for p in related["related_projects"]], ["Queue worker"])

    def test_editing_context_echoes_request(self) -> None:
        context = build_context(
            self.store, "experiences", item_id="2", role_type="software_engineer", field="responsibilities"
        )
        self.assertEqual(
            context["editing_context"],
            {"collection": "experiences", "role_type": "software_engineer", "field": "responsibilities"},
        )

    def test_unknown_role_type_passes_through(self) -> None:
        context = build_context(self.store, "skills", role_type="data_scientist")
        self.assertEqual(context["editing_context"]["role_type"], "data_scientist")
        self.assertEqual(context["related_context"]["related_experiences"], [])

    def test_profile_collection_uses_profile_as_current_item(self) -> None:
        context = build_context(self.store, "profile")
        self.assertEqual(context["current_item"]["personal_info"]["name"], "Jane Doe")
        self.assertEqual(context["related_context"], {})

    def test_missing_item_is_none(self) -> None:
        context = build_context(self.store, "experiences", item_id="999", role_type="software_engineer")
        self.assertIsNone(context["current_item"])

    def test_profile_failure_returns_stub(self) -> None:
        context = build_context(FailingProfileStore(career_documents()), "experiences", item_id="1")
        self.assertEqual(
            context["profile_summary"],
            {"name": "User", "positioning": "", "value_props": [], "mission": ""},
        )
        self.assertIsNone(context["current_item"])
        self.assertEqual(context["related_context"], {})

    def test_failed_related_fetch_becomes_empty_list(self) -> None:
        with self.assertLogs("assistant.context", level="WARNING"):
            context = build_context(
                FailingSkillsStore(career_documents()), "experiences", item_id="1", role_type="software_engineer"
            )
        self.assertEqual(context["related_context"]["skills"], [])
        self.assertEqual(len(context["related_context"]["keywords"]), 1)

    def test_missing_profile_gives_default_summary(self) -> None:
        documents = career_documents()
        del documents["profile"]
        context = build_context(InMemoryRecordStore(documents), "skills")
        self.assertEqual(context["profile_summary"]["name"], "User")

    def test_build_is_repeatable(self) -> None:
        first = build_context(self.store, "experiences", item_id="2", role_type="software_engineer")
        second = build_context(self.store, "experiences", item_id="2", role_type="software_engineer")
        self.assertEqual(first, second)


class CompressContextTests(SimpleTestCase):
    def setUp(self) -> None:
        self.context = build_context(
            InMemoryRecordStore(career_documents()), "experiences", item_id="1", role_type="software_engineer"
        )

    def test_compress_trims_a_copy(self) -> None:
        compressed = compress_context(self.context)
        self.assertEqual(len(compressed["current_item"]["technologies"]), 10)
        self.assertEqual(len(compressed["current_item"]["responsibilities"]), 5)
        self.assertEqual(
            set(compressed["related_context"]["recent_experiences"][0]),
            {"company", "title", "technologies"},
        )
        self.assertEqual(len(self.context["current_item"]["technologies"]), 12)

    def test_estimate_token_count(self) -> None:
        self.assertEqual(estimate_token_count({}), 1)
        self.assertLess(
            estimate_token_count(compress_context(self.context)),
            estimate_token_count(self.context),
        )
