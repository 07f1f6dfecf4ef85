import datetime

from django.test import SimpleTestCase

from assistant import constants, schema


class SchemaNormalizerTests(SimpleTestCase):
    """Legacy document shapes are migrated into the current records."""

    def test_snake_keys_is_recursive(self) -> None:
        self.assertEqual(
            schema.snake_keys({"personalInfo": {"writingSamples": [{"linkText": "a"}]}}),
            {"personal_info": {"writing_samples": [{"link_text": "a"}]}},
        )

    def test_parse_date_formats(self) -> None:
        self.assertEqual(schema.parse_date("2021"), datetime.date(2021, 1, 1))
        self.assertEqual(schema.parse_date("2021-06"), datetime.date(2021, 6, 1))
        self.assertEqual(schema.parse_date("2021-06-15T00:00:00Z"), datetime.date(2021, 6, 15))
        self.assertEqual(schema.parse_date({"$date": "2019-03-02"}), datetime.date(2019, 3, 2))
        self.assertIsNone(schema.parse_date(None))
        with self.assertRaises(ValueError):
            schema.parse_date("last spring")

    def test_profile_links_move_under_personal_info(self) -> None:
        record = schema.normalize_profile(
            {
                "_id": {"$oid": "abc123"},
                "personalInfo": {"name": "Jane", "linkedin": "https://linkedin.com/in/jane"},
                "positioning": "Writer who codes",
            }
        )
        self.assertEqual(record["id"], "abc123")
        self.assertEqual(record["personal_info"]["links"], {"linkedin": "https://linkedin.com/in/jane"})
        self.assertNotIn("linkedin", record["personal_info"])
        self.assertEqual(record["positioning"], {"current": "Writer who codes", "by_role": {}})

    def test_bullet_points_only_fill_empty_responsibilities(self) -> None:
        legacy = schema.normalize_experience(
            {"company": "Acme", "startDate": "2020-01", "bulletPoints": ["Wrote docs"]}
        )
        current = schema.normalize_experience(
            {
                "company": "Acme",
                "startDate": "2020-01",
                "responsibilities": ["Led team"],
                "bulletPoints": ["Wrote docs"],
            }
        )
        self.assertEqual(legacy["responsibilities"], ["Wrote docs"])
        self.assertEqual(current["responsibilities"], ["Led team"])
        self.assertNotIn("bullet_points", current)

    def test_string_achievements_become_objects(self) -> None:
        record = schema.normalize_experience(
            {"startDate": "2020", "achievements": ["Cut costs 20%", {"description": "Shipped v2", "metrics": "2x"}]}
        )
        self.assertEqual(
            record["achievements"],
            [{"description": "Cut costs 20%"}, {"description": "Shipped v2", "metrics": "2x"}],
        )

    def test_nested_skill_category_is_flattened(self) -> None:
        records = schema.normalize(
            constants.SKILLS,
            {
                "category": "Languages",
                "roleRelevance": ["software_engineer"],
                "skills": [{"name": "Python", "proficiency": "Expert", "yearsUsed": 8}, "Go"],
            },
        )
        self.assertEqual([r["name"] for r in records], ["Python", "Go"])
        self.assertEqual(records[0]["level"], "expert")
        self.assertEqual(records[0]["years_of_experience"], 8.0)
        self.assertEqual(records[1]["level"], "intermediate")
        self.assertTrue(all(r["category"] == "Languages" for r in records))
        self.assertTrue(all(r["role_relevance"] == ["software_engineer"] for r in records))

    def test_flat_skill_rating_is_clamped(self) -> None:
        (record,) = schema.normalize(constants.SKILLS, {"name": "SQL", "rating": 9})
        self.assertEqual(record["rating"], 5)

    def test_keyword_terms_accept_plain_strings(self) -> None:
        record = schema.normalize_keyword_category({"category": "Docs", "terms": ["DITA", {"primary": "API"}]})
        self.assertEqual(record["terms"], [{"primary": "DITA"}, {"primary": "API"}])

    def test_project_defaults(self) -> None:
        record = schema.normalize_project({"name": "Site", "links": ["https://example.com"]})
        self.assertEqual(record["type"], "hybrid")
        self.assertEqual(record["links"], [{"url": "https://example.com", "link_text": "", "type": ""}])

    def test_unknown_collection_raises(self) -> None:
        with self.assertRaises(KeyError):
            schema.normalize("portfolios", {})
