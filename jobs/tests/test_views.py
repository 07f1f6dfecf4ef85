from unittest import mock

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from accounts.authentication import issue_token
from accounts.models import User
from assistant.services import CompletionRateLimitError, CompletionTimeoutError
from assistant.store import ORMRecordStore
from jobs.services import DraftResult, JobAgentService, JobScrapeError

JOB_INFO = {"description": "Own our API reference.", "job_type": "technical-writer"}


class JobAgentViewTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(username="jane", password="secret-pass")
        self.api = APIClient()
        self.api.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(self.user)}")

        patcher = mock.patch("jobs.views.JobAgentService")
        self.service = patcher.start().return_value
        self.addCleanup(patcher.stop)

    def test_generate_resume(self) -> None:
        self.service.generate_draft.return_value = DraftResult(
            "resume", "# Jane Doe", usage={"input_tokens": 800, "output_tokens": 200}, words_generated=2,
            total_tokens=1000,
        )

        response = self.api.post(reverse("job-agent-resume"), {"job_info": JOB_INFO}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["resume"], "# Jane Doe")
        args, kwargs = self.service.generate_draft.call_args
        self.assertEqual(args[0], "resume")
        self.assertEqual(args[1]["description"], "Own our API reference.")
        self.user.refresh_from_db()
        self.assertEqual(self.user.tokens_used, 1000)

    def test_revise_cover_letter(self) -> None:
        self.service.revise_draft.return_value = DraftResult("cover_letter", "Warmer letter")

        response = self.api.post(
            reverse("job-agent-cover-letter"),
            {"action": "revise", "job_info": JOB_INFO, "prior_draft": "Letter", "feedback": "Warmer"},
            format="json",
        )

        self.assertEqual(response.json()["cover_letter"], "Warmer letter")
        args = self.service.revise_draft.call_args.args
        self.assertEqual(args[0], "cover_letter")
        self.assertEqual(args[2:], ("Letter", "Warmer"))

    def test_revise_needs_draft_and_feedback(self) -> None:
        response = self.api.post(
            reverse("job-agent-resume"), {"action": "revise", "job_info": JOB_INFO}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.service.revise_draft.assert_not_called()

    def test_question_requires_question(self) -> None:
        response = self.api.post(reverse("job-agent-question"), {"job_info": JOB_INFO}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("question", response.json())

    def test_question_answer(self) -> None:
        self.service.generate_draft.return_value = DraftResult("question", "Because docs matter.")
        response = self.api.post(
            reverse("job-agent-question"), {"job_info": JOB_INFO, "question": "Why us?"}, format="json"
        )
        self.assertEqual(response.json(), {"answer": "Because docs matter.", "usage": {}})
        self.assertEqual(self.service.generate_draft.call_args.kwargs["question"], "Why us?")

    def test_missing_job_info(self) -> None:
        response = self.api.post(reverse("job-agent-resume"), {"job_info": {"description": ""}}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_completion_errors_are_mapped(self) -> None:
        for error, status_code in ((CompletionRateLimitError(), 429), (CompletionTimeoutError(), 504)):
            self.service.generate_draft.side_effect = error
            response = self.api.post(reverse("job-agent-resume"), {"job_info": JOB_INFO}, format="json")
            self.assertEqual(response.status_code, status_code)
            self.assertEqual(response.json()["code"], error.code)

    def test_requires_authentication(self) -> None:
        response = APIClient().post(reverse("job-agent-resume"), {"job_info": JOB_INFO}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_job_types(self) -> None:
        response = self.api.get(reverse("job-agent-job-types"))
        self.assertEqual(
            [job_type["value"] for job_type in response.json()],
            ["technical-writer", "technical-writing-manager", "software-engineer", "software-engineering-manager"],
        )

    def test_unexpected_failure_returns_json_error(self) -> None:
        self.service.generate_draft.side_effect = RuntimeError("boom")
        with self.assertLogs("jobs.views", level="ERROR"):
            response = self.api.post(reverse("job-agent-cover-letter"), {"job_info": JOB_INFO}, format="json")
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.json(), {"error": "Failed to generate cover letter", "code": "AI_ERROR"})
        self.user.refresh_from_db()
        self.assertEqual(self.user.tokens_used, 0)


class JobAgentStoreFailureTests(TestCase):
    def setUp(self) -> None:
        user = User.objects.create_user(username="jane", password="secret-pass")
        self.api = APIClient()
        self.api.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(user)}")

    @mock.patch("jobs.views.JobAgentService")
    def test_record_store_failure(self, service_class) -> None:
        store = ORMRecordStore()
        store.list_projects = mock.Mock(side_effect=ConnectionError("db down"))
        client = mock.Mock()
        service_class.side_effect = lambda: JobAgentService(store=store, client=client, workers=1)

        with self.assertLogs("jobs.views", level="ERROR") as logs:
            response = self.api.post(reverse("job-agent-resume"), {"job_info": JOB_INFO}, format="json")

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response["Content-Type"], "application/json")
        self.assertEqual(response.json()["code"], "AI_ERROR")
        self.assertIn("db down", logs.output[0])
        client.complete.assert_not_called()


class ScrapeViewTests(TestCase):
    def setUp(self) -> None:
        user = User.objects.create_user(username="jane", password="secret-pass")
        self.api = APIClient()
        self.api.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(user)}")

        patcher = mock.patch("jobs.views.JobDescriptionScraper")
        self.scraper = patcher.start().return_value
        self.addCleanup(patcher.stop)

    def test_scrape(self) -> None:
        self.scraper.fetch.return_value = "Write API docs."
        response = self.api.post(reverse("job-agent-scrape"), {"url": "https://jobs.example.com/1"}, format="json")
        self.assertEqual(response.json(), {"description": "Write API docs.", "url": "https://jobs.example.com/1"})

    def test_scrape_failure(self) -> None:
        self.scraper.fetch.side_effect = JobScrapeError("HTTP 500: Server Error")
        response = self.api.post(reverse("job-agent-scrape"), {"url": "https://jobs.example.com/1"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertEqual(response.json()["error"], "Failed to extract job description")

    def test_invalid_url(self) -> None:
        response = self.api.post(reverse("job-agent-scrape"), {"url": "not a url"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
