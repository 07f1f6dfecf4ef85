import datetime
from io import StringIO
from unittest import mock

from django.core.management import call_command
from django.test import TestCase

from assistant.services import CompletionError, CompletionRateLimitError, CompletionResult
from experience.models import Experience


class AssistantChatCommandTests(TestCase):
    def setUp(self) -> None:
        patcher = mock.patch("assistant.conversation.get_completion_client")
        self.client = patcher.start().return_value
        self.addCleanup(patcher.stop)

    def chat(self, lines, *args):
        out, err = StringIO(), StringIO()
        with mock.patch("builtins.input", side_effect=lines) as prompt:
            call_command("assistant_chat", *args, stdout=out, stderr=err)
        return out.getvalue(), err.getvalue(), prompt

    def sent_messages(self, call_index):
        return [message["content"] for message in self.client.complete.call_args_list[call_index].args[1]]

    def test_retry_reset_and_quit(self) -> None:
        self.client.complete.side_effect = [
            CompletionRateLimitError(),
            CompletionResult(content="Draft one"),
            CompletionResult(content="Draft two"),
            CompletionResult(content="Draft three"),
        ]

        out, err, prompt = self.chat(
            ["Improve my summary", "/retry", "Shorter please", "/reset", "/retry", "Again", "/quit", "unread"],
            "profile",
        )

        self.assertIn("Rate limit reached", err)
        self.assertIn("Draft one", out)
        self.assertIn("Draft two", out)
        self.assertIn("History cleared.", out)
        self.assertIn("Nothing to retry.", out)
        self.assertIn("Draft three", out)
        self.assertEqual(prompt.call_count, 7)

        self.assertEqual(self.client.complete.call_count, 4)
        self.assertEqual(self.sent_messages(1), ["Improve my summary"])
        self.assertEqual(self.sent_messages(2), ["Improve my summary", "Draft one", "Shorter please"])
        self.assertEqual(self.sent_messages(3), ["Again"])

    def test_other_errors_offer_retry(self) -> None:
        self.client.complete.side_effect = CompletionError()
        out, err, _prompt = self.chat(["Hello", "/quit"], "profile")
        self.assertIn("Failed to get AI response (AI_ERROR). Type /retry to resend.", err)

    def test_end_of_input_exits(self) -> None:
        out, _err, _prompt = self.chat(EOFError(), "profile")
        self.assertIn("Editing profile as technical_writer.", out)
        self.client.complete.assert_not_called()

    def test_prompt_describes_item_under_edit(self) -> None:
        item = Experience.objects.create(
            company="Acme", title="Staff Engineer", location="Remote", start_date=datetime.date(2020, 1, 1),
            role_types=["software_engineer"],
        )
        self.client.complete.return_value = CompletionResult(content="ok")

        self.chat(
            ["Punch up my bullets", "/quit"],
            "experiences", "--item-id", str(item.pk), "--role-type", "software_engineer",
        )

        system_prompt = self.client.complete.call_args.args[0]
        self.assertIn("- Company: Acme", system_prompt)
        self.assertIn("TARGET ROLE: Software Engineer", system_prompt)
