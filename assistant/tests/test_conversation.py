from unittest import mock

from django.test import SimpleTestCase

from assistant.context import build_context
from assistant.conversation import AssistantConversation
from assistant.services import CompletionRateLimitError, CompletionResult
from assistant.store import InMemoryRecordStore

from .fixtures import career_documents


class AssistantConversationTests(SimpleTestCase):
    def setUp(self) -> None:
        context = build_context(
            InMemoryRecordStore(career_documents()), "experiences", item_id="1", role_type="software_engineer"
        )
        self.client = mock.Mock()
        self.client.complete.return_value = CompletionResult(content="Led migration to Go, cutting p99 by 40%")
        self.conversation = AssistantConversation(context, client=self.client)

    def test_send_records_both_turns(self) -> None:
        result = self.conversation.send("Improve my first bullet")

        self.assertEqual(result.content, "Led migration to Go, cutting p99 by 40%")
        self.assertEqual(
            self.conversation.history,
            [
                {"role": "user", "content": "Improve my first bullet"},
                {"role": "assistant", "content": "Led migration to Go, cutting p99 by 40%"},
            ],
        )
        system_prompt, turns = self.client.complete.call_args.args
        self.assertIn("CURRENT ITEM BEING EDITED", system_prompt)
        self.assertEqual(turns, [{"role": "user", "content": "Improve my first bullet"}])
        self.assertEqual(self.client.complete.call_args.kwargs, {"max_tokens": 1000, "temperature": 0.7})

    def test_rate_limit_leaves_history_unchanged(self) -> None:
        self.conversation.send("First")
        before = list(self.conversation.history)
        self.client.complete.side_effect = CompletionRateLimitError()

        with self.assertRaises(CompletionRateLimitError):
            self.conversation.send("Second")

        self.assertEqual(self.conversation.history, before)
        self.assertEqual(self.conversation.pending_message, "Second")
        self.assertEqual(self.conversation.last_error.code, "RATE_LIMIT")

    def test_retry_resends_pending_message(self) -> None:
        self.client.complete.side_effect = [CompletionRateLimitError(), CompletionResult(content="Done")]
        with self.assertRaises(CompletionRateLimitError):
            self.conversation.send("Tighten this")

        result = self.conversation.retry()

        self.assertEqual(result.content, "Done")
        self.assertIsNone(self.conversation.pending_message)
        self.assertEqual([turn["content"] for turn in self.conversation.history], ["Tighten this", "Done"])

    def test_retry_without_failure(self) -> None:
        with self.assertRaises(ValueError):
            self.conversation.retry()

    def test_reset(self) -> None:
        self.conversation.send("Hello")
        self.conversation.reset()
        self.assertEqual(self.conversation.history, [])
        self.assertIsNone(self.conversation.pending_message)
