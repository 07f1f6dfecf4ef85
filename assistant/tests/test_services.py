import os
from types import SimpleNamespace
from unittest import mock

import httpx
import openai
from django.test import SimpleTestCase, override_settings

from assistant.services import (
    CompletionClient,
    CompletionConfigurationError,
    CompletionError,
    CompletionRateLimitError,
    CompletionTimeoutError,
    get_completion_client,
    reset_completion_client,
)

REQUEST = httpx.Request("POST", "https://api.openai.com/v1/responses")


def provider_response(text="Improved bullet", input_tokens=120, output_tokens=30, cached_tokens=None):
    details = SimpleNamespace(cached_tokens=cached_tokens) if cached_tokens is not None else None
    return SimpleNamespace(
        output=[SimpleNamespace(content=[SimpleNamespace(type="output_text", text=text)])],
        usage=SimpleNamespace(
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            input_tokens_details=details,
        ),
    )


def status_error(error_class, status_code, headers=None):
    response = httpx.Response(status_code, request=REQUEST, headers=headers or {})
    return error_class("provider error", response=response, body=None)


class CompletionClientTests(SimpleTestCase):
    """CompletionClient against a mocked OpenAI handle."""

    def setUp(self) -> None:
        self.sdk = mock.Mock()
        self.sdk.responses.create.return_value = provider_response()
        self.client = CompletionClient(client=self.sdk, model="test-model", timeout=5)

    def test_clamp_max_tokens(self) -> None:
        self.assertEqual(CompletionClient.clamp_max_tokens(10000), 4096)
        self.assertEqual(CompletionClient.clamp_max_tokens(4096), 4096)
        self.assertEqual(CompletionClient.clamp_max_tokens(500), 500)
        self.assertEqual(CompletionClient.clamp_max_tokens("abc"), 1000)

    def test_complete_sends_prompt_as_instructions(self) -> None:
        result = self.client.complete(
            "SYSTEM PROMPT",
            [
                {"role": "system", "content": "ignored"},
                {"role": "user", "content": "Rewrite this"},
                {"role": "assistant", "content": "Draft"},
                {"role": "user", "content": "Shorter"},
            ],
            max_tokens=9000,
            temperature=0,
        )

        kwargs = self.sdk.responses.create.call_args.kwargs
        self.assertEqual(kwargs["model"], "test-model")
        self.assertEqual(kwargs["instructions"], "SYSTEM PROMPT")
        self.assertEqual([m["role"] for m in kwargs["input"]], ["user", "assistant", "user"])
        self.assertEqual(kwargs["max_output_tokens"], 4096)
        self.assertEqual(kwargs["temperature"], 0)
        self.assertEqual(result.role, "assistant")
        self.assertEqual(result.content, "Improved bullet")
        self.assertEqual(result.usage, {"input_tokens": 120, "output_tokens": 30})
        self.assertEqual(result.total_tokens, 150)
        self.assertEqual(result.words_generated, 2)

    def test_model_override(self) -> None:
        self.client.complete("p", [{"role": "user", "content": "hi"}], model="other-model")
        self.assertEqual(self.sdk.responses.create.call_args.kwargs["model"], "other-model")

    def test_cached_tokens_reported(self) -> None:
        self.sdk.responses.create.return_value = provider_response(cached_tokens=64)
        result = self.client.complete("p", [{"role": "user", "content": "hi"}])
        self.assertEqual(result.usage["cached_tokens"], 64)

    def test_response_dict(self) -> None:
        result = self.client.complete("p", [{"role": "user", "content": "hi"}])
        self.assertEqual(
            result.to_response_dict(),
            {
                "message": {"role": "assistant", "content": "Improved bullet"},
                "usage": {"input_tokens": 120, "output_tokens": 30},
            },
        )

    def test_streaming_collects_chunks(self) -> None:
        self.sdk.responses.create.return_value = iter(
            [
                SimpleNamespace(type="response.created"),
                SimpleNamespace(type="response.output_text.delta", delta="Hello "),
                SimpleNamespace(type="response.output_text.delta", delta="world"),
                SimpleNamespace(type="response.completed", response=provider_response()),
            ]
        )
        result = self.client.complete("p", [{"role": "user", "content": "hi"}], stream=True)
        self.assertTrue(self.sdk.responses.create.call_args.kwargs["stream"])
        self.assertEqual(result.chunks, ["Hello ", "world"])
        self.assertEqual(result.content, "Hello world")
        self.assertEqual(result.usage["output_tokens"], 30)

    def test_rate_limit_is_mapped(self) -> None:
        self.sdk.responses.create.side_effect = status_error(
            openai.RateLimitError, 429, headers={"retry-after": "12"}
        )
        with self.assertRaises(CompletionRateLimitError) as ctx:
            self.client.complete("p", [{"role": "user", "content": "hi"}])
        self.assertEqual(ctx.exception.code, "RATE_LIMIT")
        self.assertEqual(ctx.exception.retry_after, 12.0)

    def test_auth_failure_is_mapped(self) -> None:
        self.sdk.responses.create.side_effect = status_error(openai.AuthenticationError, 401)
        with self.assertRaises(CompletionConfigurationError) as ctx:
            self.client.complete("p", [{"role": "user", "content": "hi"}])
        self.assertEqual(ctx.exception.code, "API_AUTH_ERROR")

    def test_timeout_is_mapped(self) -> None:
        self.sdk.responses.create.side_effect = openai.APITimeoutError(request=REQUEST)
        with self.assertRaises(CompletionTimeoutError) as ctx:
            self.client.complete("p", [{"role": "user", "content": "hi"}])
        self.assertEqual(ctx.exception.code, "TIMEOUT")

    def test_other_failures_are_generic(self) -> None:
        for error in (status_error(openai.InternalServerError, 500), RuntimeError("boom")):
            self.sdk.responses.create.side_effect = error
            with self.assertRaises(CompletionError) as ctx:
                self.client.complete("p", [{"role": "user", "content": "hi"}])
            self.assertEqual(ctx.exception.code, "AI_ERROR")
            self.assertEqual(type(ctx.exception), CompletionError)

    @override_settings(OPENAI_API_KEY="")
    def test_missing_api_key(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            client = CompletionClient(model="test-model", timeout=5)
            with self.assertRaises(CompletionConfigurationError):
                client.complete("p", [{"role": "user", "content": "hi"}])

    def test_default_client_is_memoized(self) -> None:
        reset_completion_client()
        self.addCleanup(reset_completion_client)
        self.assertIs(get_completion_client(), get_completion_client())
