"""
Assistant app services

Completion client for the writing assistant and job agent, built on the
OpenAI Responses API.

One call in, one result out: system-role turns are dropped, the assembled
prompt is sent as `instructions`, and the first text result comes back with
its usage counters. Provider failures are mapped onto the CompletionError
hierarchy so views can answer with a stable error code. There are no retries.
"""
from __future__ import annotations

import logging
import os
import re
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

import openai
from django.conf import settings
from openai import OpenAI

logger = logging.getLogger(__name__)


MAX_TOKENS_CEILING = 4096
DEFAULT_MAX_TOKENS = 1000
DEFAULT_TEMPERATURE = 0.7


class CompletionError(Exception):
    """
    Generic completion failure.
    """

    code = "AI_ERROR"
    user_message = "Failed to get AI response"


class CompletionRateLimitError(CompletionError):
    """
    The provider rejected the call with HTTP 429.
    """

    code = "RATE_LIMIT"
    user_message = "Rate limit exceeded. Please try again in a moment."

    def __init__(self, message: str = "", retry_after: Optional[float] = None):
        super().__init__(message or self.user_message)
        self.retry_after = retry_after


class CompletionConfigurationError(CompletionError):
    """
    Missing or rejected API credentials.
    """

    code = "API_AUTH_ERROR"
    user_message = "API configuration error. Please contact administrator."


class CompletionTimeoutError(CompletionError):
    """
    The provider did not answer within OPENAI_TIMEOUT_SECONDS.
    """

    code = "TIMEOUT"
    user_message = "The AI request timed out. Please try again."


@dataclass
class CompletionResult:
    """
    First text result of a completion call.
    """

    role: str = "assistant"
    content: str = ""
    usage: Dict[str, int] = field(default_factory=dict)
    chunks: List[str] = field(default_factory=list)

    @property
    def words_generated(self) -> int:
        return len(re.findall(r"\w+", self.content))

    @property
    def total_tokens(self) -> int:
        return int(self.usage.get("input_tokens", 0)) + int(self.usage.get("output_tokens", 0))

    def to_response_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {"message": {"role": self.role, "content": self.content}}
        if self.usage:
            payload["usage"] = self.usage
        return payload


class CompletionClient:
    """
    Thin wrapper around one OpenAI SDK handle.

    The handle is created lazily so a missing key only fails the calls that
    need it, with CompletionConfigurationError.
    """

    def __init__(self, client: Any = None, model: Optional[str] = None, timeout: Optional[float] = None):
        self.model = model or os.environ.get("OPENAI_MODEL") or getattr(
            settings,
            "OPENAI_MODEL",
            "gpt-4o-mini",
        )
        self.timeout = timeout or float(
            os.environ.get("OPENAI_TIMEOUT_SECONDS")
            or getattr(settings, "OPENAI_TIMEOUT_SECONDS", 90)
        )
        self._client = client

    @property
    def client(self):
        if self._client is None:
            api_key = os.environ.get("OPENAI_API_KEY") or getattr(settings, "OPENAI_API_KEY", "")
            if not api_key:
                raise CompletionConfigurationError("OPENAI_API_KEY is not configured.")
            self._client = OpenAI(api_key=api_key, timeout=self.timeout, max_retries=0)
        return self._client

    # --------------------------------------------------------------------- #
    # Public helpers                                                        #
    # --------------------------------------------------------------------- #

    @staticmethod
    def clamp_max_tokens(max_tokens: Any) -> int:
        try:
            value = int(max_tokens)
        except (TypeError, ValueError):
            value = DEFAULT_MAX_TOKENS
        if value <= 0:
            value = DEFAULT_MAX_TOKENS
        return min(value, MAX_TOKENS_CEILING)

    @staticmethod
    def build_input(messages: Iterable[Dict[str, Any]]) -> List[Dict[str, str]]:
        """Conversation turns for the provider, without system-role entries."""
        return [
            {"role": message["role"], "content": str(message.get("content") or "")}
            for message in messages
            if message.get("role") in ("user", "assistant")
        ]

    def complete(
        self,
        system_prompt: str,
        messages: Iterable[Dict[str, Any]],
        *,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        stream: bool = False,
        model: Optional[str] = None,
    ) -> CompletionResult:
        """
        Submit one completion request.

        Args:
            system_prompt: Assembled prompt, sent as instructions.
            messages: role/content turns; system turns are ignored.
            max_tokens: Output cap, clamped to MAX_TOKENS_CEILING.
            temperature: Sampling temperature.
            stream: Consume the provider event stream and keep the text chunks.
            model: Per-call model override.

        Raises:
            CompletionError: Or one of its subclasses, on any failure.
        """
        request_params: Dict[str, Any] = {
            "model": model or self.model,
            "instructions": system_prompt,
            "input": self.build_input(messages),
            "max_output_tokens": self.clamp_max_tokens(max_tokens),
            "temperature": temperature,
        }
        logger.info(
            "Completion request: model=%s prompt_chars=%s turns=%s stream=%s",
            request_params["model"],
            len(system_prompt),
            len(request_params["input"]),
            stream,
        )

        try:
            if stream:
                result = self._complete_streaming(request_params)
            else:
                response = self.client.responses.create(**request_params)
                result = CompletionResult(
                    content=self._extract_text(response),
                    usage=self._extract_usage(response),
                )
        except CompletionError:
            raise
        except Exception as exc:  # noqa: BLE001
            raise self._map_exception(exc) from exc

        logger.info("Completion usage: %s", result.usage)
        return result

    # --------------------------------------------------------------------- #
    # Internal helpers                                                      #
    # --------------------------------------------------------------------- #

    def _complete_streaming(self, request_params: Dict[str, Any]) -> CompletionResult:
        chunks: List[str] = []
        final_response = None
        for event in self.client.responses.create(stream=True, **request_params):
            event_type = getattr(event, "type", "")
            if event_type == "response.output_text.delta":
                delta = getattr(event, "delta", "")
                if delta:
                    chunks.append(delta)
            elif event_type == "response.completed":
                final_response = getattr(event, "response", None)
            elif event_type in ("error", "response.failed"):
                raise CompletionError(f"Streaming completion failed: {event_type}")
        return CompletionResult(
            content="".join(chunks),
            usage=self._extract_usage(final_response),
            chunks=chunks,
        )

    def _extract_text(self, response: Any) -> str:
        output_text_parts: List[str] = []
        for item in getattr(response, "output", []) or []:
            for block in getattr(item, "content", []) or []:
                if getattr(block, "type", None) == "output_text":
                    output_text_parts.append(getattr(block, "text", ""))
        text = "".join(output_text_parts)

        # SDK convenience property fallback
        if not text:
            text = getattr(response, "output_text", "") or ""
        return text

    def _extract_usage(self, response: Any) -> Dict[str, int]:
        usage = getattr(response, "usage", None)
        if not usage:
            return {}
        extracted = {
            "input_tokens": int(getattr(usage, "input_tokens", 0) or 0),
            "output_tokens": int(getattr(usage, "output_tokens", 0) or 0),
        }
        details = getattr(usage, "input_tokens_details", None)
        cached = getattr(details, "cached_tokens", None) if details else None
        if cached:
            extracted["cached_tokens"] = int(cached)
        return extracted

    def _map_exception(self, exc: Exception) -> CompletionError:
        if isinstance(exc, openai.RateLimitError):
            retry_after = None
            response = getattr(exc, "response", None)
            if response is not None:
                try:
                    retry_after = float(response.headers.get("retry-after"))
                except (TypeError, ValueError):
                    retry_after = None
            logger.error("OpenAI rate limit exceeded: %s", exc)
            return CompletionRateLimitError(f"OpenAI rate limit exceeded: {exc}", retry_after=retry_after)
        if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
            logger.error("OpenAI rejected the configured credentials: %s", exc)
            return CompletionConfigurationError(f"OpenAI authentication failed: {exc}")
        if isinstance(exc, openai.APITimeoutError):
            logger.error("OpenAI request timed out after %ss", self.timeout)
            return CompletionTimeoutError(f"OpenAI request timed out after {self.timeout}s")
        if isinstance(exc, openai.APIStatusError):
            logger.error("OpenAI API error (%s): %s", exc.status_code, exc)
            return CompletionError(f"OpenAI API error ({exc.status_code}): {exc}")
        logger.error("OpenAI request failed: %s", exc, exc_info=True)
        return CompletionError(f"OpenAI request failed: {exc}")


_client_lock = threading.Lock()
_default_client: Optional[CompletionClient] = None


def get_completion_client() -> CompletionClient:
    """
    Process-wide CompletionClient, created on first use.
    """
    global _default_client
    if _default_client is None:
        with _client_lock:
            if _default_client is None:
                _default_client = CompletionClient()
    return _default_client


def reset_completion_client() -> None:
    global _default_client
    with _client_lock:
        _default_client = None
