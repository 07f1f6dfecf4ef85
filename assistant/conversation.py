"""
Assistant app conversation

Transient chat state for one editing session with the writing assistant.
Nothing here is persisted; the history lives as long as the object does.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .prompts import build_assistant_prompt
from .services import CompletionClient, CompletionError, CompletionResult, get_completion_client

logger = logging.getLogger(__name__)


class AssistantConversation:
    """
    Chat history bound to one AI context.

    A turn is only recorded once the assistant has answered. When a call
    fails, the history is left as it was and the unsent text is kept in
    `pending_message` so it can be retried.
    """

    def __init__(
        self,
        context: Dict[str, Any],
        client: Optional[CompletionClient] = None,
        *,
        max_tokens: int = 1000,
        temperature: float = 0.7,
    ):
        self.context = context
        self.client = client or get_completion_client()
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.history: List[Dict[str, str]] = []
        self.pending_message: Optional[str] = None
        self.last_error: Optional[CompletionError] = None

    @property
    def system_prompt(self) -> str:
        return build_assistant_prompt(self.context)

    def send(self, text: str) -> CompletionResult:
        """
        Send a user message and record the exchange on success.

        Raises:
            CompletionError: The provider call failed; history is unchanged.
        """
        turns = self.history + [{"role": "user", "content": text}]
        try:
            result = self.client.complete(
                self.system_prompt,
                turns,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except CompletionError as exc:
            logger.info("Assistant message not sent (%s); kept for retry", exc.code)
            self.pending_message = text
            self.last_error = exc
            raise

        self.history = turns + [{"role": result.role, "content": result.content}]
        self.pending_message = None
        self.last_error = None
        return result

    def retry(self) -> CompletionResult:
        """Resend the message that failed last."""
        if self.pending_message is None:
            raise ValueError("There is no failed message to retry.")
        return self.send(self.pending_message)

    def reset(self) -> None:
        self.history = []
        self.pending_message = None
        self.last_error = None
