"""
Assistant app views

Endpoints for building an AI context and for sending a conversation to the
writing assistant.
"""
import json
import logging

from django.http import HttpResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .context import build_context, compress_context, estimate_token_count
from .prompts import build_assistant_prompt
from .serializers import AssistantRequestSerializer, ContextRequestSerializer
from .services import CompletionError, CompletionResult, get_completion_client
from .store import ORMRecordStore

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    "RATE_LIMIT": status.HTTP_429_TOO_MANY_REQUESTS,
    "TIMEOUT": status.HTTP_504_GATEWAY_TIMEOUT,
}


def completion_error_response(exc: CompletionError) -> Response:
    """
    Map a completion failure onto its HTTP status and stable error code.
    """
    return Response(
        {"error": exc.user_message, "code": exc.code},
        status=ERROR_STATUS.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def event_stream_response(result: CompletionResult) -> HttpResponse:
    """
    Render streamed chunks as server-sent events followed by message_stop.
    """
    events = [
        "data: " + json.dumps({"type": "content_block_delta", "delta": {"text": chunk}}) + "\n\n"
        for chunk in result.chunks
    ]
    events.append('data: {"type": "message_stop"}\n\n')
    response = HttpResponse("".join(events), content_type="text/event-stream")
    response["Cache-Control"] = "no-cache"
    return response


def record_usage(user, result: CompletionResult) -> None:
    if hasattr(user, "record_usage"):
        user.record_usage(tokens=result.total_tokens, words=result.words_generated)


class AssistantContextView(APIView):
    """
    Build the AI context for an editing target.

    POST /api/assistant/context/
    {"collection": "experiences", "item_id": "3", "role_type": "software_engineer", "field": "responsibilities"}
    """

    def post(self, request):
        serializer = ContextRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        context = build_context(
            ORMRecordStore(),
            data["collection"],
            item_id=data.get("item_id") or None,
            role_type=data.get("role_type"),
            field=data.get("field") or None,
        )
        if data.get("compress"):
            context = compress_context(context)

        logger.info(
            "Built AI context for %s (~%s tokens)",
            data["collection"],
            estimate_token_count(context),
        )
        return Response(context)


class AssistantView(APIView):
    """
    Send a conversation and its AI context to the writing assistant.

    POST /api/assistant/
    """

    def post(self, request):
        serializer = AssistantRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        options = data.get("options") or {}

        system_prompt = build_assistant_prompt(data["context"])

        try:
            result = get_completion_client().complete(
                system_prompt,
                data["messages"],
                max_tokens=options.get("max_tokens", 1000),
                temperature=options.get("temperature", 0.7),
                stream=options.get("stream", False),
                model=options.get("model") or None,
            )
        except CompletionError as exc:
            return completion_error_response(exc)

        record_usage(request.user, result)

        if options.get("stream"):
            return event_stream_response(result)
        return Response(result.to_response_dict())
