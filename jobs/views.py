"""
Jobs app views

Job agent endpoints: tailored resume, cover letter and application answer
drafts, plus a job posting scraper.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from assistant.services import CompletionError
from assistant.views import completion_error_response, record_usage

from .serializers import (
    DraftRequestSerializer,
    QuestionRequestSerializer,
    ScrapeRequestSerializer,
    job_type_choices,
)
from .services import (
    COVER_LETTER,
    QUESTION,
    RESUME,
    JobAgentError,
    JobAgentService,
    JobDescriptionScraper,
    JobScrapeError,
)

logger = logging.getLogger(__name__)


class DraftView(APIView):
    """
    Base view for one document kind.

    POST {"action": "generate", "job_info": {"description": "...", "job_type": "software-engineer"}}
    POST {"action": "revise", "job_info": {...}, "prior_draft": "...", "feedback": "..."}
    """

    kind = None
    serializer_class = DraftRequestSerializer

    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        question = data.get('question', '')

        try:
            service = JobAgentService()
            if data['action'] == 'revise':
                result = service.revise_draft(
                    self.kind,
                    data['job_info'],
                    data['prior_draft'],
                    data['feedback'],
                    question=question,
                    additional_context=data.get('additional_context', ''),
                )
            else:
                result = service.generate_draft(
                    self.kind,
                    data['job_info'],
                    additional_context=data.get('additional_context', ''),
                    question=question,
                )
        except CompletionError as exc:
            logger.warning("Job agent %s failed: %s", self.kind, exc)
            return completion_error_response(exc)
        except JobAgentError as exc:
            return Response({'error': str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except Exception:
            logger.exception("Job agent %s failed", self.kind)
            return Response(
                {'error': f'Failed to generate {self.kind.replace("_", " ")}', 'code': CompletionError.code},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        record_usage(request.user, result)
        return Response(result.to_response_dict())


class ResumeView(DraftView):
    kind = RESUME


class CoverLetterView(DraftView):
    kind = COVER_LETTER


class QuestionView(DraftView):
    kind = QUESTION
    serializer_class = QuestionRequestSerializer


class ScrapeView(APIView):
    """
    Extract a job description from a posting URL.

    POST {"url": "https://example.com/jobs/42"}
    """

    def post(self, request):
        serializer = ScrapeRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        url = serializer.validated_data['url']

        try:
            description = JobDescriptionScraper().fetch(url)
        except JobScrapeError as exc:
            logger.warning("Scrape failed for %s: %s", url, exc)
            return Response(
                {'error': 'Failed to extract job description', 'details': str(exc)},
                status=status.HTTP_502_BAD_GATEWAY,
            )

        return Response({'description': description, 'url': url})


class JobTypeListView(APIView):
    def get(self, request):
        return Response(job_type_choices())
