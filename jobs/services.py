"""
Jobs app services

Job agent: tailors resumes, cover letters and application answers to one job
posting. Each request reads the whole career record set (profile,
experiences, skills, projects), renders it into a task prompt and makes a
single completion call.

Also hosts the job posting scraper that pulls a description out of a
posting's HTML.
"""
from __future__ import annotations

import logging
import os
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import urlparse

import requests
from django.conf import settings
from django.db import connection

from assistant.prompts import (
    CareerData,
    build_cover_letter_prompt,
    build_question_prompt,
    build_resume_prompt,
)
from assistant.services import CompletionClient, get_completion_client
from assistant.store import ORMRecordStore, RecordStore

logger = logging.getLogger(__name__)


RESUME = "resume"
COVER_LETTER = "cover_letter"
QUESTION = "question"
DOCUMENT_KINDS = (RESUME, COVER_LETTER, QUESTION)


@dataclass(frozen=True)
class JobTypeConfig:
    display_name: str
    role_types: List[str]
    skill_relevance: List[str]
    focus_areas: List[str]

    def to_dict(self) -> Dict[str, object]:
        return {
            "display_name": self.display_name,
            "role_types": list(self.role_types),
            "skill_relevance": list(self.skill_relevance),
            "focus_areas": list(self.focus_areas),
        }


DEFAULT_JOB_TYPE = "technical-writer"

JOB_TYPE_CONFIGS: Dict[str, JobTypeConfig] = {
    "technical-writer": JobTypeConfig(
        display_name="Technical Writer",
        role_types=["technical_writer"],
        skill_relevance=["technical_writer", "technical_writing_manager"],
        focus_areas=["documentation", "API documentation", "user guides", "technical communication"],
    ),
    "technical-writing-manager": JobTypeConfig(
        display_name="Technical Writing Manager",
        role_types=["technical_writing_manager", "technical_writer"],
        skill_relevance=["technical_writing_manager", "technical_writer"],
        focus_areas=[
            "team leadership",
            "documentation strategy",
            "content management",
            "cross-functional collaboration",
        ],
    ),
    "software-engineer": JobTypeConfig(
        display_name="Software Engineer",
        role_types=["software_engineer"],
        skill_relevance=["software_engineer"],
        focus_areas=["software development", "programming", "system design", "technical problem solving"],
    ),
    "software-engineering-manager": JobTypeConfig(
        display_name="Software Engineering Manager",
        role_types=["engineering_manager", "software_engineer"],
        skill_relevance=["engineering_manager", "software_engineer"],
        focus_areas=["engineering leadership", "team management", "technical strategy", "project delivery"],
    ),
}


def get_job_type_config(job_type: str) -> JobTypeConfig:
    """Config for a job type; unknown types fall back to technical-writer."""
    return JOB_TYPE_CONFIGS.get(job_type) or JOB_TYPE_CONFIGS[DEFAULT_JOB_TYPE]


class JobAgentError(Exception):
    """
    Domain-specific exception for job agent failures outside the completion call.
    """


class JobScrapeError(Exception):
    """
    A job posting could not be downloaded or read.
    """


# --------------------------------------------------------------------- #
# Bulk career data                                                      #
# --------------------------------------------------------------------- #


def _run_and_release(fetch: Callable[[], Any]) -> Any:
    try:
        return fetch()
    finally:
        connection.close()


def fetch_career_data(store: RecordStore, workers: Optional[int] = None) -> CareerData:
    """
    Read profile, experiences, skills and projects for the job agent.

    The four reads are independent and are issued concurrently on a thread
    pool of CAREER_DATA_FETCH_WORKERS threads; with one worker they run in
    the calling thread. Any read failure propagates.
    """
    if workers is None:
        workers = int(
            os.environ.get("CAREER_DATA_FETCH_WORKERS")
            or getattr(settings, "CAREER_DATA_FETCH_WORKERS", 4)
        )

    fetches: Dict[str, Callable[[], Any]] = {
        "profile": store.get_profile,
        "experiences": store.list_experiences,
        "skills": store.list_skills,
        "projects": store.list_projects,
    }

    if workers <= 1:
        results = {name: fetch() for name, fetch in fetches.items()}
    else:
        with ThreadPoolExecutor(max_workers=min(workers, len(fetches))) as executor:
            futures = {name: executor.submit(_run_and_release, fetch) for name, fetch in fetches.items()}
            results = {name: future.result() for name, future in futures.items()}

    career_data = CareerData(
        profile=results["profile"],
        experiences=list(results["experiences"] or []),
        skills=list(results["skills"] or []),
        projects=list(results["projects"] or []),
    )
    logger.info(
        "Fetched career data: profile=%s experiences=%s skills=%s projects=%s",
        "found" if career_data.profile else "not found",
        len(career_data.experiences),
        len(career_data.skills),
        len(career_data.projects),
    )
    return career_data


# --------------------------------------------------------------------- #
# Draft generation                                                      #
# --------------------------------------------------------------------- #


@dataclass
class DraftResult:
    """
    Generated document plus usage metadata.
    """

    kind: str
    content: str
    usage: Dict[str, int] = field(default_factory=dict)
    words_generated: int = 0
    total_tokens: int = 0

    RESPONSE_KEYS = {RESUME: "resume", COVER_LETTER: "cover_letter", QUESTION: "answer"}

    def to_response_dict(self) -> Dict[str, object]:
        return {self.RESPONSE_KEYS[self.kind]: self.content, "usage": self.usage}


class JobAgentService:
    """
    Generate and revise job application documents.
    """

    DEFAULT_PARAMETERS = {
        RESUME: {"max_tokens": 4000, "temperature": 0.3},
        COVER_LETTER: {"max_tokens": 4000, "temperature": 0.3},
        QUESTION: {"max_tokens": 2000, "temperature": 0.3},
    }

    GENERATE_MESSAGES = {
        RESUME: "Generate a tailored resume in markdown format based on the job requirements and career data provided.",
        COVER_LETTER: "Generate a tailored cover letter in markdown format based on the job requirements and career data provided.",
        QUESTION: "Generate a tailored answer to this application question based on the job requirements and career data provided.",
    }

    REVISE_MESSAGES = {
        RESUME: "Please revise the resume based on this feedback: {feedback}",
        COVER_LETTER: "Please revise the cover letter based on this feedback: {feedback}",
        QUESTION: "Please revise the answer based on this feedback: {feedback}",
    }

    def __init__(
        self,
        store: Optional[RecordStore] = None,
        client: Optional[CompletionClient] = None,
        workers: Optional[int] = None,
    ):
        self.store = store or ORMRecordStore()
        self.client = client or get_completion_client()
        self.workers = workers

    # --------------------------------------------------------------------- #
    # Public helpers                                                        #
    # --------------------------------------------------------------------- #

    def generate_draft(
        self,
        kind: str,
        job_info: Dict[str, Any],
        additional_context: str = "",
        question: str = "",
    ) -> DraftResult:
        """
        Write a first draft of a resume, cover letter or question answer.

        Raises:
            JobAgentError: Unknown kind or missing question.
            CompletionError: The completion call failed.
        """
        self._check_request(kind, job_info, question)
        system_prompt = self.build_prompt(
            kind,
            job_info,
            fetch_career_data(self.store, self.workers),
            additional_context=additional_context,
            question=question,
        )
        messages = [{"role": "user", "content": self.GENERATE_MESSAGES[kind]}]
        return self._complete(kind, system_prompt, messages)

    def revise_draft(
        self,
        kind: str,
        job_info: Dict[str, Any],
        prior_draft: str,
        feedback: str,
        question: str = "",
        additional_context: str = "",
    ) -> DraftResult:
        """
        Revise an earlier draft. The draft goes back to the model as its own
        previous turn, followed by the feedback.
        """
        self._check_request(kind, job_info, question)
        if not feedback:
            raise JobAgentError("Feedback is required to revise a draft.")

        system_prompt = self.build_prompt(
            kind,
            job_info,
            fetch_career_data(self.store, self.workers),
            additional_context=additional_context,
            question=question,
            current_answer=prior_draft,
            feedback=feedback,
        )
        messages = [
            {"role": "user", "content": self.GENERATE_MESSAGES[kind]},
            {"role": "assistant", "content": prior_draft},
            {"role": "user", "content": self.REVISE_MESSAGES[kind].format(feedback=feedback)},
        ]
        return self._complete(kind, system_prompt, messages)

    @staticmethod
    def build_prompt(
        kind: str,
        job_info: Dict[str, Any],
        career_data: CareerData,
        *,
        additional_context: str = "",
        question: str = "",
        current_answer: str = "",
        feedback: str = "",
    ) -> str:
        if kind == RESUME:
            return build_resume_prompt(job_info, career_data, additional_context)
        if kind == COVER_LETTER:
            return build_cover_letter_prompt(job_info, career_data, additional_context)
        return build_question_prompt(job_info, question, career_data, current_answer, feedback)

    # --------------------------------------------------------------------- #
    # Internal helpers                                                      #
    # --------------------------------------------------------------------- #

    def _check_request(self, kind: str, job_info: Dict[str, Any], question: str) -> None:
        if kind not in DOCUMENT_KINDS:
            raise JobAgentError(f"Unknown document kind: {kind}")
        if not job_info.get("description") or not job_info.get("job_type"):
            raise JobAgentError("Job info with description and job_type is required.")
        if kind == QUESTION and not question:
            raise JobAgentError("An application question is required.")

        config = get_job_type_config(job_info["job_type"])
        logger.info(
            "Job agent %s for %s (role types: %s; focus: %s)",
            kind,
            config.display_name,
            ", ".join(config.role_types),
            ", ".join(config.focus_areas),
        )

    def _complete(self, kind: str, system_prompt: str, messages: List[Dict[str, str]]) -> DraftResult:
        logger.info("Job agent %s prompt length: %s characters", kind, len(system_prompt))
        result = self.client.complete(system_prompt, messages, **self.DEFAULT_PARAMETERS[kind])
        return DraftResult(
            kind=kind,
            content=result.content,
            usage=result.usage,
            words_generated=result.words_generated,
            total_tokens=result.total_tokens,
        )


# --------------------------------------------------------------------- #
# Job posting scraper                                                   #
# --------------------------------------------------------------------- #

JOB_SECTION_KEYWORDS = (
    "job description",
    "position summary",
    "role description",
    "responsibilities",
    "requirements",
    "qualifications",
    "about the role",
    "what you'll do",
)

JOB_TERMS = ("experience", "skills", "team", "work", "develop", "manage", "lead")

MAX_DESCRIPTION_CHARS = 2000


def extract_job_description(html: str) -> str:
    """
    Pick the paragraph of a posting that reads most like a job description.

    Paragraphs under 100 characters are ignored; section keywords score 2
    and common job terms 0.5. The winner must be over 200 characters,
    otherwise the first paragraph over 300 characters, or the first 1000
    characters of text, is used. The result is capped at 2000 characters.
    """
    text = re.sub(r"<script[^>]*>[\s\S]*?</script>", "", html or "", flags=re.IGNORECASE)
    text = re.sub(r"<style[^>]*>[\s\S]*?</style>", "", text, flags=re.IGNORECASE)
    text = re.sub(r"<[^>]*>", " ", text)
    text = re.sub(r"\s+", " ", text).strip()

    paragraphs = re.split(r"\n\s*\n|\.\s+(?=[A-Z])", text)

    best_match = ""
    best_score = 0.0
    for paragraph in paragraphs:
        if len(paragraph) < 100:
            continue
        lowered = paragraph.lower()
        score = sum(2 for keyword in JOB_SECTION_KEYWORDS if keyword in lowered)
        score += sum(0.5 for term in JOB_TERMS if term in lowered)
        if score > best_score and len(paragraph) > 200:
            best_score = score
            best_match = paragraph

    if not best_match:
        best_match = next((p for p in paragraphs if len(p) > 300), text[:1000])

    return best_match[:MAX_DESCRIPTION_CHARS]


class JobDescriptionScraper:
    """
    Download a job posting and extract its description.
    """

    HEADERS = {
        "User-Agent": "Mozilla/5.0 (compatible; JobAgent/1.0)",
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.session = session or requests.Session()
        self.timeout = timeout or float(
            os.environ.get("JOB_SCRAPER_TIMEOUT_SECONDS")
            or getattr(settings, "JOB_SCRAPER_TIMEOUT_SECONDS", 15)
        )

    def fetch(self, url: str) -> str:
        """
        Raises:
            JobScrapeError: Bad URL, network failure or non-200 response.
        """
        if urlparse(url).scheme not in ("http", "https"):
            raise JobScrapeError("Only http and https URLs can be scraped.")

        logger.info("Fetching job posting from %s", url)
        try:
            response = self.session.get(url, headers=self.HEADERS, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Failed to fetch job posting %s: %s", url, exc)
            raise JobScrapeError(f"Could not fetch {url}: {exc}") from exc

        if response.status_code != 200:
            raise JobScrapeError(f"HTTP {response.status_code}: {response.reason}")

        return extract_job_description(response.text)
