"""
Assistant app prompt builder

Prompts are ordered lists of named sections. Each section has a render
function and an inclusion predicate; a template renders the included
sections in order and joins them with blank lines. How many records and list
entries go into a prompt is set by PromptLimits instances, never inline.

Builders are pure: they read the data they are given and perform no I/O.
Record lists are always truncated to a prefix of their source order.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from . import constants

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class PromptLimits:
    """
    Head-counts applied when rendering records into a prompt.
    """

    experiences: int = 10
    skills: int = 50
    projects: int = 8
    technologies_per_experience: int = 10
    responsibilities_per_experience: int = 4
    achievements_per_experience: int = 2
    technologies_per_project: int = 8
    current_item_responsibilities: int = 3
    related_skills: int = 10
    keyword_terms: int = 15


ASSISTANT_LIMITS = PromptLimits()
DOCUMENT_LIMITS = PromptLimits(experiences=10, skills=50, projects=8)
QUESTION_LIMITS = PromptLimits(
    experiences=8,
    skills=40,
    projects=6,
    responsibilities_per_experience=3,
)


def _always(_data: Dict[str, Any]) -> bool:
    return True


@dataclass
class PromptSection:
    name: str
    render: Callable[[Dict[str, Any]], str]
    include: Callable[[Dict[str, Any]], bool] = _always


@dataclass
class PromptTemplate:
    """Ordered prompt sections rendered against one data dict."""

    sections: List[PromptSection] = field(default_factory=list)

    def section_names(self, data: Dict[str, Any]) -> List[str]:
        return [section.name for section in self.sections if section.include(data)]

    def build(self, data: Dict[str, Any]) -> str:
        rendered = []
        for section in self.sections:
            if not section.include(data):
                continue
            text = section.render(data).strip("\n")
            if text:
                rendered.append(text)
        return "\n\n".join(rendered)


@dataclass
class CareerData:
    """Bulk career records for the job-tailoring prompts, in store order."""

    profile: Optional[Dict[str, Any]] = None
    experiences: List[Dict[str, Any]] = field(default_factory=list)
    skills: List[Dict[str, Any]] = field(default_factory=list)
    projects: List[Dict[str, Any]] = field(default_factory=list)


# --------------------------------------------------------------------- #
# Formatting helpers                                                    #
# --------------------------------------------------------------------- #


def role_display_name(role_type: str) -> str:
    """technical_writing_manager -> Technical Writing Manager"""
    return " ".join(word[:1].upper() + word[1:] for word in str(role_type or "").replace("_", " ").split())


def job_type_label(job_type: str) -> str:
    return str(job_type or "").replace("-", " ")


def or_na(value: Any) -> str:
    if value is None or value == "" or value == []:
        return NOT_AVAILABLE
    return str(value)


def joined_or_na(values: Optional[Sequence[Any]], limit: Optional[int] = None, separator: str = ", ") -> str:
    head = [str(value) for value in list(values or [])[:limit]]
    return separator.join(head) if head else NOT_AVAILABLE


def _links(profile: Dict[str, Any]) -> Dict[str, Any]:
    return (profile.get("personal_info") or {}).get("links") or {}


def render_experience(experience: Dict[str, Any], limits: PromptLimits) -> str:
    start = or_na(experience.get("start_date"))
    end = experience.get("end_date") or "Present"
    lines = [
        f"**{or_na(experience.get('company'))}** | {or_na(experience.get('title'))} | {start} - {end}",
        f"Tech: {joined_or_na(experience.get('technologies'), limits.technologies_per_experience)}",
    ]
    for responsibility in (experience.get("responsibilities") or [])[: limits.responsibilities_per_experience]:
        lines.append(f"• {responsibility}")
    for achievement in (experience.get("achievements") or [])[: limits.achievements_per_experience]:
        description = achievement.get("description") if isinstance(achievement, dict) else achievement
        lines.append(f"• {or_na(description)}")
    return "\n".join(lines)


def render_project(project: Dict[str, Any], limits: PromptLimits) -> str:
    return "\n".join(
        [
            f"**{or_na(project.get('name'))}** | {or_na(project.get('type'))}",
            or_na(project.get("overview")),
            f"Tech: {joined_or_na(project.get('technologies'), limits.technologies_per_project)}",
        ]
    )


# --------------------------------------------------------------------- #
# Writing assistant prompt                                              #
# --------------------------------------------------------------------- #


def _assistant_preamble(data: Dict[str, Any]) -> str:
    context = data["context"]
    editing = context.get("editing_context") or {}
    summary = context.get("profile_summary") or {}
    role_name = role_display_name(editing.get("role_type") or constants.DEFAULT_ROLE_TYPE)
    editing_label = editing.get("collection") or ""
    if editing.get("field"):
        editing_label += f" ({editing['field']})"
    return (
        f"You are an expert career development writing assistant helping "
        f"{summary.get('name') or 'the user'} craft professional career documents.\n\n"
        f"TARGET ROLE: {role_name}\n"
        f"CURRENT EDITING: {editing_label}"
    )


def _profile_lines(data: Dict[str, Any]) -> List[str]:
    summary = data["context"].get("profile_summary") or {}
    lines = []
    if summary.get("positioning"):
        lines.append(f"- Positioning: {summary['positioning']}")
    if summary.get("value_props"):
        lines.append(f"- Key Value Props: {'; '.join(summary['value_props'])}")
    if summary.get("mission"):
        lines.append(f"- Mission: {summary['mission']}")
    return lines


def _assistant_profile(data: Dict[str, Any]) -> str:
    return "\n".join(["PROFILE CONTEXT:"] + _profile_lines(data))


def _assistant_directives(data: Dict[str, Any]) -> str:
    editing = data["context"].get("editing_context") or {}
    role_name = role_display_name(editing.get("role_type") or constants.DEFAULT_ROLE_TYPE)
    return f"""YOUR RESPONSIBILITIES:
1. Write in a professional but authentic voice that matches the user's existing content
2. Include quantifiable metrics and measurable impact whenever possible (%, $, #, time saved)
3. Optimize content for Applicant Tracking Systems (ATS) using relevant keywords
4. Ensure consistency with the existing career narrative and positioning
5. Tailor content specifically for {role_name} roles
6. Use strong action verbs and clear, concise language
7. Focus on achievements and outcomes, not just responsibilities

GUIDELINES:
- Bullet points should be 1-2 lines max, starting with strong action verbs
- Achievements should include metrics (%, $, #, time saved, users impacted, etc.)
- Avoid clichés like "team player", "hard worker", "self-motivated", "go-getter"
- Use industry-standard terminology and keywords for {role_name}
- Maintain consistency in tense (past tense for previous roles, present for current)
- Be specific about technologies, tools, and methodologies used
- Highlight cross-functional collaboration and leadership when relevant"""


def _has_current_item(data: Dict[str, Any]) -> bool:
    context = data["context"]
    collection = (context.get("editing_context") or {}).get("collection")
    return bool(context.get("current_item")) and collection in (constants.EXPERIENCES, constants.PROJECTS)


def _assistant_current_item(data: Dict[str, Any]) -> str:
    context = data["context"]
    limits: PromptLimits = data["limits"]
    item = context["current_item"]
    lines = ["CURRENT ITEM BEING EDITED:"]
    if context["editing_context"]["collection"] == constants.EXPERIENCES:
        lines.append(f"- Company: {or_na(item.get('company'))}")
        lines.append(f"- Title: {or_na(item.get('title'))}")
        lines.append(f"- Technologies: {joined_or_na(item.get('technologies'))}")
        responsibilities = (item.get("responsibilities") or [])[: limits.current_item_responsibilities]
        if responsibilities:
            lines.append(f"- Key Responsibilities: {'; '.join(responsibilities)}")
    else:
        lines.append(f"- Project: {or_na(item.get('name'))}")
        lines.append(f"- Type: {or_na(item.get('type'))}")
        lines.append(f"- Technologies: {joined_or_na(item.get('technologies'))}")
    return "\n".join(lines)


def featured_skill_names(data: Dict[str, Any]) -> List[str]:
    limits: PromptLimits = data["limits"]
    skills = (data["context"].get("related_context") or {}).get("skills") or []
    return [skill.get("name") for skill in skills if skill.get("featured") and skill.get("name")][
        : limits.related_skills
    ]


def keyword_terms(data: Dict[str, Any]) -> List[str]:
    limits: PromptLimits = data["limits"]
    categories = (data["context"].get("related_context") or {}).get("keywords") or []
    terms = [
        term.get("primary")
        for category in categories
        for term in (category.get("terms") or [])
        if term.get("primary")
    ]
    return terms[: limits.keyword_terms]


ASSISTANT_CLOSING = """When asked to improve or generate content:
1. First, understand the context and goals
2. Reference specific experiences, skills, or projects from the career data
3. Provide 2-3 variations when appropriate
4. Explain your reasoning for suggestions briefly
5. Be ready to iterate and refine based on feedback

Remember: Be helpful, specific, and actionable. Focus on making the user's career achievements shine."""


ASSISTANT_TEMPLATE = PromptTemplate(
    [
        PromptSection("preamble", _assistant_preamble),
        PromptSection("profile", _assistant_profile, lambda data: bool(_profile_lines(data))),
        PromptSection("directives", _assistant_directives),
        PromptSection("current_item", _assistant_current_item, _has_current_item),
        PromptSection(
            "relevant_skills",
            lambda data: f"RELEVANT SKILLS: {', '.join(featured_skill_names(data))}",
            lambda data: bool(featured_skill_names(data)),
        ),
        PromptSection(
            "ats_keywords",
            lambda data: f"ATS KEYWORDS TO CONSIDER: {', '.join(keyword_terms(data))}",
            lambda data: bool(keyword_terms(data)),
        ),
        PromptSection("closing", lambda data: ASSISTANT_CLOSING),
    ]
)


def build_assistant_prompt(context: Dict[str, Any], limits: PromptLimits = ASSISTANT_LIMITS) -> str:
    """Render the writing assistant's system prompt for an AI context."""
    return ASSISTANT_TEMPLATE.build({"context": context, "limits": limits})


# --------------------------------------------------------------------- #
# Job-tailoring prompts                                                 #
# --------------------------------------------------------------------- #


def _contact_lines(profile: Dict[str, Any]) -> List[str]:
    info = profile.get("personal_info") or {}
    links = _links(profile)
    return [
        f"Name: {or_na(info.get('name'))}",
        f"Location: {or_na(info.get('location'))}",
        f"Email: {or_na(info.get('email'))}",
        f"Phone: {or_na(info.get('phone'))}",
        f"Portfolio: {or_na(links.get('portfolio'))}",
        f"GitHub: {or_na(links.get('github'))}",
        f"LinkedIn: {or_na(links.get('linkedin'))}",
    ]


def _positioning_line(profile: Dict[str, Any]) -> str:
    return f"Positioning: {or_na((profile.get('positioning') or {}).get('current'))}"


def _narrative_lines(profile: Dict[str, Any]) -> List[str]:
    return [
        f"Professional Mission: {or_na(profile.get('professional_mission'))}",
        f"Value Propositions: {joined_or_na(profile.get('value_propositions'), separator='; ')}",
    ]


def _profile_block(lines_for: Callable[[Dict[str, Any]], List[str]]) -> Callable[[Dict[str, Any]], str]:
    def render(data: Dict[str, Any]) -> str:
        profile = data["career_data"].profile
        body = "\n".join(lines_for(profile)) if profile else "No profile data available"
        return f"## Career Data Available\n\n### Profile Information\n{body}"

    return render


def _experiences_section(data: Dict[str, Any]) -> str:
    limits: PromptLimits = data["limits"]
    experiences = data["career_data"].experiences
    entries = [render_experience(experience, limits) for experience in experiences[: limits.experiences]]
    header = f"### Work Experiences ({len(experiences)} total - showing top {limits.experiences})"
    return "\n\n".join([header] + entries)


def _skills_section(data: Dict[str, Any]) -> str:
    limits: PromptLimits = data["limits"]
    skills = data["career_data"].skills
    names = " • ".join(str(skill.get("name")) for skill in skills[: limits.skills])
    return f"### Skills ({len(skills)} total - showing top {limits.skills})\n{names}"


def _projects_section(data: Dict[str, Any]) -> str:
    limits: PromptLimits = data["limits"]
    projects = data["career_data"].projects
    entries = [render_project(project, limits) for project in projects[: limits.projects]]
    header = f"### Projects ({len(projects)} total - showing top {limits.projects})"
    return "\n\n".join([header] + entries)


def _additional_context(data: Dict[str, Any]) -> str:
    return f"## Additional Context from User\n{data['additional_context']}"


def _has_additional_context(data: Dict[str, Any]) -> bool:
    return bool(data.get("additional_context"))


def _job_requirements(heading: str) -> Callable[[Dict[str, Any]], str]:
    return lambda data: f"## {heading}\n{data['job_info'].get('description') or ''}"


RESUME_INSTRUCTIONS = """## Instructions
1. Analyze the job requirements and identify key skills, technologies, and qualifications needed
2. Create a tailored resume that highlights the most relevant experiences and skills
3. Use the exact career data provided - do not fabricate any information
4. Reorder and emphasize content to match job requirements
5. Include relevant keywords naturally throughout the resume
6. Format as clean markdown with proper structure

## Resume Structure Required
# [Full Name]
[Location] • [Phone] • [Email]
[Portfolio] • [GitHub] • [LinkedIn]

## Profile
[Tailored positioning statement emphasizing relevant experience]

## Experience
[List experiences in reverse chronological order, emphasizing relevant bullet points and achievements]

## Skills
[Organize skills by category, prioritizing job-relevant skills]

## Projects
[Include 2-3 most relevant projects if they add value]

## Education
[Include if available in career data]

Generate the tailored resume now."""


COVER_LETTER_INSTRUCTIONS = """## Cover Letter Requirements

Create a professional cover letter that:

1. **Opening Paragraph**:
   - Express genuine interest in the specific role
   - Include a compelling hook that showcases your unique value
   - Reference something specific about the company or role

2. **Body Paragraphs** (2-3 paragraphs):
   - Highlight most relevant experiences with quantifiable achievements
   - Demonstrate understanding of the role through relevant projects
   - Show cultural fit and alignment with company values
   - Connect your skills and experiences to specific job requirements

3. **Closing Paragraph**:
   - Reiterate interest and value proposition
   - Include a professional call to action
   - Express enthusiasm for next steps

4. **Formatting**:
   - Use proper business letter format
   - Keep it concise (3-4 paragraphs, ~300-400 words)
   - Professional yet engaging tone
   - Natural keyword integration from job posting

5. **Personalization**:
   - Address specific company details when available
   - Match tone to company culture
   - Ensure all claims are genuine and supportable from career data
   - Avoid generic statements

Generate the cover letter in markdown format now."""


ANSWER_INSTRUCTIONS = """## Answer Requirements

1. **Be Specific and Concrete**:
   - Use real examples from career data
   - Include quantifiable achievements when relevant
   - Reference specific technologies, projects, or experiences

2. **Match the Question Type**:
   - Behavioral questions: Use STAR method (Situation, Task, Action, Result)
   - Technical questions: Demonstrate expertise with examples
   - Motivation questions: Show genuine alignment with role/company
   - Hypothetical questions: Use past experiences as framework

3. **Keep it Concise**:
   - Typically 150-300 words unless question requires more detail
   - Get to the point quickly
   - Use clear, professional language

4. **Show Value**:
   - Connect answer to job requirements
   - Highlight relevant skills and achievements
   - Demonstrate understanding of the role

5. **Be Authentic**:
   - Only use information from the career data
   - Don't fabricate or exaggerate
   - Maintain professional but genuine tone

Generate the answer now. Provide ONLY the answer text, no meta-commentary."""


RESUME_TEMPLATE = PromptTemplate(
    [
        PromptSection(
            "preamble",
            lambda data: (
                "# Resume Tailoring Assistant\n\n"
                "You are an expert resume tailoring assistant. Create a tailored resume for a "
                f"{job_type_label(data['job_info'].get('job_type'))} position."
            ),
        ),
        PromptSection("job_requirements", _job_requirements("Job Requirements")),
        PromptSection(
            "profile",
            _profile_block(lambda profile: _contact_lines(profile) + [_positioning_line(profile)]),
        ),
        PromptSection("experiences", _experiences_section),
        PromptSection("skills", _skills_section),
        PromptSection("projects", _projects_section),
        PromptSection("additional_context", _additional_context, _has_additional_context),
        PromptSection("instructions", lambda data: RESUME_INSTRUCTIONS),
    ]
)


COVER_LETTER_TEMPLATE = PromptTemplate(
    [
        PromptSection(
            "preamble",
            lambda data: (
                "# Cover Letter Writing Assistant\n\n"
                "You are an expert cover letter writer. Create a tailored, compelling cover letter for a "
                f"{job_type_label(data['job_info'].get('job_type'))} position."
            ),
        ),
        PromptSection("job_requirements", _job_requirements("Job Requirements")),
        PromptSection(
            "profile",
            _profile_block(
                lambda profile: _contact_lines(profile)
                + [_positioning_line(profile)]
                + _narrative_lines(profile)
            ),
        ),
        PromptSection("experiences", _experiences_section),
        PromptSection("skills", _skills_section),
        PromptSection("projects", _projects_section),
        PromptSection("additional_context", _additional_context, _has_additional_context),
        PromptSection("instructions", lambda data: COVER_LETTER_INSTRUCTIONS),
    ]
)


QUESTION_TEMPLATE = PromptTemplate(
    [
        PromptSection(
            "preamble",
            lambda data: (
                "# Application Question Answering Assistant\n\n"
                "You are an expert at answering job application questions. Provide a tailored, "
                f"compelling answer for a {job_type_label(data['job_info'].get('job_type'))} position."
            ),
        ),
        PromptSection("job_context", _job_requirements("Job Context")),
        PromptSection("question", lambda data: f"## Application Question\n{data['question']}"),
        PromptSection(
            "current_answer",
            lambda data: f"## Current Answer\n{data['current_answer']}",
            lambda data: bool(data.get("current_answer")),
        ),
        PromptSection(
            "feedback",
            lambda data: f"## Revision Feedback\n{data['feedback']}",
            lambda data: bool(data.get("feedback")),
        ),
        PromptSection(
            "profile",
            _profile_block(
                lambda profile: [f"Name: {or_na((profile.get('personal_info') or {}).get('name'))}",
                                 _positioning_line(profile)]
                + _narrative_lines(profile)
            ),
        ),
        PromptSection("experiences", _experiences_section),
        PromptSection("skills", _skills_section),
        PromptSection("projects", _projects_section),
        PromptSection("instructions", lambda data: ANSWER_INSTRUCTIONS),
    ]
)


def build_resume_prompt(
    job_info: Dict[str, Any],
    career_data: CareerData,
    additional_context: str = "",
    limits: PromptLimits = DOCUMENT_LIMITS,
) -> str:
    return RESUME_TEMPLATE.build(
        {
            "job_info": job_info,
            "career_data": career_data,
            "additional_context": additional_context,
            "limits": limits,
        }
    )


def build_cover_letter_prompt(
    job_info: Dict[str, Any],
    career_data: CareerData,
    additional_context: str = "",
    limits: PromptLimits = DOCUMENT_LIMITS,
) -> str:
    return COVER_LETTER_TEMPLATE.build(
        {
            "job_info": job_info,
            "career_data": career_data,
            "additional_context": additional_context,
            "limits": limits,
        }
    )


def build_question_prompt(
    job_info: Dict[str, Any],
    question: str,
    career_data: CareerData,
    current_answer: str = "",
    feedback: str = "",
    limits: PromptLimits = QUESTION_LIMITS,
) -> str:
    """
    Render the system prompt for answering one application question.

    current_answer and feedback are only present when revising.
    """
    return QUESTION_TEMPLATE.build(
        {
            "job_info": job_info,
            "question": question,
            "career_data": career_data,
            "current_answer": current_answer,
            "feedback": feedback,
            "limits": limits,
        }
    )
