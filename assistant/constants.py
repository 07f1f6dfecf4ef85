"""
Shared names for the writing assistant.
"""

TECHNICAL_WRITER = "technical_writer"
TECHNICAL_WRITING_MANAGER = "technical_writing_manager"
SOFTWARE_ENGINEER = "software_engineer"
ENGINEERING_MANAGER = "engineering_manager"

ROLE_TYPES = (
    TECHNICAL_WRITER,
    TECHNICAL_WRITING_MANAGER,
    SOFTWARE_ENGINEER,
    ENGINEERING_MANAGER,
)

DEFAULT_ROLE_TYPE = TECHNICAL_WRITER

PROFILE = "profile"
EXPERIENCES = "experiences"
SKILLS = "skills"
PROJECTS = "projects"
EDUCATION = "education"
KEYWORDS = "keywords"

ITEM_COLLECTIONS = (EXPERIENCES, SKILLS, PROJECTS, EDUCATION, KEYWORDS)
COLLECTIONS = (PROFILE,) + ITEM_COLLECTIONS
