"""
Career documents shared by the assistant and job agent tests.
"""
import copy

PROFILE = {
    "personalInfo": {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "location": "Portland, OR",
        "github": "https://github.com/janedoe",
    },
    "positioning": {
        "current": "General positioning",
        "byRole": {"software_engineer": "Senior backend engineer"},
    },
    "valuePropositions": ["Ships reliable APIs", "Mentors juniors", "Writes clear docs", "Fourth prop"],
    "professionalMission": "Make complex systems understandable",
}


def experience(index, role_types=("software_engineer",), featured=False, **overrides):
    record = {
        "company": f"Company {index}",
        "title": f"Engineer {index}",
        "location": "Remote",
        "startDate": f"20{10 + index:02d}-01",
        "roleTypes": list(role_types),
        "responsibilities": [f"Responsibility {index}.{n}" for n in range(1, 6)],
        "achievements": [f"Achievement {index}.{n}" for n in range(1, 4)],
        "technologies": [f"Tech{n}" for n in range(1, 13)],
        "featured": featured,
    }
    record.update(overrides)
    return record


def career_documents():
    return copy.deepcopy(
        {
            "profile": PROFILE,
            "experiences": [
                experience(1, featured=True),
                experience(2, featured=True),
                experience(3, role_types=("technical_writer",), featured=True),
                experience(4),
                experience(5, featured=True),
            ],
            "skills": [
                {"name": "Python", "roleRelevance": ["software_engineer"], "featured": True},
                {"name": "Go", "roleRelevance": ["software_engineer"], "featured": False},
                {"name": "DITA", "roleRelevance": ["technical_writer"], "featured": True},
            ],
            "keywords": [
                {
                    "category": "Backend",
                    "roleType": "software_engineer",
                    "terms": [{"primary": "REST"}, {"primary": "microservices"}],
                },
                {"category": "Docs", "roleType": "technical_writer", "terms": ["docs-as-code"]},
            ],
            "projects": [
                {
                    "name": "Billing API",
                    "type": "software_engineering",
                    "overview": "Rebuilt billing",
                    "technologies": ["Python", "Postgres"],
                    "roleTypes": ["software_engineer"],
                },
                {
                    "name": "Style guide",
                    "type": "technical_writing",
                    "overview": "House style",
                    "technologies": ["Vale"],
                    "roleTypes": ["technical_writer"],
                },
                {
                    "name": "Queue worker",
                    "overview": "Async jobs",
                    "technologies": ["Redis"],
                    "roleTypes": ["software_engineer"],
                },
            ],
        }
    )
