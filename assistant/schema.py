"""
Assistant app schema

Normalizers that turn raw career documents into the current record shapes.

Exports from the old document store mix several generations of shapes:
camelCase keys, Mongo `_id`/`$date` wrappers, experiences that still carry
`bulletPoints`, achievements stored as bare strings, and skills nested inside
category documents. Every raw document passes through `normalize()` exactly
once when it enters the system, so the rest of the code only ever sees the
flat snake_case shape the DRF serializers produce.
"""
from __future__ import annotations

import datetime
import logging
import re
from typing import Any, Callable, Dict, Iterable, List, Optional

from . import constants

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")

SKILL_LEVELS = ("expert", "advanced", "intermediate", "beginner")


def snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub(r"_\1", key).lower()


def snake_keys(value: Any) -> Any:
    """Recursively rename dict keys to snake_case."""
    if isinstance(value, dict):
        return {snake_case(str(key)): snake_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [snake_keys(item) for item in value]
    return value


def unwrap_id(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        value = value.get("$oid") or value.get("oid")
    if value in (None, ""):
        return None
    return str(value)


def parse_date(value: Any) -> Optional[datetime.date]:
    """
    Accept dates as YYYY, YYYY-MM, YYYY-MM-DD, ISO datetimes or `{"$date": ...}`.
    """
    if isinstance(value, dict):
        value = value.get("$date")
    if value in (None, ""):
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if 1900 <= value <= 2100:
            return datetime.date(int(value), 1, 1)
        return datetime.datetime.fromtimestamp(value / 1000, tz=datetime.timezone.utc).date()

    text = str(value).strip()
    for pattern, fmt in (
        (r"^\d{4}-\d{2}-\d{2}", "%Y-%m-%d"),
        (r"^\d{4}-\d{2}$", "%Y-%m"),
        (r"^\d{4}$", "%Y"),
    ):
        match = re.match(pattern, text)
        if match:
            return datetime.datetime.strptime(match.group(0), fmt).date()
    raise ValueError(f"Unrecognised date: {value!r}")


def string_list(value: Any) -> List[str]:
    if value in (None, ""):
        return []
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if isinstance(value, Iterable):
        return [str(item).strip() for item in value if item is not None and str(item).strip()]
    return [str(value)]


def _int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


# --------------------------------------------------------------------- #
# Per-collection normalizers                                            #
# --------------------------------------------------------------------- #


def normalize_profile(raw: Dict[str, Any]) -> Dict[str, Any]:
    doc = snake_keys(raw)
    personal_info = dict(doc.get("personal_info") or {})

    # Older profiles kept the links beside name/email.
    links = dict(personal_info.pop("links", None) or {})
    for key in ("portfolio", "github", "linkedin", "writing_samples"):
        if key in personal_info:
            links.setdefault(key, personal_info.pop(key))
    if links:
        personal_info["links"] = links

    positioning = doc.get("positioning") or {}
    if isinstance(positioning, str):
        positioning = {"current": positioning}

    return {
        "id": unwrap_id(doc.get("id") or doc.get("_id")),
        "personal_info": personal_info,
        "positioning": {
            "current": positioning.get("current") or "",
            "by_role": dict(positioning.get("by_role") or {}),
        },
        "value_propositions": string_list(doc.get("value_propositions")),
        "professional_mission": doc.get("professional_mission") or "",
        "unique_selling_points": string_list(doc.get("unique_selling_points")),
    }


def normalize_achievement(raw: Any) -> Dict[str, Any]:
    if isinstance(raw, str):
        return {"description": raw}
    doc = snake_keys(raw or {})
    achievement = {"description": str(doc.get("description") or "")}
    for key in ("metrics", "impact"):
        if doc.get(key):
            achievement[key] = str(doc[key])
    if doc.get("keywords"):
        achievement["keywords"] = string_list(doc["keywords"])
    return achievement


def normalize_experience(raw: Dict[str, Any]) -> Dict[str, Any]:
    doc = snake_keys(raw)

    # bullet_points duplicated responsibilities and was retired; it only
    # survives where responsibilities were never filled in.
    responsibilities = string_list(doc.get("responsibilities")) or string_list(doc.get("bullet_points"))

    return {
        "id": unwrap_id(doc.get("id") or doc.get("_id")),
        "company": doc.get("company") or "",
        "title": doc.get("title") or "",
        "location": doc.get("location") or "",
        "industry": doc.get("industry") or "",
        "start_date": parse_date(doc.get("start_date")),
        "end_date": parse_date(doc.get("end_date")),
        "role_types": string_list(doc.get("role_types")),
        "responsibilities": responsibilities,
        "achievements": [
            normalize_achievement(item) for item in (doc.get("achievements") or [])
        ],
        "technologies": string_list(doc.get("technologies")),
        "organizations": string_list(doc.get("organizations")),
        "cross_functional": string_list(doc.get("cross_functional")),
        "featured": bool(doc.get("featured", False)),
        "display_order": _int(doc.get("display_order"), 0),
    }


def _skill_level(value: Any) -> str:
    level = str(value or "").strip().lower()
    return level if level in SKILL_LEVELS else "intermediate"


def _flat_skill(doc: Dict[str, Any], *, category: str = "", role_relevance=None) -> Dict[str, Any]:
    rating = _int(doc.get("rating"), 3)
    years = doc.get("years_of_experience", doc.get("years_used"))
    try:
        years = float(years or 0)
    except (TypeError, ValueError):
        years = 0.0
    return {
        "id": unwrap_id(doc.get("id") or doc.get("_id")),
        "name": doc.get("name") or "",
        "category": doc.get("category") or category,
        "role_relevance": string_list(doc.get("role_relevance") or role_relevance),
        "level": _skill_level(doc.get("level") or doc.get("proficiency")),
        "rating": max(1, min(5, rating)),
        "years_of_experience": years,
        "tags": string_list(doc.get("tags")),
        "keywords": string_list(doc.get("keywords")),
        "featured": bool(doc.get("featured", False)),
        "display_order": _int(doc.get("display_order"), 0),
    }


def normalize_skills(raw: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    A flat skill yields one record; a legacy category document yields one
    record per nested skill, inheriting the category and role relevance.
    """
    doc = snake_keys(raw)
    nested = doc.get("skills")
    if isinstance(nested, list):
        category = doc.get("category") or ""
        role_relevance = doc.get("role_relevance")
        return [
            _flat_skill(item if isinstance(item, dict) else {"name": item},
                        category=category, role_relevance=role_relevance)
            for item in nested
        ]
    return [_flat_skill(doc)]


def normalize_keyword_category(raw: Dict[str, Any]) -> Dict[str, Any]:
    doc = snake_keys(raw)
    terms = []
    for term in doc.get("terms") or []:
        if isinstance(term, str):
            terms.append({"primary": term})
            continue
        entry = {"primary": str(term.get("primary") or "")}
        if term.get("alternatives"):
            entry["alternatives"] = string_list(term["alternatives"])
        if term.get("frequency") is not None:
            entry["frequency"] = _int(term["frequency"], 0)
        if term.get("context"):
            entry["context"] = str(term["context"])
        terms.append(entry)
    return {
        "id": unwrap_id(doc.get("id") or doc.get("_id")),
        "category": doc.get("category") or "",
        "role_type": doc.get("role_type") or "",
        "terms": terms,
    }


def normalize_project(raw: Dict[str, Any]) -> Dict[str, Any]:
    doc = snake_keys(raw)
    links = []
    for link in doc.get("links") or []:
        if isinstance(link, str):
            links.append({"url": link, "link_text": "", "type": ""})
        elif link.get("url"):
            links.append(
                {
                    "url": link["url"],
                    "link_text": link.get("link_text") or "",
                    "type": link.get("type") or "",
                }
            )
    return {
        "id": unwrap_id(doc.get("id") or doc.get("_id")),
        "name": doc.get("name") or "",
        "type": doc.get("type") or "hybrid",
        "date": parse_date(doc.get("date")),
        "featured": bool(doc.get("featured", False)),
        "overview": doc.get("overview") or "",
        "challenge": doc.get("challenge") or "",
        "approach": doc.get("approach") or "",
        "outcome": doc.get("outcome") or "",
        "impact": doc.get("impact") or "",
        "technologies": string_list(doc.get("technologies")),
        "keywords": string_list(doc.get("keywords")),
        "links": links,
        "role_types": string_list(doc.get("role_types")),
    }


def normalize_education(raw: Dict[str, Any]) -> Dict[str, Any]:
    doc = snake_keys(raw)
    return {
        "id": unwrap_id(doc.get("id") or doc.get("_id")),
        "institution": doc.get("institution") or "",
        "degree": doc.get("degree") or "",
        "field": doc.get("field") or "",
        "graduation_year": _int(doc.get("graduation_year"), 0),
        "relevant_coursework": string_list(doc.get("relevant_coursework")),
        "display_order": _int(doc.get("display_order"), 0),
    }


def _one(normalizer: Callable[[Dict[str, Any]], Dict[str, Any]]):
    return lambda raw: [normalizer(raw)]


NORMALIZERS: Dict[str, Callable[[Dict[str, Any]], List[Dict[str, Any]]]] = {
    constants.PROFILE: _one(normalize_profile),
    constants.EXPERIENCES: _one(normalize_experience),
    constants.SKILLS: normalize_skills,
    constants.KEYWORDS: _one(normalize_keyword_category),
    constants.PROJECTS: _one(normalize_project),
    constants.EDUCATION: _one(normalize_education),
}


def normalize(collection: str, raw: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Normalize one raw document of `collection` into zero or more records.

    Raises:
        KeyError: If the collection is unknown.
    """
    return NORMALIZERS[collection](raw)


def normalize_many(collection: str, documents: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    records: List[Dict[str, Any]] = []
    for document in documents or []:
        records.extend(normalize(collection, document))
    return records
