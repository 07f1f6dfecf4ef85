"""
Assistant app context assembly

Builds the bounded, role-relevant slice of career data that is handed to the
writing assistant for one editing target.

Context shape:
{
  "profile_summary": {"name", "positioning", "value_props", "mission"},
  "current_item": {...} | None,
  "related_context": {"skills", "keywords", "recent_experiences" | "related_projects"}
                     | {"related_experiences"} | {},
  "editing_context": {"collection", "role_type", "field"},
}

Every store read is isolated: a failed related fetch becomes [] and a failed
profile fetch degrades the whole context to a stub. `build_context` never
raises for store errors.
"""
from __future__ import annotations

import copy
import json
import logging
import math
from typing import Any, Callable, Dict, List, Optional

from . import constants
from .store import RecordStore

logger = logging.getLogger(__name__)

VALUE_PROPS_IN_SUMMARY = 3
SIBLING_FETCH_LIMIT = 3
MAX_SIBLINGS = 2
SKILL_EXPERIENCE_LIMIT = 3


def empty_profile_summary() -> Dict[str, Any]:
    return {"name": "User", "positioning": "", "value_props": [], "mission": ""}


def summarize_profile(profile: Optional[Dict[str, Any]], role_type: str) -> Dict[str, Any]:
    """
    Reduce a profile to name, positioning for the role (falling back to the
    current positioning), the first three value propositions and the mission.
    """
    profile = profile or {}
    personal_info = profile.get("personal_info") or {}
    positioning = profile.get("positioning") or {}
    by_role = positioning.get("by_role") or {}
    return {
        "name": personal_info.get("name") or "User",
        "positioning": by_role.get(role_type) or positioning.get("current") or "",
        "value_props": list((profile.get("value_propositions") or [])[:VALUE_PROPS_IN_SUMMARY]),
        "mission": profile.get("professional_mission") or "",
    }


def _isolated(label: str, fetch: Callable[[], List[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    try:
        return list(fetch() or [])
    except Exception:  # noqa: BLE001
        logger.warning("Failed to fetch %s for AI context", label, exc_info=True)
        return []


def _get_current_item(store: RecordStore, collection: str, item_id) -> Optional[Dict[str, Any]]:
    try:
        return store.get_item(collection, item_id)
    except Exception:  # noqa: BLE001
        logger.warning("Failed to fetch %s item %s for AI context", collection, item_id, exc_info=True)
        return None


def _without_item(records: List[Dict[str, Any]], item_id) -> List[Dict[str, Any]]:
    if item_id is None:
        return records[:MAX_SIBLINGS]
    return [r for r in records if str(r.get("id")) != str(item_id)][:MAX_SIBLINGS]


def get_related_context(store: RecordStore, collection: str, role_type: str, item_id=None) -> Dict[str, Any]:
    """
    Related records for the collection under edit.

    experiences/projects get role-relevant skills and keyword categories plus
    up to two sibling records; skills get up to three featured experiences;
    everything else gets nothing.
    """
    related: Dict[str, Any] = {}

    if collection in (constants.EXPERIENCES, constants.PROJECTS):
        related["skills"] = _isolated("skills", lambda: store.list_skills(role_type=role_type))
        related["keywords"] = _isolated("keywords", lambda: store.list_keywords(role_type=role_type))

        if collection == constants.EXPERIENCES:
            experiences = _isolated(
                "recent experiences",
                lambda: store.list_experiences(role_type=role_type, limit=SIBLING_FETCH_LIMIT),
            )
            related["recent_experiences"] = _without_item(experiences, item_id)
        else:
            projects = _isolated(
                "related projects",
                lambda: store.list_projects(role_type=role_type, limit=SIBLING_FETCH_LIMIT),
            )
            related["related_projects"] = _without_item(projects, item_id)

    elif collection == constants.SKILLS:
        related["related_experiences"] = _isolated(
            "related experiences",
            lambda: store.list_experiences(
                role_type=role_type, featured=True, limit=SKILL_EXPERIENCE_LIMIT
            ),
        )

    return related


def build_context(
    store: RecordStore,
    collection: str,
    item_id=None,
    role_type: str = constants.DEFAULT_ROLE_TYPE,
    field: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Assemble the AI context for one editing target.

    Args:
        store: Record store to read from.
        collection: "profile" or one of the record collections.
        item_id: Record being edited, if any.
        role_type: Target role tag. Unknown values pass through unchanged.
        field: Field under edit; informational only.

    Returns:
        Dict with profile_summary, current_item, related_context and
        editing_context.
    """
    role_type = role_type or constants.DEFAULT_ROLE_TYPE
    editing_context = {"collection": collection, "role_type": role_type, "field": field}

    try:
        profile = store.get_profile()
    except Exception:  # noqa: BLE001
        logger.warning("Failed to fetch profile for AI context; using stub context", exc_info=True)
        return {
            "profile_summary": empty_profile_summary(),
            "current_item": None,
            "related_context": {},
            "editing_context": editing_context,
        }

    if collection == constants.PROFILE:
        current_item = profile
    elif item_id not in (None, ""):
        current_item = _get_current_item(store, collection, item_id)
    else:
        current_item = None

    return {
        "profile_summary": summarize_profile(profile, role_type),
        "current_item": current_item,
        "related_context": get_related_context(store, collection, role_type, item_id),
        "editing_context": editing_context,
    }


def compress_context(context: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a trimmed copy of a context for large career profiles.

    The input is left untouched.
    """
    compressed = copy.deepcopy(context)

    item = compressed.get("current_item")
    if isinstance(item, dict):
        for key, cap in (("responsibilities", 5), ("achievements", 5), ("technologies", 10)):
            if isinstance(item.get(key), list):
                item[key] = item[key][:cap]

    related = compressed.get("related_context") or {}
    for key in ("skills", "keywords"):
        if isinstance(related.get(key), list):
            related[key] = related[key][:3]
    if isinstance(related.get("recent_experiences"), list):
        related["recent_experiences"] = [
            {
                "company": experience.get("company"),
                "title": experience.get("title"),
                "technologies": (experience.get("technologies") or [])[:5],
            }
            for experience in related["recent_experiences"][:2]
        ]

    return compressed


def estimate_token_count(context: Dict[str, Any]) -> int:
    """Rough token estimate: one token per four characters of JSON."""
    return math.ceil(len(json.dumps(context, default=str, separators=(",", ":"))) / 4)
