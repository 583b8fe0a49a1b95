"""
Keyword-based scheme matching.
Maps words in the user's query to scheme categories.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from sahayak.config import get_settings
from sahayak.db.models import SchemeCategory

logger = logging.getLogger(__name__)
settings = get_settings()


CATEGORY_KEYWORDS: Mapping[SchemeCategory, Tuple[str, ...]] = {
    SchemeCategory.AGRICULTURE: (
        "किसान", "खेती", "कृषि", "farmer", "farming", "agriculture", "crop", "kisan",
    ),
    SchemeCategory.EDUCATION: (
        "छात्रवृत्ति", "शिक्षा", "छात्र", "scholarship", "education", "student", "school", "college",
    ),
    SchemeCategory.HOUSING: (
        "घर", "मकान", "आवास", "house", "housing", "home", "awas",
    ),
    SchemeCategory.HEALTH: (
        "स्वास्थ्य", "इलाज", "अस्पताल", "health", "hospital", "treatment", "medical", "insurance",
    ),
    SchemeCategory.WOMEN: (
        "महिला", "बेटी", "women", "woman", "girl", "daughter", "widow", "mahila",
    ),
    SchemeCategory.EMPLOYMENT: (
        "रोजगार", "नौकरी", "employment", "job", "work", "unemployed", "rozgar",
    ),
}


def matched_categories(text: str) -> List[SchemeCategory]:
    """Categories whose keywords occur in `text` (substring match)."""
    haystack = (text or "").lower()
    return [
        category for category, keywords in CATEGORY_KEYWORDS.items()
        if any(keyword in haystack for keyword in keywords)
    ]


def _state_conflicts(scheme: Any, user_state: Optional[str]) -> bool:
    scheme_state = getattr(scheme, "state", None)
    if not scheme_state or not user_state:
        return False
    return scheme_state.strip().lower() != user_state.strip().lower()


def match_schemes(
    query: str,
    schemes: Sequence[Any],
    user_info: Optional[Dict[str, Any]] = None,
    limit: Optional[int] = None
) -> List[str]:
    """
    Suggest scheme IDs for a query.

    Args:
        query: The user's message
        schemes: Candidate schemes (anything with id, category, state)
        user_info: Extracted details; occupation widens the keywords and
            state excludes other states' schemes
        limit: Maximum IDs returned (default SUGGESTED_SCHEME_LIMIT)

    Returns:
        Scheme IDs in candidate order
    """
    user_info = user_info or {}
    limit = limit or settings.SUGGESTED_SCHEME_LIMIT

    text = " ".join(filter(None, [query, str(user_info.get("occupation") or "")]))
    categories = {c.value for c in matched_categories(text)}
    if not categories:
        return []

    matched: List[str] = []
    for scheme in schemes:
        if scheme.category not in categories:
            continue
        if _state_conflicts(scheme, user_info.get("state")):
            continue
        if str(scheme.id) not in matched:
            matched.append(str(scheme.id))
        if len(matched) >= limit:
            break

    logger.debug(f"Matched categories {sorted(categories)} -> schemes {matched}")
    return matched
