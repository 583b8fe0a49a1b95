"""
Scheme REST Endpoints.
List, search and fetch welfare schemes.
"""

import logging
from typing import Optional

from fastapi import APIRouter

from sahayak.core.exceptions import SchemeNotFoundException, ValidationError
from sahayak.core.languages import LanguageCode
from sahayak.db.repositories.schemes import SchemeRepository

logger = logging.getLogger(__name__)

router = APIRouter()


def _language(lang: Optional[str]) -> Optional[LanguageCode]:
    return LanguageCode.parse(lang) if lang else None


@router.get("")
async def get_all_schemes(
    query: Optional[str] = None,
    category: Optional[str] = None,
    state: Optional[str] = None,
    lang: Optional[str] = None
):
    """Get all active schemes, or search when any filter is given."""
    query = (query or "").strip() or None
    language = _language(lang)
    repo = SchemeRepository()

    if query or category or state:
        schemes = await repo.search(query or "", category=category, state=state)
    else:
        schemes = await repo.get_all_active()

    return {
        "success": True,
        "data": [s.to_dict(language) for s in schemes],
        "count": len(schemes)
    }


@router.get("/search")
async def search_schemes(
    query: Optional[str] = None,
    category: Optional[str] = None,
    state: Optional[str] = None,
    lang: Optional[str] = None
):
    """Search schemes; at least one parameter is required."""
    query = (query or "").strip() or None
    if not (query or category or state):
        raise ValidationError(
            "At least one search parameter (query, category, or state) is required"
        )

    language = _language(lang)
    schemes = await SchemeRepository().search(query or "", category=category, state=state)

    return {
        "success": True,
        "data": [s.to_dict(language) for s in schemes],
        "count": len(schemes),
        "searchParams": {"query": query, "category": category, "state": state}
    }


@router.get("/{scheme_id}")
async def get_scheme_by_id(scheme_id: str, lang: Optional[str] = None):
    """Get a specific scheme by ID."""
    language = _language(lang)
    scheme = await SchemeRepository().get_by_id(scheme_id)

    if scheme is None:
        raise SchemeNotFoundException(scheme_id)

    return {
        "success": True,
        "data": scheme.to_dict(language)
    }
