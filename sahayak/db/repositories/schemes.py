"""
Scheme Repository.
Data access layer for welfare scheme operations.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import select, or_, func
from sqlalchemy.exc import SQLAlchemyError

from sahayak.config import get_settings
from sahayak.core.exceptions import DatabaseException
from sahayak.db.database import get_db
from sahayak.db.models import Scheme

logger = logging.getLogger(__name__)
settings = get_settings()

# Columns that upsert_by_name may write
_WRITABLE_FIELDS = {
    "id", "name", "name_i18n", "description", "description_i18n",
    "benefit_amount", "benefit_i18n", "category", "eligibility", "documents",
    "application_process", "application_url", "state", "is_active"
}


def _like_pattern(term: str) -> str:
    """Substring LIKE pattern with the wildcards in `term` escaped."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SchemeRepository:
    """Repository for scheme data operations."""

    async def get_all_active(self) -> List[Scheme]:
        """Get all active schemes."""
        try:
            async with get_db() as db:
                stmt = (
                    select(Scheme)
                    .where(Scheme.is_active.is_(True))
                    .order_by(Scheme.name)
                )
                result = await db.execute(stmt)
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Failed to load active schemes: {e}")
            raise DatabaseException("Failed to retrieve schemes", {"operation": "get_all_active"})

    async def get_by_id(self, scheme_id: str) -> Optional[Scheme]:
        """Get a scheme by ID."""
        try:
            async with get_db() as db:
                result = await db.execute(
                    select(Scheme).where(Scheme.id == scheme_id)
                )
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to load scheme {scheme_id}: {e}")
            raise DatabaseException("Failed to retrieve scheme", {"scheme_id": scheme_id})

    async def get_by_ids(self, scheme_ids: List[str]) -> List[Scheme]:
        """
        Get schemes by ID list.
        Results follow the order of `scheme_ids`; unknown and repeated IDs are dropped.
        """
        wanted = list(dict.fromkeys(str(sid) for sid in scheme_ids))
        if not wanted:
            return []

        try:
            async with get_db() as db:
                result = await db.execute(
                    select(Scheme).where(Scheme.id.in_(wanted))
                )
                found = {scheme.id: scheme for scheme in result.scalars().all()}
        except SQLAlchemyError as e:
            logger.error(f"Failed to load schemes {wanted}: {e}")
            raise DatabaseException("Failed to retrieve schemes", {"scheme_ids": wanted})

        return [found[sid] for sid in wanted if sid in found]

    async def search(
        self,
        query: str = "",
        category: Optional[str] = None,
        state: Optional[str] = None,
        limit: Optional[int] = None
    ) -> List[Scheme]:
        """
        Search active schemes.

        A scheme matches when any query term appears in its names or
        descriptions (any language). The state filter keeps schemes of that
        state plus central schemes.
        """
        limit = limit or settings.SCHEME_SEARCH_LIMIT

        try:
            async with get_db() as db:
                stmt = select(Scheme).where(Scheme.is_active.is_(True))

                terms = [t for t in (query or "").lower().split() if t]
                if terms:
                    stmt = stmt.where(
                        or_(*[Scheme.search_text.ilike(_like_pattern(term), escape="\\") for term in terms])
                    )

                if category:
                    stmt = stmt.where(Scheme.category == category.lower())

                if state:
                    stmt = stmt.where(
                        or_(
                            func.lower(Scheme.state) == state.lower(),
                            Scheme.state.is_(None)
                        )
                    )

                stmt = stmt.order_by(Scheme.name).limit(limit)

                result = await db.execute(stmt)
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Scheme search failed: {e}")
            raise DatabaseException(
                "Failed to search schemes",
                {"query": query, "category": category, "state": state}
            )

    async def upsert_by_name(self, data: Dict[str, Any]) -> Scheme:
        """
        Create a scheme or update the one with the same name.
        Running it twice with the same data leaves a single record.
        """
        values = {k: v for k, v in data.items() if k in _WRITABLE_FIELDS}
        name = values.get("name")
        if not name:
            raise ValueError("Scheme data requires a name")

        try:
            async with get_db() as db:
                result = await db.execute(select(Scheme).where(Scheme.name == name))
                scheme = result.scalar_one_or_none()

                if scheme is None:
                    values.setdefault("id", uuid.uuid4().hex[:8])
                    scheme = Scheme(**values)
                    db.add(scheme)
                else:
                    values.pop("id", None)
                    for key, value in values.items():
                        setattr(scheme, key, value)

                scheme.refresh_search_text()
                await db.flush()
                return scheme
        except SQLAlchemyError as e:
            logger.error(f"Failed to upsert scheme '{name}': {e}")
            raise DatabaseException("Failed to save scheme", {"name": name})
