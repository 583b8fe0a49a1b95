"""
SQLAlchemy Database Models.
Defines the welfare scheme entity.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from sqlalchemy import Column, String, Text, DateTime, JSON, Boolean

from sahayak.core.languages import LanguageCode, localize
from sahayak.db.database import Base


class SchemeCategory(str, Enum):
    """Scheme categories used for filtering and keyword matching."""
    AGRICULTURE = "agriculture"
    EDUCATION = "education"
    HEALTH = "health"
    HOUSING = "housing"
    WOMEN = "women"
    EMPLOYMENT = "employment"
    SOCIAL_WELFARE = "social_welfare"


class Scheme(Base):
    """Government welfare scheme entity."""
    __tablename__ = "schemes"

    id = Column(String(50), primary_key=True)
    name = Column(String(255), nullable=False, unique=True, index=True)  # canonical English name
    name_i18n = Column(JSON, default=dict)  # {"hi": "...", "ta": "..."}

    description = Column(Text, nullable=False)
    description_i18n = Column(JSON, default=dict)

    benefit_amount = Column(String(255))
    benefit_i18n = Column(JSON, default=dict)

    category = Column(String(50), nullable=False, index=True)
    eligibility = Column(JSON, default=dict)
    documents = Column(JSON, default=list)
    application_process = Column(Text)
    application_url = Column(String(500))

    state = Column(String(100), index=True)  # NULL for central schemes
    is_active = Column(Boolean, default=True, index=True)

    # Lowercased names, descriptions and category in every language
    search_text = Column(Text, default="")

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, onupdate=datetime.utcnow)

    def refresh_search_text(self):
        """Rebuild the denormalized keyword search column."""
        parts = [self.name, self.description, self.category, self.benefit_amount]
        for texts in (self.name_i18n, self.description_i18n):
            parts.extend((texts or {}).values())
        self.search_text = " ".join(p for p in parts if p).lower()

    def _texts(self, canonical: Optional[str], translations: Optional[Dict[str, str]]) -> Dict[str, str]:
        texts = {LanguageCode.EN.value: canonical} if canonical else {}
        texts.update(translations or {})
        return texts

    def to_dict(self, language: Optional[LanguageCode] = None) -> Dict[str, Any]:
        """
        Serialize for the API.

        Localized fields are returned as full maps; when `language` is given
        the flat `display*` fields carry the best translation for it.
        """
        names = self._texts(self.name, self.name_i18n)
        descriptions = self._texts(self.description, self.description_i18n)
        benefits = self._texts(self.benefit_amount, self.benefit_i18n)

        data = {
            "id": self.id,
            "name": names,
            "description": descriptions,
            "benefitAmount": benefits,
            "category": self.category,
            "eligibility": self.eligibility or {},
            "documents": self.documents or [],
            "applicationProcess": self.application_process,
            "applicationUrl": self.application_url,
            "state": self.state,
            "isActive": bool(self.is_active)
        }

        if language is not None:
            data["displayName"] = localize(names, language)
            data["displayDescription"] = localize(descriptions, language)
            data["displayBenefit"] = localize(benefits, language)

        return data

    def __repr__(self):
        return f"<Scheme {self.id}: {self.name}>"
