"""Database repositories initialization."""

from sahayak.db.repositories.schemes import SchemeRepository

__all__ = [
    "SchemeRepository"
]
