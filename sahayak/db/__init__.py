"""Database module initialization."""

from sahayak.db.database import init_db, close_db, get_db
from sahayak.db.models import Scheme, SchemeCategory

__all__ = [
    "init_db",
    "close_db",
    "get_db",
    "Scheme",
    "SchemeCategory"
]
