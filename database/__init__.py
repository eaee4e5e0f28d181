"""Database package: ORM models and session helpers."""

from .database import Database, create_db_engine
from . import models

__all__ = [
    "Database",
    "create_db_engine",
    "models",
]
