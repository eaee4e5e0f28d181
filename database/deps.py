"""Dependency helpers that expose read/write DB session generators.

These wrappers provide application-friendly names for injection into FastAPI
endpoints: `get_db_write` (default) and `get_db_read` for read-only routes.
Sessions come from the `Database` stored on `app.state` by the lifespan.
"""

from fastapi import Request

from .database import Database


def get_database(request: Request) -> Database:
    """Return the process-wide `Database` handle."""
    return request.app.state.database


def get_db_write(request: Request):
    """Yield a write-capable DB session for FastAPI dependency injection."""
    yield from get_database(request).get_write_session()


def get_db_read(request: Request):
    """Yield a read-only DB session for FastAPI dependency injection."""
    yield from get_database(request).get_read_session()

