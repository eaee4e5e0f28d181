"""Runtime configuration read from environment variables.

Defaults target a local SQLite deployment. In production, set
WRITE_DATABASE_URL and READ_DATABASE_URL to the primary and replica
instances; the session cookie names match the identity provider's.
"""

import os
from typing import List

DEFAULT_DATABASE_URL = "sqlite:///beanbuilt.db"
DEFAULT_SESSION_COOKIES = "next-auth.session-token,__Secure-next-auth.session-token"


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """Snapshot of the environment taken when the app is created."""

    def __init__(self):
        self.write_database_url = os.getenv("WRITE_DATABASE_URL", DEFAULT_DATABASE_URL)
        self.read_database_url = os.getenv("READ_DATABASE_URL", self.write_database_url)
        self.session_cookie_names = _split(os.getenv("SESSION_COOKIE_NAMES", DEFAULT_SESSION_COOKIES))
        self.cors_origins = _split(os.getenv("CORS_ORIGINS", "*"))
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()


def get_settings() -> Settings:
    """Return settings built from the current environment."""
    return Settings()
