"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started locally without any setup.  In a production
deployment you should at least override ``SECRET_KEY`` and
``ADMIN_EMAILS``.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _split_csv(value: str) -> List[str]:
    return [item.strip().lower() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "UCSB Records API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    api_prefix: str = os.getenv("API_PREFIX", "/api")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Principals whose ``sub`` claim (an email) appears in this list are
    # granted the ADMIN role on top of whatever roles their token carries.
    # Example: ADMIN_EMAILS="phtcon@ucsb.edu,admin@ucsb.edu".
    admin_emails: List[str] = field(default_factory=lambda: _split_csv(os.getenv("ADMIN_EMAILS", "")))

    # Path to the SQLite database file.  A relative path is resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "ucsb_records.db")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should therefore be set before importing this module.
settings = Settings()
