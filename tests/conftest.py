"""
Shared fixtures.

Every test gets its own SQLite file under ``tmp_path``; the settings
object is patched before the schema is created, so tests never touch
the development database.
"""

from typing import Dict, List

import pytest
from fastapi.testclient import TestClient

from ucsb_records_api.app.core.config import settings
from ucsb_records_api.app.core.db import init_db
from ucsb_records_api.app.core.security import create_access_token
from ucsb_records_api.app.main import app


def auth_headers(roles: List[str], email: str = "cgaucho@ucsb.edu") -> Dict[str, str]:
    token = create_access_token({"sub": email, "roles": roles})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def temp_database(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "test_records.db"))
    monkeypatch.setattr(settings, "admin_emails", [])
    init_db()
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def user_headers():
    return auth_headers(["USER"])


@pytest.fixture
def admin_only_headers():
    return auth_headers(["ADMIN"], email="phtcon@ucsb.edu")


@pytest.fixture
def admin_headers():
    return auth_headers(["ADMIN", "USER"], email="phtcon@ucsb.edu")
