"""
Pytest configuration and shared fixtures.
"""

from decimal import Decimal
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from jobly.auth import create_token
from jobly.database import get_store
from main import app


class FakeStore:
    """Records executed statements and replays queued result sets in order."""

    def __init__(self) -> None:
        self.results: List[List[Dict[str, Any]]] = []
        self.calls: List[tuple] = []

    def queue(self, *rows: Dict[str, Any]) -> "FakeStore":
        self.results.append(list(rows))
        return self

    async def execute(self, sql: str, values=()) -> List[Dict[str, Any]]:
        self.calls.append((sql, list(values)))
        if not self.results:
            return []
        return [dict(row) for row in self.results.pop(0)]


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def client(store):
    """TestClient with the query store swapped for a FakeStore."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_token('admin', is_admin=True)}"}


@pytest.fixture
def user_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_token('u1', is_admin=False)}"}


@pytest.fixture
def company_c1() -> Dict[str, Any]:
    return {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "numEmployees": 1,
        "logoUrl": "http://c1.img",
    }


@pytest.fixture
def job_row() -> Dict[str, Any]:
    """Job row as returned by RETURNING / SELECT on jobs."""
    return {
        "id": 1,
        "title": "Job1",
        "salary": 100,
        "equity": Decimal("0.1"),
        "companyHandle": "c1",
    }
