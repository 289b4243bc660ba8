# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.sources import get_source
from tests.fakes import FakeSource


# --- Sample list items, deliberately inconsistent across "deployments" ---
@pytest.fixture
def raw_items():
    return [
        {"Id": 1, "Title": "EMP001", "EmployeeName": "Alice Adams", "JobTitle": "Engineer",
         "Department": "Information Technology (IT)", "Email": "alice@example.com",
         "Status": "Active", "Manager": {"Id": 3, "Title": "Carol King"}},
        {"ID": "2", "Title": "EMP002", "FullName": "Bob Brown", "Position": "Analyst",
         "Dept": "Finance", "EMail": "bob@example.com", "ContactNumber": "555-0102"},
        {"id": 3, "Title": "Carol King", "JobTitle": "Director", "Department": "Operations",
         "Email": "carol@example.com", "Status": "Remote"},
    ]


@pytest.fixture
def fake_source(raw_items):
    return FakeSource(bulk=raw_items, items={r.get("Id") or int(r.get("ID") or r.get("id")): r for r in raw_items})


# --- Override the SharePoint dependency with the fake source ---
@pytest.fixture
def use_source():
    def _use(source):
        app.dependency_overrides[get_source] = lambda: source
        return source
    yield _use
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
