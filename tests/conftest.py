"""Shared fixtures: an isolated subjects store wired into the FastAPI app."""

import httpx
import pytest
from fastapi.testclient import TestClient

from main import app
from subjectadmin.database import InMemorySubjectsRepository
from subjectadmin.deps import get_subjects_repository
from subjectadmin.services.subjects_api import SubjectsApiClient


@pytest.fixture
def repository():
    return InMemorySubjectsRepository()


@pytest.fixture
def api_app(repository):
    app.dependency_overrides[get_subjects_repository] = lambda: repository
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(api_app):
    with TestClient(api_app) as c:
        yield c


@pytest.fixture
def make_api_client(api_app):
    """Build a SubjectsApiClient talking to the app in-process (or to a custom transport)."""
    def _make(transport=None, token="test-token"):
        return SubjectsApiClient(
            base_url="http://testserver/api",
            token=token,
            transport=transport or httpx.ASGITransport(app=api_app),
        )
    return _make
