import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_interview_repository, get_llm_client
from app.main import app
from app.services.pipeline.response_formatter import OutputMode, ResponseFormatter
from fakes import FakeInterviewRepository, FakeLLMClient


@pytest.fixture
def fake_llm():
    return FakeLLMClient()


@pytest.fixture
def fake_repository():
    return FakeInterviewRepository()


@pytest.fixture
def client(fake_llm, fake_repository):
    original_formatter = app.state.response_formatter
    app.dependency_overrides[get_llm_client] = lambda: fake_llm
    app.dependency_overrides[get_interview_repository] = lambda: fake_repository
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        app.state.response_formatter = original_formatter


@pytest.fixture
def wrapped_client(client):
    app.state.response_formatter = ResponseFormatter(OutputMode.WRAPPED)
    return client
