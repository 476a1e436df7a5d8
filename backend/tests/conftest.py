import pytest
from fastapi.testclient import TestClient

from config import Settings, get_settings
from main import app
from rate_limiter import limiter
from routes.deps import get_orchestrator
from services.orchestrator import ChunkOrchestrator

limiter.enabled = False


@pytest.fixture
def settings(tmp_path):
    return Settings(
        upload_dir=str(tmp_path / "uploads"),
        gemini_call_delay_seconds=0,
        rate_limit_enabled=False,
    )


@pytest.fixture
def make_client(settings):
    """Builds a TestClient whose orchestrator talks to the given fake generator."""

    def _make(generator, app_settings=None):
        active = app_settings or settings
        app.dependency_overrides[get_settings] = lambda: active
        app.dependency_overrides[get_orchestrator] = lambda: ChunkOrchestrator(active.generation, generator=generator)
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
