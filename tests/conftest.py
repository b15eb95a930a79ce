"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from src.config import get_settings
from src.core.firestore import InMemoryMessageSource
from src.core.rate_limiter import limiter
from src.features.analytics.models import Message
from src.features.analytics.service import AnalyticsService, get_analytics_service
from tests.factories import make_message

ADMIN_TOKEN = "test-admin-token"


@pytest.fixture
def conversation() -> list[Message]:
    """Two users talking to the bot, ascending by created_at."""
    return [
        make_message("ana", "Tengo dolor de cabeza", 0),
        make_message("BOT", "Lo siento, ¿desde cuándo?", 4, receiver_id="ana"),
        make_message("luis", "Tengo fiebre alta", 3600),
        make_message("BOT", "Tome líquidos", 3610, receiver_id="luis"),
        make_message("ana", None, 7200),
        make_message("ana", "Ahora tengo tos", 7300),
        make_message("BOT", "Consulte a su médico", 7306, receiver_id="ana"),
    ]


@pytest.fixture
def source(conversation) -> InMemoryMessageSource:
    return InMemoryMessageSource(conversation)


@pytest.fixture
def service(source) -> AnalyticsService:
    """Analytics service over the sample conversation."""
    return AnalyticsService(source=source)


@pytest.fixture
def settings_env(monkeypatch):
    """Configure settings for the app under test."""
    monkeypatch.setenv("ADMIN_API_TOKEN", ADMIN_TOKEN)
    monkeypatch.setenv("APP_DEBUG", "true")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def client(settings_env, source):
    """Test client with the datastore replaced by an in-memory log."""
    from src.main import create_app

    app = create_app()
    app.dependency_overrides[get_analytics_service] = lambda: AnalyticsService(source=source)
    limiter.reset()

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"X-Admin-Token": ADMIN_TOKEN}
