"""
Shared fixtures.

Settings are read once at import time, so the test environment is set
before anything from `sahayak` is imported.
"""

import os
import tempfile
from pathlib import Path
from unittest.mock import AsyncMock

_LOG_DIR = tempfile.mkdtemp(prefix="sahayak-tests-")

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["GROQ_API_KEY"] = ""
os.environ["SEED_SAMPLE_DATA"] = "true"
os.environ["DEFAULT_CHAT_LANGUAGE"] = "hi"
os.environ["CHAT_LOG_PATH"] = str(Path(_LOG_DIR) / "chat_log.md")

import pytest
from fastapi.testclient import TestClient

from sahayak.db.database import init_db, close_db
from sahayak.db.seed import seed_schemes


class FakeLLMService:
    """Stand-in for LLMService with scripted replies."""

    def __init__(self, reply="Here is what I found.", info=None):
        self.is_initialized = True
        self.generate_reply = AsyncMock(return_value=reply)
        self.extract_user_info = AsyncMock(return_value=info or {})
        self.cleanup = AsyncMock()


@pytest.fixture
async def db():
    """Fresh in-memory database."""
    await init_db()
    yield
    await close_db()


@pytest.fixture
async def seeded_db(db):
    await seed_schemes()
    yield


@pytest.fixture
def fake_llm():
    return FakeLLMService()


@pytest.fixture
def app_client():
    """Client with the real lifespan (no API key, seeded database)."""
    from sahayak.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def client(app_client, fake_llm):
    """Client whose LLM service is replaced by `fake_llm`."""
    from sahayak.main import app

    app.state.llm_service = fake_llm
    yield app_client
