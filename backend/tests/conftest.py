"""
Shared fixtures: in-memory SQLite store and a fake chatbot provider.
"""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from contextchat.api.deps import get_chat_session_repository, get_chatbot_provider
from contextchat.core.config import Settings, get_settings
from contextchat.infrastructure.local.chat_session_repository import SqliteChatSessionRepository
from contextchat.infrastructure.local.database import Base
from contextchat.interfaces.chatbot_provider import IChatbotProvider


@pytest.fixture
async def session_factory():
    """Create an in-memory database with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
def chat_repo(session_factory):
    return SqliteChatSessionRepository(session_factory=session_factory)


@pytest.fixture
def chatbot():
    """Chatbot provider that echoes a canned reply."""
    provider = AsyncMock(spec=IChatbotProvider)
    provider.chatbot.return_value = {"response": "Hello from the bot", "history": []}
    provider.get_model_name.return_value = "fake-model"
    return provider


@pytest.fixture
def test_settings():
    return Settings(NLP_MODEL="fake-model", NLP_API_KEY="fake-key", TOKEN_LIMIT=2048)


@pytest.fixture
async def client(chat_repo, chatbot, test_settings):
    """HTTP client against the app with the store and chatbot overridden."""
    from main import app

    app.dependency_overrides[get_chat_session_repository] = lambda: chat_repo
    app.dependency_overrides[get_chatbot_provider] = lambda: chatbot
    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client

    app.dependency_overrides.clear()
