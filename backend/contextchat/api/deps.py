"""
Dependency injection for API endpoints.

This module provides FastAPI dependencies that inject the store and the
chatbot provider into each request handler.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from contextchat.core.config import Settings, get_settings
from contextchat.interfaces.chat_session_repository import IChatSessionRepository
from contextchat.interfaces.chatbot_provider import IChatbotProvider
from contextchat.services.chat_service import ChatService


# ===========================================
# Repository Dependencies
# ===========================================


@lru_cache()
def get_chat_session_repository() -> IChatSessionRepository:
    """Get chat session repository instance."""
    from contextchat.infrastructure.local.chat_session_repository import SqliteChatSessionRepository
    return SqliteChatSessionRepository()


# ===========================================
# Provider Dependencies
# ===========================================


@lru_cache()
def get_chatbot_provider() -> IChatbotProvider:
    """
    Get chatbot provider instance based on CHATBOT_PROVIDER setting.

    Supports:
    - litellm: LiteLLM (NLP Cloud, OpenAI, Bedrock, etc. with optional custom endpoint)
    - gemini-api: Gemini API (API Key)
    """
    settings = get_settings()

    if settings.CHATBOT_PROVIDER == "litellm":
        from contextchat.infrastructure.local.litellm_provider import LiteLLMProvider
        return LiteLLMProvider(settings.NLP_MODEL, settings.NLP_API_KEY)

    elif settings.CHATBOT_PROVIDER == "gemini-api":
        from contextchat.infrastructure.local.gemini_api_provider import GeminiAPIProvider
        return GeminiAPIProvider(settings.NLP_MODEL, settings.NLP_API_KEY)

    else:
        raise ValueError(f"Unknown CHATBOT_PROVIDER: {settings.CHATBOT_PROVIDER}")


# ===========================================
# Type Aliases for Dependency Injection
# ===========================================

AppSettings = Annotated[Settings, Depends(get_settings)]
ChatRepo = Annotated[IChatSessionRepository, Depends(get_chat_session_repository)]
Chatbot = Annotated[IChatbotProvider, Depends(get_chatbot_provider)]


def get_chat_service(
    chat_repo: ChatRepo,
    chatbot: Chatbot,
    settings: AppSettings,
) -> ChatService:
    """Get chat service wired to the injected store and provider."""
    return ChatService(chat_repo=chat_repo, chatbot=chatbot, token_limit=settings.TOKEN_LIMIT)


ChatSvc = Annotated[ChatService, Depends(get_chat_service)]
