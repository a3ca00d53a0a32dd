"""Pydantic models (schemas) for the application."""

from contextchat.models.chat import (
    ChatRequest,
    DeleteChatRequest,
    MessageResponse,
    NewSessionResponse,
    RenameChatRequest,
    UpdateContextRequest,
    UpdateResponse,
)
from contextchat.models.chat_session import ChatMessage, Session, SessionSummary

__all__ = [
    "ChatMessage",
    "ChatRequest",
    "DeleteChatRequest",
    "MessageResponse",
    "NewSessionResponse",
    "RenameChatRequest",
    "Session",
    "SessionSummary",
    "UpdateContextRequest",
    "UpdateResponse",
]
