"""
Chat API endpoints.

Chat exchange, session listing, history, and session maintenance.
"""

from typing import Any
from uuid import uuid4

from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from contextchat.api.deps import ChatRepo, ChatSvc
from contextchat.core.exceptions import StoreError, ValidationError
from contextchat.core.logger import logger
from contextchat.models.chat import (
    ChatRequest,
    DeleteChatRequest,
    MessageResponse,
    NewSessionResponse,
    RenameChatRequest,
    UpdateContextRequest,
    UpdateResponse,
)
from contextchat.models.chat_session import ChatMessage, SessionSummary

router = APIRouter()


@router.post("/chat")
async def chat(request: ChatRequest, chat_service: ChatSvc) -> dict[str, Any]:
    """
    Send a message to the chatbot.

    Returns the engine payload merged with ``sessionId``.
    """
    try:
        return await chat_service.handle_chat(
            input=request.input,
            context=request.context,
            chat_history=request.chat_history,
            session_id=request.session_id,
            is_new_session=request.is_new_session,
        )
    except SQLAlchemyError as e:
        logger.exception(f"Failed to persist chat for session {request.session_id}: {e}")
        raise StoreError("An error occurred") from e


@router.get("/previous-chats", response_model=list[SessionSummary])
async def previous_chats(chat_repo: ChatRepo):
    """List each session with its most recent message, newest first."""
    try:
        return await chat_repo.list_latest_per_session()
    except SQLAlchemyError as e:
        logger.exception(f"Failed to fetch previous chats: {e}")
        raise StoreError("An error occurred while fetching previous chats.") from e


@router.get("/get-chat-history/{session_id}", response_model=list[ChatMessage])
async def get_chat_history(session_id: str, chat_repo: ChatRepo):
    """Get the full chat history of a session, oldest first."""
    try:
        return await chat_repo.get_history(session_id)
    except SQLAlchemyError as e:
        logger.exception(f"Failed to fetch chat history for session {session_id}: {e}")
        raise StoreError("An error occurred while fetching chat history.") from e


@router.get("/start-new-session", response_model=NewSessionResponse)
async def start_new_session():
    """Generate a new session ID. The session row is written on the first chat."""
    return NewSessionResponse(session_id=str(uuid4()))


async def _update_context(request: UpdateContextRequest, chat_repo: ChatRepo) -> UpdateResponse:
    if not request.session_id:
        raise ValidationError("Missing required fields")

    try:
        changes = await chat_repo.update_context(request.session_id, request.context)
    except SQLAlchemyError as e:
        logger.exception(f"Failed to update context for session {request.session_id}: {e}")
        raise StoreError("An error occurred while updating the context.") from e

    return UpdateResponse(message="Context updated successfully", changes=changes)


@router.put("/update-context", response_model=UpdateResponse)
async def update_context(request: UpdateContextRequest, chat_repo: ChatRepo):
    """Update a session's context. Unknown sessions report zero changes."""
    return await _update_context(request, chat_repo)


@router.post("/update-context", response_model=UpdateResponse)
async def update_context_legacy(request: UpdateContextRequest, chat_repo: ChatRepo):
    """Compatibility alias of ``PUT /update-context`` (accepts ``newContext``)."""
    return await _update_context(request, chat_repo)


@router.delete("/delete-chat", response_model=MessageResponse)
async def delete_chat(request: DeleteChatRequest, chat_repo: ChatRepo):
    """Delete a session and its messages. Deleting an unknown session succeeds."""
    if not request.session_id:
        raise ValidationError("Session ID is required")

    try:
        await chat_repo.delete_session(request.session_id)
    except SQLAlchemyError as e:
        logger.exception(f"Failed to delete session {request.session_id}: {e}")
        raise StoreError("An error occurred while deleting the chat.") from e

    return MessageResponse(message="Chat session deleted successfully")


@router.put("/rename-chat", response_model=UpdateResponse)
async def rename_chat(request: RenameChatRequest, chat_repo: ChatRepo):
    """Rename a session. Unknown sessions report zero changes."""
    if not request.new_title or not request.session_id:
        raise ValidationError("Missing required fields")

    try:
        changes = await chat_repo.rename_session(request.session_id, request.new_title)
    except SQLAlchemyError as e:
        logger.exception(f"Failed to rename session {request.session_id}: {e}")
        raise StoreError("An error occurred while renaming the chat.") from e

    return UpdateResponse(message="Chat renamed successfully", changes=changes)
