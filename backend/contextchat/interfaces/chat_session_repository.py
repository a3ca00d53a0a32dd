"""
Chat session repository interface.

Defines the contract for session metadata and chat history persistence.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from contextchat.models.chat_session import ChatMessage, Session, SessionSummary


class IChatSessionRepository(ABC):
    """Abstract interface for session and chat persistence."""

    @abstractmethod
    async def create_session(
        self,
        session_id: str,
        title: str,
        context: Optional[str] = None,
    ) -> Session:
        """
        Create session metadata.

        An existing session with the same ID is left untouched.

        Args:
            session_id: Session ID
            title: Session title
            context: Optional session context

        Returns:
            Session
        """
        pass

    @abstractmethod
    async def get_session(self, session_id: str) -> Optional[Session]:
        """Get session metadata, or None if unknown."""
        pass

    @abstractmethod
    async def add_message(
        self,
        session_id: str,
        timestamp: str,
        input: str,
        response: str,
    ) -> ChatMessage:
        """
        Persist one exchange.

        Args:
            session_id: Session ID (must reference an existing session)
            timestamp: ISO-8601 timestamp of the exchange
            input: User input, untrimmed
            response: Bot response

        Returns:
            ChatMessage
        """
        pass

    @abstractmethod
    async def list_latest_per_session(self) -> list[SessionSummary]:
        """
        List one row per session holding its most recent message.

        Sessions without messages are excluded. Ordered by timestamp,
        newest first.
        """
        pass

    @abstractmethod
    async def get_history(self, session_id: str) -> list[ChatMessage]:
        """List messages for a session, oldest first."""
        pass

    @abstractmethod
    async def update_context(self, session_id: str, context: Optional[str]) -> int:
        """
        Update a session's context.

        Returns:
            Number of rows affected (0 if the session is unknown)
        """
        pass

    @abstractmethod
    async def rename_session(self, session_id: str, title: str) -> int:
        """
        Update a session's title.

        Returns:
            Number of rows affected (0 if the session is unknown)
        """
        pass

    @abstractmethod
    async def delete_session(self, session_id: str) -> None:
        """
        Delete a session and all of its messages atomically.

        Deleting an unknown session is not an error.
        """
        pass
