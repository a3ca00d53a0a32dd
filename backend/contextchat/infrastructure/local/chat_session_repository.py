"""
SQLite implementation of Chat session repository.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import delete, func, select, update

from contextchat.infrastructure.local.database import (
    ChatORM,
    SessionMetadataORM,
    get_session_factory,
)
from contextchat.interfaces.chat_session_repository import IChatSessionRepository
from contextchat.models.chat_session import ChatMessage, Session, SessionSummary


class SqliteChatSessionRepository(IChatSessionRepository):
    """SQLite implementation of chat session repository."""

    def __init__(self, session_factory=None):
        self._session_factory = session_factory or get_session_factory()

    def _session_orm_to_model(self, orm: SessionMetadataORM) -> Session:
        """Convert session ORM object to Pydantic model."""
        return Session(
            session_id=orm.session_id,
            title=orm.title or "",
            context=orm.context,
        )

    def _message_orm_to_model(self, orm: ChatORM) -> ChatMessage:
        """Convert chat ORM object to Pydantic model."""
        return ChatMessage(
            id=orm.id,
            session_id=orm.session_id,
            timestamp=orm.timestamp,
            input=orm.input or "",
            response=orm.response or "",
        )

    async def create_session(
        self,
        session_id: str,
        title: str,
        context: Optional[str] = None,
    ) -> Session:
        """Create session metadata (first write wins)."""
        async with self._session_factory() as session:
            result = await session.execute(
                select(SessionMetadataORM).where(SessionMetadataORM.session_id == session_id)
            )
            orm = result.scalar_one_or_none()
            if orm:
                return self._session_orm_to_model(orm)

            orm = SessionMetadataORM(session_id=session_id, title=title, context=context)
            session.add(orm)
            await session.commit()
            await session.refresh(orm)
            return self._session_orm_to_model(orm)

    async def get_session(self, session_id: str) -> Optional[Session]:
        """Get session metadata."""
        async with self._session_factory() as session:
            result = await session.execute(
                select(SessionMetadataORM).where(SessionMetadataORM.session_id == session_id)
            )
            orm = result.scalar_one_or_none()
            return self._session_orm_to_model(orm) if orm else None

    async def add_message(
        self,
        session_id: str,
        timestamp: str,
        input: str,
        response: str,
    ) -> ChatMessage:
        """Persist one exchange."""
        async with self._session_factory() as session:
            orm = ChatORM(
                session_id=session_id,
                timestamp=timestamp,
                input=input,
                response=response,
            )
            session.add(orm)
            await session.commit()
            await session.refresh(orm)
            return self._message_orm_to_model(orm)

    async def list_latest_per_session(self) -> list[SessionSummary]:
        """List each session's most recent message, newest first."""
        latest = (
            select(
                ChatORM.session_id.label("session_id"),
                func.max(ChatORM.timestamp).label("max_time"),
            )
            .group_by(ChatORM.session_id)
            .subquery("latest_chats")
        )
        query = (
            select(
                SessionMetadataORM.session_id,
                SessionMetadataORM.title,
                SessionMetadataORM.context,
                ChatORM.timestamp,
                ChatORM.input,
                ChatORM.id,
            )
            .select_from(latest)
            .join(SessionMetadataORM, SessionMetadataORM.session_id == latest.c.session_id)
            .join(
                ChatORM,
                (ChatORM.session_id == latest.c.session_id)
                & (ChatORM.timestamp == latest.c.max_time),
            )
            .order_by(ChatORM.timestamp.desc())
        )
        async with self._session_factory() as session:
            result = await session.execute(query)
            return [
                SessionSummary(
                    session_id=row.session_id,
                    title=row.title,
                    context=row.context,
                    timestamp=row.timestamp,
                    input=row.input or "",
                    id=row.id,
                )
                for row in result.all()
            ]

    async def get_history(self, session_id: str) -> list[ChatMessage]:
        """List messages for a session, oldest first."""
        async with self._session_factory() as session:
            query = (
                select(ChatORM)
                .where(ChatORM.session_id == session_id)
                .order_by(ChatORM.timestamp.asc(), ChatORM.id.asc())
            )
            result = await session.execute(query)
            return [self._message_orm_to_model(orm) for orm in result.scalars().all()]

    async def update_context(self, session_id: str, context: Optional[str]) -> int:
        """Update a session's context."""
        async with self._session_factory() as session:
            result = await session.execute(
                update(SessionMetadataORM)
                .where(SessionMetadataORM.session_id == session_id)
                .values(context=context)
            )
            await session.commit()
            return result.rowcount

    async def rename_session(self, session_id: str, title: str) -> int:
        """Update a session's title."""
        async with self._session_factory() as session:
            result = await session.execute(
                update(SessionMetadataORM)
                .where(SessionMetadataORM.session_id == session_id)
                .values(title=title)
            )
            await session.commit()
            return result.rowcount

    async def delete_session(self, session_id: str) -> None:
        """Delete a session and its messages in one transaction."""
        async with self._session_factory() as session:
            async with session.begin():
                await session.execute(delete(ChatORM).where(ChatORM.session_id == session_id))
                await session.execute(
                    delete(SessionMetadataORM).where(SessionMetadataORM.session_id == session_id)
                )
