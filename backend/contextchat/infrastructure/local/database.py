"""
SQLite database configuration and ORM models.

This module defines the SQLAlchemy ORM models and database initialization.
"""

from functools import lru_cache

from sqlalchemy import Column, ForeignKey, Integer, String, Text, event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from contextchat.core.config import get_settings


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    pass


# ===========================================
# ORM Models
# ===========================================


class SessionMetadataORM(Base):
    """Session metadata ORM model."""

    __tablename__ = "session_metadata"

    session_id = Column(String, primary_key=True)
    title = Column(Text, nullable=True)
    context = Column(Text, nullable=True)


class ChatORM(Base):
    """Chat exchange ORM model."""

    __tablename__ = "chats"

    id = Column(Integer, primary_key=True, autoincrement=True)
    session_id = Column(String, ForeignKey("session_metadata.session_id"), index=True)
    timestamp = Column(Text, index=True)  # ISO-8601 string
    input = Column(Text)
    response = Column(Text)


# ===========================================
# Database Session Management
# ===========================================


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """Turn on foreign key enforcement for SQLite connections."""
    module = type(dbapi_connection).__module__
    if "sqlite" not in module:
        return
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_for_url(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the given database URL."""
    return create_async_engine(url, echo=echo)


@lru_cache()
def get_engine() -> AsyncEngine:
    """Get async engine instance."""
    settings = get_settings()
    return create_engine_for_url(settings.DATABASE_URL, echo=settings.DEBUG)


def get_session_factory():
    """Get async session factory."""
    engine = get_engine()
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db(engine: AsyncEngine | None = None):
    """Initialize database tables."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
