"""
Session and chat message models.

These models mirror the two persisted tables: session metadata and the
per-exchange chat records.
"""

from typing import Optional

from pydantic import BaseModel, Field

TITLE_MAX_LENGTH = 100


class Session(BaseModel):
    """Session metadata."""

    session_id: str = Field(..., description="Unique session identifier")
    title: str = Field("", description="Session title, seeded from the first message")
    context: Optional[str] = Field(None, description="Background instructions sent with every message")


class ChatMessage(BaseModel):
    """One persisted exchange: the user input and the bot response."""

    id: int
    session_id: str
    timestamp: str = Field(..., description="ISO-8601 UTC timestamp")
    input: str
    response: str


class SessionSummary(BaseModel):
    """A session joined with its most recent message."""

    session_id: str
    title: Optional[str] = None
    context: Optional[str] = None
    timestamp: str
    input: str
    id: int
