"""
Chat API request/response models.

Field aliases keep the camelCase names used on the wire.
"""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """Request model for the chat endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    input: Optional[str] = Field(None, description="User message")
    context: Optional[str] = Field(None, description="Session context")
    chat_history: list[dict[str, Any]] = Field(
        default_factory=list,
        alias="chatHistory",
        description="Prior input/response pairs, oldest first",
    )
    session_id: Optional[str] = Field(None, alias="sessionId")
    is_new_session: bool = Field(False, alias="isNewSession")


class UpdateContextRequest(BaseModel):
    """Request model for updating a session's context.

    Accepts both ``context`` and the older ``newContext`` field name.
    """

    model_config = ConfigDict(populate_by_name=True)

    context: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("context", "newContext"),
    )
    session_id: Optional[str] = Field(None, alias="sessionId")


class RenameChatRequest(BaseModel):
    """Request model for renaming a session."""

    model_config = ConfigDict(populate_by_name=True)

    new_title: Optional[str] = Field(None, alias="newTitle")
    session_id: Optional[str] = Field(None, alias="sessionId")


class DeleteChatRequest(BaseModel):
    """Request model for deleting a session."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: Optional[str] = Field(None, alias="sessionId")


class NewSessionResponse(BaseModel):
    """Freshly generated session identifier."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(..., serialization_alias="sessionId")


class MessageResponse(BaseModel):
    message: str


class UpdateResponse(MessageResponse):
    changes: int
