"""
Chat service.

Orchestrates token trimming, the chatbot call and persistence for one chat
request.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from contextchat.core.exceptions import ValidationError
from contextchat.core.logger import logger
from contextchat.interfaces.chat_session_repository import IChatSessionRepository
from contextchat.interfaces.chatbot_provider import IChatbotProvider
from contextchat.models.chat_session import TITLE_MAX_LENGTH
from contextchat.services.content_trimmer import trim_all_content

# Bookkeeping fields added by the store; the engine only needs input/response
INTERNAL_HISTORY_FIELDS = ("id", "timestamp", "session_id")


def now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def clean_history(history: Any = None) -> list[dict[str, Any]]:
    """Strip store bookkeeping fields from each history entry."""
    if history is None:
        return []
    if not isinstance(history, list):
        logger.error(f"clean_history expects a list, got {type(history).__name__}")
        return []
    return [
        {key: value for key, value in entry.items() if key not in INTERNAL_HISTORY_FIELDS}
        for entry in history
        if isinstance(entry, dict)
    ]


class ChatService:
    """Service handling a chat exchange end to end."""

    def __init__(
        self,
        chat_repo: IChatSessionRepository,
        chatbot: IChatbotProvider,
        token_limit: int,
    ):
        self.chat_repo = chat_repo
        self.chatbot = chatbot
        self.token_limit = token_limit

    async def handle_chat(
        self,
        input: Optional[str],
        context: Optional[str],
        chat_history: Optional[list[dict[str, Any]]],
        session_id: Optional[str],
        is_new_session: bool = False,
    ) -> dict[str, Any]:
        """
        Process one chat request.

        Steps:
        1. Validate input and session ID
        2. Create the session row for a new session
        3. Trim content to the token budget
        4. Call the chatbot with the trimmed content
        5. Persist the exchange with the untrimmed input

        The session row from step 2 is kept even if step 4 fails.

        Returns:
            Engine payload merged with ``sessionId``

        Raises:
            ValidationError: If input or session ID is missing
            UpstreamError: If the chatbot call fails
        """
        if not input:
            raise ValidationError("Input is required for a new chat")
        if not session_id:
            raise ValidationError("Session Id is required for a new chat")

        if is_new_session:
            await self.chat_repo.create_session(
                session_id=session_id,
                title=input[:TITLE_MAX_LENGTH],
                context=context,
            )

        timestamp = now_iso()

        trimmed = trim_all_content(input, context, chat_history or [], self.token_limit)
        logger.debug(
            f"Token budget: total={trimmed.total_tokens} max={trimmed.max_tokens} "
            f"history_entries={len(trimmed.chat_history)}"
        )

        api_response = await self.chatbot.chatbot(
            trimmed.input,
            trimmed.context,
            clean_history(trimmed.chat_history),
        )
        bot_response = api_response.get("response", "")

        await self.chat_repo.add_message(
            session_id=session_id,
            timestamp=timestamp,
            input=input,
            response=bot_response,
        )

        return {**api_response, "sessionId": session_id}
