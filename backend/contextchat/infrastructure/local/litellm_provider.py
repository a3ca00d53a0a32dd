"""
LiteLLM chatbot provider.

Routes to NLP Cloud ("nlp_cloud/<model>"), OpenAI, Bedrock and any other
provider LiteLLM supports. Includes support for custom endpoints (api_base).
"""

import os
from typing import Any, Optional

import litellm

from contextchat.core.config import get_settings
from contextchat.core.exceptions import ConfigurationError, UpstreamError
from contextchat.core.logger import logger
from contextchat.interfaces.chatbot_provider import IChatbotProvider


def build_messages(
    input: str,
    context: Optional[str],
    history: list[dict[str, Any]],
) -> list[dict[str, str]]:
    """Convert context/history/input into chat-completion messages."""
    messages: list[dict[str, str]] = []
    if context:
        messages.append({"role": "system", "content": context})
    for entry in history:
        if entry.get("input"):
            messages.append({"role": "user", "content": str(entry["input"])})
        if entry.get("response"):
            messages.append({"role": "assistant", "content": str(entry["response"])})
    messages.append({"role": "user", "content": input})
    return messages


class LiteLLMProvider(IChatbotProvider):
    """Chatbot provider backed by litellm.acompletion."""

    def __init__(
        self,
        model_name: str,
        api_key: str,
        api_base: Optional[str] = None,
    ):
        """
        Initialize LiteLLM provider.

        Args:
            model_name: LiteLLM model identifier (e.g., "nlp_cloud/chatdolphin")
            api_key: Provider API key
            api_base: Custom API endpoint URL (optional, for proxy servers)
        """
        if not model_name or not api_key:
            raise ConfigurationError(
                "API key or Model is missing. Please add NLP_API_KEY and NLP_MODEL to a .env file."
            )

        self._model_name = model_name
        self._api_key = api_key
        self._settings = get_settings()
        self._api_base = api_base or self._settings.NLP_API_BASE or None

        if self._settings.DEBUG:
            os.environ["LITELLM_LOG"] = "DEBUG"

    def get_model_name(self) -> str:
        """Get human-readable model name."""
        if self._api_base:
            return f"LiteLLM ({self._model_name} @ {self._api_base})"
        return f"LiteLLM ({self._model_name})"

    async def chatbot(
        self,
        input: str,
        context: Optional[str],
        history: list[dict[str, Any]],
    ) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "model": self._model_name,
            "messages": build_messages(input, context, history),
            "api_key": self._api_key,
        }
        if self._api_base:
            kwargs["api_base"] = self._api_base

        try:
            response = await litellm.acompletion(**kwargs)
        except Exception as e:
            status = getattr(e, "status_code", None)
            detail = getattr(e, "message", None) or str(e)
            logger.error(f"Chatbot call failed, Status: {status}")
            logger.error(f"Chatbot call failed, Data: {detail}")
            raise UpstreamError("Chatbot request failed", status=status, detail=detail) from e

        try:
            text = response.choices[0].message.content or ""
        except (AttributeError, IndexError, TypeError) as e:
            logger.error(f"Chatbot call returned a malformed reply: {e}")
            raise UpstreamError("Chatbot request failed", detail=f"Malformed reply: {e}") from e

        return {
            "response": text,
            "history": [*history, {"input": input, "response": text}],
        }
