"""
Gemini API chatbot provider.

Uses the Gemini API with an API key through google-genai.
"""

from typing import Any, Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai.types import Content, GenerateContentConfig, Part

from contextchat.core.exceptions import ConfigurationError, UpstreamError
from contextchat.core.logger import logger
from contextchat.interfaces.chatbot_provider import IChatbotProvider


def build_contents(input: str, history: list[dict[str, Any]]) -> list[Content]:
    """Convert history and input into Gemini conversation turns."""
    contents: list[Content] = []
    for entry in history:
        if entry.get("input"):
            contents.append(Content(role="user", parts=[Part(text=str(entry["input"]))]))
        if entry.get("response"):
            contents.append(Content(role="model", parts=[Part(text=str(entry["response"]))]))
    contents.append(Content(role="user", parts=[Part(text=input)]))
    return contents


class GeminiAPIProvider(IChatbotProvider):
    """Gemini API provider using an API key."""

    def __init__(self, model_name: str, api_key: str):
        """
        Initialize Gemini API provider.

        Args:
            model_name: Gemini model name (e.g., "gemini-2.0-flash")
            api_key: Google API key
        """
        if not model_name or not api_key:
            raise ConfigurationError(
                "API key or Model is missing. Please add NLP_API_KEY and NLP_MODEL to a .env file."
            )
        self._model_name = model_name
        self._client = genai.Client(api_key=api_key)

    def get_model_name(self) -> str:
        """Get human-readable model name."""
        return f"Gemini API ({self._model_name})"

    async def chatbot(
        self,
        input: str,
        context: Optional[str],
        history: list[dict[str, Any]],
    ) -> dict[str, Any]:
        config = GenerateContentConfig(system_instruction=context) if context else None
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model_name,
                contents=build_contents(input, history),
                config=config,
            )
        except genai_errors.APIError as e:
            logger.error(f"Chatbot call failed, Status: {e.code}")
            logger.error(f"Chatbot call failed, Data: {e.message}")
            raise UpstreamError("Chatbot request failed", status=e.code, detail=e.message) from e
        except Exception as e:
            logger.error(f"Chatbot call failed: {e}")
            raise UpstreamError("Chatbot request failed", detail=str(e)) from e

        text = (response.text or "").strip()
        return {
            "response": text,
            "history": [*history, {"input": input, "response": text}],
        }
