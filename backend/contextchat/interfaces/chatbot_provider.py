"""
Chatbot provider interface.

Defines the contract for the hosted NLP engine.
Implementations: LiteLLM (NLP Cloud, OpenAI, Bedrock, ...), Gemini API.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IChatbotProvider(ABC):
    """Abstract interface for chatbot providers."""

    @abstractmethod
    async def chatbot(
        self,
        input: str,
        context: Optional[str],
        history: list[dict[str, Any]],
    ) -> dict[str, Any]:
        """
        Generate a reply to ``input``.

        Args:
            input: User input
            context: Background instructions for the conversation
            history: Prior exchanges as ``{"input", "response"}`` dicts, oldest first

        Returns:
            Engine payload with at least a ``response`` key and the updated ``history``

        Raises:
            UpstreamError: If the engine call fails
        """
        pass

    @abstractmethod
    def get_model_name(self) -> str:
        """
        Get the human-readable model name.

        Returns:
            Model name string for logging/display
        """
        pass
