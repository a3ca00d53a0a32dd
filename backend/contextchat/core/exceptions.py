"""
Custom exceptions for the application.
"""

from typing import Any, Optional


class ChatAppError(Exception):
    """Base exception for contextchat."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(ChatAppError):
    """A required request field is missing or invalid."""

    pass


class UpstreamError(ChatAppError):
    """The hosted NLP engine call failed."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        detail: Optional[Any] = None,
    ):
        super().__init__(message, details={"status": status, "detail": detail})
        self.status = status
        self.detail = detail


class StoreError(ChatAppError):
    """A query or write against the session store failed."""

    pass


class ConfigurationError(ChatAppError):
    """Required configuration is missing."""

    pass
