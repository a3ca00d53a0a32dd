"""API routers."""

from contextchat.api import chat

__all__ = ["chat"]
