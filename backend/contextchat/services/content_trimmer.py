"""
Token budget trimming for chat requests.

The budget is shared jointly by input, chat history and context, with a fixed
priority: input is never trimmed, history is trimmed before context.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from contextchat.services.token_utils import count_tokens, tokenize, trim_tokens


@dataclass
class TrimResult:
    """Trimmed request content plus the token accounting behind it."""

    input: str
    context: Optional[str]
    chat_history: list[dict[str, Any]] = field(default_factory=list)
    max_tokens: int = 0
    total_tokens: int = 0


def history_text(chat_history: list[dict[str, Any]]) -> str:
    """Space-join every entry's input and response."""
    return " ".join(
        f"{entry.get('input') or ''} {entry.get('response') or ''}" for entry in chat_history
    )


def count_history_tokens(chat_history: list[dict[str, Any]]) -> int:
    return count_tokens(history_text(chat_history))


def trim_chat_history(
    chat_history: list[dict[str, Any]],
    max_tokens: int,
) -> list[dict[str, Any]]:
    """
    Drop whole entries, oldest first, until the history fits ``max_tokens``.

    The caller's list is not modified.
    """
    trimmed = list(chat_history)
    while trimmed and count_history_tokens(trimmed) > max_tokens:
        trimmed.pop(0)
    return trimmed


def trim_all_content(
    input: str,
    context: Optional[str],
    chat_history: list[dict[str, Any]],
    max_tokens: int,
) -> TrimResult:
    """
    Fit input, context and chat history into ``max_tokens``.

    When everything fits, the arguments come back unchanged. Otherwise the
    budget left after the input goes to history first; if history alone
    overflows it, history is trimmed and context is emptied. Context is trimmed
    from its start (oldest text) to whatever budget remains.

    A budget smaller than the input never raises: history and context
    degrade to empty.
    """
    input_tokens = tokenize(input)
    context_tokens = tokenize(context)
    history_token_count = count_history_tokens(chat_history)

    total_tokens = len(input_tokens) + history_token_count + len(context_tokens)

    if total_tokens > max_tokens:
        remaining = max_tokens - len(input_tokens)

        if history_token_count > remaining:
            chat_history = trim_chat_history(chat_history, remaining)
            remaining = 0
        else:
            remaining -= history_token_count

        if len(context_tokens) > remaining:
            context = trim_tokens(context_tokens, remaining)

    return TrimResult(
        input=input,
        context=context,
        chat_history=chat_history,
        max_tokens=max_tokens,
        total_tokens=total_tokens,
    )
