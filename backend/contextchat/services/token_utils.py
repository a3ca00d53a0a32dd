"""
Fixed-width token accounting.

A token is a 4-character chunk. This is a cheap stand-in for the engine's
real tokenizer and is only used to keep requests inside the token budget.
"""

from __future__ import annotations

from typing import Any

TOKEN_SIZE = 4


def tokenize(text: Any) -> list[str]:
    """
    Split text into consecutive non-overlapping chunks of TOKEN_SIZE characters.

    Non-string input yields an empty list.
    """
    if not isinstance(text, str):
        return []
    return [text[i : i + TOKEN_SIZE] for i in range(0, len(text), TOKEN_SIZE)]


def count_tokens(text: Any) -> int:
    return len(tokenize(text))


def trim_tokens(tokens: list[str], max_tokens: int) -> str:
    """Drop tokens from the start until at most ``max_tokens`` remain, then join."""
    if max_tokens <= 0:
        return ""
    return "".join(tokens[-max_tokens:])
