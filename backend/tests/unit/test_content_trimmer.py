"""
Unit tests for token budget trimming.
"""

from contextchat.services.content_trimmer import (
    count_history_tokens,
    history_text,
    trim_all_content,
    trim_chat_history,
)


def _entry(input: str, response: str) -> dict:
    return {"input": input, "response": response}


def _numbered_history() -> list[dict]:
    # Joined: "1111 aaaa 2222 bbbb 3333 cccc" -> 29 chars -> 8 tokens
    return [_entry("1111", "aaaa"), _entry("2222", "bbbb"), _entry("3333", "cccc")]


def test_history_text_space_joins_inputs_and_responses() -> None:
    assert history_text(_numbered_history()) == "1111 aaaa 2222 bbbb 3333 cccc"
    assert history_text([]) == ""


def test_history_text_treats_missing_fields_as_empty() -> None:
    assert history_text([{"input": "abc"}, {"response": None}]) == "abc   "


def test_within_budget_returns_arguments_unchanged() -> None:
    history = [_entry("hi", "hey")]

    result = trim_all_content("hello", "be nice", history, 2048)

    assert result.input == "hello"
    assert result.context == "be nice"
    assert result.chat_history is history
    assert result.total_tokens == 6
    assert result.max_tokens == 2048


def test_budget_equal_to_input_empties_history_and_context() -> None:
    result = trim_all_content(
        "abcdefgh",
        "context text",
        [_entry("aaaa", "bbbb")],
        2,
    )

    assert result.input == "abcdefgh"
    assert result.chat_history == []
    assert result.context == ""


def test_budget_equal_to_input_with_empty_history_empties_context() -> None:
    result = trim_all_content("abcdefgh", "some context", [], 2)

    assert result.input == "abcdefgh"
    assert result.chat_history == []
    assert result.context == ""


def test_history_trimmed_from_oldest_entry() -> None:
    history = _numbered_history()

    result = trim_all_content("inpt", "", history, 6)

    assert result.chat_history == [_entry("2222", "bbbb"), _entry("3333", "cccc")]
    assert count_history_tokens(result.chat_history) <= 6 - 1


def test_history_trimmed_until_it_fits_remaining_budget() -> None:
    result = trim_all_content("inpt", "", _numbered_history(), 4)

    assert result.chat_history == [_entry("3333", "cccc")]
    assert count_history_tokens(result.chat_history) <= 4 - 1


def test_history_trimming_leaves_no_budget_for_context() -> None:
    history = [_entry("1111", "aaaa"), _entry("2222", "bbbb")]

    result = trim_all_content("inpt", "ctx", history, 4)

    assert result.chat_history == [_entry("2222", "bbbb")]
    assert result.context == ""


def test_context_trimmed_from_its_start_when_history_fits() -> None:
    history = [_entry("hi", "yo")]

    result = trim_all_content("inpt", "0123456789abcdef", history, 5)

    assert result.chat_history is history
    assert result.context == "89abcdef"


def test_negative_remaining_budget_degrades_to_empty() -> None:
    result = trim_all_content("abcdefgh", "context", _numbered_history(), 0)

    assert result.input == "abcdefgh"
    assert result.chat_history == []
    assert result.context == ""
    assert result.total_tokens == 2 + 8 + 2


def test_trimming_does_not_mutate_caller_history() -> None:
    history = _numbered_history()

    trim_all_content("inpt", "", history, 4)

    assert len(history) == 3


def test_trim_chat_history_noop_on_empty_history() -> None:
    assert trim_chat_history([], 0) == []
    assert trim_chat_history([], -5) == []


def test_none_context_within_budget_stays_none() -> None:
    result = trim_all_content("inpt", None, [], 10)

    assert result.context is None
