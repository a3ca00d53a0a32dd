"""
Unit tests for the SQLite chat session repository.
"""

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from contextchat.infrastructure.local.database import ChatORM, SessionMetadataORM


async def _seed(chat_repo, session_id: str, title: str, *exchanges: tuple[str, str, str]) -> None:
    await chat_repo.create_session(session_id, title, context=f"context for {session_id}")
    for timestamp, input, response in exchanges:
        await chat_repo.add_message(session_id, timestamp, input, response)


@pytest.mark.asyncio
async def test_create_session(chat_repo):
    created = await chat_repo.create_session("s1", "First question", context="be brief")

    assert created.session_id == "s1"
    assert created.title == "First question"
    assert created.context == "be brief"

    fetched = await chat_repo.get_session("s1")
    assert fetched == created


@pytest.mark.asyncio
async def test_create_session_keeps_first_title(chat_repo):
    await chat_repo.create_session("s1", "Original", context="a")
    again = await chat_repo.create_session("s1", "Other", context="b")

    assert again.title == "Original"
    assert again.context == "a"


@pytest.mark.asyncio
async def test_get_unknown_session_returns_none(chat_repo):
    assert await chat_repo.get_session("missing") is None


@pytest.mark.asyncio
async def test_add_message_assigns_increasing_ids(chat_repo):
    await chat_repo.create_session("s1", "t")

    first = await chat_repo.add_message("s1", "2024-05-01T10:00:00.000Z", "hi", "hello")
    second = await chat_repo.add_message("s1", "2024-05-01T10:01:00.000Z", "how are you", "fine")

    assert second.id > first.id
    assert first.session_id == "s1"
    assert first.input == "hi"
    assert first.response == "hello"


@pytest.mark.asyncio
async def test_add_message_requires_existing_session(chat_repo):
    with pytest.raises(IntegrityError):
        await chat_repo.add_message("ghost", "2024-05-01T10:00:00.000Z", "hi", "hello")


@pytest.mark.asyncio
async def test_get_history_ordered_oldest_first(chat_repo):
    await _seed(
        chat_repo,
        "s1",
        "t",
        ("2024-05-01T10:02:00.000Z", "third", "c"),
        ("2024-05-01T10:00:00.000Z", "first", "a"),
        ("2024-05-01T10:01:00.000Z", "second", "b"),
    )

    history = await chat_repo.get_history("s1")

    assert [m.input for m in history] == ["first", "second", "third"]


@pytest.mark.asyncio
async def test_get_history_unknown_session_is_empty(chat_repo):
    assert await chat_repo.get_history("missing") == []


@pytest.mark.asyncio
async def test_list_latest_per_session(chat_repo):
    await _seed(
        chat_repo,
        "older",
        "Older chat",
        ("2024-05-01T09:00:00.000Z", "old 1", "r"),
        ("2024-05-01T09:30:00.000Z", "old 2", "r"),
    )
    await _seed(
        chat_repo,
        "newer",
        "Newer chat",
        ("2024-05-01T11:00:00.000Z", "new 1", "r"),
    )
    # Sessions without messages are excluded
    await chat_repo.create_session("empty", "No messages yet")

    summaries = await chat_repo.list_latest_per_session()

    assert [s.session_id for s in summaries] == ["newer", "older"]
    assert summaries[0].title == "Newer chat"
    assert summaries[0].input == "new 1"
    assert summaries[0].timestamp == "2024-05-01T11:00:00.000Z"
    assert summaries[1].input == "old 2"
    assert summaries[1].context == "context for older"


@pytest.mark.asyncio
async def test_update_context(chat_repo):
    await chat_repo.create_session("s1", "t", context="old")

    changes = await chat_repo.update_context("s1", "new")

    assert changes == 1
    assert (await chat_repo.get_session("s1")).context == "new"


@pytest.mark.asyncio
async def test_update_context_unknown_session_reports_zero(chat_repo):
    assert await chat_repo.update_context("missing", "new") == 0


@pytest.mark.asyncio
async def test_rename_session(chat_repo):
    await chat_repo.create_session("s1", "Before")

    changes = await chat_repo.rename_session("s1", "After")

    assert changes == 1
    assert (await chat_repo.get_session("s1")).title == "After"


@pytest.mark.asyncio
async def test_rename_unknown_session_reports_zero(chat_repo):
    assert await chat_repo.rename_session("missing", "After") == 0


@pytest.mark.asyncio
async def test_delete_session_removes_messages(chat_repo, session_factory):
    await _seed(chat_repo, "s1", "t", ("2024-05-01T10:00:00.000Z", "hi", "hello"))
    await _seed(chat_repo, "s2", "t", ("2024-05-01T10:00:00.000Z", "keep", "me"))

    await chat_repo.delete_session("s1")

    assert await chat_repo.get_session("s1") is None
    assert await chat_repo.get_history("s1") == []
    assert len(await chat_repo.get_history("s2")) == 1

    async with session_factory() as session:
        rows = (await session.execute(select(ChatORM))).scalars().all()
        assert [row.session_id for row in rows] == ["s2"]


@pytest.mark.asyncio
async def test_delete_unknown_session_leaves_store_unchanged(chat_repo, session_factory):
    await _seed(chat_repo, "s1", "t", ("2024-05-01T10:00:00.000Z", "hi", "hello"))

    await chat_repo.delete_session("missing")

    async with session_factory() as session:
        sessions = (await session.execute(select(SessionMetadataORM))).scalars().all()
        chats = (await session.execute(select(ChatORM))).scalars().all()
    assert [s.session_id for s in sessions] == ["s1"]
    assert len(chats) == 1
