"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import logfire
import pytest

from remark.domain.model import Comment, CommentReaction, CommentReactor, Commenter
from remark.domain.value import (
    AccountId,
    CommentId,
    CommentType,
    EmojiCode,
    ResourceId,
    Username,
)
from remark.domain.value.path import append_to_path, path_from_chain

# Console-only Logfire so service spans don't warn about missing configuration
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_commenter(username: str = "alice") -> Commenter:
    """Helper to build a commenter snapshot."""
    return Commenter(account_id=AccountId(uuid4()), username=Username(username))


def make_reaction(
    emoji: str = "1f44d", username: str = "bob", account_id: UUID | None = None
) -> CommentReaction:
    """Helper to build a reaction value."""
    return CommentReaction(
        reactor=CommentReactor(
            account_id=AccountId(account_id or uuid4()),
            username=Username(username),
        ),
        emoji_unified_code=EmojiCode(emoji),
    )


def make_comment(
    parent_path: str,
    minutes: int = 0,
    text: str = "A comment",
) -> Comment:
    """Helper to build a comment below ``parent_path``.

    A bare resource ID as ``parent_path`` yields a root comment. ``minutes``
    offsets the timestamp from a fixed base so ordering is deterministic.
    """
    comment_id = CommentId(uuid4())
    is_root = "->" not in parent_path
    return Comment(
        comment_id=comment_id,
        comment_type=CommentType.ROOT if is_root else CommentType.BRANCH,
        commenter=make_commenter(),
        commented_timestamp=BASE_TIME + timedelta(minutes=minutes),
        comment_text=text,
        materialized_path=append_to_path(parent_path, comment_id),
    )


@pytest.fixture
def resource_id() -> ResourceId:
    """A fresh resource ID."""
    return ResourceId(uuid4())


@pytest.fixture
def resource_path(resource_id: ResourceId) -> str:
    """The resource ID as a zero-depth path."""
    return path_from_chain([resource_id])


class UnreachableSession:
    """Stand-in AsyncSession whose every statement fails like a lost database."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or OSError("connection refused")
        self.statements = []

    async def execute(self, statement, *args, **kwargs):
        self.statements.append(statement)
        raise self.error

    async def flush(self) -> None:
        raise self.error
