"""In-memory comment repository for testing."""

import re

import logfire

from remark.domain.error import NotFoundError, NotModifiedError, StoreError
from remark.domain.model.comment import Comment, CommentReaction
from remark.domain.repository.comment import CommentRepository
from remark.domain.value import CommentId
from remark.domain.value.path import child_path_pattern, is_within, path_length


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Mirrors the PostgreSQL repository's matching and ordering rules.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def insert(self, comment: Comment) -> None:
        """Insert a new comment."""
        if comment.comment_id in self._comments:
            raise StoreError(f"insert failed: duplicate comment {comment.comment_id}")
        self._comments[comment.comment_id] = comment

    async def find_by_id(self, comment_id: CommentId) -> Comment:
        """Find a comment by ID."""
        comment = self._comments.get(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def append_reaction(
        self, comment_id: CommentId, reaction: CommentReaction
    ) -> None:
        """Append a reaction."""
        comment = self._comments.get(comment_id)
        if comment is None:
            raise NotModifiedError("append_reaction", str(comment_id))

        # Create updated comment (since comments are immutable)
        self._comments[comment_id] = comment.model_copy(
            update={"reactions": [*comment.reactions, reaction]}
        )

    async def remove_reaction(
        self, comment_id: CommentId, reaction: CommentReaction
    ) -> None:
        """Remove the first reaction equal to ``reaction``."""
        comment = self._comments.get(comment_id)
        if comment is None or reaction not in comment.reactions:
            raise NotModifiedError("remove_reaction", str(comment_id))

        reactions = list(comment.reactions)
        reactions.remove(reaction)
        self._comments[comment_id] = comment.model_copy(
            update={"reactions": reactions}
        )

    async def replace_text(self, comment_id: CommentId, text: str) -> None:
        """Set the comment text."""
        comment = self._comments.get(comment_id)
        if comment is None:
            logfire.info("No comment documents updated", comment_id=str(comment_id))
            return
        self._comments[comment_id] = comment.model_copy(update={"comment_text": text})

    async def prune_subtree(self, path: str) -> int:
        """Delete every comment within ``path``."""
        doomed = [
            c.comment_id
            for c in self._comments.values()
            if is_within(c.materialized_path, path)
        ]
        for comment_id in doomed:
            del self._comments[comment_id]

        if not doomed:
            logfire.info("No comment documents deleted", path=path)
        return len(doomed)

    async def find_children(self, parent_path: str) -> list[Comment]:
        """Find comments exactly one segment below ``parent_path``."""
        pattern = re.compile(child_path_pattern(parent_path))
        comments = [
            c for c in self._comments.values() if pattern.match(c.materialized_path)
        ]

        # Latest first
        comments.sort(key=lambda c: c.commented_timestamp, reverse=True)
        return comments

    async def find_subtree(self, root_path: str) -> list[Comment]:
        """Find every comment within ``root_path``, shallowest first."""
        comments = [
            c
            for c in self._comments.values()
            if is_within(c.materialized_path, root_path)
        ]

        # Latest first, then a stable sort by depth
        comments.sort(key=lambda c: c.commented_timestamp, reverse=True)
        comments.sort(key=lambda c: path_length(c.materialized_path))
        return comments
