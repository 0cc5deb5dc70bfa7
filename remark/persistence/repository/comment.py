"""PostgreSQL implementation of Comment repository."""

from collections import defaultdict
from contextlib import contextmanager
from typing import Dict, Iterator, List, Sequence

import logfire
from sqlalchemy import String, delete, desc, func, literal, or_, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from remark.domain.error import NotFoundError, NotModifiedError, StoreError
from remark.domain.model import Comment, CommentReaction
from remark.domain.repository import CommentRepository
from remark.domain.value import CommentId
from remark.domain.value.path import PATH_SEPARATOR, child_path_pattern
from remark.persistence.mappers import (
    comment_to_dict,
    reaction_to_dict,
    row_to_comment,
    row_to_reaction,
)
from remark.persistence.tables import comment_reactions_table, comments_table


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Re-raise database and connection failures as StoreError.

    Logging is left to the interface layer.
    """
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        raise StoreError(f"{operation} failed: {e}") from e


def _within(path: str):
    """Predicate for the node at ``path`` and all of its descendants."""
    column = comments_table.c.materialized_path
    return or_(
        column == path,
        column.startswith(path + PATH_SEPARATOR, autoescape=True),
    )


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Comments live in ``comments``; reactions are rows in
    ``comment_reactions`` ordered by their serial ID and removed with their
    comment by ``ON DELETE CASCADE``.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _load_reactions(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, List[CommentReaction]]:
        """Fetch reactions for a batch of comments in insertion order."""
        reactions: Dict[CommentId, List[CommentReaction]] = defaultdict(list)
        if not comment_ids:
            return reactions

        stmt = (
            select(comment_reactions_table)
            .where(comment_reactions_table.c.comment_id.in_(comment_ids))
            .order_by(comment_reactions_table.c.id)
        )
        result = await self.session.execute(stmt)
        for row in result.fetchall():
            data = row._asdict()
            reactions[data["comment_id"]].append(row_to_reaction(data))
        return reactions

    async def _fetch_comments(self, stmt) -> List[Comment]:
        """Run a comments query and attach each comment's reactions."""
        result = await self.session.execute(stmt)
        rows = [row._asdict() for row in result.fetchall()]
        reactions = await self._load_reactions([row["comment_id"] for row in rows])
        return [row_to_comment(row, reactions.get(row["comment_id"], [])) for row in rows]

    async def insert(self, comment: Comment) -> None:
        """Insert a new comment and any reactions it already carries."""
        with _store_errors("insert"):
            await self.session.execute(
                comments_table.insert().values(**comment_to_dict(comment))
            )
            if comment.reactions:
                await self.session.execute(
                    comment_reactions_table.insert(),
                    [
                        reaction_to_dict(comment.comment_id, reaction)
                        for reaction in comment.reactions
                    ],
                )
            await self.session.flush()

    async def find_by_id(self, comment_id: CommentId) -> Comment:
        """Find a comment by ID."""
        with _store_errors("find_by_id"):
            stmt = select(comments_table).where(
                comments_table.c.comment_id == comment_id
            )
            comments = await self._fetch_comments(stmt)

        if not comments:
            raise NotFoundError("Comment", str(comment_id))
        return comments[0]

    async def append_reaction(
        self, comment_id: CommentId, reaction: CommentReaction
    ) -> None:
        """Append a reaction in one INSERT ... SELECT guarded by the comment row."""
        with _store_errors("append_reaction"):
            source = select(
                comments_table.c.comment_id,
                literal(reaction.reactor.account_id, UUID(as_uuid=True)),
                literal(reaction.reactor.username.root, String),
                literal(reaction.emoji_unified_code.root, String),
            ).where(comments_table.c.comment_id == comment_id)
            stmt = (
                comment_reactions_table.insert()
                .from_select(
                    [
                        "comment_id",
                        "reactor_account_id",
                        "reactor_username",
                        "emoji_unified_code",
                    ],
                    source,
                )
                .returning(comment_reactions_table.c.id)
            )
            result = await self.session.execute(stmt)
            inserted = result.fetchone()
            await self.session.flush()

        if inserted is None:
            raise NotModifiedError("append_reaction", str(comment_id))

    async def remove_reaction(
        self, comment_id: CommentId, reaction: CommentReaction
    ) -> None:
        """Delete the oldest reaction row equal to ``reaction``."""
        reactions = comment_reactions_table
        with _store_errors("remove_reaction"):
            target = (
                select(reactions.c.id)
                .where(reactions.c.comment_id == comment_id)
                .where(reactions.c.reactor_account_id == reaction.reactor.account_id)
                .where(reactions.c.reactor_username == reaction.reactor.username.root)
                .where(
                    reactions.c.emoji_unified_code == reaction.emoji_unified_code.root
                )
                .order_by(reactions.c.id)
                .limit(1)
                .scalar_subquery()
            )
            stmt = delete(reactions).where(reactions.c.id == target).returning(
                reactions.c.id
            )
            result = await self.session.execute(stmt)
            removed = result.fetchone()
            await self.session.flush()

        if removed is None:
            raise NotModifiedError("remove_reaction", str(comment_id))

    async def replace_text(self, comment_id: CommentId, text: str) -> None:
        """Set the comment text."""
        with _store_errors("replace_text"):
            stmt = (
                update(comments_table)
                .where(comments_table.c.comment_id == comment_id)
                .values(comment_text=text)
            )
            result = await self.session.execute(stmt)
            await self.session.flush()

        if result.rowcount == 0:
            logfire.info("No comment documents updated", comment_id=str(comment_id))

    async def prune_subtree(self, path: str) -> int:
        """Delete every comment within ``path`` in a single statement."""
        with _store_errors("prune_subtree"):
            stmt = delete(comments_table).where(_within(path))
            result = await self.session.execute(stmt)
            await self.session.flush()

        deleted = result.rowcount or 0
        if deleted == 0:
            logfire.info("No comment documents deleted", path=path)
        return deleted

    async def find_children(self, parent_path: str) -> List[Comment]:
        """Find comments exactly one segment below ``parent_path``."""
        column = comments_table.c.materialized_path
        with _store_errors("find_children"):
            stmt = (
                select(comments_table)
                # LIKE narrows via the path index, the regex pins the depth
                .where(column.startswith(parent_path + PATH_SEPARATOR, autoescape=True))
                .where(column.regexp_match(child_path_pattern(parent_path)))
                .order_by(desc(comments_table.c.commented_timestamp))
            )
            return await self._fetch_comments(stmt)

    async def find_subtree(self, root_path: str) -> List[Comment]:
        """Find every comment within ``root_path``, shallowest first."""
        column = comments_table.c.materialized_path
        depth = func.array_length(func.string_to_array(column, PATH_SEPARATOR), 1)
        with _store_errors("find_subtree"):
            stmt = (
                select(comments_table)
                .where(_within(root_path))
                .order_by(depth, desc(comments_table.c.commented_timestamp))
            )
            return await self._fetch_comments(stmt)
