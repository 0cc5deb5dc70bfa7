"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List

from remark.domain.model.comment import Comment, CommentReaction
from remark.domain.value import CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations. All tree
    queries work on the materialized path, never on parent pointers.
    Implementations live in the persistence layer and raise
    ``StoreError`` for any failure other than a missing comment.
    """

    @abstractmethod
    async def insert(self, comment: Comment) -> None:
        """Store a fully constructed comment.

        Args:
            comment: The comment, with its materialized path already set

        Raises:
            StoreError: If the write could not be completed
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Comment:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment

        Raises:
            NotFoundError: If no comment has this ID
        """
        pass

    @abstractmethod
    async def append_reaction(
        self, comment_id: CommentId, reaction: CommentReaction
    ) -> None:
        """Atomically append a reaction to a comment.

        Duplicate reactions are not rejected.

        Raises:
            NotModifiedError: If the comment does not exist
        """
        pass

    @abstractmethod
    async def remove_reaction(
        self, comment_id: CommentId, reaction: CommentReaction
    ) -> None:
        """Atomically remove the first reaction equal to ``reaction``.

        Raises:
            NotModifiedError: If nothing was removed
        """
        pass

    @abstractmethod
    async def replace_text(self, comment_id: CommentId, text: str) -> None:
        """Replace a comment's text.

        A missing comment is logged, not raised.
        """
        pass

    @abstractmethod
    async def prune_subtree(self, path: str) -> int:
        """Delete the comment at ``path`` and all of its descendants.

        Args:
            path: Materialized path of the subtree root

        Returns:
            Number of comments deleted (zero is logged, not raised)
        """
        pass

    @abstractmethod
    async def find_children(self, parent_path: str) -> List[Comment]:
        """Find comments exactly one level below ``parent_path``.

        Args:
            parent_path: Path of the parent comment, or a bare resource ID

        Returns:
            Direct children, most recent first
        """
        pass

    @abstractmethod
    async def find_subtree(self, root_path: str) -> List[Comment]:
        """Find every comment at or below ``root_path``.

        Args:
            root_path: Path of the subtree root, or a bare resource ID

        Returns:
            Comments ordered shallowest first, most recent first within a level
        """
        pass
