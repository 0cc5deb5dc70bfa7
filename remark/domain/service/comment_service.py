"""Comment domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from remark.domain.model.comment import (
    Comment,
    CommentReaction,
    CommentReactor,
    Commenter,
)
from remark.domain.repository import CommentRepository
from remark.domain.value import CommentId, CommentType, EmojiCode, ResourceId
from remark.domain.value.path import append_to_path, path_from_chain

from .base import Service


class CommentService(Service):
    """Domain service for comment operations.

    Each method is one user-facing operation composed of one or two
    repository calls. Read-then-write operations (branching, editing,
    deleting) are not transactional across requests.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_root_comment(
        self,
        resource_id: ResourceId,
        commenter: Commenter,
        text: str,
    ) -> Comment:
        """Create a comment attached directly to a resource.

        Args:
            resource_id: Resource being commented on
            commenter: Account snapshot of the author
            text: Comment text

        Returns:
            Created comment

        Raises:
            StoreError: If the comment could not be stored
        """
        with logfire.span(
            "comment_service.create_root_comment",
            resource_id=str(resource_id),
            commenter_account_id=str(commenter.account_id),
        ):
            comment_id = CommentId(uuid4())
            comment = Comment(
                comment_id=comment_id,
                comment_type=CommentType.ROOT,
                commenter=commenter,
                commented_timestamp=datetime.now(timezone.utc),
                comment_text=text,
                reactions=[],
                materialized_path=path_from_chain([resource_id, comment_id]),
            )

            await self.comment_repository.insert(comment)
            logfire.info(
                "Root comment created",
                comment_id=str(comment_id),
                resource_id=str(resource_id),
            )
            return comment

    async def create_branch_comment(
        self,
        branched_from: CommentId,
        commenter: Commenter,
        text: str,
    ) -> Comment:
        """Create a comment attached to another comment.

        The new path is the parent's current path plus the new ID.

        Args:
            branched_from: Parent comment ID
            commenter: Account snapshot of the author
            text: Comment text

        Returns:
            Created comment

        Raises:
            NotFoundError: If the parent comment does not exist
            StoreError: If the comment could not be stored
        """
        with logfire.span(
            "comment_service.create_branch_comment",
            branched_from=str(branched_from),
            commenter_account_id=str(commenter.account_id),
        ):
            parent = await self.comment_repository.find_by_id(branched_from)

            comment_id = CommentId(uuid4())
            comment = Comment(
                comment_id=comment_id,
                comment_type=CommentType.BRANCH,
                commenter=commenter,
                commented_timestamp=datetime.now(timezone.utc),
                comment_text=text,
                reactions=[],
                materialized_path=append_to_path(
                    parent.materialized_path, comment_id
                ),
            )

            await self.comment_repository.insert(comment)
            logfire.info(
                "Branch comment created",
                comment_id=str(comment_id),
                branched_from=str(branched_from),
                depth=comment.depth,
            )
            return comment

    async def react_to_comment(
        self,
        comment_id: CommentId,
        reactor: CommentReactor,
        emoji: EmojiCode,
    ) -> CommentReaction:
        """Add an emoji reaction to a comment.

        Raises:
            StoreError: If the comment could not be modified
        """
        with logfire.span(
            "comment_service.react_to_comment",
            comment_id=str(comment_id),
            reactor_account_id=str(reactor.account_id),
            emoji=emoji.root,
        ):
            reaction = CommentReaction(reactor=reactor, emoji_unified_code=emoji)
            await self.comment_repository.append_reaction(comment_id, reaction)
            logfire.info("Reaction added", comment_id=str(comment_id))
            return reaction

    async def undo_react_to_comment(
        self,
        comment_id: CommentId,
        reactor: CommentReactor,
        emoji: EmojiCode,
    ) -> CommentReaction:
        """Remove one matching emoji reaction from a comment.

        Raises:
            StoreError: If no matching reaction could be removed
        """
        with logfire.span(
            "comment_service.undo_react_to_comment",
            comment_id=str(comment_id),
            reactor_account_id=str(reactor.account_id),
            emoji=emoji.root,
        ):
            reaction = CommentReaction(reactor=reactor, emoji_unified_code=emoji)
            await self.comment_repository.remove_reaction(comment_id, reaction)
            logfire.info("Reaction removed", comment_id=str(comment_id))
            return reaction

    async def update_comment_text(self, comment_id: CommentId, text: str) -> Comment:
        """Replace the text of an existing comment.

        Args:
            comment_id: Comment ID
            text: New text content

        Returns:
            The comment with its new text

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.update_comment_text",
            comment_id=str(comment_id),
            text_length=len(text),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            updated = comment.model_copy(update={"comment_text": text})

            await self.comment_repository.replace_text(
                comment_id, updated.comment_text
            )
            logfire.info("Comment text updated", comment_id=str(comment_id))
            return updated

    async def delete_comment(self, comment_id: CommentId) -> int:
        """Delete a comment together with every branch below it.

        Args:
            comment_id: Comment ID

        Returns:
            Number of comments removed

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            deleted = await self.comment_repository.prune_subtree(
                comment.materialized_path
            )
            logfire.info(
                "Comment subtree pruned",
                comment_id=str(comment_id),
                deleted=deleted,
            )
            return deleted

    async def get_root_comments(self, resource_id: ResourceId) -> list[Comment]:
        """Get the comments attached directly to a resource, latest first."""
        with logfire.span(
            "comment_service.get_root_comments", resource_id=str(resource_id)
        ):
            comments = await self.comment_repository.find_children(str(resource_id))
            logfire.info(
                "Root comments retrieved",
                resource_id=str(resource_id),
                count=len(comments),
            )
            return comments

    async def get_branch_comments_next(
        self, branched_from: CommentId
    ) -> list[Comment]:
        """Get the direct branches of a comment, latest first.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.get_branch_comments_next",
            branched_from=str(branched_from),
        ):
            parent = await self.comment_repository.find_by_id(branched_from)
            comments = await self.comment_repository.find_children(
                parent.materialized_path
            )
            logfire.info(
                "Next-level branch comments retrieved",
                branched_from=str(branched_from),
                count=len(comments),
            )
            return comments

    async def get_branch_comments_rest(
        self, branched_from: CommentId
    ) -> list[Comment]:
        """Get a comment and its whole subtree, shallowest first.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.get_branch_comments_rest",
            branched_from=str(branched_from),
        ):
            parent = await self.comment_repository.find_by_id(branched_from)
            comments = await self.comment_repository.find_subtree(
                parent.materialized_path
            )
            logfire.info(
                "Branch subtree retrieved",
                branched_from=str(branched_from),
                count=len(comments),
            )
            return comments

    async def get_all_comments(self, resource_id: ResourceId) -> list[Comment]:
        """Get every comment on a resource, shallowest first."""
        with logfire.span(
            "comment_service.get_all_comments", resource_id=str(resource_id)
        ):
            comments = await self.comment_repository.find_subtree(str(resource_id))
            logfire.info(
                "All comments retrieved",
                resource_id=str(resource_id),
                count=len(comments),
            )
            return comments
