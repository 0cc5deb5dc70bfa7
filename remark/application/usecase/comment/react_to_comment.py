"""Reaction use cases."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.model import CommentReactor
from remark.domain.service import CommentService
from remark.domain.value import AccountId, CommentId, EmojiCode, Username


class ReactToCommentRequest(BaseModel):
    """React (or undo a reaction) to a comment."""

    reacted_comment_id: UUID
    reactor_account_id: UUID
    reactor_username: Username
    emoji_unicode: EmojiCode


def _reactor(request: ReactToCommentRequest) -> CommentReactor:
    return CommentReactor(
        account_id=AccountId(request.reactor_account_id),
        username=request.reactor_username,
    )


class ReactToCommentUseCase:
    """Use case for adding an emoji reaction."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ReactToCommentRequest) -> None:
        """Add the reaction.

        Raises:
            StoreError: If the comment could not be modified
        """
        await self.comment_service.react_to_comment(
            comment_id=CommentId(request.reacted_comment_id),
            reactor=_reactor(request),
            emoji=request.emoji_unicode,
        )


class UndoReactToCommentUseCase:
    """Use case for removing an emoji reaction."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ReactToCommentRequest) -> None:
        """Remove one matching reaction.

        Raises:
            StoreError: If no matching reaction could be removed
        """
        await self.comment_service.undo_react_to_comment(
            comment_id=CommentId(request.reacted_comment_id),
            reactor=_reactor(request),
            emoji=request.emoji_unicode,
        )
