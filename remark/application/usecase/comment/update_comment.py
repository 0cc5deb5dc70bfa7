"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.service import CommentService
from remark.domain.value import CommentId


class UpdateCommentTextRequest(BaseModel):
    """Update comment text request."""

    comment_id: UUID
    new_comment_text: str


class UpdateCommentTextUseCase:
    """Use case for editing a comment's text."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment text use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentTextRequest) -> None:
        """Execute update comment text flow.

        Args:
            request: Comment ID and the replacement text

        Raises:
            NotFoundError: If the comment does not exist
        """
        await self.comment_service.update_comment_text(
            CommentId(request.comment_id), request.new_comment_text
        )
