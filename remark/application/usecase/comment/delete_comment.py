"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.service import CommentService
from remark.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: UUID


class DeleteCommentUseCase:
    """Use case for deleting a comment and every branch below it."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        await self.comment_service.delete_comment(CommentId(request.comment_id))
