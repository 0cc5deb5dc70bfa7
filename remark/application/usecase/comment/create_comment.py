"""Create comment use cases."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.model import Commenter
from remark.domain.service import CommentService
from remark.domain.value import AccountId, CommentId, ResourceId, Username


class CreateRootCommentRequest(BaseModel):
    """Create root comment request."""

    resource_id: UUID
    commenter_account_id: UUID
    commenter_username: Username
    comment_text: str


class CreateBranchCommentRequest(BaseModel):
    """Create branch comment request."""

    branched_from: UUID  # Parent comment ID
    commenter_account_id: UUID
    commenter_username: Username
    comment_text: str


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str


class CreateRootCommentUseCase:
    """Use case for commenting directly on a resource."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create root comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateRootCommentRequest) -> CreateCommentResponse:
        """Execute create root comment flow.

        Args:
            request: Create root comment request

        Returns:
            The new comment's ID

        Raises:
            StoreError: If the comment could not be stored
        """
        comment = await self.comment_service.create_root_comment(
            resource_id=ResourceId(request.resource_id),
            commenter=Commenter(
                account_id=AccountId(request.commenter_account_id),
                username=request.commenter_username,
            ),
            text=request.comment_text,
        )
        return CreateCommentResponse(comment_id=str(comment.comment_id))


class CreateBranchCommentUseCase:
    """Use case for replying to an existing comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create branch comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, request: CreateBranchCommentRequest
    ) -> CreateCommentResponse:
        """Execute create branch comment flow.

        Args:
            request: Create branch comment request

        Returns:
            The new comment's ID

        Raises:
            NotFoundError: If the parent comment does not exist
            StoreError: If the comment could not be stored
        """
        comment = await self.comment_service.create_branch_comment(
            branched_from=CommentId(request.branched_from),
            commenter=Commenter(
                account_id=AccountId(request.commenter_account_id),
                username=request.commenter_username,
            ),
            text=request.comment_text,
        )
        return CreateCommentResponse(comment_id=str(comment.comment_id))
