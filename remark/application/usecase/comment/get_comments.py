"""Get comments use cases.

Four read paths over the materialized-path tree: the root comments of a
resource, the direct branches of a comment, a comment's whole subtree, and
every comment on a resource.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from remark.domain.model import Comment
from remark.domain.service import CommentService
from remark.domain.value import CommentId, CommentType, ResourceId


class AccountItem(BaseModel):
    """Commenter or reactor snapshot in responses."""

    account_id: str
    username: str


class ReactionItem(BaseModel):
    """Reaction item in responses."""

    reactor: AccountItem
    emoji_unified_code: str


class CommentItem(BaseModel):
    """Comment item in responses."""

    comment_id: str
    comment_type: CommentType
    commenter: AccountItem
    commented_timestamp: datetime
    comment_text: str
    reactions: list[ReactionItem]
    materialized_path: str
    depth: int

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        """Build a response item from a domain comment."""
        return cls(
            comment_id=str(comment.comment_id),
            comment_type=comment.comment_type,
            commenter=AccountItem(
                account_id=str(comment.commenter.account_id),
                username=comment.commenter.username.root,
            ),
            commented_timestamp=comment.commented_timestamp,
            comment_text=comment.comment_text,
            reactions=[
                ReactionItem(
                    reactor=AccountItem(
                        account_id=str(reaction.reactor.account_id),
                        username=reaction.reactor.username.root,
                    ),
                    emoji_unified_code=reaction.emoji_unified_code.root,
                )
                for reaction in comment.reactions
            ],
            materialized_path=comment.materialized_path,
            depth=comment.depth,
        )


class GetRootCommentsRequest(BaseModel):
    """Get root comments request."""

    resource_id: UUID


class GetRootCommentsResponse(BaseModel):
    """Root comments of a resource, latest first."""

    root_comments: list[CommentItem]


class GetBranchCommentsRequest(BaseModel):
    """Get branch comments request (next level or the rest of the subtree)."""

    branched_from: UUID


class GetBranchCommentsResponse(BaseModel):
    """Branch comments response."""

    branch_comments: list[CommentItem]


class GetAllCommentsRequest(BaseModel):
    """Get all comments request."""

    resource_id: UUID


class GetAllCommentsResponse(BaseModel):
    """Every comment on a resource, shallowest first."""

    comments: list[CommentItem]


class GetRootCommentsUseCase:
    """Use case for listing the comments attached directly to a resource."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetRootCommentsRequest) -> GetRootCommentsResponse:
        comments = await self.comment_service.get_root_comments(
            ResourceId(request.resource_id)
        )
        return GetRootCommentsResponse(
            root_comments=[CommentItem.from_comment(c) for c in comments]
        )


class GetBranchCommentsNextUseCase:
    """Use case for listing the direct branches of a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: GetBranchCommentsRequest
    ) -> GetBranchCommentsResponse:
        """Execute get next-level branches flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comments = await self.comment_service.get_branch_comments_next(
            CommentId(request.branched_from)
        )
        return GetBranchCommentsResponse(
            branch_comments=[CommentItem.from_comment(c) for c in comments]
        )


class GetBranchCommentsRestUseCase:
    """Use case for listing a comment together with its whole subtree."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: GetBranchCommentsRequest
    ) -> GetBranchCommentsResponse:
        """Execute get subtree flow.

        The requested comment itself is the first item.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comments = await self.comment_service.get_branch_comments_rest(
            CommentId(request.branched_from)
        )
        return GetBranchCommentsResponse(
            branch_comments=[CommentItem.from_comment(c) for c in comments]
        )


class GetAllCommentsUseCase:
    """Use case for listing every comment on a resource."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetAllCommentsRequest) -> GetAllCommentsResponse:
        comments = await self.comment_service.get_all_comments(
            ResourceId(request.resource_id)
        )
        return GetAllCommentsResponse(
            comments=[CommentItem.from_comment(c) for c in comments]
        )
