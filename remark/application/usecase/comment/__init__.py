"""Comment use cases."""

from .create_comment import (
    CreateBranchCommentRequest,
    CreateBranchCommentUseCase,
    CreateCommentResponse,
    CreateRootCommentRequest,
    CreateRootCommentUseCase,
)
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .get_comments import (
    CommentItem,
    GetAllCommentsRequest,
    GetAllCommentsResponse,
    GetAllCommentsUseCase,
    GetBranchCommentsNextUseCase,
    GetBranchCommentsRequest,
    GetBranchCommentsResponse,
    GetBranchCommentsRestUseCase,
    GetRootCommentsRequest,
    GetRootCommentsResponse,
    GetRootCommentsUseCase,
)
from .react_to_comment import (
    ReactToCommentRequest,
    ReactToCommentUseCase,
    UndoReactToCommentUseCase,
)
from .update_comment import UpdateCommentTextRequest, UpdateCommentTextUseCase

__all__ = [
    "CommentItem",
    "CreateBranchCommentRequest",
    "CreateBranchCommentUseCase",
    "CreateCommentResponse",
    "CreateRootCommentRequest",
    "CreateRootCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetAllCommentsRequest",
    "GetAllCommentsResponse",
    "GetAllCommentsUseCase",
    "GetBranchCommentsNextUseCase",
    "GetBranchCommentsRequest",
    "GetBranchCommentsResponse",
    "GetBranchCommentsRestUseCase",
    "GetRootCommentsRequest",
    "GetRootCommentsResponse",
    "GetRootCommentsUseCase",
    "ReactToCommentRequest",
    "ReactToCommentUseCase",
    "UndoReactToCommentUseCase",
    "UpdateCommentTextRequest",
    "UpdateCommentTextUseCase",
]
