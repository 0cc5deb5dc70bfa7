"""Application layer DI providers."""

from dishka import Scope, provide

from remark.application.usecase.comment import (
    CreateBranchCommentUseCase,
    CreateRootCommentUseCase,
    DeleteCommentUseCase,
    GetAllCommentsUseCase,
    GetBranchCommentsNextUseCase,
    GetBranchCommentsRestUseCase,
    GetRootCommentsUseCase,
    ReactToCommentUseCase,
    UndoReactToCommentUseCase,
    UpdateCommentTextUseCase,
)
from remark.domain.service import CommentService
from remark.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment creation
    @provide(scope=Scope.REQUEST)
    def get_create_root_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateRootCommentUseCase:
        """Provide create root comment use case."""
        return CreateRootCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_create_branch_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateBranchCommentUseCase:
        """Provide create branch comment use case."""
        return CreateBranchCommentUseCase(comment_service=comment_service)

    # Comment mutation
    @provide(scope=Scope.REQUEST)
    def get_update_comment_text_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentTextUseCase:
        """Provide update comment text use case."""
        return UpdateCommentTextUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Reactions
    @provide(scope=Scope.REQUEST)
    def get_react_to_comment_use_case(
        self, comment_service: CommentService
    ) -> ReactToCommentUseCase:
        """Provide react to comment use case."""
        return ReactToCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_undo_react_to_comment_use_case(
        self, comment_service: CommentService
    ) -> UndoReactToCommentUseCase:
        """Provide undo reaction use case."""
        return UndoReactToCommentUseCase(comment_service=comment_service)

    # Queries
    @provide(scope=Scope.REQUEST)
    def get_get_root_comments_use_case(
        self, comment_service: CommentService
    ) -> GetRootCommentsUseCase:
        """Provide get root comments use case."""
        return GetRootCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_branch_comments_next_use_case(
        self, comment_service: CommentService
    ) -> GetBranchCommentsNextUseCase:
        """Provide get next-level branch comments use case."""
        return GetBranchCommentsNextUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_branch_comments_rest_use_case(
        self, comment_service: CommentService
    ) -> GetBranchCommentsRestUseCase:
        """Provide get branch subtree use case."""
        return GetBranchCommentsRestUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_all_comments_use_case(
        self, comment_service: CommentService
    ) -> GetAllCommentsUseCase:
        """Provide get all comments use case."""
        return GetAllCommentsUseCase(comment_service=comment_service)
