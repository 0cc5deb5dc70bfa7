"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from remark.application.usecase.comment import (
    CreateBranchCommentRequest,
    CreateBranchCommentUseCase,
    CreateCommentResponse,
    CreateRootCommentRequest,
    CreateRootCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
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
    UpdateCommentTextRequest,
    UpdateCommentTextUseCase,
)
from remark.domain.error import NotFoundError, StoreError
from remark.interface.error import not_found, store_failure

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


@router.post(
    "/root-comment/new",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_root_comment(
    request: CreateRootCommentRequest,
    use_case: FromDishka[CreateRootCommentUseCase],
) -> CreateCommentResponse:
    """Comment directly on a resource.

    Args:
        request: Resource ID, commenter snapshot and text
        use_case: Create root comment use case from DI

    Returns:
        The new comment's ID

    Raises:
        HTTPException: 500 if the comment could not be stored
    """
    try:
        return await use_case.execute(request)
    except StoreError as e:
        raise store_failure(e, "create root comment")


@router.post(
    "/branch-comment/new",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_branch_comment(
    request: CreateBranchCommentRequest,
    use_case: FromDishka[CreateBranchCommentUseCase],
) -> CreateCommentResponse:
    """Reply to an existing comment.

    Raises:
        HTTPException: 404 if the parent comment does not exist,
            500 if the comment could not be stored
    """
    try:
        return await use_case.execute(request)
    except NotFoundError as e:
        raise not_found(e)
    except StoreError as e:
        raise store_failure(e, "create branch comment")


@router.get("/root-comments", response_model=GetRootCommentsResponse)
async def get_root_comments(
    resource_id: UUID,
    use_case: FromDishka[GetRootCommentsUseCase],
) -> GetRootCommentsResponse:
    """Get the comments attached directly to a resource, latest first."""
    try:
        return await use_case.execute(GetRootCommentsRequest(resource_id=resource_id))
    except StoreError as e:
        raise store_failure(e, "get root comments")


@router.get("/branch-comments/next", response_model=GetBranchCommentsResponse)
async def get_branch_comments_next(
    branched_from: UUID,
    use_case: FromDishka[GetBranchCommentsNextUseCase],
) -> GetBranchCommentsResponse:
    """Get the direct branches of a comment, latest first."""
    try:
        return await use_case.execute(
            GetBranchCommentsRequest(branched_from=branched_from)
        )
    except NotFoundError as e:
        raise not_found(e)
    except StoreError as e:
        raise store_failure(e, "get branch comments")


@router.get("/branch-comments/rest", response_model=GetBranchCommentsResponse)
async def get_branch_comments_rest(
    branched_from: UUID,
    use_case: FromDishka[GetBranchCommentsRestUseCase],
) -> GetBranchCommentsResponse:
    """Get a comment and every branch below it, shallowest first."""
    try:
        return await use_case.execute(
            GetBranchCommentsRequest(branched_from=branched_from)
        )
    except NotFoundError as e:
        raise not_found(e)
    except StoreError as e:
        raise store_failure(e, "get branch comments")


@router.get("/comments/all", response_model=GetAllCommentsResponse)
async def get_all_comments(
    resource_id: UUID,
    use_case: FromDishka[GetAllCommentsUseCase],
) -> GetAllCommentsResponse:
    """Get every comment on a resource, shallowest first."""
    try:
        return await use_case.execute(GetAllCommentsRequest(resource_id=resource_id))
    except StoreError as e:
        raise store_failure(e, "get all comments")


@router.post("/comment/update", status_code=status.HTTP_204_NO_CONTENT)
async def update_comment_text(
    request: UpdateCommentTextRequest,
    use_case: FromDishka[UpdateCommentTextUseCase],
) -> None:
    """Replace a comment's text.

    Raises:
        HTTPException: 404 if the comment does not exist
    """
    try:
        await use_case.execute(request)
    except NotFoundError as e:
        raise not_found(e)
    except StoreError as e:
        raise store_failure(e, "update comment")


@router.post("/comment/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    request: DeleteCommentRequest,
    use_case: FromDishka[DeleteCommentUseCase],
) -> None:
    """Delete a comment and every branch below it.

    Raises:
        HTTPException: 404 if the comment does not exist
    """
    try:
        await use_case.execute(request)
    except NotFoundError as e:
        raise not_found(e)
    except StoreError as e:
        raise store_failure(e, "delete comment")
