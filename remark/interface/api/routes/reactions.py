"""Reaction routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from remark.application.usecase.comment import (
    ReactToCommentRequest,
    ReactToCommentUseCase,
    UndoReactToCommentUseCase,
)
from remark.domain.error import StoreError
from remark.interface.error import store_failure

router = APIRouter(prefix="/reaction", tags=["reactions"], route_class=DishkaRoute)


@router.post("/new", status_code=status.HTTP_204_NO_CONTENT)
async def react_to_comment(
    request: ReactToCommentRequest,
    use_case: FromDishka[ReactToCommentUseCase],
) -> None:
    """React to a comment with an emoji.

    A missing comment is reported as a server error, matching the store's
    "nothing modified" signal.
    """
    try:
        await use_case.execute(request)
    except StoreError as e:
        raise store_failure(e, "react to comment")


@router.post("/undo", status_code=status.HTTP_204_NO_CONTENT)
async def undo_react_to_comment(
    request: ReactToCommentRequest,
    use_case: FromDishka[UndoReactToCommentUseCase],
) -> None:
    """Remove one matching emoji reaction from a comment."""
    try:
        await use_case.execute(request)
    except StoreError as e:
        raise store_failure(e, "undo reaction")
