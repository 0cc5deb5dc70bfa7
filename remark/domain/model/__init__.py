"""Domain model entities for Remark."""

from remark.domain.model.comment import (
    Comment,
    CommentReaction,
    CommentReactor,
    Commenter,
)

__all__ = [
    "Comment",
    "CommentReaction",
    "CommentReactor",
    "Commenter",
]
