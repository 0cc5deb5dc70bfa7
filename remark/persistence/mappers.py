"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's ORM.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from remark.domain.model import Comment, CommentReaction, CommentReactor, Commenter
from remark.domain.value import (
    AccountId,
    CommentId,
    CommentType,
    EmojiCode,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_reaction(row: Dict[str, Any]) -> CommentReaction:
    """Convert a comment_reactions row to a CommentReaction value."""
    return CommentReaction(
        reactor=CommentReactor(
            account_id=AccountId(_uuid(row["reactor_account_id"])),
            username=Username(row["reactor_username"]),
        ),
        emoji_unified_code=EmojiCode(row["emoji_unified_code"]),
    )


def reaction_to_dict(comment_id: CommentId, reaction: CommentReaction) -> Dict[str, Any]:
    """Convert a CommentReaction to a comment_reactions row dict."""
    return {
        "comment_id": comment_id,
        "reactor_account_id": reaction.reactor.account_id,
        "reactor_username": reaction.reactor.username.root,
        "emoji_unified_code": reaction.emoji_unified_code.root,
    }


def row_to_comment(
    row: Dict[str, Any], reactions: Iterable[CommentReaction] = ()
) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: comments row as dict
        reactions: The comment's reactions in insertion order

    Returns:
        Comment domain model
    """
    return Comment(
        comment_id=CommentId(_uuid(row["comment_id"])),
        comment_type=CommentType(row["comment_type"]),
        commenter=Commenter(
            account_id=AccountId(_uuid(row["commenter_account_id"])),
            username=Username(row["commenter_username"]),
        ),
        commented_timestamp=row["commented_timestamp"],
        comment_text=row["comment_text"],
        reactions=list(reactions),
        materialized_path=row["materialized_path"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to a comments row dict.

    Reactions live in their own table and are not included.
    """
    return {
        "comment_id": comment.comment_id,
        "comment_type": comment.comment_type.value,
        "commenter_account_id": comment.commenter.account_id,
        "commenter_username": comment.commenter.username.root,
        "commented_timestamp": comment.commented_timestamp,
        "comment_text": comment.comment_text,
        "materialized_path": comment.materialized_path,
    }
