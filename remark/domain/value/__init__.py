"""Domain value objects for Remark."""

from remark.domain.value.identifiers import AccountId, CommentId, ResourceId
from remark.domain.value.types import CommentType, EmojiCode, Username

__all__ = [
    # Identifiers
    "AccountId",
    "CommentId",
    "ResourceId",
    # Types
    "CommentType",
    "EmojiCode",
    "Username",
]
