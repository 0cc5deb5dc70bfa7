"""Domain value objects for Remark."""

from enum import Enum

from pydantic import field_validator

from remark.domain.value.common import RootValueObject


class CommentType(str, Enum):
    """Where a comment attaches.

    Root comments attach directly to a resource, branch comments attach to
    another comment.
    """

    ROOT = "root"
    BRANCH = "branch"


class Username(RootValueObject[str]):
    """Display name of an account at the time it posted or reacted."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Username must be 1-255 characters")
        return v


class EmojiCode(RootValueObject[str]):
    """Unified emoji code, e.g. ``1f44d`` or ``1f468-200d-1f4bb``."""

    @field_validator("root")
    @classmethod
    def validate_emoji_code(cls, v: str) -> str:
        """Validate emoji code is not empty and reasonably short."""
        if len(v) < 1 or len(v) > 64:
            raise ValueError("Emoji code must be 1-64 characters")
        return v
