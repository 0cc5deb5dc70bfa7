"""Comment entity.

Comments attach to a resource (root comments) or to another comment (branch
comments) with unlimited depth. Tree position is encoded in a materialized
path fixed at creation time.
"""

from datetime import datetime, timezone

from pydantic import Field, computed_field

from remark.domain.model.common import DomainModel
from remark.domain.value import AccountId, CommentId, CommentType, EmojiCode, Username
from remark.domain.value.common import ValueObject
from remark.domain.value.path import path_length


class Commenter(ValueObject):
    """Snapshot of the account that posted a comment."""

    account_id: AccountId
    username: Username


class CommentReactor(ValueObject):
    """Snapshot of the account that reacted to a comment."""

    account_id: AccountId
    username: Username


class CommentReaction(ValueObject):
    """An emoji reaction.

    Reactions compare structurally, which is what removal matches on.
    """

    reactor: CommentReactor
    emoji_unified_code: EmojiCode


class Comment(DomainModel):
    """Comment entity.

    Threading is managed entirely through ``materialized_path``: the
    ``->``-joined chain from the resource ID down to and including this
    comment's ID. A root comment's path is ``resource_id->comment_id``; a
    branch comment's path is its parent's path plus its own ID.
    """

    comment_id: CommentId
    comment_type: CommentType
    commenter: Commenter
    commented_timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    comment_text: str
    reactions: list[CommentReaction] = Field(default_factory=list)
    materialized_path: str = Field(min_length=1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def depth(self) -> int:
        """Nesting level below the resource (0 for root comments)."""
        return path_length(self.materialized_path) - 2
