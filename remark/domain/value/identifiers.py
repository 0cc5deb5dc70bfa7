"""Strongly typed identifiers for Remark entities.

Using NewType keeps comment, resource and account IDs from being mixed up
while still storing plain UUIDs.
"""

from typing import NewType
from uuid import UUID

CommentId = NewType("CommentId", UUID)
ResourceId = NewType("ResourceId", UUID)
AccountId = NewType("AccountId", UUID)
