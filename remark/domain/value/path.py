"""Materialized path encoding for comment trees.

A comment's position is stored as the chain of identifiers from its resource
down to the comment itself, joined with ``->``:

    resource_id->root_comment_id->branch_id->...

Descendant queries become prefix matches on this string, and direct-children
queries become an anchored match for exactly one more segment.
"""

import re
from typing import Iterable
from uuid import UUID

PATH_SEPARATOR = "->"

UUID_PATTERN = (
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def path_from_chain(ids: Iterable[UUID | str]) -> str:
    """Join an ordered chain of identifiers into a materialized path.

    Args:
        ids: Identifiers from the resource down to the node

    Returns:
        The joined path, or an empty string for an empty chain
    """
    return PATH_SEPARATOR.join(str(i) for i in ids)


def append_to_path(existing_path: str, new_id: UUID | str) -> str:
    """Extend a path by one identifier.

    Args:
        existing_path: Parent path (may be empty)
        new_id: Identifier of the new child node

    Returns:
        The child's path
    """
    if not existing_path:
        return str(new_id)
    return f"{existing_path}{PATH_SEPARATOR}{new_id}"


def split_path(path: str) -> list[str]:
    """Split a path back into its identifier segments."""
    if not path:
        return []
    return path.split(PATH_SEPARATOR)


def path_length(path: str) -> int:
    """Number of segments in a path."""
    return len(split_path(path))


def is_within(path: str, prefix: str) -> bool:
    """Whether ``path`` is ``prefix`` itself or one of its descendants.

    The match is aligned on segment boundaries, so ``a->bc`` is not within
    ``a->b``.
    """
    return path == prefix or path.startswith(prefix + PATH_SEPARATOR)


def child_path_pattern(parent_path: str) -> str:
    """Anchored regex matching paths exactly one segment below ``parent_path``.

    The same pattern is valid for Python's ``re`` and PostgreSQL's ``~``
    operator.
    """
    return f"^{re.escape(parent_path)}{PATH_SEPARATOR}{UUID_PATTERN}$"
