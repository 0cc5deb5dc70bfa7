"""PostgreSQL repository implementations."""

from remark.persistence.repository.comment import PostgresCommentRepository

__all__ = [
    "PostgresCommentRepository",
]
