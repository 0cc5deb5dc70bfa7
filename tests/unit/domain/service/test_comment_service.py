"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from remark.domain.error import NotFoundError, NotModifiedError
from remark.domain.model import CommentReactor
from remark.domain.repository import CommentRepository
from remark.domain.service import CommentService
from remark.domain.value import (
    AccountId,
    CommentId,
    CommentType,
    EmojiCode,
    ResourceId,
    Username,
)
from remark.domain.value.path import path_from_chain
from tests.conftest import make_commenter
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateRootComment:
    """Tests for create_root_comment."""

    @pytest.mark.asyncio
    async def test_root_path_is_resource_then_comment(self, unit_env):
        """Root comment path is exactly resource_id->comment_id."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        resource_id = ResourceId(uuid4())

        # Act
        result = await comment_service.create_root_comment(
            resource_id=resource_id,
            commenter=make_commenter("alice"),
            text="First!",
        )

        # Assert
        assert result.comment_type == CommentType.ROOT
        assert result.materialized_path == f"{resource_id}->{result.comment_id}"
        assert result.depth == 0
        assert result.reactions == []

        saved = await comment_repo.find_by_id(result.comment_id)
        assert saved == result

    @pytest.mark.asyncio
    async def test_each_root_gets_a_fresh_id(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        resource_id = ResourceId(uuid4())

        first = await comment_service.create_root_comment(
            resource_id, make_commenter(), "one"
        )
        second = await comment_service.create_root_comment(
            resource_id, make_commenter(), "two"
        )

        assert first.comment_id != second.comment_id


class TestCreateBranchComment:
    """Tests for create_branch_comment."""

    @pytest.mark.asyncio
    async def test_branch_path_extends_parent_path(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        root = await comment_service.create_root_comment(
            ResourceId(uuid4()), make_commenter(), "root"
        )

        branch = await comment_service.create_branch_comment(
            branched_from=root.comment_id,
            commenter=make_commenter("bob"),
            text="reply",
        )

        assert branch.comment_type == CommentType.BRANCH
        assert branch.materialized_path == (
            f"{root.materialized_path}->{branch.comment_id}"
        )
        assert branch.depth == 1

    @pytest.mark.asyncio
    async def test_path_invariant_holds_at_every_depth(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        resource_id = ResourceId(uuid4())
        parent = await comment_service.create_root_comment(
            resource_id, make_commenter(), "root"
        )
        chain = [resource_id, parent.comment_id]

        for depth in range(1, 8):
            child = await comment_service.create_branch_comment(
                parent.comment_id, make_commenter(), f"depth {depth}"
            )
            chain.append(child.comment_id)

            assert child.materialized_path == f"{parent.materialized_path}->{child.comment_id}"
            assert child.materialized_path == path_from_chain(chain)
            assert child.depth == depth
            parent = child

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await comment_service.create_branch_comment(
                CommentId(uuid4()), make_commenter(), "orphan"
            )


class TestReactions:
    """Tests for react_to_comment and undo_react_to_comment."""

    @pytest.mark.asyncio
    async def test_react_then_undo_round_trip(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_service.create_root_comment(
            ResourceId(uuid4()), make_commenter(), "react to me"
        )
        reactor = CommentReactor(account_id=AccountId(uuid4()), username=Username("bob"))
        emoji = EmojiCode("1f525")

        reaction = await comment_service.react_to_comment(
            comment.comment_id, reactor, emoji
        )
        reacted = await comment_repo.find_by_id(comment.comment_id)
        assert reacted.reactions == [reaction]

        await comment_service.undo_react_to_comment(comment.comment_id, reactor, emoji)
        undone = await comment_repo.find_by_id(comment.comment_id)
        assert undone.reactions == []

    @pytest.mark.asyncio
    async def test_react_to_missing_comment_is_store_failure(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        reactor = CommentReactor(account_id=AccountId(uuid4()), username=Username("bob"))

        with pytest.raises(NotModifiedError):
            await comment_service.react_to_comment(
                CommentId(uuid4()), reactor, EmojiCode("1f44d")
            )

    @pytest.mark.asyncio
    async def test_undo_without_reaction_is_store_failure(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_root_comment(
            ResourceId(uuid4()), make_commenter(), "no reactions yet"
        )
        reactor = CommentReactor(account_id=AccountId(uuid4()), username=Username("bob"))

        with pytest.raises(NotModifiedError):
            await comment_service.undo_react_to_comment(
                comment.comment_id, reactor, EmojiCode("1f44d")
            )


class TestUpdateCommentText:
    """Tests for update_comment_text."""

    @pytest.mark.asyncio
    async def test_update_changes_only_text(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_service.create_root_comment(
            ResourceId(uuid4()), make_commenter(), "typo"
        )

        updated = await comment_service.update_comment_text(comment.comment_id, "fixed")

        saved = await comment_repo.find_by_id(comment.comment_id)
        assert saved == updated
        assert saved.comment_text == "fixed"
        assert saved.materialized_path == comment.materialized_path
        assert saved.commented_timestamp == comment.commented_timestamp

    @pytest.mark.asyncio
    async def test_update_twice_with_same_text_is_idempotent(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_service.create_root_comment(
            ResourceId(uuid4()), make_commenter(), "draft"
        )

        await comment_service.update_comment_text(comment.comment_id, "final")
        once = await comment_repo.find_by_id(comment.comment_id)
        await comment_service.update_comment_text(comment.comment_id, "final")
        twice = await comment_repo.find_by_id(comment.comment_id)

        assert once == twice

    @pytest.mark.asyncio
    async def test_update_missing_comment_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.update_comment_text(CommentId(uuid4()), "text")


class TestDeleteComment:
    """Tests for delete_comment."""

    @pytest.mark.asyncio
    async def test_delete_prunes_whole_subtree(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        resource_id = ResourceId(uuid4())
        root = await comment_service.create_root_comment(
            resource_id, make_commenter(), "root"
        )
        branch = await comment_service.create_branch_comment(
            root.comment_id, make_commenter(), "branch"
        )
        leaf = await comment_service.create_branch_comment(
            branch.comment_id, make_commenter(), "leaf"
        )
        sibling = await comment_service.create_root_comment(
            resource_id, make_commenter(), "sibling"
        )

        deleted = await comment_service.delete_comment(root.comment_id)

        assert deleted == 3
        for removed in (root, branch, leaf):
            with pytest.raises(NotFoundError):
                await comment_repo.find_by_id(removed.comment_id)
        assert await comment_repo.find_by_id(sibling.comment_id) == sibling

    @pytest.mark.asyncio
    async def test_delete_missing_comment_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(CommentId(uuid4()))


class TestQueries:
    """Tests for the four read operations."""

    @pytest.mark.asyncio
    async def test_get_root_comments_only_returns_roots(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        resource_id = ResourceId(uuid4())
        root = await comment_service.create_root_comment(
            resource_id, make_commenter(), "root"
        )
        await comment_service.create_branch_comment(
            root.comment_id, make_commenter(), "branch"
        )

        roots = await comment_service.get_root_comments(resource_id)

        assert [c.comment_id for c in roots] == [root.comment_id]

    @pytest.mark.asyncio
    async def test_get_branch_comments_for_missing_parent_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.get_branch_comments_next(CommentId(uuid4()))
        with pytest.raises(NotFoundError):
            await comment_service.get_branch_comments_rest(CommentId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_all_comments_for_unknown_resource_is_empty(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.get_all_comments(ResourceId(uuid4())) == []


class TestThreadScenario:
    """Create, query and prune a two-level thread end to end."""

    @pytest.mark.asyncio
    async def test_root_branch_query_prune(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        resource_id = ResourceId(uuid4())

        c1 = await comment_service.create_root_comment(
            resource_id, make_commenter(), "C1"
        )
        assert c1.materialized_path == f"{resource_id}->{c1.comment_id}"

        c2 = await comment_service.create_branch_comment(
            c1.comment_id, make_commenter(), "C2"
        )
        assert c2.materialized_path == (
            f"{resource_id}->{c1.comment_id}->{c2.comment_id}"
        )

        children = await comment_service.get_branch_comments_next(c1.comment_id)
        assert [c.comment_id for c in children] == [c2.comment_id]

        subtree = await comment_service.get_branch_comments_rest(c1.comment_id)
        assert [c.comment_id for c in subtree] == [c1.comment_id, c2.comment_id]

        await comment_repo.prune_subtree(c1.materialized_path)

        for gone in (c1, c2):
            with pytest.raises(NotFoundError):
                await comment_repo.find_by_id(gone.comment_id)
