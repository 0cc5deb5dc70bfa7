"""End-to-end tests for the comment and reaction endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from remark.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by an in-memory comment store."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance)


def _root(client, resource_id, text="Root comment"):
    response = client.post(
        "/root-comment/new",
        json={
            "resource_id": str(resource_id),
            "commenter_account_id": str(uuid4()),
            "commenter_username": "alice",
            "comment_text": text,
        },
    )
    assert response.status_code == 201
    return response.json()["comment_id"]


def _branch(client, parent_id, text="Branch comment"):
    response = client.post(
        "/branch-comment/new",
        json={
            "branched_from": parent_id,
            "commenter_account_id": str(uuid4()),
            "commenter_username": "bob",
            "comment_text": text,
        },
    )
    assert response.status_code == 201
    return response.json()["comment_id"]


def _reaction(comment_id, account_id, emoji="1f44d"):
    return {
        "reacted_comment_id": comment_id,
        "reactor_account_id": str(account_id),
        "reactor_username": "carol",
        "emoji_unicode": emoji,
    }


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCreateEndpoints:
    """Tests for POST /root-comment/new and /branch-comment/new."""

    def test_create_root_and_branch(self, client):
        """Created comments are visible through the read endpoints."""
        # Arrange
        resource_id = uuid4()

        # Act
        root_id = _root(client, resource_id)
        branch_id = _branch(client, root_id)

        # Assert
        data = client.get(
            "/comments/all", params={"resource_id": str(resource_id)}
        ).json()
        comments = data["comments"]
        assert [c["comment_id"] for c in comments] == [root_id, branch_id]
        assert comments[0]["comment_type"] == "root"
        assert comments[0]["materialized_path"] == f"{resource_id}->{root_id}"
        assert comments[1]["comment_type"] == "branch"
        assert comments[1]["materialized_path"] == (
            f"{resource_id}->{root_id}->{branch_id}"
        )
        assert comments[1]["commenter"]["username"] == "bob"
        assert comments[1]["depth"] == 1

    def test_branch_on_missing_parent_is_404(self, client):
        response = client.post(
            "/branch-comment/new",
            json={
                "branched_from": str(uuid4()),
                "commenter_account_id": str(uuid4()),
                "commenter_username": "bob",
                "comment_text": "orphan",
            },
        )

        assert response.status_code == 404

    def test_long_text_is_stored_whole(self, client):
        resource_id = uuid4()
        text = "lorem ipsum " * 2000

        comment_id = _root(client, resource_id, text)

        comments = client.get(
            "/comments/all", params={"resource_id": str(resource_id)}
        ).json()["comments"]
        assert comments[0]["comment_id"] == comment_id
        assert comments[0]["comment_text"] == text

    def test_missing_field_is_422(self, client):
        response = client.post(
            "/root-comment/new",
            json={"resource_id": str(uuid4()), "comment_text": "no author"},
        )

        assert response.status_code == 422

    def test_malformed_resource_id_is_422(self, client):
        response = client.post(
            "/root-comment/new",
            json={
                "resource_id": "not-a-uuid",
                "commenter_account_id": str(uuid4()),
                "commenter_username": "alice",
                "comment_text": "hello",
            },
        )

        assert response.status_code == 422


class TestReadEndpoints:
    """Tests for the four GET comment endpoints."""

    def test_root_comments_exclude_branches(self, client):
        resource_id = uuid4()
        first = _root(client, resource_id, "first")
        second = _root(client, resource_id, "second")
        _branch(client, first)

        response = client.get(
            "/root-comments", params={"resource_id": str(resource_id)}
        )

        assert response.status_code == 200
        ids = {c["comment_id"] for c in response.json()["root_comments"]}
        assert ids == {first, second}

    def test_branch_comments_next_and_rest(self, client):
        resource_id = uuid4()
        root_id = _root(client, resource_id)
        branch_id = _branch(client, root_id)
        reply_id = _branch(client, branch_id)

        next_level = client.get(
            "/branch-comments/next", params={"branched_from": root_id}
        )
        rest = client.get("/branch-comments/rest", params={"branched_from": root_id})

        assert next_level.status_code == 200
        assert [c["comment_id"] for c in next_level.json()["branch_comments"]] == [
            branch_id
        ]
        assert rest.status_code == 200
        assert [c["comment_id"] for c in rest.json()["branch_comments"]] == [
            root_id,
            branch_id,
            reply_id,
        ]

    def test_branch_comments_for_missing_comment_is_404(self, client):
        missing = str(uuid4())

        assert (
            client.get(
                "/branch-comments/next", params={"branched_from": missing}
            ).status_code
            == 404
        )
        assert (
            client.get(
                "/branch-comments/rest", params={"branched_from": missing}
            ).status_code
            == 404
        )

    def test_unknown_resource_returns_empty_lists(self, client):
        resource_id = str(uuid4())

        roots = client.get("/root-comments", params={"resource_id": resource_id})
        everything = client.get("/comments/all", params={"resource_id": resource_id})

        assert roots.json() == {"root_comments": []}
        assert everything.json() == {"comments": []}

    def test_malformed_query_id_is_422(self, client):
        response = client.get("/root-comments", params={"resource_id": "nope"})

        assert response.status_code == 422


class TestMutationEndpoints:
    """Tests for POST /comment/update and /comment/delete."""

    def test_update_comment_text(self, client):
        resource_id = uuid4()
        comment_id = _root(client, resource_id, "before")

        response = client.post(
            "/comment/update",
            json={"comment_id": comment_id, "new_comment_text": "after"},
        )

        assert response.status_code == 204
        comments = client.get(
            "/comments/all", params={"resource_id": str(resource_id)}
        ).json()["comments"]
        assert comments[0]["comment_text"] == "after"

    def test_update_to_empty_text(self, client):
        resource_id = uuid4()
        comment_id = _root(client, resource_id, "soon empty")

        response = client.post(
            "/comment/update",
            json={"comment_id": comment_id, "new_comment_text": ""},
        )

        assert response.status_code == 204
        comments = client.get(
            "/comments/all", params={"resource_id": str(resource_id)}
        ).json()["comments"]
        assert comments[0]["comment_text"] == ""

    def test_update_missing_comment_is_404(self, client):
        response = client.post(
            "/comment/update",
            json={"comment_id": str(uuid4()), "new_comment_text": "after"},
        )

        assert response.status_code == 404

    def test_delete_prunes_subtree(self, client):
        resource_id = uuid4()
        root_id = _root(client, resource_id)
        _branch(client, _branch(client, root_id))
        survivor = _root(client, resource_id)

        response = client.post("/comment/delete", json={"comment_id": root_id})

        assert response.status_code == 204
        comments = client.get(
            "/comments/all", params={"resource_id": str(resource_id)}
        ).json()["comments"]
        assert [c["comment_id"] for c in comments] == [survivor]

    def test_delete_missing_comment_is_404(self, client):
        response = client.post("/comment/delete", json={"comment_id": str(uuid4())})

        assert response.status_code == 404


class TestReactionEndpoints:
    """Tests for POST /reaction/new and /reaction/undo."""

    def test_react_and_undo(self, client):
        resource_id = uuid4()
        comment_id = _root(client, resource_id)
        account_id = uuid4()

        reacted = client.post("/reaction/new", json=_reaction(comment_id, account_id))
        after_react = client.get(
            "/root-comments", params={"resource_id": str(resource_id)}
        ).json()["root_comments"][0]
        undone = client.post("/reaction/undo", json=_reaction(comment_id, account_id))
        after_undo = client.get(
            "/root-comments", params={"resource_id": str(resource_id)}
        ).json()["root_comments"][0]

        assert reacted.status_code == 204
        assert after_react["reactions"] == [
            {
                "reactor": {"account_id": str(account_id), "username": "carol"},
                "emoji_unified_code": "1f44d",
            }
        ]
        assert undone.status_code == 204
        assert after_undo["reactions"] == []

    def test_react_to_missing_comment_is_500(self, client):
        response = client.post("/reaction/new", json=_reaction(str(uuid4()), uuid4()))

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to react to comment"

    def test_undo_without_reaction_is_500(self, client):
        comment_id = _root(client, uuid4())

        response = client.post("/reaction/undo", json=_reaction(comment_id, uuid4()))

        assert response.status_code == 500
