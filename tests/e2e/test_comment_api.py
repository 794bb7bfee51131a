"""End-to-end tests for comment routes."""

from uuid import uuid4

from tests.harness import create_client_fixture, register_user

# E2E fixture - in-memory persistence behind the real app
api = create_client_fixture()


def _create_stock(client, headers) -> str:
    response = client.post(
        "/stocks",
        json={"symbol": "ACME", "name": "Acme Corp", "current_price": 10.0},
        headers=headers,
    )
    return response.json()["stock_id"]


class TestCommentThreads:
    """End-to-end tests for commenting and reading threads."""

    def test_anonymous_comment_and_authenticated_reply(self, api):
        """The thread nests the reply and the stock summary tracks the newest comment."""
        # Arrange
        client, container = api
        _, headers = register_user(client, container)
        stock_id = _create_stock(client, headers)

        # Act
        top = client.post(
            "/comments",
            json={"content": "Thoughts on guidance?", "stock_id": stock_id},
            headers={"X-Session-Id": "session-1"},
        )
        reply = client.post(
            "/comments",
            json={
                "content": "Conservative as usual.",
                "stock_id": stock_id,
                "parent_comment_id": top.json()["comment"]["comment_id"],
            },
            headers=headers,
        )
        thread = client.get(f"/comments/stock/{stock_id}")

        # Assert
        assert top.status_code == 201
        assert top.json()["comment"]["author_name"] == "Anonymous"
        assert reply.status_code == 201
        assert reply.json()["comment_count"] == 2

        body = thread.json()
        assert body["total"] == 2
        assert len(body["comments"]) == 1
        assert body["comments"][0]["replies"][0]["author_name"] == "trader_joe"

        stock = client.get(f"/stocks/{stock_id}").json()
        assert stock["comment_count"] == 2
        assert stock["last_comment"]["content"] == "Conservative as usual."

    def test_comment_needs_exactly_one_parent(self, api):
        client, container = api
        _, headers = register_user(client, container)
        stock_id = _create_stock(client, headers)

        none = client.post("/comments", json={"content": "Orphan"})
        both = client.post(
            "/comments",
            json={"content": "Greedy", "stock_id": stock_id, "portfolio_id": str(uuid4())},
        )

        assert none.status_code == 400
        assert both.status_code == 400

    def test_comment_on_missing_stock_is_not_found(self, api):
        client, _ = api

        response = client.post("/comments", json={"content": "Hi", "stock_id": str(uuid4())})

        assert response.status_code == 404

    def test_overlong_comment_is_rejected(self, api):
        client, container = api
        _, headers = register_user(client, container)
        stock_id = _create_stock(client, headers)

        response = client.post(
            "/comments", json={"content": "x" * 5001, "stock_id": stock_id}
        )

        assert response.status_code == 422


class TestCommentModeration:
    """End-to-end tests for editing and deleting comments."""

    def test_edit_and_delete_own_comment(self, api):
        # Arrange
        client, container = api
        _, headers = register_user(client, container)
        stock_id = _create_stock(client, headers)
        comment_id = client.post(
            "/comments", json={"content": "Draft", "stock_id": stock_id}, headers=headers
        ).json()["comment"]["comment_id"]

        # Act
        edited = client.put(
            f"/comments/{comment_id}", json={"content": "Final"}, headers=headers
        )
        deleted = client.delete(f"/comments/{comment_id}", headers=headers)

        # Assert
        assert edited.status_code == 200
        assert edited.json()["comment"]["content"] == "Final"
        assert deleted.status_code == 200
        assert deleted.json()["comment_count"] == 0
        assert client.get(f"/stocks/{stock_id}").json()["last_comment"] is None

    def test_anonymous_caller_cannot_edit(self, api):
        """Editing requires authentication."""
        client, container = api
        _, headers = register_user(client, container)
        stock_id = _create_stock(client, headers)
        comment_id = client.post(
            "/comments",
            json={"content": "Mine", "stock_id": stock_id},
            headers={"X-Session-Id": "session-1"},
        ).json()["comment"]["comment_id"]

        response = client.put(
            f"/comments/{comment_id}",
            json={"content": "Changed"},
            headers={"X-Session-Id": "session-1"},
        )

        assert response.status_code == 401

    def test_other_user_cannot_delete(self, api):
        client, container = api
        _, author = register_user(client, container, "author_one")
        _, other = register_user(client, container, "author_two")
        stock_id = _create_stock(client, author)
        comment_id = client.post(
            "/comments", json={"content": "Mine", "stock_id": stock_id}, headers=author
        ).json()["comment"]["comment_id"]

        response = client.delete(f"/comments/{comment_id}", headers=other)

        assert response.status_code == 403

    def test_comment_votes(self, api):
        """Comments take likes and dislikes like any other target."""
        client, container = api
        _, headers = register_user(client, container)
        stock_id = _create_stock(client, headers)
        comment_id = client.post(
            "/comments", json={"content": "Vote me", "stock_id": stock_id}
        ).json()["comment"]["comment_id"]

        liked = client.post(f"/comments/{comment_id}/like", headers=headers)
        thread = client.get(f"/comments/stock/{stock_id}", headers=headers).json()

        assert liked.status_code == 200
        assert thread["comments"][0]["likes"] == 1
        assert thread["comments"][0]["user_vote"] == "up"
