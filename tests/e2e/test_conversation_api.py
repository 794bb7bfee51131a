"""End-to-end tests for conversation routes."""

from tests.harness import create_client_fixture

# E2E fixture - in-memory persistence behind the real app
api = create_client_fixture()

SESSION = {"X-Session-Id": "session-1"}


class TestConversationRoutes:
    """End-to-end tests for conversations."""

    def test_anonymous_conversation_with_comments(self, api):
        # Arrange
        client, _ = api
        created = client.post(
            "/conversations",
            json={"title": "Rate cuts?", "content": "When do we get them?"},
            headers=SESSION,
        )
        conversation_id = created.json()["conversation_id"]

        # Act
        comment = client.post(
            f"/conversations/{conversation_id}/comments",
            json={"content": "September."},
            headers=SESSION,
        )
        comments = client.get(f"/conversations/{conversation_id}/comments")
        listed = client.get("/conversations", params={"limit": 10})

        # Assert
        assert created.status_code == 201
        assert created.json()["is_anonymous"] is True
        assert comment.status_code == 201
        assert comments.json()["total"] == 1
        assert listed.json()["conversations"][0]["comment_count"] == 1

    def test_like_and_unlike(self, api):
        client, _ = api
        conversation_id = client.post(
            "/conversations", json={"title": "Oil", "content": "Long or short?"}
        ).json()["conversation_id"]

        liked = client.post(f"/conversations/{conversation_id}/like", headers=SESSION)
        read = client.get(f"/conversations/{conversation_id}", headers=SESSION).json()
        unliked = client.post(f"/conversations/{conversation_id}/unlike", headers=SESSION)

        assert liked.json()["up"] == 1
        assert read["is_liked"] is True
        assert unliked.json()["up"] == 0

    def test_limit_out_of_range_is_rejected(self, api):
        client, _ = api

        response = client.get("/conversations", params={"limit": 500})

        assert response.status_code == 422
