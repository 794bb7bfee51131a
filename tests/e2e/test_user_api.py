"""End-to-end tests for user routes."""

from tests.harness import create_client_fixture, register_user

# E2E fixture - in-memory persistence behind the real app
api = create_client_fixture()


class TestUserRoutes:
    """End-to-end tests for the caller's own profile."""

    def test_me_returns_profile(self, api):
        # Arrange
        client, container = api
        user, headers = register_user(client, container)

        # Act
        response = client.get("/users/me", headers=headers)

        # Assert
        assert response.status_code == 200
        profile = response.json()
        assert profile["user_id"] == str(user.id)
        assert profile["username"] == "trader_joe"
        assert profile["is_admin"] is False

    def test_me_requires_authentication(self, api):
        client, _ = api

        response = client.get("/users/me")

        assert response.status_code == 401

    def test_rename(self, api):
        # Arrange
        client, container = api
        _, headers = register_user(client, container)

        # Act
        response = client.put(
            "/users/me/username", json={"username": "bull_market"}, headers=headers
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["username"] == "bull_market"
        assert client.get("/users/me", headers=headers).json()["username"] == "bull_market"

    def test_taken_username_is_bad_request(self, api):
        # Arrange
        client, container = api
        register_user(client, container, "bull_market")
        _, headers = register_user(client, container)

        # Act
        response = client.put(
            "/users/me/username", json={"username": "bull_market"}, headers=headers
        )

        # Assert
        assert response.status_code == 400
        assert "already taken" in response.json()["detail"]

    def test_malformed_username_is_bad_request(self, api):
        client, container = api
        _, headers = register_user(client, container)

        response = client.put(
            "/users/me/username", json={"username": "no spaces!"}, headers=headers
        )

        assert response.status_code == 400

    def test_rename_requires_authentication(self, api):
        client, _ = api

        response = client.put("/users/me/username", json={"username": "bull_market"})

        assert response.status_code == 401
