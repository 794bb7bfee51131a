"""End-to-end tests for request transaction handling."""

from forum.domain.repository import UnitOfWork
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


class TestRequestTransaction:
    """Each request commits before responding, or rolls back on error."""

    def test_successful_write_is_committed(self, api):
        # Arrange
        client, container = api
        _, headers = register_user(client, container)
        unit_of_work = client.portal.call(container.get, UnitOfWork)

        # Act
        response = client.post(
            "/stocks",
            json={"symbol": "ACME", "name": "Acme Corp", "current_price": 10.0},
            headers=headers,
        )

        # Assert
        assert response.status_code == 201
        assert unit_of_work.events == ["commit"]

    def test_rejected_request_is_rolled_back(self, api):
        """A domain error answered with 400 must not commit."""
        # Arrange
        client, container = api
        _, headers = register_user(client, container)
        stock_id = _create_stock(client, headers)
        unit_of_work = client.portal.call(container.get, UnitOfWork)
        unit_of_work.events.clear()

        # Act
        response = client.post("/comments", json={"content": "   ", "stock_id": stock_id})

        # Assert
        assert response.status_code == 400
        assert unit_of_work.events == ["rollback"]

    def test_unauthenticated_write_is_rolled_back(self, api):
        # Arrange
        client, container = api
        unit_of_work = client.portal.call(container.get, UnitOfWork)

        # Act
        response = client.post(
            "/stocks", json={"symbol": "ACME", "name": "Acme Corp", "current_price": 10.0}
        )

        # Assert
        assert response.status_code == 401
        assert unit_of_work.events == ["rollback"]

    def test_failed_commit_is_a_server_error(self, api):
        """The caller sees 500 when the change could not be saved."""
        # Arrange
        client, container = api
        _, headers = register_user(client, container)
        stock_id = _create_stock(client, headers)
        unit_of_work = client.portal.call(container.get, UnitOfWork)
        unit_of_work.fail_commits = True

        # Act
        response = client.post(
            "/comments", json={"content": "Lost?", "stock_id": stock_id}
        )

        # Assert
        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
        assert unit_of_work.events[-1] == "failed commit"
