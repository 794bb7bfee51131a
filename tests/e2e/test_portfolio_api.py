"""End-to-end tests for portfolio routes."""

from tests.harness import create_client_fixture, register_user

# E2E fixture - in-memory persistence behind the real app
api = create_client_fixture()

PORTFOLIO = {
    "title": "All in on semis",
    "image_url": "https://cdn.example.com/portfolios/semis.png",
    "category": "GAINS",
}


class TestPortfolioRoutes:
    """End-to-end tests for the portfolio feed."""

    def test_share_requires_authentication(self, api):
        client, _ = api

        response = client.post("/portfolios", json=PORTFOLIO)

        assert response.status_code == 401

    def test_share_and_browse_by_category(self, api):
        # Arrange
        client, container = api
        _, headers = register_user(client, container)
        client.post("/portfolios", json=PORTFOLIO, headers=headers)
        client.post("/portfolios", json={**PORTFOLIO, "category": "YOLO"}, headers=headers)

        # Act
        gains = client.get("/portfolios", params={"category": "gains"})
        everything = client.get("/portfolios", params={"category": "all", "sort": "bogus"})
        unknown = client.get("/portfolios", params={"category": "meme"})

        # Assert
        assert gains.status_code == 200
        assert gains.json()["total_count"] == 1
        assert everything.json()["total_count"] == 2
        assert unknown.status_code == 400

    def test_vote_and_comment(self, api):
        # Arrange
        client, container = api
        _, headers = register_user(client, container)
        portfolio_id = client.post("/portfolios", json=PORTFOLIO, headers=headers).json()[
            "portfolio_id"
        ]
        session = {"X-Session-Id": "session-1"}

        # Act
        voted = client.post(
            f"/portfolios/{portfolio_id}/vote", json={"vote_type": "downvote"}, headers=session
        )
        bad_vote = client.post(
            f"/portfolios/{portfolio_id}/vote", json={"vote_type": "sideways"}, headers=session
        )
        commented = client.post(
            f"/portfolios/{portfolio_id}/comments", json={"content": "Brave."}, headers=session
        )

        # Assert
        assert voted.status_code == 200
        assert voted.json()["down"] == 1
        assert bad_vote.status_code == 422
        assert commented.status_code == 201

        post = client.get(f"/portfolios/{portfolio_id}").json()
        assert post["downvotes"] == 1
        assert post["comment_count"] == 1

    def test_author_deletes_post(self, api):
        client, container = api
        _, author = register_user(client, container, "author_one")
        _, other = register_user(client, container, "author_two")
        portfolio_id = client.post("/portfolios", json=PORTFOLIO, headers=author).json()[
            "portfolio_id"
        ]

        assert client.delete(f"/portfolios/{portfolio_id}", headers=other).status_code == 403
        assert client.delete(f"/portfolios/{portfolio_id}", headers=author).status_code == 200
        assert client.get(f"/portfolios/{portfolio_id}").status_code == 404
