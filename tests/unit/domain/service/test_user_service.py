"""Unit tests for UserService."""

from uuid import uuid4

import pydantic
import pytest

from forum.domain.error import AdminRequiredError, NotFoundError, ValidationError
from forum.domain.repository import UserRepository
from forum.domain.service import UserService
from forum.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateUser:
    """Tests for create_user and grant_admin."""

    @pytest.mark.asyncio
    async def test_taken_username_is_rejected(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        await user_service.create_user("trader_joe")

        # Act / Assert
        with pytest.raises(ValidationError):
            await user_service.create_user("trader_joe")

    @pytest.mark.asyncio
    async def test_grant_admin_promotes_existing_user(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user = await user_service.create_user("editor")

        # Act
        promoted = await user_service.grant_admin("editor")

        # Assert
        assert promoted.id == user.id
        assert promoted.is_admin


class TestRequireAdmin:
    """Tests for require_admin method."""

    @pytest.mark.asyncio
    async def test_admin_is_returned(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        admin = await user_repo.save(make_user("editor", is_admin=True))

        # Act
        user = await user_service.require_admin(admin.id, "publish articles")

        # Assert
        assert user.id == admin.id

    @pytest.mark.asyncio
    async def test_regular_user_is_refused(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())

        # Act / Assert
        with pytest.raises(AdminRequiredError, match="publish articles"):
            await user_service.require_admin(user.id, "publish articles")

    @pytest.mark.asyncio
    async def test_unknown_user_is_not_found(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act / Assert
        with pytest.raises(NotFoundError):
            await user_service.require_admin(UserId(uuid4()), "publish articles")


class TestUpdateUsername:
    """Tests for update_username method."""

    @pytest.mark.asyncio
    async def test_rename_is_saved(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())

        # Act
        renamed = await user_service.update_username(user.id, "  bull_market ")

        # Assert
        assert renamed.username.root == "bull_market"
        assert (await user_repo.find_by_username("bull_market")).id == user.id

    @pytest.mark.asyncio
    async def test_keeping_own_name_is_allowed(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())

        # Act
        renamed = await user_service.update_username(user.id, "trader_joe")

        # Assert
        assert renamed.username.root == "trader_joe"

    @pytest.mark.asyncio
    async def test_name_held_by_another_user_is_rejected(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("bull_market"))
        user = await user_repo.save(make_user())

        # Act / Assert
        with pytest.raises(ValidationError, match="already taken"):
            await user_service.update_username(user.id, "bull_market")

    @pytest.mark.asyncio
    async def test_malformed_name_is_rejected(self, unit_env):
        """Usernames follow the same rules as at registration."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())

        # Act / Assert
        with pytest.raises(pydantic.ValidationError):
            await user_service.update_username(user.id, "x")
