#!/usr/bin/env python3
"""Create a forum user and print a bearer token for them.

Usage:
    python scripts/create_user.py alice --email alice@example.com
    python scripts/create_user.py bob --admin
    python scripts/create_user.py carol --grant-admin   # promote an existing user
"""

import argparse
import asyncio
import sys

import logfire

from forum.config import Settings
from forum.domain.repository import UnitOfWork
from forum.domain.service import JWTService, UserService
from forum.util.di.container import create_container
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


async def create_user(username: str, email: str | None, admin: bool) -> str:
    """Create the user and return a token for them."""
    container = create_container()
    try:
        async with container() as request_container:
            user_service = await request_container.get(UserService)
            jwt_service = await request_container.get(JWTService)
            unit_of_work = await request_container.get(UnitOfWork)

            user = await user_service.create_user(username, email=email, is_admin=admin)
            await unit_of_work.commit()
            return jwt_service.create_token(str(user.id), user.username.root)
    finally:
        await container.close()


async def grant_admin(username: str) -> None:
    """Promote an existing user to admin."""
    container = create_container()
    try:
        async with container() as request_container:
            user_service = await request_container.get(UserService)
            unit_of_work = await request_container.get(UnitOfWork)
            await user_service.grant_admin(username)
            await unit_of_work.commit()
    finally:
        await container.close()


def main() -> int:
    """Parse arguments, run the command and log any errors to Logfire."""
    parser = argparse.ArgumentParser(description="Create a forum user")
    parser.add_argument("username", help="Username (3-30 letters, digits, _)")
    parser.add_argument("--email", default=None, help="Optional email address")
    parser.add_argument("--admin", action="store_true", help="Create as admin")
    parser.add_argument(
        "--grant-admin",
        action="store_true",
        help="Promote an existing user instead of creating one",
    )
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    try:
        if args.grant_admin:
            asyncio.run(grant_admin(args.username))
            print(f"Granted admin to {args.username}")
            return 0

        token = asyncio.run(create_user(args.username, args.email, args.admin))
        print(f"Created {args.username}")
        print(f"Token: {token}")
        return 0

    except Exception as e:
        logfire.error(
            "User creation failed",
            username=args.username,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
