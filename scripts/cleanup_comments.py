#!/usr/bin/env python3
"""Delete every comment and reset comment aggregates on all content.

Comment votes are purged with their comments. Content likes and
dislikes are left untouched.

Usage:
    python scripts/cleanup_comments.py --yes
"""

import argparse
import asyncio
import sys

import logfire

from forum.config import Settings
from forum.domain.repository import UnitOfWork
from forum.domain.service import CommentAggregateService, CommentService, VoteService
from forum.domain.value import TargetType
from forum.util.di.container import create_container
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


async def cleanup() -> tuple[int, int]:
    """Run the cleanup in one transaction.

    Returns:
        Number of comments deleted and number of content rows reset
    """
    container = create_container()
    try:
        async with container() as request_container:
            comment_service = await request_container.get(CommentService)
            vote_service = await request_container.get(VoteService)
            aggregate_service = await request_container.get(CommentAggregateService)
            unit_of_work = await request_container.get(UnitOfWork)

            deleted = await comment_service.delete_all()
            await vote_service.purge_target_type(TargetType.COMMENT)
            reset = await aggregate_service.reset_all()
            await unit_of_work.commit()
            return deleted, reset
    finally:
        await container.close()


def main() -> int:
    """Run the cleanup and log any errors to Logfire."""
    parser = argparse.ArgumentParser(description="Delete all comments")
    parser.add_argument(
        "--yes", action="store_true", help="Confirm deleting every comment"
    )
    args = parser.parse_args()

    if not args.yes:
        print("Refusing to delete all comments without --yes", file=sys.stderr)
        return 1

    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info("Starting comment cleanup", environment=settings.environment)
        deleted, reset = asyncio.run(cleanup())
        logfire.info("Comment cleanup completed", deleted=deleted, reset=reset)
        print(f"Deleted {deleted} comments, reset {reset} content rows")
        return 0

    except Exception as e:
        logfire.error(
            "Comment cleanup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
