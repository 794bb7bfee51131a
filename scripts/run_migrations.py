#!/usr/bin/env python3
"""Run database migrations with Logfire error tracking.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py --revision 3f1c2a9d7b40
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.observability import configure_logfire


def main() -> int:
    """Run migrations and log any errors to Logfire."""
    parser = argparse.ArgumentParser(description="Upgrade the forum database schema")
    parser.add_argument(
        "--revision", default="head", help="Target revision (default: head)"
    )
    parser.add_argument(
        "--config", default="alembic.ini", help="Path to alembic.ini"
    )
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations", revision=args.revision)

        alembic_cfg = Config(args.config)
        command.upgrade(alembic_cfg, args.revision)

        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
