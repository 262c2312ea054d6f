#!/usr/bin/env python3
"""Bring the forum schema to a revision, with Logfire error tracking.

Usage:
    scripts/run_migrations.py            # upgrade to head
    scripts/run_migrations.py <rev>      # upgrade to <rev>
    scripts/run_migrations.py -1         # downgrade one step
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Run migrations against the configured database."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)

    with logfire.span("migrations", target=target, environment=settings.environment):
        try:
            if target.startswith("-"):
                command.downgrade(alembic_cfg, target)
            else:
                command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail loudly so nothing starts against a half-migrated schema
            raise

        logfire.info("Database migrations completed", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
