#!/usr/bin/env python3
"""Run database migrations with Logfire error tracking."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from folio.config import Settings
from folio.util.logging import setup_logging
from folio.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main() -> int:
    """Run migrations and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations", environment=settings.environment)

        # migrations/env.py reads the database URL from Settings
        alembic_cfg = Config(str(ALEMBIC_INI))

        # Run migrations
        command.upgrade(alembic_cfg, "head")

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
