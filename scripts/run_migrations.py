#!/usr/bin/env python3
"""Apply invitation schema migrations with Logfire error tracking."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from invitations.config import Settings
from invitations.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the invitations schema and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info("Applying invitation migrations", revision=revision)

        # Database URL is taken from settings by migrations/env.py
        command.upgrade(Config("alembic.ini"), revision)

        logfire.info("Invitation migrations applied", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Invitation migrations failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so a deployment does not start against a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
