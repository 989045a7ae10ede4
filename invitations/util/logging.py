"""Standard library logging setup.

Application code logs through logfire; this configures the plain loggers of
uvicorn, SQLAlchemy and alembic so their output lands on the same stream.
"""

import logging
import sys

from invitations.config import Settings

_NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "asyncpg")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from settings.

    Args:
        settings: Application settings; ``debug`` switches to DEBUG level
            and lets SQL statements through.
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if settings.debug else logging.WARNING)
    logging.getLogger("invitations").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging ready for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
