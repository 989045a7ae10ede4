"""SQLAlchemy table definitions for invitations.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Index, MetaData, String, Table
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("token", String(255), primary_key=True),
    Column("type_id", String(100), nullable=False),  # e.g. 'joinProjectInvitation'
    Column("project_id", String(255), nullable=False),  # Host internal project id
    Column("params", JSONB, nullable=False),  # Flat string-keyed invitation record
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_invitations_project_id", invitations_table.c.project_id)
