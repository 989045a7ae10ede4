"""create_invitations_table

Store invitations as flat string-keyed records:
- token is the primary key and the only lookup used at redemption
- type_id selects the invitation type that decodes params
- project_id lists a project's invitations on its invitations tab

Revision ID: 3c1f7a92d4e8
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f7a92d4e8"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "invitations",
        sa.Column("token", sa.String(length=255), nullable=False),
        sa.Column("type_id", sa.String(length=100), nullable=False),
        sa.Column("project_id", sa.String(length=255), nullable=False),
        sa.Column(
            "params",
            postgresql.JSONB(astext_type=sa.Text()),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("token"),
    )
    op.create_index(
        "idx_invitations_project_id", "invitations", ["project_id"], unique=False
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_invitations_project_id", table_name="invitations")
    op.drop_table("invitations")
