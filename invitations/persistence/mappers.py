"""Mappers between database rows and domain records."""

from typing import Any, Dict

from invitations.domain.model import InvitationRecord
from invitations.domain.value import ProjectId


def record_to_dict(record: InvitationRecord) -> Dict[str, Any]:
    """Convert InvitationRecord to dictionary for database insert/update.

    Args:
        record: InvitationRecord domain model

    Returns:
        Dictionary with database column values
    """
    return {
        "token": record.token,
        "type_id": record.type_id,
        "project_id": record.project_id,
        "params": dict(record.params),
        "created_at": record.created_at,
    }


def row_to_record(row: Dict[str, Any]) -> InvitationRecord:
    """Convert database row to InvitationRecord domain model.

    Args:
        row: Database row as dictionary

    Returns:
        InvitationRecord domain model
    """
    return InvitationRecord(
        token=row["token"],
        type_id=row["type_id"],
        project_id=ProjectId(row["project_id"]),
        params={str(k): str(v) for k, v in row["params"].items()},
        created_at=row["created_at"],
    )
