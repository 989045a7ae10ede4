"""Token helpers shared by services, use cases and routes."""

_VISIBLE_CHARS = 8


def short_token(token: str) -> str:
    """Redact an invitation token for logs and error messages.

    Only the first few characters are kept; a full token is a working
    credential and must not end up in telemetry.

    Args:
        token: Invitation token

    Returns:
        Token prefix followed by an ellipsis
    """
    return token[:_VISIBLE_CHARS] + "..."
