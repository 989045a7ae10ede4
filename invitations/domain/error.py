"""Domain layer errors."""

from invitations.domain.value import InvalidProperty
from invitations.util.token import short_token


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Submitted invitation form is invalid.

    Carries one InvalidProperty per offending field so the form can show
    them next to the inputs.
    """

    def __init__(self, errors: list[InvalidProperty]):
        self.errors = errors
        super().__init__(
            "; ".join(f"{e.property_name}: {e.message}" for e in errors)
        )


class ConstructionInvariantError(DomainError):
    """Raised when an invitation is built without a role and without a group."""

    pass


class UnknownTokenError(DomainError):
    """Raised when a token resolves to nothing or was already consumed."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invitation not available: {short_token(token)}")


class ForbiddenError(DomainError):
    """Raised when a principal lacks the permission an invitation requires."""

    def __init__(self, message: str):
        super().__init__(message)


class InvitationException(DomainError):
    """Raised when an invitation cannot be applied at redemption time."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AccessDeniedError(DomainError):
    """Raised by the host when the ambient principal lacks authority for a call."""

    pass
