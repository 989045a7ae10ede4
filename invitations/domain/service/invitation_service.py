"""Invitation domain service."""

import secrets
from typing import Optional

import logfire

from invitations.domain.error import (
    ForbiddenError,
    NotFoundError,
    UnknownTokenError,
    ValidationError,
)
from invitations.domain.model import Invitation, InvitationRecord, Project, User
from invitations.domain.repository import InvitationRepository
from invitations.domain.value import InvitationForm, Navigation, Redirect
from invitations.util.token import short_token

from .base import Service
from .core import CoreFacade
from .invitation_type import EditPropertiesView, InvitationType
from .registry import InvitationTypeRegistry


class InvitationService(Service):
    """Domain service for the invitation lifecycle.

    Creation, lookup, revocation and redemption of invitations. Decoding a
    stored record always goes through the type registered under the
    record's type id.
    """

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        registry: InvitationTypeRegistry,
        core: CoreFacade,
        token_bytes: int = 32,
        default_redirect: str = "/",
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            registry: Registered invitation types
            core: Host platform facade
            token_bytes: Entropy of generated tokens
            default_redirect: Where failed redemptions land
        """
        self.invitation_repository = invitation_repository
        self.registry = registry
        self.core = core
        self.token_bytes = token_bytes
        self.default_redirect = default_redirect

    def get_type(self, type_id: str) -> InvitationType:
        """Get a registered invitation type.

        Raises:
            NotFoundError: If no type is registered under type_id
        """
        invitation_type = self.registry.find(type_id)
        if invitation_type is None:
            raise NotFoundError("Invitation type", type_id)
        return invitation_type

    def available_types(self, user: User, project: Project) -> list[InvitationType]:
        """Invitation types user may create in project."""
        return [t for t in self.registry if t.is_available_for(user, project)]

    async def resolve(self, token: str) -> tuple[Invitation, InvitationType]:
        """Map a token back to its invitation and type.

        Raises:
            UnknownTokenError: If the token, its type or its project is unknown
        """
        record = await self.invitation_repository.find_by_token(token)
        if record is None:
            raise UnknownTokenError(token)
        return self._decode(record)

    def _decode(self, record: InvitationRecord) -> tuple[Invitation, InvitationType]:
        invitation_type = self.registry.find(record.type_id)
        if invitation_type is None:
            logfire.warn(
                "Stored invitation has unknown type",
                token=short_token(record.token),
                type_id=record.type_id,
            )
            raise UnknownTokenError(record.token)

        with self.core.run_as_system():
            project = self.core.find_project(record.project_id)
        if project is None:
            logfire.warn(
                "Stored invitation refers to a missing project",
                token=short_token(record.token),
                project_id=record.project_id,
            )
            raise UnknownTokenError(record.token)

        return invitation_type.read_from(record.params, project), invitation_type

    async def find_invitation(self, token: str) -> Optional[Invitation]:
        """Get invitation by token, None if it is not available."""
        with logfire.span(
            "invitation_service.find_invitation", token=short_token(token)
        ):
            try:
                invitation, _ = await self.resolve(token)
            except UnknownTokenError:
                logfire.info("Invitation not found", token=short_token(token))
                return None
            return invitation

    def _mint_token(self) -> str:
        return secrets.token_urlsafe(self.token_bytes)

    async def create_invitation(
        self, type_id: str, user: User, form: InvitationForm, project: Project
    ) -> Invitation:
        """Create and store a new invitation.

        Args:
            type_id: Kind of invitation to create
            user: Issuing principal
            form: Submitted form values
            project: Project the invitation grants access to

        Returns:
            Created invitation

        Raises:
            NotFoundError: If the type is not registered
            ForbiddenError: If user may not create this kind of invitation
            ValidationError: If the form is invalid
        """
        with logfire.span(
            "invitation_service.create_invitation",
            type_id=type_id,
            user_id=user.id,
            project_id=project.project_id,
        ):
            invitation_type = self.get_type(type_id)
            if not invitation_type.is_available_for(user, project):
                logfire.warn(
                    "Invitation creation refused",
                    type_id=type_id,
                    user_id=user.id,
                    project_id=project.project_id,
                )
                raise ForbiddenError(
                    f"User {user.id} may not create {type_id} in {project.project_id}"
                )

            errors = invitation_type.validate(form, project)
            if errors:
                raise ValidationError(errors)

            token = self._mint_token()
            while await self.invitation_repository.find_by_token(token) is not None:
                token = self._mint_token()

            invitation = invitation_type.create_new_invitation(
                user, form, project, token
            )
            await self.invitation_repository.save(InvitationRecord.of(invitation))
            logfire.info(
                "Invitation created",
                token=short_token(token),
                invitation=invitation_type.describe(invitation),
                reusable=invitation.is_reusable,
            )
            return invitation

    async def update_invitation(
        self, token: str, user: User, form: InvitationForm
    ) -> Invitation:
        """Replace the properties of an existing invitation, keeping its token.

        Raises:
            UnknownTokenError: If the token is unknown
            ForbiddenError: If user may not manage this kind of invitation
            ValidationError: If the form is invalid
        """
        with logfire.span(
            "invitation_service.update_invitation",
            token=short_token(token),
            user_id=user.id,
        ):
            record = await self.invitation_repository.find_by_token(token)
            if record is None:
                raise UnknownTokenError(token)
            invitation, invitation_type = self._decode(record)
            project = invitation.project

            if not invitation_type.is_available_for(user, project):
                raise ForbiddenError(
                    f"User {user.id} may not edit invitations in {project.project_id}"
                )
            errors = invitation_type.validate(form, project)
            if errors:
                raise ValidationError(errors)

            updated = invitation_type.create_new_invitation(user, form, project, token)
            await self.invitation_repository.save(
                InvitationRecord.of(updated).model_copy(
                    update={"created_at": record.created_at}
                )
            )
            logfire.info(
                "Invitation updated",
                token=short_token(token),
                invitation=invitation_type.describe(updated),
            )
            return updated

    async def list_invitations(self, project: Project, user: User) -> list[Invitation]:
        """List invitations of a project that user may manage."""
        with logfire.span(
            "invitation_service.list_invitations",
            project_id=project.project_id,
            user_id=user.id,
        ):
            records = await self.invitation_repository.find_by_project(
                project.project_id
            )
            invitations = []
            for record in records:
                invitation_type = self.registry.find(record.type_id)
                if invitation_type is None or not invitation_type.is_available_for(
                    user, project
                ):
                    continue
                invitations.append(invitation_type.read_from(record.params, project))
            logfire.info(
                "Invitations listed",
                project_id=project.project_id,
                count=len(invitations),
            )
            return invitations

    async def revoke_invitation(self, token: str, user: User) -> None:
        """Delete an invitation.

        Raises:
            UnknownTokenError: If the token is unknown
            ForbiddenError: If user may not manage this kind of invitation
        """
        with logfire.span(
            "invitation_service.revoke_invitation",
            token=short_token(token),
            user_id=user.id,
        ):
            invitation, invitation_type = await self.resolve(token)
            if not invitation_type.is_available_for(user, invitation.project):
                raise ForbiddenError(
                    f"User {user.id} may not revoke invitations in "
                    f"{invitation.project.project_id}"
                )
            if not await self.invitation_repository.delete(token):
                raise UnknownTokenError(token)
            logfire.info(
                "Invitation revoked",
                token=short_token(token),
                invitation=invitation_type.describe(invitation),
            )

    async def get_edit_properties_view(
        self,
        type_id: str,
        user: User,
        project: Project,
        token: Optional[str] = None,
    ) -> EditPropertiesView:
        """Form prefill for a new invitation, or for the one behind token.

        Raises:
            NotFoundError: If the type is not registered
            UnknownTokenError: If token is unknown or names an invitation of
                another project or type
            ForbiddenError: If user may not create this kind of invitation
        """
        invitation_type = self.get_type(type_id)
        if not invitation_type.is_available_for(user, project):
            raise ForbiddenError(
                f"User {user.id} may not create {type_id} in {project.project_id}"
            )
        invitation = None
        if token is not None:
            invitation, _ = await self.resolve(token)
            # Rights were checked for project only
            if (
                invitation.project.project_id != project.project_id
                or invitation.type_id != invitation_type.id
            ):
                logfire.warn(
                    "Invitation requested through another project or type",
                    token=short_token(token),
                    user_id=user.id,
                    project_id=project.project_id,
                    type_id=type_id,
                )
                raise UnknownTokenError(token)
        return invitation_type.get_edit_properties_view(user, project, invitation)

    def authorize(self, invitation: Invitation, invitation_type: InvitationType) -> User:
        """Check the invitation is still backed by its issuer.

        The per-invitation check runs with the issuer's own authority, not
        with system authority.

        Returns:
            The issuing user

        Raises:
            ForbiddenError: If the issuer is gone or lost the permission
        """
        inviter = None
        if invitation.created_by_user_id is not None:
            with self.core.run_as_system():
                inviter = self.core.get_user(invitation.created_by_user_id)
        if inviter is None:
            raise ForbiddenError(
                f"Issuer of invitation {short_token(invitation.token)} no longer exists"
            )
        with self.core.acting_as(inviter):
            available = invitation_type.is_invitation_available_for(
                invitation, inviter
            )
        if not available:
            raise ForbiddenError(
                f"Invitation {short_token(invitation.token)} is not available for "
                f"{inviter.describe()}"
            )
        return inviter

    async def redeem(self, token: str, user: User) -> Navigation:
        """Redeem an invitation for user.

        Resolves the token, authorizes the invitation, consumes it when it
        is not reusable and applies it. Failures while applying are logged
        and turned into a redirect to the default location; a consumed
        token is put back so it is not burned by a failed grant.

        Args:
            token: Presented token
            user: Redeeming principal

        Returns:
            Where the user should go next

        Raises:
            UnknownTokenError: If the token is unknown or already consumed
            ForbiddenError: If the invitation is not authorized
        """
        with logfire.span(
            "invitation_service.redeem", token=short_token(token), user_id=user.id
        ):
            with self.core.acting_as(user):
                invitation, invitation_type = await self.resolve(token)
                self.authorize(invitation, invitation_type)

                consumed = None
                if not invitation.is_reusable:
                    consumed = await self.invitation_repository.take(token)
                    if consumed is None:
                        logfire.info(
                            "Invitation already consumed", token=short_token(token)
                        )
                        raise UnknownTokenError(token)

                try:
                    navigation = invitation_type.accept(invitation, user)
                except Exception as e:
                    logfire.warn(
                        "Failed to apply invitation for the invited user",
                        user=user.describe(),
                        invitation=invitation.describe(),
                        error=str(e),
                        error_type=type(e).__name__,
                    )
                    if consumed is not None:
                        await self.invitation_repository.save(consumed)
                    return Redirect(url=self.default_redirect)

                logfire.info(
                    "Invitation redeemed",
                    token=short_token(token),
                    user_id=user.id,
                    consumed=consumed is not None,
                )
                return navigation

    async def process_invitation_request(
        self, token: str, user: Optional[User]
    ) -> Navigation:
        """Landing navigation for a presented token.

        Raises:
            UnknownTokenError: If the token is unknown
        """
        with logfire.span(
            "invitation_service.process_invitation_request", token=short_token(token)
        ):
            invitation, invitation_type = await self.resolve(token)
            return invitation_type.process_invitation_request(invitation, user)
