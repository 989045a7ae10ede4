"""Unit tests for editing, revoking and form prefill use cases."""

import pytest

from invitations.application.usecase.invitation import (
    CreateInvitationRequest,
    CreateInvitationUseCase,
    GetEditPropertiesRequest,
    GetEditPropertiesUseCase,
    RevokeInvitationRequest,
    RevokeInvitationUseCase,
    UpdateInvitationRequest,
    UpdateInvitationUseCase,
)
from invitations.domain.error import ForbiddenError, UnknownTokenError
from invitations.domain.service import CoreFacade, InvitationService
from tests.conftest import join_form, seed_host
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def create_token(unit_env, host) -> str:
    use_case = await unit_env.get(CreateInvitationUseCase)
    response = await use_case.execute(
        CreateInvitationRequest(
            user_id=host.admin.id,
            project_id=host.project.project_id,
            type_id="joinProjectInvitation",
            form=join_form(),
        )
    )
    return response.invitation.token


class TestUpdateInvitationUseCase:
    """Tests for UpdateInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_update_keeps_url(self, unit_env):
        # Arrange
        host = seed_host(await unit_env.get(CoreFacade))
        token = await create_token(unit_env, host)
        use_case = await unit_env.get(UpdateInvitationUseCase)

        # Act
        item = await use_case.execute(
            UpdateInvitationRequest(
                user_id=host.admin.id,
                token=token,
                form=join_form(name="Renamed", multiuser=True),
            )
        )

        # Assert
        assert item.token == token
        assert item.name == "Renamed"
        assert item.reusable is False


class TestRevokeInvitationUseCase:
    """Tests for RevokeInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_revoke(self, unit_env):
        # Arrange
        host = seed_host(await unit_env.get(CoreFacade))
        token = await create_token(unit_env, host)
        use_case = await unit_env.get(RevokeInvitationUseCase)
        service = await unit_env.get(InvitationService)

        # Act
        await use_case.execute(
            RevokeInvitationRequest(user_id=host.admin.id, token=token)
        )

        # Assert
        assert await service.find_invitation(token) is None

    @pytest.mark.asyncio
    async def test_revoke_unknown_token(self, unit_env):
        # Arrange
        host = seed_host(await unit_env.get(CoreFacade))
        use_case = await unit_env.get(RevokeInvitationUseCase)

        # Act & Assert
        with pytest.raises(UnknownTokenError):
            await use_case.execute(
                RevokeInvitationRequest(user_id=host.admin.id, token="missing")
            )


class TestGetEditPropertiesUseCase:
    """Tests for GetEditPropertiesUseCase."""

    @pytest.mark.asyncio
    async def test_new_form(self, unit_env):
        # Arrange
        host = seed_host(await unit_env.get(CoreFacade))
        use_case = await unit_env.get(GetEditPropertiesUseCase)

        # Act
        view = await use_case.execute(
            GetEditPropertiesRequest(
                user_id=host.admin.id,
                project_id=host.project.project_id,
                type_id="joinProjectInvitation",
            )
        )

        # Assert
        assert view.role_id == host.developer_role.id
        assert [g.key for g in view.groups] == [host.developers.key]

    @pytest.mark.asyncio
    async def test_existing_invitation(self, unit_env):
        # Arrange
        host = seed_host(await unit_env.get(CoreFacade))
        token = await create_token(unit_env, host)
        use_case = await unit_env.get(GetEditPropertiesUseCase)

        # Act
        view = await use_case.execute(
            GetEditPropertiesRequest(
                user_id=host.admin.id,
                project_id=host.project.project_id,
                type_id="joinProjectInvitation",
                token=token,
            )
        )

        # Assert
        assert view.name == "Join Backend"
        assert view.welcome_text == "Welcome aboard"

    @pytest.mark.asyncio
    async def test_non_manager_is_forbidden(self, unit_env):
        # Arrange
        host = seed_host(await unit_env.get(CoreFacade))
        use_case = await unit_env.get(GetEditPropertiesUseCase)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await use_case.execute(
                GetEditPropertiesRequest(
                    user_id=host.newcomer.id,
                    project_id=host.project.project_id,
                    type_id="joinProjectInvitation",
                )
            )
