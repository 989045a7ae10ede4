"""Invitation routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel

from invitations.application.usecase.invitation import (
    AcceptInvitationRequest,
    AcceptInvitationUseCase,
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
    GetEditPropertiesRequest,
    GetEditPropertiesUseCase,
    GetInvitationsRequest,
    GetInvitationsResponse,
    GetInvitationsUseCase,
    InvitationItem,
    NavigationResponse,
    ProcessInvitationRequest,
    ProcessInvitationResponse,
    ProcessInvitationUseCase,
    RevokeInvitationRequest,
    RevokeInvitationUseCase,
    UpdateInvitationRequest,
    UpdateInvitationUseCase,
)
from invitations.domain.error import (
    ForbiddenError,
    NotFoundError,
    UnknownTokenError,
    ValidationError,
)
from invitations.domain.service import EditPropertiesView
from invitations.domain.value import InvitationForm
from invitations.util.token import short_token

router = APIRouter(tags=["invitations"], route_class=DishkaRoute)


class InvitationFormAPIRequest(BaseModel):
    """API request carrying the create/edit invitation form."""

    name: str = ""
    role: str = ""
    group: str = ""
    multiuser: bool = False
    welcome_text: str = ""

    def to_form(self) -> InvitationForm:
        return InvitationForm(**self.model_dump())


class CreateInvitationAPIRequest(InvitationFormAPIRequest):
    """API request for creating an invitation."""

    type_id: str = "joinProjectInvitation"


def _require_user_id(x_user_id: int | None) -> int:
    # The host's authentication layer forwards the signed-in user
    if x_user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return x_user_id


def _to_http_error(e: Exception) -> HTTPException:
    if isinstance(e, ValidationError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=[error.model_dump() for error in e.errors],
        )
    if isinstance(e, (UnknownTokenError, NotFoundError)):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))


@router.get("/invitations/{token}", response_model=ProcessInvitationResponse)
async def process_invitation(
    token: str,
    process_invitation_use_case: FromDishka[ProcessInvitationUseCase],
    x_user_id: int | None = Header(default=None),
) -> ProcessInvitationResponse:
    """Landing page of an invitation link.

    Anonymous visitors are sent to registration; signed-in users get the
    landing view from which they can accept the invitation.

    Args:
        token: Invitation token from the link
        process_invitation_use_case: Process invitation use case from DI
        x_user_id: Signed-in user, if any

    Returns:
        Whether the token is valid and where to go

    Raises:
        HTTPException: If the signed-in user does not exist
    """
    try:
        return await process_invitation_use_case.execute(
            ProcessInvitationRequest(token=token, user_id=x_user_id)
        )
    except NotFoundError as e:
        raise _to_http_error(e)


@router.post("/invitations/{token}/accept", response_model=NavigationResponse)
async def accept_invitation(
    token: str,
    accept_invitation_use_case: FromDishka[AcceptInvitationUseCase],
    x_user_id: int | None = Header(default=None),
) -> NavigationResponse:
    """Redeem an invitation for the signed-in user.

    Args:
        token: Invitation token
        accept_invitation_use_case: Accept invitation use case from DI
        x_user_id: Signed-in user

    Returns:
        Where the user goes next

    Raises:
        HTTPException: 401 when anonymous, 404 for unknown or used tokens,
            403 when the invitation is no longer authorized
    """
    user_id = _require_user_id(x_user_id)
    try:
        return await accept_invitation_use_case.execute(
            AcceptInvitationRequest(token=token, user_id=user_id)
        )
    except (UnknownTokenError, NotFoundError, ForbiddenError) as e:
        logfire.warn(
            "Invitation redemption rejected",
            token=short_token(token),
            user_id=user_id,
            error=str(e),
        )
        raise _to_http_error(e)


@router.get(
    "/projects/{project_id}/invitations", response_model=GetInvitationsResponse
)
async def get_invitations(
    project_id: str,
    get_invitations_use_case: FromDishka[GetInvitationsUseCase],
    x_user_id: int | None = Header(default=None),
) -> GetInvitationsResponse:
    """List the project's invitations and the types the user may create."""
    user_id = _require_user_id(x_user_id)
    try:
        return await get_invitations_use_case.execute(
            GetInvitationsRequest(user_id=user_id, project_id=project_id)
        )
    except NotFoundError as e:
        raise _to_http_error(e)


@router.post(
    "/projects/{project_id}/invitations",
    response_model=CreateInvitationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_invitation(
    project_id: str,
    request: CreateInvitationAPIRequest,
    create_invitation_use_case: FromDishka[CreateInvitationUseCase],
    x_user_id: int | None = Header(default=None),
) -> CreateInvitationResponse:
    """Create an invitation link for a project.

    Args:
        project_id: Project the invitation grants access to
        request: Submitted form
        create_invitation_use_case: Create invitation use case from DI
        x_user_id: Signed-in user

    Returns:
        The created invitation and its URL

    Raises:
        HTTPException: 400 with per-field errors if the form is invalid
    """
    user_id = _require_user_id(x_user_id)
    try:
        return await create_invitation_use_case.execute(
            CreateInvitationRequest(
                user_id=user_id,
                project_id=project_id,
                type_id=request.type_id,
                form=request.to_form(),
            )
        )
    except (ValidationError, NotFoundError, ForbiddenError) as e:
        raise _to_http_error(e)


@router.get(
    "/projects/{project_id}/invitations/types/{type_id}/properties",
    response_model=EditPropertiesView,
)
async def get_edit_properties(
    project_id: str,
    type_id: str,
    get_edit_properties_use_case: FromDishka[GetEditPropertiesUseCase],
    token: str | None = None,
    x_user_id: int | None = Header(default=None),
) -> EditPropertiesView:
    """Prefill for the create/edit invitation form."""
    user_id = _require_user_id(x_user_id)
    try:
        return await get_edit_properties_use_case.execute(
            GetEditPropertiesRequest(
                user_id=user_id, project_id=project_id, type_id=type_id, token=token
            )
        )
    except (UnknownTokenError, NotFoundError, ForbiddenError) as e:
        raise _to_http_error(e)


@router.put("/invitations/{token}", response_model=InvitationItem)
async def update_invitation(
    token: str,
    request: InvitationFormAPIRequest,
    update_invitation_use_case: FromDishka[UpdateInvitationUseCase],
    x_user_id: int | None = Header(default=None),
) -> InvitationItem:
    """Edit an invitation; its link keeps working."""
    user_id = _require_user_id(x_user_id)
    try:
        return await update_invitation_use_case.execute(
            UpdateInvitationRequest(
                user_id=user_id, token=token, form=request.to_form()
            )
        )
    except (ValidationError, UnknownTokenError, NotFoundError, ForbiddenError) as e:
        raise _to_http_error(e)


@router.delete("/invitations/{token}", status_code=status.HTTP_204_NO_CONTENT)
async def revoke_invitation(
    token: str,
    revoke_invitation_use_case: FromDishka[RevokeInvitationUseCase],
    x_user_id: int | None = Header(default=None),
) -> None:
    """Delete an invitation so its link stops working."""
    user_id = _require_user_id(x_user_id)
    try:
        await revoke_invitation_use_case.execute(
            RevokeInvitationRequest(user_id=user_id, token=token)
        )
    except (UnknownTokenError, NotFoundError, ForbiddenError) as e:
        raise _to_http_error(e)
