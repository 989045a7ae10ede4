"""Unit tests for JoinProjectInvitationType."""

import pytest

from invitations.adapter.host import InMemoryCoreFacade
from invitations.domain.error import InvitationException
from invitations.domain.model import Group, Project, Role, User
from invitations.domain.service import JoinProjectInvitationType
from invitations.domain.service.join_project import ROLE_OR_GROUP_REQUIRED
from invitations.domain.value import (
    GroupKey,
    InvalidProperty,
    Permission,
    ProjectId,
    Redirect,
    RoleId,
    UserId,
    View,
)
from tests.conftest import join_form, seed_host


@pytest.fixture
def host():
    return seed_host(InMemoryCoreFacade())


@pytest.fixture
def join_type(host):
    return JoinProjectInvitationType(core=host.core)


def issue(join_type, host, **form_values):
    return join_type.create_new_invitation(
        host.admin, join_form(**form_values), host.project, "tok-0123456789"
    )


class TestDescription:
    """Tests for the type's identity and view locators."""

    def test_identity(self, join_type):
        assert join_type.id == "joinProjectInvitation"
        assert join_type.description == "Join project"

    def test_view_paths_live_under_plugin_resources(self, join_type):
        assert (
            join_type.description_view_path
            == "/plugins/invitations/joinProjectInvitationDescription.html"
        )

    def test_describe_names_project_role_and_group(self, join_type, host):
        """Descriptions used in logs name every part of the invitation."""
        # Arrange
        invitation = issue(join_type, host)

        # Act
        description = join_type.describe(invitation)

        # Assert
        assert "Platform / Backend" in description
        assert "Project developer" in description
        assert "group:  <empty>" in description


class TestValidate:
    """Tests for form validation."""

    def test_missing_role_and_group_reports_both_fields(self, join_type, host):
        """Neither role nor group yields one error per field."""
        # Act
        errors = join_type.validate(join_form(role="", group=""), host.project)

        # Assert
        assert errors == [
            InvalidProperty(property_name="role", message=ROLE_OR_GROUP_REQUIRED),
            InvalidProperty(property_name="group", message=ROLE_OR_GROUP_REQUIRED),
        ]

    def test_blank_values_count_as_missing(self, join_type, host):
        """Whitespace-only submissions are not a role or a group."""
        # Act
        errors = join_type.validate(join_form(role="  ", group=" "), host.project)

        # Assert
        assert {e.property_name for e in errors} == {"role", "group"}

    @pytest.mark.parametrize(
        "role,group",
        [
            ("PROJECT_DEVELOPER", ""),
            ("", "DEVELOPERS"),
            ("PROJECT_DEVELOPER", "DEVELOPERS"),
        ],
    )
    def test_role_or_group_is_enough(self, join_type, host, role, group):
        """Either field alone makes the form valid."""
        assert join_type.validate(join_form(role=role, group=group), host.project) == []

    def test_empty_name_is_rejected(self, join_type, host):
        """The generic name check still applies."""
        # Act
        errors = join_type.validate(join_form(name=" "), host.project)

        # Assert
        assert [e.property_name for e in errors] == ["name"]


class TestEditPropertiesView:
    """Tests for the create/edit form prefill."""

    def test_new_form_defaults(self, join_type, host):
        """A new form gets the type description, multi and the default welcome."""
        # Act
        view = join_type.get_edit_properties_view(host.admin, host.project)

        # Assert
        assert view.view_path == (
            "/plugins/invitations/joinProjectInvitationProperties.html"
        )
        assert view.name == "Join project"
        assert view.multiuser is True
        assert view.group_key is None
        assert view.welcome_text == (
            "Ada Admin invites you to join the Platform / Backend project"
        )

    def test_preselects_smallest_role_that_runs_builds(self, join_type, host):
        """Among roles with RUN_BUILD the one with fewest permissions wins."""
        # Act
        view = join_type.get_edit_properties_view(host.admin, host.project)

        # Assert
        assert view.role_id == host.developer_role.id

    def test_falls_back_to_first_role_without_build_roles(self):
        """Without any RUN_BUILD role the first offered role is preselected."""
        # Arrange
        core = InMemoryCoreFacade()
        project = core.add_project(
            Project(project_id=ProjectId("p"), external_id="P", name="P")
        )
        core.define_role(
            Role(
                id=RoleId("VIEWER"),
                name="Viewer",
                permissions=frozenset({Permission.VIEW_PROJECT}),
            )
        )
        user = core.add_user(User(id=UserId(1), username="u"))

        # Act
        view = JoinProjectInvitationType(core).get_edit_properties_view(user, project)

        # Assert
        assert view.role_id == "VIEWER"

    def test_no_roles_means_no_preselection(self):
        """A host without roles leaves the role unselected."""
        # Arrange
        core = InMemoryCoreFacade()
        project = core.add_project(
            Project(project_id=ProjectId("p"), external_id="P", name="P")
        )
        user = core.add_user(User(id=UserId(1), username="u"))

        # Act
        view = JoinProjectInvitationType(core).get_edit_properties_view(user, project)

        # Assert
        assert view.roles == []
        assert view.role_id is None

    def test_offers_only_project_roles(self, join_type, host):
        """Roles that cannot be associated with a project are hidden."""
        # Arrange
        host.core.define_role(
            Role(
                id=RoleId("SYSTEM_ADMIN"),
                name="System administrator",
                permissions=frozenset({Permission.CHANGE_USER}),
                project_association_supported=False,
            )
        )

        # Act
        view = join_type.get_edit_properties_view(host.admin, host.project)

        # Assert
        assert RoleId("SYSTEM_ADMIN") not in {r.id for r in view.roles}
        assert len(view.roles) == 3

    def test_offers_groups_that_see_project_and_user_can_edit(self, join_type, host):
        """Groups without access to the project are not offered."""
        # Arrange
        host.core.define_group(
            Group(key=GroupKey("WRITERS"), name="Writers"),
            project_roles={host.other_project.project_id: host.viewer_role.id},
        )

        # Act
        view = join_type.get_edit_properties_view(host.admin, host.project)

        # Assert
        assert [g.key for g in view.groups] == [host.developers.key]

    def test_hides_groups_user_cannot_edit(self, join_type, host):
        """A user without rights over a group's projects does not see it."""
        # Act
        view = join_type.get_edit_properties_view(host.outsider, host.project)

        # Assert
        assert view.groups == []

    def test_existing_invitation_is_prefilled(self, join_type, host):
        """Editing shows the stored values instead of the defaults."""
        # Arrange
        invitation = issue(
            join_type,
            host,
            role="",
            group="DEVELOPERS",
            multiuser=False,
            name="Team",
            welcome_text="Hi",
        )

        # Act
        view = join_type.get_edit_properties_view(host.admin, host.project, invitation)

        # Assert
        assert view.name == "Team"
        assert view.multiuser is False
        assert view.role_id is None
        assert view.group_key == "DEVELOPERS"
        assert view.welcome_text == "Hi"


class TestAvailability:
    """Type-level and per-invitation availability."""

    def test_admin_may_create(self, join_type, host):
        assert join_type.is_available_for(host.admin, host.project) is True

    def test_user_without_role_rights_may_not_create(self, join_type, host):
        assert join_type.is_available_for(host.newcomer, host.project) is False

    def test_type_level_check_does_not_need_project_visibility(self, join_type, host):
        """Holding the right is enough at type level, even without viewing."""
        # Arrange
        host.core.define_role(
            Role(
                id=RoleId("ROLE_MANAGER"),
                name="Role manager",
                permissions=frozenset({Permission.CHANGE_USER_ROLES_IN_PROJECT}),
            )
        )
        host.core.grant_role(
            host.outsider.id, RoleId("ROLE_MANAGER"), host.project.project_id
        )
        invitation = issue(join_type, host)

        # Act
        with host.core.acting_as(host.outsider):
            type_level = join_type.is_available_for(host.outsider, host.project)
            instance_level = join_type.is_invitation_available_for(
                invitation, host.outsider
            )

        # Assert
        assert type_level is True
        assert instance_level is False

    def test_instance_check_uses_ambient_authority(self, join_type, host):
        """The issuer, acting as themselves, keeps their invitation usable."""
        # Arrange
        invitation = issue(join_type, host, group="DEVELOPERS")

        # Act
        with host.core.acting_as(host.admin):
            available = join_type.is_invitation_available_for(invitation, host.admin)

        # Assert
        assert available is True

    def test_instance_check_requires_group_rights(self, join_type, host):
        """A group the holder may not edit makes the invitation unavailable."""
        # Arrange
        host.core.define_group(
            Group(key=GroupKey("DOCS_TEAM"), name="Docs team"),
            project_roles={host.other_project.project_id: host.viewer_role.id},
        )
        invitation = issue(join_type, host, group="DOCS_TEAM")

        # Act
        with host.core.acting_as(host.admin):
            available = join_type.is_invitation_available_for(invitation, host.admin)

        # Assert
        assert available is False


class TestAccept:
    """Tests for applying an invitation."""

    def test_grants_role_without_redeemer_rights(self, join_type, host):
        """The newcomer needs no rights of their own to get the role."""
        # Arrange
        invitation = issue(join_type, host)

        # Act
        with host.core.acting_as(host.newcomer):
            navigation = join_type.accept(invitation, host.newcomer)

        # Assert
        assert host.core.roles_of(host.newcomer.id, host.project.project_id) == {
            host.developer_role.id
        }
        assert navigation == Redirect(url="/project.html?projectId=Platform_Backend")

    def test_adds_user_to_group(self, join_type, host):
        """Group invitations make the user a member."""
        # Arrange
        invitation = issue(join_type, host, role="", group="DEVELOPERS")

        # Act
        with host.core.acting_as(host.newcomer):
            join_type.accept(invitation, host.newcomer)

        # Assert
        assert host.newcomer.id in host.core.members_of(host.developers.key)
        assert Permission.RUN_BUILD in host.core.permissions_of(
            host.newcomer, host.project.project_id
        )

    def test_project_editors_land_on_project_settings(self, join_type, host):
        """Users who can edit the project are sent to its settings page."""
        # Arrange
        invitation = issue(join_type, host, role="PROJECT_ADMIN")

        # Act
        with host.core.acting_as(host.newcomer):
            navigation = join_type.accept(invitation, host.newcomer)

        # Assert
        assert navigation == Redirect(
            url="/editProject.html?projectId=Platform_Backend"
        )

    def test_missing_role_and_group_raises(self, join_type, host):
        """Nothing left to grant is an error for the caller to handle."""
        # Arrange
        invitation = issue(join_type, host)
        host.core.delete_role(host.developer_role.id)

        # Act & Assert
        with pytest.raises(InvitationException):
            join_type.accept(invitation, host.newcomer)

    def test_missing_role_still_applies_group(self, join_type, host):
        """A deleted role does not prevent the group membership."""
        # Arrange
        invitation = issue(join_type, host, group="DEVELOPERS")
        host.core.delete_role(host.developer_role.id)

        # Act
        join_type.accept(invitation, host.newcomer)

        # Assert
        assert host.core.roles_of(host.newcomer.id, host.project.project_id) == set()
        assert host.newcomer.id in host.core.members_of(host.developers.key)


class TestProcessInvitationRequest:
    """Tests for the landing navigation chosen by the type."""

    def test_signed_in_user_gets_plugin_landing_view(self, join_type, host):
        # Arrange
        invitation = issue(join_type, host)

        # Act
        navigation = join_type.process_invitation_request(invitation, host.newcomer)

        # Assert
        assert isinstance(navigation, View)
        assert navigation.path == "/plugins/invitations/invitationLanding.html"
        assert navigation.model["token"] == "tok-0123456789"

    def test_anonymous_visitor_is_sent_to_registration(self, join_type, host):
        # Act
        navigation = join_type.process_invitation_request(issue(join_type, host), None)

        # Assert
        assert navigation == Redirect(url="/registerUser.html")
