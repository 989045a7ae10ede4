"""End-to-end tests for the invitation HTTP API."""

import pytest
from fastapi.testclient import TestClient

from invitations.adapter.host import InMemoryCoreFacade
from invitations.interface.api.app import create_app
from tests.conftest import seed_host
from tests.di import build_test_container


@pytest.fixture
def host():
    return seed_host(InMemoryCoreFacade())


@pytest.fixture
def client(host):
    """Create test client backed by the seeded in-memory host."""
    app_instance = create_app(container=build_test_container(core=host.core))
    return TestClient(app_instance)


def as_user(user) -> dict[str, str]:
    return {"X-User-Id": str(user.id)}


def create_invitation(client, host, **overrides) -> dict:
    body = {
        "name": "Join Backend",
        "role": "PROJECT_DEVELOPER",
        "group": "",
        "multiuser": True,
        "welcome_text": "Welcome aboard",
    }
    body.update(overrides)
    response = client.post(
        f"/projects/{host.project.project_id}/invitations",
        json=body,
        headers=as_user(host.admin),
    )
    assert response.status_code == 201, response.text
    return response.json()["invitation"]


class TestInvitationFlow:
    """Issue, open and redeem an invitation over HTTP."""

    def test_single_use_link(self, client, host):
        """The first redeemer joins, the second gets a 404."""
        # Arrange
        invitation = create_invitation(client, host)
        token = invitation["token"]

        # Act
        landing = client.get(f"/invitations/{token}", headers=as_user(host.newcomer))
        accepted = client.post(
            f"/invitations/{token}/accept", headers=as_user(host.newcomer)
        )
        second = client.post(
            f"/invitations/{token}/accept", headers=as_user(host.outsider)
        )

        # Assert
        assert landing.status_code == 200
        assert landing.json()["navigation"]["kind"] == "view"
        assert accepted.status_code == 200
        assert accepted.json() == {
            "kind": "redirect",
            "url": "/project.html?projectId=Platform_Backend",
            "view_path": None,
            "model": {},
        }
        assert second.status_code == 404
        assert host.core.roles_of(host.newcomer.id, host.project.project_id) == {
            host.developer_role.id
        }

    def test_anonymous_visitor_is_sent_to_registration(self, client, host):
        # Arrange
        token = create_invitation(client, host)["token"]

        # Act
        response = client.get(f"/invitations/{token}")

        # Assert
        assert response.status_code == 200
        assert response.json()["navigation"]["url"] == "/registerUser.html"

    def test_unknown_token_landing(self, client):
        # Act
        response = client.get("/invitations/does-not-exist")

        # Assert
        assert response.status_code == 200
        assert response.json()["valid"] is False

    def test_accept_requires_authentication(self, client, host):
        # Arrange
        token = create_invitation(client, host)["token"]

        # Act
        response = client.post(f"/invitations/{token}/accept")

        # Assert
        assert response.status_code == 401

    def test_accept_forbidden_when_issuer_lost_rights(self, client, host):
        # Arrange
        token = create_invitation(client, host)["token"]
        host.core.delete_role(host.admin_role.id)

        # Act
        response = client.post(
            f"/invitations/{token}/accept", headers=as_user(host.newcomer)
        )

        # Assert
        assert response.status_code == 403


class TestInvitationManagement:
    """Create, list, edit and revoke over HTTP."""

    def test_create_validation_errors(self, client, host):
        """Invalid forms return per-field errors."""
        # Act
        response = client.post(
            f"/projects/{host.project.project_id}/invitations",
            json={"name": "No grant", "role": "", "group": ""},
            headers=as_user(host.admin),
        )

        # Assert
        assert response.status_code == 400
        fields = [e["property_name"] for e in response.json()["detail"]]
        assert fields == ["role", "group"]

    def test_create_forbidden_for_non_manager(self, client, host):
        # Act
        response = client.post(
            f"/projects/{host.project.project_id}/invitations",
            json={"name": "Sneaky", "role": "PROJECT_ADMIN"},
            headers=as_user(host.newcomer),
        )

        # Assert
        assert response.status_code == 403

    def test_create_in_unknown_project(self, client, host):
        # Act
        response = client.post(
            "/projects/missing/invitations",
            json={"name": "Lost", "role": "PROJECT_DEVELOPER"},
            headers=as_user(host.admin),
        )

        # Assert
        assert response.status_code == 404

    def test_list_edit_and_revoke(self, client, host):
        # Arrange
        token = create_invitation(client, host)["token"]
        path = f"/projects/{host.project.project_id}/invitations"

        # Act
        listed = client.get(path, headers=as_user(host.admin))
        edited = client.put(
            f"/invitations/{token}",
            json={"name": "Developers", "group": "DEVELOPERS"},
            headers=as_user(host.admin),
        )
        revoked = client.delete(f"/invitations/{token}", headers=as_user(host.admin))
        listed_after = client.get(path, headers=as_user(host.admin))

        # Assert
        assert listed.status_code == 200
        assert [i["token"] for i in listed.json()["invitations"]] == [token]
        assert edited.status_code == 200
        assert edited.json()["token"] == token
        assert edited.json()["name"] == "Developers"
        assert revoked.status_code == 204
        assert listed_after.json()["total"] == 0

    def test_edit_properties_prefill(self, client, host):
        # Act
        response = client.get(
            f"/projects/{host.project.project_id}/invitations/types/"
            "joinProjectInvitation/properties",
            headers=as_user(host.admin),
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["role_id"] == "PROJECT_DEVELOPER"
        assert body["multiuser"] is True

    def test_edit_properties_hides_invitation_of_another_project(self, client, host):
        """An admin of Docs cannot read a Backend invitation through Docs."""
        # Arrange
        invitation = create_invitation(client, host, welcome_text="Backend only")
        host.core.grant_role(
            host.outsider.id, host.admin_role.id, host.other_project.project_id
        )

        # Act
        response = client.get(
            f"/projects/{host.other_project.project_id}/invitations/types/"
            "joinProjectInvitation/properties",
            params={"token": invitation["token"]},
            headers=as_user(host.outsider),
        )

        # Assert
        assert response.status_code == 404
        assert "Backend only" not in response.text


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["invitation_types"] == ["joinProjectInvitation"]
