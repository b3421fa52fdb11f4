"""API resource tests."""

from uuid import uuid4

import pytest
from falcon.testing import TestClient

from tests.api.conftest import auth_headers
from tests.conftest import FakeUnitOfWork


class TestAccess:
    """GET /v1/access and POST /v1/access/check."""

    def test_access_requires_session(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/access")
        assert result.status_code == 401
        assert result.json == {"error": "Unauthorized"}

    def test_access_describes_advisor(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/access", headers=auth_headers("asesor-1"))
        assert result.status_code == 200
        assert result.json["role"] == "asesor"
        assert [n["title"] for n in result.json["navigation"]] == [
            "Panel Principal",
            "Inventario",
            "Ventas",
            "Clientes",
            "Reportes",
            "Analíticas",
        ]
        assert "/dashboard/master-data" not in result.json["actions"]
        assert "edit_price" in result.json["actions"]["/dashboard/sales"]

    def test_check_action_denied(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/access/check",
            json={"route": "/dashboard/sales", "action": "edit_price"},
            headers=auth_headers("colaborador-1"),
        )
        assert result.status_code == 200
        assert result.json["allowed"] is False
        assert result.json["error"] == "insufficient permissions"
        assert result.json["user"]["role"] == "colaborador"

    def test_check_action_allowed(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/access/check",
            json={"route": "/dashboard/inventory/manage", "action": "delete"},
            headers=auth_headers("colaborador-1"),
        )
        assert result.json["allowed"] is True
        assert result.json["error"] is None

    def test_check_route_only(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/access/check",
            json={"route": "/dashboard/settings"},
            headers=auth_headers("admin-1"),
        )
        assert result.json["allowed"] is True

    def test_check_without_session(self, client: TestClient) -> None:
        result = client.simulate_post("/v1/access/check", json={"route": "/dashboard"})
        assert result.status_code == 200
        assert result.json == {"allowed": False, "error": "not authenticated", "user": None}

    @pytest.mark.parametrize(
        "body",
        [{}, {"action": "view"}, {"route": 3}, {"route": "/dashboard", "action": 1}, ["route"]],
    )
    def test_check_bad_body(self, client: TestClient, body) -> None:
        result = client.simulate_post(
            "/v1/access/check", json=body, headers=auth_headers("admin-1")
        )
        assert result.status_code == 400
        assert "error" in result.json


class TestUsers:
    """GET /v1/users, GET /v1/roles and PUT /v1/users/{user_id}/role."""

    def test_list_users_as_admin(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/users", headers=auth_headers("admin-1"))
        assert result.status_code == 200
        assert {u["email"] for u in result.json["items"]} == {
            "admin-1@panela.test",
            "asesor-1@panela.test",
            "colaborador-1@panela.test",
        }

    def test_list_users_forbidden(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/users", headers=auth_headers("asesor-1"))
        assert result.status_code == 403
        assert result.json == {"error": "Permission denied"}

    def test_list_users_unauthenticated(self, client: TestClient) -> None:
        assert client.simulate_get("/v1/users").status_code == 401

    def test_list_roles(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles", headers=auth_headers("admin-1"))
        assert result.status_code == 200
        assert [r["name"] for r in result.json["items"]] == ["admin", "asesor", "colaborador"]

    def test_list_roles_forbidden(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles", headers=auth_headers("colaborador-1"))
        assert result.status_code == 403

    def test_assign_role(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        target = fake_uow.add_user("nuevo-1", role_name="colaborador")

        result = client.simulate_put(
            f"/v1/users/{target.id}/role",
            json={"role": "asesor"},
            headers=auth_headers("admin-1"),
        )

        assert result.status_code == 200
        assert result.json["id"] == str(target.id)
        assert result.json["role"] == "asesor"

        # New role applies to the user's next request.
        page = client.simulate_get("/dashboard/sales", headers=auth_headers("nuevo-1"))
        assert page.status_code == 200

    def test_assign_role_forbidden(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        target = fake_uow.add_user("nuevo-1", role_name="colaborador")
        result = client.simulate_put(
            f"/v1/users/{target.id}/role",
            json={"role": "admin"},
            headers=auth_headers("asesor-1"),
        )
        assert result.status_code == 403

    def test_assign_unknown_role(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        target = fake_uow.add_user("nuevo-1", role_name="colaborador")
        result = client.simulate_put(
            f"/v1/users/{target.id}/role",
            json={"role": "gerente"},
            headers=auth_headers("admin-1"),
        )
        assert result.status_code == 400
        assert result.json["error"] == "Unknown role: gerente"

    def test_assign_role_unknown_user(self, client: TestClient) -> None:
        result = client.simulate_put(
            f"/v1/users/{uuid4()}/role",
            json={"role": "asesor"},
            headers=auth_headers("admin-1"),
        )
        assert result.status_code == 404

    def test_assign_role_invalid_user_id(self, client: TestClient) -> None:
        result = client.simulate_put(
            "/v1/users/not-a-uuid/role",
            json={"role": "asesor"},
            headers=auth_headers("admin-1"),
        )
        assert result.status_code == 400
        assert result.json == {"error": "Invalid user ID"}

    @pytest.mark.parametrize("body", [{}, {"role": 5}])
    def test_assign_role_bad_body(self, client: TestClient, body) -> None:
        result = client.simulate_put(
            f"/v1/users/{uuid4()}/role", json=body, headers=auth_headers("admin-1")
        )
        assert result.status_code == 400
