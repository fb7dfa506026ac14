import uuid

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from tests.helpers.asserts import api_call


def test_read_profile(client: TestClient, requester, manager, auth_headers):
    response = api_call(client, "GET", "/account/me", headers=auth_headers(requester))

    data = response.json()["data"]
    assert data["id"] == str(requester.id)
    assert data["line_manager_id"] == str(manager.id)
    assert data["email_notification_opt_out"] is False


def test_inactive_user_is_refused(client: TestClient, user_factory, auth_headers):
    inactive = user_factory(is_active=False)

    response = client.get("/account/me", headers=auth_headers(inactive))

    assert response.status_code == 403


def test_set_line_manager(client: TestClient, db_session: Session, user_factory, auth_headers):
    employee = user_factory(full_name="Employee")
    boss = user_factory(full_name="Boss")

    response = api_call(
        client, "PUT", "/account/line-manager", headers=auth_headers(employee),
        json={"line_manager_id": str(boss.id)},
    )

    assert response.json()["data"]["line_manager_id"] == str(boss.id)
    db_session.refresh(employee)
    assert employee.line_manager_id == boss.id


def test_line_manager_cannot_be_self(client: TestClient, manager, auth_headers):
    response = client.put(
        "/account/line-manager", headers=auth_headers(manager), json={"line_manager_id": str(manager.id)}
    )
    assert response.status_code == 400


def test_line_manager_cycle_is_rejected(client: TestClient, user_factory, auth_headers):
    top = user_factory(full_name="Top")
    middle = user_factory(full_name="Middle", line_manager=top)
    bottom = user_factory(full_name="Bottom", line_manager=middle)

    response = client.put(
        "/account/line-manager", headers=auth_headers(top), json={"line_manager_id": str(bottom.id)}
    )

    assert response.status_code == 400
    assert "cycle" in response.json()["message"]


def test_unknown_line_manager(client: TestClient, manager, auth_headers):
    response = client.put(
        "/account/line-manager", headers=auth_headers(manager), json={"line_manager_id": str(uuid.uuid4())}
    )
    assert response.status_code == 404


def test_token_for_deleted_user_is_rejected(client: TestClient, auth_headers):
    class Ghost:
        id = uuid.uuid4()

    response = client.get("/account/me", headers=auth_headers(Ghost))
    assert response.status_code == 401
