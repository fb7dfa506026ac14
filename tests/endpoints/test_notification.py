import uuid
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from app.core.constants import NotificationTypeEnum
from app.crud.notification import notification as crud_notification
from app.crud.user import user as crud_user
from app.models.notification import Notification
from app.services.notification import notification_service
from tests.helpers.asserts import api_call


def _fail(*args, **kwargs):
    raise OperationalError("UPDATE ...", {}, Exception("database is unavailable"))


def test_opt_out_then_opt_in(client: TestClient, db_session: Session, manager, auth_headers):
    headers = auth_headers(manager)

    response = api_call(client, "PATCH", "/notification/optOut", headers=headers)
    assert response.json()["status"] == "success"
    db_session.refresh(manager)
    assert manager.email_notification_opt_out is True

    # repeating is harmless
    api_call(client, "PATCH", "/notification/optOut", headers=headers)
    db_session.refresh(manager)
    assert manager.email_notification_opt_out is True

    response = api_call(client, "PATCH", "/notification/optIn", headers=headers)
    assert response.json()["status"] == "success"
    db_session.refresh(manager)
    assert manager.email_notification_opt_out is False


@pytest.mark.parametrize("endpoint", ["/notification/optOut", "/notification/optIn"])
def test_opt_preference_persistence_failure(client: TestClient, manager, auth_headers, monkeypatch, endpoint):
    monkeypatch.setattr(crud_user, "set_email_opt_out", _fail)

    response = client.patch(endpoint, headers=auth_headers(manager))

    assert response.status_code == 500
    body = response.json()
    assert body["status"] == "error"
    assert "unavailable" not in body["message"]


def test_notification_endpoints_require_token(client: TestClient):
    for method, endpoint in [
        ("GET", "/notification"),
        ("PATCH", "/notification/optOut"),
        ("PATCH", "/notification/markAllAsRead"),
        ("DELETE", "/notification/clear"),
    ]:
        response = client.request(method, endpoint)
        assert response.status_code == 401
        assert response.json()["status"] == "error"


def test_invalid_token_is_rejected(client: TestClient):
    response = client.get("/notification", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json()["status"] == "error"


def test_list_returns_only_own_notifications_newest_first(
    client: TestClient, manager, requester, notification_factory, auth_headers
):
    older = notification_factory(manager, message="older", created_at=datetime(2026, 1, 5, 9, 0))
    newer = notification_factory(manager, message="newer", created_at=datetime(2026, 3, 5, 9, 0))
    notification_factory(requester, message="someone else's")

    response = api_call(client, "GET", "/notification", headers=auth_headers(manager))

    body = response.json()
    assert body["status"] == "success"
    assert [n["id"] for n in body["data"]] == [str(newer.id), str(older.id)]
    assert all(n["user_id"] == str(manager.id) for n in body["data"])


def test_list_orders_notifications_recorded_in_one_transaction(
    client: TestClient, db_session: Session, manager, auth_headers
):
    first = notification_service.record(
        db_session, recipient=manager, message="first", notification_type=NotificationTypeEnum.REQUEST_CREATED, commit=False
    )
    second = notification_service.record(
        db_session, recipient=manager, message="second", notification_type=NotificationTypeEnum.REQUEST_CREATED, commit=False
    )
    db_session.commit()

    assert second.created_at > first.created_at
    response = api_call(client, "GET", "/notification", headers=auth_headers(manager))
    assert [n["message"] for n in response.json()["data"]] == ["second", "first"]


def test_list_is_empty_for_user_without_notifications(client: TestClient, manager, auth_headers):
    response = api_call(client, "GET", "/notification", headers=auth_headers(manager))
    assert response.json()["data"] == []


def test_list_persistence_failure(client: TestClient, manager, auth_headers, monkeypatch):
    monkeypatch.setattr(crud_notification, "get_for_user", _fail)

    response = client.get("/notification", headers=auth_headers(manager))

    assert response.status_code == 500
    assert response.json()["status"] == "error"


def test_unread_count(client: TestClient, manager, notification_factory, auth_headers):
    notification_factory(manager)
    notification_factory(manager)
    notification_factory(manager, is_read=True)

    response = api_call(client, "GET", "/notification/unreadCount", headers=auth_headers(manager))
    assert response.json()["data"] == 2


def test_mark_as_read_is_idempotent(
    client: TestClient, db_session: Session, manager, notification_factory, auth_headers
):
    notification = notification_factory(manager)
    endpoint = f"/notification/markAsRead/{notification.id}"

    for _ in range(2):
        response = api_call(client, "PATCH", endpoint, headers=auth_headers(manager))
        assert response.json()["status"] == "success"
        db_session.refresh(notification)
        assert notification.is_read is True


def test_mark_as_read_leaves_other_users_notification_untouched(
    client: TestClient, db_session: Session, manager, requester, notification_factory, auth_headers
):
    notification = notification_factory(requester)

    response = client.patch(f"/notification/markAsRead/{notification.id}", headers=auth_headers(manager))

    assert response.status_code == 200
    assert response.json()["status"] == "success"
    db_session.refresh(notification)
    assert notification.is_read is False


def test_mark_as_read_unknown_notification_is_a_no_op(
    client: TestClient, db_session: Session, manager, notification_factory, auth_headers
):
    mine = notification_factory(manager)

    response = client.patch(f"/notification/markAsRead/{uuid.uuid4()}", headers=auth_headers(manager))

    assert response.status_code == 200
    assert response.json()["status"] == "success"
    db_session.refresh(mine)
    assert mine.is_read is False


def test_mark_as_read_persistence_failure(client: TestClient, manager, notification_factory, auth_headers, monkeypatch):
    notification = notification_factory(manager)
    monkeypatch.setattr(crud_notification, "mark_as_read", _fail)

    response = client.patch(f"/notification/markAsRead/{notification.id}", headers=auth_headers(manager))

    assert response.status_code == 500
    assert response.json()["status"] == "error"


def test_mark_all_as_read_leaves_other_users_untouched(
    client: TestClient, db_session: Session, manager, requester, notification_factory, auth_headers
):
    notification_factory(manager)
    notification_factory(manager)
    other = notification_factory(requester)

    response = api_call(client, "PATCH", "/notification/markAllAsRead", headers=auth_headers(manager))
    assert response.json()["status"] == "success"

    mine = db_session.query(Notification).filter(Notification.user_id == manager.id).all()
    assert len(mine) == 2
    assert all(n.is_read for n in mine)
    db_session.refresh(other)
    assert other.is_read is False


def test_mark_all_as_read_persistence_failure(client: TestClient, manager, auth_headers, monkeypatch):
    monkeypatch.setattr(crud_notification, "mark_all_as_read", _fail)

    response = client.patch("/notification/markAllAsRead", headers=auth_headers(manager))

    assert response.status_code == 500
    assert response.json()["status"] == "error"


def test_clear_removes_only_own_notifications(
    client: TestClient, db_session: Session, manager, requester, notification_factory, auth_headers
):
    notification_factory(manager)
    notification_factory(manager, is_read=True)
    survivor = notification_factory(requester)

    response = api_call(client, "DELETE", "/notification/clear", headers=auth_headers(manager))
    assert response.json()["status"] == "success"

    listing = api_call(client, "GET", "/notification", headers=auth_headers(manager))
    assert listing.json()["data"] == []
    assert db_session.get(Notification, survivor.id) is not None


def test_clear_persistence_failure(client: TestClient, manager, notification_factory, auth_headers, monkeypatch):
    notification_factory(manager)
    monkeypatch.setattr(crud_notification, "delete_for_user", _fail)

    response = client.delete("/notification/clear", headers=auth_headers(manager))

    assert response.status_code == 500
    assert response.json()["status"] == "error"
