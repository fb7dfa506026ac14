import uuid

from fastapi.testclient import TestClient

from app.core.constants import DEFAULT_ACCOMMODATION_IMAGE
from tests.helpers.asserts import api_call

ACCOMMODATION = {
    "country": "Kenya",
    "city": "Nairobi",
    "address": "4 Riverside Drive",
    "accommodation": "Riverside Lodge",
    "accommodationType": ["lodge", "apartment"],
    "roomType": ["single"],
    "numOfRooms": 12,
    "description": "Quiet lodge ten minutes from the office",
    "facilities": ["wifi", "breakfast"],
}


def test_create_accommodation_uses_placeholder_image(client: TestClient, manager, auth_headers):
    response = api_call(client, "POST", "/accommodations", headers=auth_headers(manager), json=ACCOMMODATION)

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["images"] == [DEFAULT_ACCOMMODATION_IMAGE]
    assert data["accommodationType"] == ["lodge", "apartment"]
    assert data["country"] == "Kenya"


def test_create_accommodation_keeps_supplied_images(client: TestClient, manager, auth_headers):
    payload = {**ACCOMMODATION, "images": ["https://img.example.org/lodge.jpg"]}

    response = api_call(client, "POST", "/accommodations", headers=auth_headers(manager), json=payload)

    assert response.json()["data"]["images"] == ["https://img.example.org/lodge.jpg"]


def test_create_accommodation_rejects_unknown_country(client: TestClient, manager, auth_headers):
    payload = {**ACCOMMODATION, "country": "Atlantis"}

    response = client.post("/accommodations", headers=auth_headers(manager), json=payload)

    assert response.status_code == 422
    assert response.json()["status"] == "error"


def test_list_and_filter_accommodations(client: TestClient, manager, accommodation, auth_headers):
    api_call(client, "POST", "/accommodations", headers=auth_headers(manager), json=ACCOMMODATION)

    everything = api_call(client, "GET", "/accommodations", headers=auth_headers(manager)).json()["data"]
    assert len(everything) == 2

    in_lagos = api_call(client, "GET", "/accommodations?city=lagos", headers=auth_headers(manager)).json()["data"]
    assert [a["id"] for a in in_lagos] == [str(accommodation.id)]

    in_kenya = api_call(client, "GET", "/accommodations?country=Kenya", headers=auth_headers(manager)).json()["data"]
    assert [a["city"] for a in in_kenya] == ["Nairobi"]


def test_get_accommodation(client: TestClient, manager, accommodation, auth_headers):
    response = api_call(client, "GET", f"/accommodations/{accommodation.id}", headers=auth_headers(manager))
    assert response.json()["data"]["accommodation"] == "Harbour View Suites"

    missing = client.get(f"/accommodations/{uuid.uuid4()}", headers=auth_headers(manager))
    assert missing.status_code == 404
