"""Tests for JSON/XML content negotiation."""

import xml.etree.ElementTree as ET

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from mobile_app_ws.app.core.negotiation import parse_xml, to_xml, wants_xml

pytestmark = pytest.mark.unit

XML_HEADERS = {"Content-Type": "application/xml", "Accept": "application/xml"}

CREATE_XML = (
    b"<UserDetailsRequestModel>"
    b"<firstName>Jan</firstName>"
    b"<lastName>Doe</lastName>"
    b"<email>jan@example.com</email>"
    b"<password>secret123</password>"
    b"</UserDetailsRequestModel>"
)


def _request(accept=None) -> Request:
    headers = [] if accept is None else [(b"accept", accept.encode())]
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


@pytest.mark.parametrize(
    "accept, expected",
    [
        (None, False),
        ("*/*", False),
        ("application/json", False),
        ("application/xml", True),
        ("text/xml", True),
        ("application/json, application/xml", False),
        ("application/xml, application/json", True),
        ("application/json;q=0.5, application/xml;q=0.9", True),
        ("application/xml;q=0.1, application/json", False),
        ("application/json;q=0, application/xml", True),
        ("application/xml;q=0", False),
    ],
)
def test_wants_xml(accept, expected) -> None:
    assert wants_xml(_request(accept)) is expected


def test_parse_xml_reads_root_children() -> None:
    data = parse_xml(b"<Update><firstName> Jane </firstName><lastName/></Update>")

    assert data == {"firstName": "Jane", "lastName": None}


def test_to_xml_renders_lists_as_items() -> None:
    root = ET.fromstring(to_xml("UserRest", [{"userId": 1}, {"userId": 2}]))

    assert root.tag == "List"
    assert [item.findtext("userId") for item in root.findall("item")] == ["1", "2"]


@pytest.mark.parametrize("prefix", ["/users", "/jpa/users"])
def test_create_from_xml_and_answer_in_xml(client: TestClient, prefix) -> None:
    response = client.post(prefix, content=CREATE_XML, headers=XML_HEADERS)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/xml")
    root = ET.fromstring(response.content)
    assert root.tag == "UserRest"
    assert root.findtext("firstName") == "Jan"
    assert root.findtext("email") == "jan@example.com"
    assert root.findtext("userId") not in (None, "", "0")


def test_xml_body_json_answer(client: TestClient) -> None:
    response = client.post(
        "/users", content=CREATE_XML, headers={"Content-Type": "text/xml", "Accept": "application/json"}
    )

    assert response.status_code == 200
    assert response.json()["lastName"] == "Doe"


def test_get_in_xml(client: TestClient, user_details) -> None:
    created = client.post("/jpa/users", json=user_details).json()

    response = client.get(f"/jpa/users/{created['userId']}", headers={"Accept": "application/xml"})

    root = ET.fromstring(response.content)
    assert root.findtext("userId") == str(created["userId"])


def test_update_from_xml(client: TestClient, user_details) -> None:
    created = client.post("/users", json=user_details).json()

    response = client.put(
        f"/users/{created['userId']}",
        content=b"<UpdateUserDetailsRequestModel><firstName>Jane</firstName>"
        b"<lastName>Doe</lastName></UpdateUserDetailsRequestModel>",
        headers={"Content-Type": "application/xml"},
    )

    assert response.status_code == 200
    assert response.json()["firstName"] == "Jane"


def test_list_in_xml(client: TestClient, user_details) -> None:
    client.post("/users", json=user_details)

    response = client.get("/users", headers={"Accept": "application/xml"})

    root = ET.fromstring(response.content)
    assert root.tag == "List"
    assert [item.findtext("firstName") for item in root.findall("item")] == ["Jan"]


def test_validation_error_in_xml(client: TestClient) -> None:
    body = CREATE_XML.replace(b"secret123", b"short")

    response = client.post("/users", content=body, headers=XML_HEADERS)

    assert response.status_code == 400
    root = ET.fromstring(response.content)
    assert root.tag == "ErrorMessage"
    assert root.findtext("timeStamp")
    assert root.find("errors/password") is not None


def test_empty_xml_element_counts_as_null(client: TestClient) -> None:
    body = CREATE_XML.replace(b"<email>jan@example.com</email>", b"<email></email>")

    response = client.post("/users", content=body, headers={"Content-Type": "application/xml"})

    assert response.status_code == 400
    assert response.json()["errors"] == {"email": "Email cannot be null"}


def test_malformed_xml_is_bad_request(client: TestClient) -> None:
    response = client.post("/users", content=b"<UserDetailsRequestModel>", headers=XML_HEADERS)

    assert response.status_code == 400
    assert ET.fromstring(response.content).findtext("message") == "Malformed XML request body"


def test_malformed_json_is_bad_request(client: TestClient) -> None:
    response = client.post("/users", content=b"{not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json()["message"] == "Malformed JSON request body"


def test_unsupported_media_type(client: TestClient) -> None:
    response = client.post("/jpa/users", content=b"firstName=Jan", headers={"Content-Type": "text/plain"})

    assert response.status_code == 415
    assert response.json()["message"] == "Content type 'text/plain' not supported"
