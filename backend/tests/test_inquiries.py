"""
Tests for contact-form inquiries and their admin workflow.
"""
from fastapi.testclient import TestClient
from sqlmodel import Session

from brandsbridge.models import Inquiry, InquiryStatus, InquiryType

INQUIRY = {
    "firstName": "Sara",
    "lastName": "Haddad",
    "email": "sara@example.com",
    "company": "Gulf Foods",
    "message": "We would like to distribute your catalog.",
}


def make_inquiry(session: Session, **overrides) -> Inquiry:
    values = {
        "first_name": "Omar",
        "last_name": "Khalil",
        "email": "omar@example.com",
        "message": "Hello",
    }
    values.update(overrides)
    inquiry = Inquiry(**values)
    session.add(inquiry)
    session.commit()
    session.refresh(inquiry)
    return inquiry


def test_create_inquiry_defaults(client: TestClient):
    response = client.post("/api/inquiries", json=INQUIRY)
    assert response.status_code == 201
    data = response.json()
    assert data["type"] == "GENERAL"
    assert data["status"] == "NEW"
    assert data["respondedAt"] is None
    assert data["notes"] is None


def test_minimal_inquiry_defaults(client: TestClient):
    response = client.post(
        "/api/inquiries",
        json={"firstName": "A", "lastName": "B", "email": "a@b.com", "message": "Hello there, interested."},
    )
    assert response.status_code == 201
    data = response.json()
    assert (data["type"], data["status"], data["respondedAt"]) == ("GENERAL", "NEW", None)


def test_create_inquiry_requires_message(client: TestClient):
    payload = {k: v for k, v in INQUIRY.items() if k != "message"}
    assert client.post("/api/inquiries", json=payload).status_code == 422

    bad_email = dict(INQUIRY, email="not-an-email")
    assert client.post("/api/inquiries", json=bad_email).status_code == 422


def test_admin_routes_require_auth(client: TestClient, session: Session):
    inquiry = make_inquiry(session)

    assert client.get("/api/inquiries").status_code == 401
    assert client.get(f"/api/inquiries/{inquiry.id}").status_code == 401
    assert client.delete(f"/api/inquiries/{inquiry.id}").status_code == 401


def test_list_newest_first_with_filters(client: TestClient, session: Session, admin_headers):
    make_inquiry(session, email="first@example.com", type=InquiryType.BUSINESS)
    make_inquiry(session, email="second@example.com", status=InquiryStatus.CLOSED)
    make_inquiry(session, email="third@example.com", company="Gulf Foods")

    data = client.get("/api/inquiries", headers=admin_headers).json()
    assert [i["email"] for i in data["data"]] == [
        "third@example.com", "second@example.com", "first@example.com",
    ]
    assert data["meta"]["total"] == 3

    business = client.get("/api/inquiries", params={"type": "BUSINESS"}, headers=admin_headers).json()
    assert [i["email"] for i in business["data"]] == ["first@example.com"]

    closed = client.get("/api/inquiries", params={"status": "CLOSED"}, headers=admin_headers).json()
    assert [i["email"] for i in closed["data"]] == ["second@example.com"]

    found = client.get("/api/inquiries", params={"search": "gulf"}, headers=admin_headers).json()
    assert [i["email"] for i in found["data"]] == ["third@example.com"]


def test_unknown_status_filter_is_rejected(client: TestClient, admin_headers):
    response = client.get("/api/inquiries", params={"status": "ARCHIVED"}, headers=admin_headers)
    assert response.status_code == 422


def test_status_responded_stamps_responded_at(client: TestClient, session: Session, admin_headers):
    inquiry = make_inquiry(session)

    in_progress = client.patch(
        f"/api/inquiries/{inquiry.id}/status",
        json={"status": "IN_PROGRESS"},
        headers=admin_headers,
    ).json()
    assert in_progress["respondedAt"] is None

    responded = client.patch(
        f"/api/inquiries/{inquiry.id}/status",
        json={"status": "RESPONDED"},
        headers=admin_headers,
    ).json()
    assert responded["status"] == "RESPONDED"
    assert responded["respondedAt"] is not None

    # Leaving RESPONDED keeps the stamp
    closed = client.patch(
        f"/api/inquiries/{inquiry.id}/status",
        json={"status": "CLOSED"},
        headers=admin_headers,
    ).json()
    assert closed["respondedAt"] == responded["respondedAt"]


def test_general_update_follows_stamping_rule(client: TestClient, session: Session, admin_headers):
    inquiry = make_inquiry(session)

    data = client.patch(
        f"/api/inquiries/{inquiry.id}",
        json={"status": "RESPONDED", "notes": "Sent price list"},
        headers=admin_headers,
    ).json()
    assert data["respondedAt"] is not None
    assert data["notes"] == "Sent price list"


def test_add_note(client: TestClient, session: Session, admin_headers):
    inquiry = make_inquiry(session)

    response = client.patch(
        f"/api/inquiries/{inquiry.id}/notes",
        json={"notes": "Call back on Monday"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["notes"] == "Call back on Monday"
    assert response.json()["status"] == "NEW"


def test_missing_inquiry(client: TestClient, admin_headers):
    response = client.patch("/api/inquiries/9/status", json={"status": "CLOSED"}, headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Inquiry not found"


def test_delete_inquiry(client: TestClient, session: Session, admin_headers):
    inquiry = make_inquiry(session)

    response = client.delete(f"/api/inquiries/{inquiry.id}", headers=admin_headers)
    assert response.json() == {"message": "Inquiry deleted successfully"}
    assert client.get(f"/api/inquiries/{inquiry.id}", headers=admin_headers).status_code == 404


def test_inquiry_stats(client: TestClient, session: Session, admin_headers):
    for i in range(6):
        make_inquiry(session, email=f"user{i}@example.com", type=InquiryType.BUSINESS)
    make_inquiry(session, email="support@example.com", type=InquiryType.SUPPORT, status=InquiryStatus.CLOSED)

    data = client.get("/api/inquiries/stats", headers=admin_headers).json()
    assert data["total"] == 7
    assert data["byStatus"] == {"NEW": 6, "CLOSED": 1}
    assert data["byType"] == {"BUSINESS": 6, "SUPPORT": 1}
    assert len(data["recent"]) == 5
    assert data["recent"][0]["email"] == "support@example.com"
    assert set(data["recent"][0]) == {"id", "firstName", "lastName", "email", "type", "status", "createdAt"}
