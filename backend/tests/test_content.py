"""
Tests for site content, settings and the public display blocks.
"""
from fastapi.testclient import TestClient
from sqlmodel import Session

from brandsbridge.models import (
    CompanyValue, Content, ContentType, Partner, PartnerType, Service, Setting, Statistic,
)


def add_all(session: Session, *rows) -> None:
    for row in rows:
        session.add(row)
    session.commit()


def test_public_content_is_keyed_map(client: TestClient, session: Session):
    add_all(
        session,
        Content(key="hero_title", value="Welcome", value_ar="أهلا", section="hero"),
        Content(key="about_text", type=ContentType.HTML, value="<p>About</p>", section="about"),
    )

    data = client.get("/api/content/public").json()
    assert data == {
        "hero_title": {"value": "Welcome", "valueAr": "أهلا", "type": "TEXT"},
        "about_text": {"value": "<p>About</p>", "valueAr": None, "type": "HTML"},
    }


def test_public_content_empty(client: TestClient):
    assert client.get("/api/content/public").json() == {}


def test_settings_map_and_group_filter(client: TestClient, session: Session):
    add_all(
        session,
        Setting(key="company_name", value="Brands Bridge International"),
        Setting(key="meta_title", value="Premium FMCG Trading", group="seo"),
    )

    assert client.get("/api/content/settings").json() == {
        "company_name": "Brands Bridge International",
        "meta_title": "Premium FMCG Trading",
    }
    assert client.get("/api/content/settings", params={"group": "seo"}).json() == {
        "meta_title": "Premium FMCG Trading",
    }


def test_update_setting(client: TestClient, session: Session, admin_headers):
    add_all(session, Setting(key="company_phone", value="+1 555", group="contact"))

    response = client.patch(
        "/api/content/settings/company_phone",
        json={"value": "+971 4 000 0000"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["value"] == "+971 4 000 0000"
    assert response.json()["group"] == "contact"


def test_update_missing_setting(client: TestClient, admin_headers):
    response = client.patch("/api/content/settings/nope", json={"value": "x"}, headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Setting not found"


def test_content_crud(client: TestClient, admin_headers):
    created = client.post(
        "/api/content",
        json={"key": "hero_cta", "value": "Explore", "section": "hero"},
        headers=admin_headers,
    )
    assert created.status_code == 201
    assert created.json()["type"] == "TEXT"

    duplicate = client.post(
        "/api/content",
        json={"key": "hero_cta", "value": "Again"},
        headers=admin_headers,
    )
    assert duplicate.status_code == 409
    assert duplicate.json()["detail"] == "Content with this key already exists"

    updated = client.patch(
        "/api/content/key/hero_cta",
        json={"valueAr": "استكشف"},
        headers=admin_headers,
    )
    assert updated.json()["valueAr"] == "استكشف"
    assert updated.json()["value"] == "Explore"

    fetched = client.get("/api/content/key/hero_cta", headers=admin_headers)
    assert fetched.json()["section"] == "hero"

    deleted = client.delete("/api/content/key/hero_cta", headers=admin_headers)
    assert deleted.json() == {"message": "Content deleted successfully"}
    assert client.get("/api/content/key/hero_cta", headers=admin_headers).status_code == 404


def test_admin_content_list_by_section(client: TestClient, session: Session, admin_headers):
    add_all(
        session,
        Content(key="hero_title", value="A", section="hero"),
        Content(key="about_title", value="B", section="about"),
        Content(key="hero_cta", value="C", section="hero"),
    )

    everything = client.get("/api/content", headers=admin_headers).json()
    assert [c["key"] for c in everything] == ["about_title", "hero_cta", "hero_title"]

    hero = client.get("/api/content", params={"section": "hero"}, headers=admin_headers).json()
    assert [c["key"] for c in hero] == ["hero_cta", "hero_title"]

    assert client.get("/api/content").status_code == 401


def test_display_blocks_are_active_and_sorted(client: TestClient, session: Session):
    add_all(
        session,
        Statistic(key="brands", label="Partner Brands", value="200+", sort_order=2),
        Statistic(key="countries", label="Countries Served", value="75+", sort_order=1),
        Statistic(key="hidden", label="Hidden", value="0", is_active=False),
        CompanyValue(title="Expertise", description="Deep industry knowledge", sort_order=1),
        Service(title="Distribution", description="Logistics", image="/uploads/d.jpg"),
    )

    stats = client.get("/api/content/statistics").json()
    assert [s["key"] for s in stats] == ["countries", "brands"]
    assert stats[0]["label"] == "Countries Served"

    values = client.get("/api/content/values").json()
    assert values[0]["title"] == "Expertise"

    services = client.get("/api/content/services").json()
    assert services[0]["image"] == "/uploads/d.jpg"


def test_partners_type_filter(client: TestClient, session: Session):
    add_all(
        session,
        Partner(name="ISO", logo="/uploads/iso.png", type=PartnerType.CERTIFICATION),
        Partner(name="Gulf Foods", logo="/uploads/gulf.png", type=PartnerType.DISTRIBUTOR),
    )

    assert len(client.get("/api/content/partners").json()) == 2
    certified = client.get("/api/content/partners", params={"type": "CERTIFICATION"}).json()
    assert [p["name"] for p in certified] == ["ISO"]
