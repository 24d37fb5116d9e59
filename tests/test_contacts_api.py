"""Tests for POST /contact"""

from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient
from sqlalchemy import select

from models import Contact

CONTACT = {"name": "A", "email": "a@x.com", "phone": "1", "subject": "S", "message": "M"}


def _stored_contacts(client: TestClient) -> list[Contact]:
    database = client.app.state.database

    async def _load():
        async with database.sessionmaker() as session:
            result = await session.execute(select(Contact))
            return list(result.scalars().all())

    return client.portal.call(_load)


def test_submit_contact(client: TestClient):
    before = datetime.now(timezone.utc)
    response = client.post("/contact", json=CONTACT)
    assert response.status_code == 200
    assert response.json() == {"message": "Contact message saved successfully"}

    (stored,) = _stored_contacts(client)
    assert stored.name == "A"
    assert stored.message == "M"
    sent_at = stored.sent_at.replace(tzinfo=timezone.utc) if stored.sent_at.tzinfo is None else stored.sent_at
    assert before - timedelta(seconds=1) <= sent_at <= datetime.now(timezone.utc) + timedelta(seconds=1)


def test_submit_contact_missing_field_fails(client: TestClient):
    body = {k: v for k, v in CONTACT.items() if k != "subject"}
    response = client.post("/contact", json=body)
    assert response.status_code == 500
    assert response.json() == {"message": "Failed to save contact message"}
    assert _stored_contacts(client) == []


def test_submit_contact_coerces_numeric_phone(client: TestClient):
    response = client.post("/contact", json={**CONTACT, "phone": 5550100})
    assert response.status_code == 200
    (stored,) = _stored_contacts(client)
    assert stored.phone == "5550100"


def test_submit_contact_empty_fields_fail(client: TestClient):
    response = client.post("/contact", json={k: "" for k in CONTACT})
    assert response.status_code == 500
    assert response.json() == {"message": "Failed to save contact message"}
    assert _stored_contacts(client) == []


def test_submit_contact_uncastable_field_fails(client: TestClient):
    response = client.post("/contact", json={**CONTACT, "phone": ["1", "2"]})
    assert response.status_code == 500
    assert response.json() == {"message": "Failed to save contact message"}
    assert _stored_contacts(client) == []


def test_submit_contact_coerces_boolean(client: TestClient):
    response = client.post("/contact", json={**CONTACT, "subject": True})
    assert response.status_code == 200
    (stored,) = _stored_contacts(client)
    assert stored.subject == "true"
