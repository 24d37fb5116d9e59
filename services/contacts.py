from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from models import Contact
from services.errors import PersistenceError, require_fields
from utils.ids import new_record_id

logger = logging.getLogger(__name__)

CONTACT_FIELDS = ("name", "email", "phone", "subject", "message")


async def submit_contact(session: AsyncSession, fields: dict[str, Any]) -> Contact:
    """Store a contact-form message. All five text fields are required."""
    require_fields("Contact", fields, CONTACT_FIELDS)
    contact = Contact(
        id=new_record_id(),
        name=fields.get("name"),
        email=fields.get("email"),
        phone=fields.get("phone"),
        subject=fields.get("subject"),
        message=fields.get("message"),
        sent_at=datetime.now(timezone.utc),
    )
    session.add(contact)
    try:
        await session.flush()
    except SQLAlchemyError as e:
        raise PersistenceError("Could not save contact message") from e
    logger.info("Contact message saved", extra={"contact_id": contact.id})
    return contact
