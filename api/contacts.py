from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.errors import json_body, operation
from database import get_db
from schemas.contact import ContactCreate
from services.contacts import submit_contact

router = APIRouter(tags=["contacts"])


@router.post("/contact", openapi_extra=json_body(ContactCreate))
async def create_contact(payload: Any = Body(None), db: AsyncSession = Depends(get_db)):
    with operation("Failed to save contact message"):
        body = ContactCreate.model_validate(payload)
        await submit_contact(db, body.model_dump())
    return {"message": "Contact message saved successfully"}
