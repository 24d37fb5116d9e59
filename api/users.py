from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.errors import json_body, operation
from config import settings
from database import get_db
from models import User
from schemas.user import LoginRequest, RegisterRequest
from services.users import authenticate_user, list_users, register_user

router = APIRouter(tags=["users"])


def _user_to_response(user: User) -> dict[str, Any]:
    """Serialize a user; the password hash only goes out when explicitly enabled."""
    out = {"_id": user.id, "username": user.username}
    if user.phone is not None:
        out["phone"] = user.phone
    if user.email is not None:
        out["email"] = user.email
    if settings.expose_password_hash:
        out["password"] = user.password
    return out


@router.post("/register", openapi_extra=json_body(RegisterRequest))
async def register(payload: Any = Body(None), db: AsyncSession = Depends(get_db)):
    with operation("Registration failed"):
        body = RegisterRequest.model_validate(payload)
        await register_user(
            db,
            username=body.username,
            password=body.password,
            phone=body.phone,
            email=body.email,
        )
    return {"message": "Registration successful"}


@router.post("/login", openapi_extra=json_body(LoginRequest))
async def login(payload: Any = Body(None), db: AsyncSession = Depends(get_db)):
    with operation("Login failed"):
        body = LoginRequest.model_validate(payload)
        user = await authenticate_user(db, body.username, body.password)
    return {"message": "Login successful", "user": _user_to_response(user)}


@router.get("/users")
async def get_users(db: AsyncSession = Depends(get_db)):
    with operation("Error fetching users"):
        users = await list_users(db)
    out = []
    for u in users:
        item = {"_id": u.id, "username": u.username}
        if u.email is not None:
            item["email"] = u.email
        if u.phone is not None:
            item["phone"] = u.phone
        out.append(item)
    return out
