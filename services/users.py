from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from models import User
from security import hash_password, verify_password
from services.errors import Conflict, InvalidCredentials, NotFound, PersistenceError, require_fields
from utils.ids import new_record_id

logger = logging.getLogger(__name__)

MSG_USERNAME_TAKEN = "Username already exists"


async def get_user_by_username(session: AsyncSession, username: str) -> User | None:
    result = await session.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def register_user(
    session: AsyncSession,
    username: str,
    password: str,
    phone: str | None = None,
    email: str | None = None,
) -> User:
    """
    Create a user with a bcrypt-hashed password (hashed off the event loop).
    Two concurrent registrations can both pass the lookup; the unique
    constraint on username rejects the second insert.
    """
    require_fields("User", {"username": username}, ("username",))
    if await get_user_by_username(session, username) is not None:
        raise Conflict(MSG_USERNAME_TAKEN)
    user = User(
        id=new_record_id(),
        username=username,
        phone=phone,
        email=email,
        password=await run_in_threadpool(hash_password, password),
    )
    session.add(user)
    try:
        await session.flush()
    except IntegrityError as e:
        raise Conflict(MSG_USERNAME_TAKEN) from e
    except SQLAlchemyError as e:
        raise PersistenceError("Could not save user") from e
    logger.info("User registered", extra={"user_id": user.id, "username": username})
    return user


async def authenticate_user(session: AsyncSession, username: str, password: str) -> User:
    user = await get_user_by_username(session, username)
    if user is None:
        raise NotFound("User not found")
    if not await run_in_threadpool(verify_password, password, user.password):
        raise InvalidCredentials("Invalid password")
    return user


async def list_users(session: AsyncSession) -> list[User]:
    result = await session.execute(select(User))
    return list(result.scalars().all())
