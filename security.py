"""Password hashing with bcrypt."""

import bcrypt

from config import settings

# bcrypt only looks at the first 72 bytes of a password.
_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: int | None = None) -> str:
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("ascii")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plaintext password against a stored hash.

    Raises ValueError when ``hashed`` is not a bcrypt hash.
    """
    return bcrypt.checkpw(_encode(password), hashed.encode("ascii"))
