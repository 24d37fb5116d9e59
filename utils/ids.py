"""Record identifiers: 24 hex characters, assigned by the service on insert."""
import re
import uuid

_RECORD_ID = re.compile(r"[0-9a-fA-F]{24}")


def new_record_id() -> str:
    return uuid.uuid4().hex[:24]


def is_valid_record_id(value: str) -> bool:
    return bool(value) and _RECORD_ID.fullmatch(value) is not None
