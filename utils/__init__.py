"""Shared utilities for the backend."""
from utils.case import dict_keys_to_camel
from utils.ids import is_valid_record_id, new_record_id

__all__ = [
    "dict_keys_to_camel",
    "is_valid_record_id",
    "new_record_id",
]
