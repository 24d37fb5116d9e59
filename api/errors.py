import logging
from contextlib import contextmanager
from typing import Any, Iterator

from fastapi import HTTPException
from pydantic import BaseModel, ValidationError

from services.errors import PersistenceError, RecordError

logger = logging.getLogger(__name__)


def json_body(model: type[BaseModel]) -> dict[str, Any]:
    """OpenAPI request body for a route that validates its payload inside ``operation``."""
    return {
        "requestBody": {
            "content": {"application/json": {"schema": model.model_json_schema(by_alias=True)}},
        }
    }


@contextmanager
def operation(failure_message: str) -> Iterator[None]:
    """
    Map service errors raised inside the block to HTTP errors.
    Client errors keep their own message; bodies that cannot be cast,
    store failures and anything unexpected become a 500 with
    ``failure_message`` and are logged.
    """
    try:
        yield
    except ValidationError as e:
        # Field locations only; inputs may carry passwords.
        fields = [".".join(str(p) for p in err["loc"]) or "body" for err in e.errors()]
        logger.warning(failure_message, extra={"invalid_fields": fields})
        raise HTTPException(status_code=500, detail=failure_message) from e
    except PersistenceError as e:
        logger.exception(failure_message, extra={"error": e.message})
        raise HTTPException(status_code=500, detail=failure_message) from e
    except RecordError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    except Exception as e:
        logger.exception(failure_message)
        raise HTTPException(status_code=500, detail=failure_message) from e
