from typing import Annotated, Any

from pydantic import BeforeValidator


def _bool_to_str(v: Any) -> Any:
    if isinstance(v, bool):
        return "true" if v else "false"
    return v


# String field that also takes booleans; numbers are handled by coerce_numbers_to_str.
Text = Annotated[str, BeforeValidator(_bool_to_str)]
