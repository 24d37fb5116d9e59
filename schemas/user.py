from typing import Optional

from pydantic import BaseModel

from schemas.fields import Text


class RegisterRequest(BaseModel):
    username: Text
    phone: Optional[Text] = None
    email: Optional[Text] = None
    password: Text

    model_config = {"coerce_numbers_to_str": True}


class LoginRequest(BaseModel):
    username: Text
    password: Text

    model_config = {"coerce_numbers_to_str": True}
