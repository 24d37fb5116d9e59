from typing import Optional

from pydantic import BaseModel

from schemas.fields import Text


class ContactCreate(BaseModel):
    # Presence is checked when the record is saved, not here.
    name: Optional[Text] = None
    email: Optional[Text] = None
    phone: Optional[Text] = None
    subject: Optional[Text] = None
    message: Optional[Text] = None

    model_config = {"coerce_numbers_to_str": True}
