from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel

from schemas.fields import Text

Number = Union[int, float]

_EXISTING_LOANS_FLAGS = {"yes": True, "true": True, "no": False, "false": False}


class LoanCreate(BaseModel):
    """Loan application body.

    Every field is optional here: which ones matter depends on ``loanType``
    and nothing is enforced per type. ``loanType`` itself is required by the
    store. ``status`` and ``appliedAt`` are assigned by the service.
    """

    loan_type: Optional[Text] = None
    full_name: Optional[Text] = None
    email: Optional[Text] = None
    phone: Optional[Text] = None
    address: Optional[Text] = None
    loan_amount: Optional[Number] = None
    loan_duration: Optional[Text] = None

    # Applicant and income
    date_of_birth: Optional[Text] = None
    age: Optional[Number] = None
    contact_number: Optional[Text] = None
    employment_type: Optional[Text] = None
    employment_status: Optional[Text] = None
    monthly_income: Optional[Text] = None
    loan_purpose: Optional[Text] = None
    pan_card: Optional[Text] = None
    credit_score: Optional[Text] = None
    existing_loans: Optional[Union[bool, str]] = None
    bank_name: Optional[Text] = None
    account_number: Optional[Text] = None

    # House
    property_value: Optional[Text] = None
    property_location: Optional[Text] = None
    property_type: Optional[Text] = None

    # Car
    car_make: Optional[Text] = None
    car_model: Optional[Text] = None
    car_price: Optional[Text] = None
    loan_tenure: Optional[Text] = None
    down_payment: Optional[Text] = None

    # Business
    business_name: Optional[Text] = None
    business_type: Optional[Text] = None
    year_established: Optional[Text] = None
    annual_revenue: Optional[Text] = None
    business_address: Optional[Text] = None
    tax_id: Optional[Text] = None

    # Education
    institution: Optional[Text] = None
    course: Optional[Text] = None
    course_duration: Optional[Text] = None
    total_fees: Optional[Text] = None
    parent_name: Optional[Text] = None
    parent_income: Optional[Text] = None
    academic_score: Optional[Text] = None
    admission_status: Optional[Text] = None

    # Jewel
    jewel_type: Optional[Text] = None
    jewel_weight: Optional[Text] = None
    jewel_purity: Optional[Text] = None
    estimated_value: Optional[Text] = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "coerce_numbers_to_str": True,
    }

    @field_validator("existing_loans", mode="before")
    @classmethod
    def normalize_existing_loans(cls, v: Any) -> Any:
        """Clients send either a boolean or "Yes"/"No"; keep a boolean when we can."""
        if isinstance(v, str):
            return _EXISTING_LOANS_FLAGS.get(v.strip().lower(), v)
        return v


class LoanStatusUpdate(BaseModel):
    status: Optional[Text] = None

    model_config = {"coerce_numbers_to_str": True}


class LoanStats(BaseModel):
    applied: int
    approved: int
    rejected: int
