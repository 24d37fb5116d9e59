from schemas.contact import ContactCreate
from schemas.loan import LoanCreate, LoanStats, LoanStatusUpdate
from schemas.user import LoginRequest, RegisterRequest

__all__ = [
    "ContactCreate",
    "LoanCreate",
    "LoanStats",
    "LoanStatusUpdate",
    "LoginRequest",
    "RegisterRequest",
]
