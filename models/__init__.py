from models.contact import Contact
from models.loan import STATUS_APPROVED, STATUS_PENDING, STATUS_REJECTED, Loan
from models.user import User

__all__ = [
    "Contact",
    "Loan",
    "User",
    "STATUS_APPROVED",
    "STATUS_PENDING",
    "STATUS_REJECTED",
]
