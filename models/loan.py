from sqlalchemy import JSON, Column, DateTime, Float, String, Text

from database import Base

STATUS_PENDING = "Pending"
STATUS_APPROVED = "Approved"
STATUS_REJECTED = "Rejected"


class Loan(Base):
    __tablename__ = "loans"

    id = Column(String(24), primary_key=True, index=True)
    loan_type = Column(String(64), nullable=False)
    # Free text typed by the applicant; matched against usernames as-is.
    full_name = Column(String(256), nullable=True, index=True)
    email = Column(String(256), nullable=True)
    phone = Column(String(64), nullable=True)
    address = Column(Text, nullable=True)
    loan_amount = Column(Float, nullable=True)
    loan_duration = Column(String(64), nullable=True)
    status = Column(String(32), nullable=False, default=STATUS_PENDING, index=True)
    applied_at = Column(DateTime(timezone=True), nullable=False, index=True)
    # Loan-type specific fields (property, vehicle, business, education, jewel, income)
    details = Column(JSON, nullable=False, default=dict)
