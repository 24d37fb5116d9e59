from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.errors import json_body, operation
from database import get_db
from models import Loan
from schemas.loan import LoanCreate, LoanStats, LoanStatusUpdate
from services.loans import LOAN_COLUMNS, apply_loan, list_loans, loan_stats, update_loan_status
from utils.case import dict_keys_to_camel

router = APIRouter(tags=["loans"])


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    # SQLite returns naive datetimes; values are always written in UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def _loan_to_response(loan: Loan) -> dict[str, Any]:
    """Flatten columns and loan-type details into one camelCase document."""
    columns = {name: getattr(loan, name) for name in LOAN_COLUMNS}
    return {
        "_id": loan.id,
        **dict_keys_to_camel({k: v for k, v in columns.items() if v is not None}),
        **dict_keys_to_camel(loan.details or {}),
        "status": loan.status,
        "appliedAt": _isoformat(loan.applied_at),
    }


@router.post("/apply-loan", openapi_extra=json_body(LoanCreate))
async def submit_loan_application(payload: Any = Body(None), db: AsyncSession = Depends(get_db)):
    with operation("Failed to submit loan application"):
        body = LoanCreate.model_validate(payload)
        await apply_loan(db, body.model_dump(exclude_none=True))
    return {"message": "Loan application submitted successfully"}


@router.get("/loan-applications")
async def list_loan_applications(db: AsyncSession = Depends(get_db)):
    with operation("Failed to fetch loan applications"):
        loans = await list_loans(db)
    return [_loan_to_response(l) for l in loans]


@router.get("/my-loans/{username}")
async def list_user_loans(username: str, db: AsyncSession = Depends(get_db)):
    with operation("Failed to fetch user loans"):
        loans = await list_loans(db, full_name=username)
    return [_loan_to_response(l) for l in loans]


@router.put("/update-loan-status/{loan_id}", openapi_extra=json_body(LoanStatusUpdate))
async def set_loan_status(loan_id: str, payload: Any = Body(None), db: AsyncSession = Depends(get_db)):
    with operation("Failed to update loan status"):
        body = LoanStatusUpdate.model_validate(payload)
        loan = await update_loan_status(db, loan_id, body.status)
    return {"message": "Status updated successfully", "loan": _loan_to_response(loan)}


@router.get("/loan-stats/{username}", response_model=LoanStats)
async def get_loan_stats(username: str, db: AsyncSession = Depends(get_db)):
    with operation("Failed to fetch loan stats"):
        stats = await loan_stats(db, username)
    return LoanStats(**stats)
