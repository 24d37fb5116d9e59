from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from models import STATUS_APPROVED, STATUS_PENDING, STATUS_REJECTED, Loan
from services.errors import InvalidArgument, NotFound, PersistenceError, require_fields
from utils.ids import is_valid_record_id, new_record_id

logger = logging.getLogger(__name__)

# Fields with their own column; everything else goes into Loan.details.
LOAN_COLUMNS = (
    "loan_type",
    "full_name",
    "email",
    "phone",
    "address",
    "loan_amount",
    "loan_duration",
)


async def apply_loan(session: AsyncSession, fields: dict[str, Any]) -> Loan:
    """
    Persist a loan application as submitted. No per-loanType checks;
    status starts as Pending and appliedAt is the time of the request.
    """
    require_fields("Loan", fields, ("loan_type",))
    data = {k: v for k, v in fields.items() if v is not None}
    columns = {k: data.pop(k, None) for k in LOAN_COLUMNS}
    loan = Loan(
        id=new_record_id(),
        status=STATUS_PENDING,
        applied_at=datetime.now(timezone.utc),
        details=data,
        **columns,
    )
    session.add(loan)
    try:
        await session.flush()
    except SQLAlchemyError as e:
        raise PersistenceError("Could not save loan application") from e
    logger.info(
        "Loan application submitted",
        extra={"loan_id": loan.id, "loan_type": loan.loan_type},
    )
    return loan


async def list_loans(session: AsyncSession, full_name: str | None = None) -> list[Loan]:
    """All loans newest first, optionally only those whose fullName equals ``full_name``."""
    stmt = select(Loan).order_by(Loan.applied_at.desc())
    if full_name is not None:
        stmt = stmt.where(Loan.full_name == full_name)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def update_loan_status(session: AsyncSession, loan_id: str, status: str | None) -> Loan:
    if not is_valid_record_id(loan_id):
        raise InvalidArgument("Invalid loan ID format")
    result = await session.execute(select(Loan).where(Loan.id == loan_id))
    loan = result.scalar_one_or_none()
    if not loan:
        raise NotFound("Loan not found")
    if status is not None:
        previous = loan.status
        loan.status = status
        try:
            await session.flush()
        except SQLAlchemyError as e:
            raise PersistenceError("Could not update loan status") from e
        logger.info(
            "Loan status updated",
            extra={"loan_id": loan.id, "from_status": previous, "to_status": status},
        )
    return loan


async def _count_loans(session: AsyncSession, full_name: str, status: str | None = None) -> int:
    stmt = select(func.count()).select_from(Loan).where(Loan.full_name == full_name)
    if status is not None:
        stmt = stmt.where(Loan.status == status)
    result = await session.execute(stmt)
    return result.scalar_one()


async def loan_stats(session: AsyncSession, full_name: str) -> dict[str, int]:
    # Three separate counts; they are not a consistent snapshot under concurrent writes.
    return {
        "applied": await _count_loans(session, full_name),
        "approved": await _count_loans(session, full_name, STATUS_APPROVED),
        "rejected": await _count_loans(session, full_name, STATUS_REJECTED),
    }
