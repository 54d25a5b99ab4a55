from datetime import date
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlmodel import Session

from famfin.core.security import get_current_user
from famfin.database import get_session
from famfin.models.enums import PaymentStatus
from famfin.models.essential_bill import EssentialBill
from famfin.schemas.essential_bill import EssentialBillCreate, EssentialBillRead, EssentialBillUpdate
from famfin.schemas.summary import BillAnalyticsRead, BillSummaryRead
from famfin.services.aggregation import total_amount
from famfin.services.bills import analyze_bills, effective_status, summarize_bills
from famfin.utils.dates import month_bounds
from famfin.utils.ownership import get_owned_or_404
from famfin.utils.records import fetch_bills, fetch_expenses

router = APIRouter(prefix="/bills", tags=["bills"])


def _read(bill: EssentialBill, today: date) -> EssentialBillRead:
    read = EssentialBillRead.model_validate(bill)
    return read.model_copy(update={"payment_status": effective_status(bill, today)})


@router.post("", response_model=EssentialBillRead)
@router.post("/", response_model=EssentialBillRead)
def create_bill(
    bill_data: EssentialBillCreate,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    bill = EssentialBill(**bill_data.model_dump(), user_id=user_id)
    session.add(bill)
    session.commit()
    session.refresh(bill)
    return bill


@router.get("", response_model=List[EssentialBillRead])
@router.get("/", response_model=List[EssentialBillRead])
def list_bills(
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    """Bills by due date; pending bills already past due are reported as Overdue."""
    today = date.today()
    return [_read(bill, today) for bill in fetch_bills(session, user_id)]


@router.get("/summary", response_model=BillSummaryRead)
def bill_summary(
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    summary = summarize_bills(fetch_bills(session, user_id))
    return BillSummaryRead.model_validate(summary)


@router.get("/analytics", response_model=BillAnalyticsRead)
def bill_analytics(
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    today = date.today()
    start, end = month_bounds(today)
    month_expenses = total_amount(fetch_expenses(session, user_id, start_date=start, end_date=end))

    analytics = analyze_bills(fetch_bills(session, user_id), month_expenses, today)
    return BillAnalyticsRead.model_validate(analytics)


@router.put("/{bill_id}", response_model=EssentialBillRead)
def update_bill(
    bill_id: int,
    bill_data: EssentialBillUpdate,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    bill = get_owned_or_404(session, EssentialBill, bill_id, user_id, "Bill not found")
    for key, value in bill_data.model_dump(exclude_unset=True).items():
        setattr(bill, key, value)

    session.add(bill)
    session.commit()
    session.refresh(bill)
    return _read(bill, date.today())


@router.post("/{bill_id}/pay", response_model=EssentialBillRead)
def mark_bill_paid(
    bill_id: int,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    bill = get_owned_or_404(session, EssentialBill, bill_id, user_id, "Bill not found")
    today = date.today()
    bill.payment_status = PaymentStatus.paid
    bill.last_paid_date = today

    session.add(bill)
    session.commit()
    session.refresh(bill)
    return _read(bill, today)


@router.delete("/{bill_id}")
def delete_bill(
    bill_id: int,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    bill = get_owned_or_404(session, EssentialBill, bill_id, user_id, "Bill not found")
    session.delete(bill)
    session.commit()
    return {"message": "Bill deleted"}
