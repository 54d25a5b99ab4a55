from datetime import date
from decimal import Decimal

import pytest

from famfin.models.enums import PaymentStatus
from famfin.services.bills import analyze_bills, effective_status, summarize_bills

TODAY = date(2024, 3, 15)


def make_bills():
    return [
        {"category": "Rent", "amount": "15000", "due_date": date(2024, 3, 1), "payment_status": "Paid"},
        {"category": "Electricity", "amount": "1200", "due_date": date(2024, 3, 10), "payment_status": "Pending"},
        {"category": "Internet", "amount": "800", "due_date": date(2024, 3, 25), "payment_status": "Pending"},
        {"category": "Rent", "amount": "15000", "due_date": date(2024, 1, 1), "payment_status": "Paid"},
        {"category": "Water", "amount": "300", "due_date": date(2023, 6, 1), "payment_status": "Overdue"},
    ]


def test_pending_bill_past_due_reads_overdue():
    bills = make_bills()
    assert effective_status(bills[1], TODAY) == PaymentStatus.overdue
    assert effective_status(bills[2], TODAY) == PaymentStatus.pending
    assert effective_status(bills[0], TODAY) == PaymentStatus.paid


def test_summarize_bills():
    summary = summarize_bills(make_bills(), today=TODAY)
    assert summary.pending_amount == Decimal("2300")
    assert summary.pending_count == 3
    assert summary.paid_amount == Decimal("30000")
    assert summary.current_month_total == Decimal("17000")


def test_analyze_bills_breakdown_and_trend():
    analytics = analyze_bills(make_bills(), Decimal("34000"), today=TODAY)

    assert [(c.name, c.total) for c in analytics.category_breakdown] == [
        ("Rent", Decimal("30000")),
        ("Electricity", Decimal("1200")),
        ("Internet", Decimal("800")),
        ("Water", Decimal("300")),
    ]
    assert [p.month for p in analytics.monthly_trend] == [
        "Oct 23", "Nov 23", "Dec 23", "Jan 24", "Feb 24", "Mar 24",
    ]
    assert [p.total for p in analytics.monthly_trend] == [0, 0, 0, 15000, 0, 17000]
    assert analytics.current_month_bills == Decimal("17000")
    assert analytics.percentage_of_expenses == pytest.approx(50.0)


def test_analyze_bills_without_expenses():
    analytics = analyze_bills(make_bills(), 0, today=TODAY)
    assert analytics.percentage_of_expenses == 0.0


def test_analyze_no_bills():
    analytics = analyze_bills([], Decimal("100"), today=TODAY)
    assert analytics.category_breakdown == []
    assert len(analytics.monthly_trend) == 6
    assert analytics.current_month_bills == 0
