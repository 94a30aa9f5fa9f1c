"""Debt aging - buckets outstanding tickets by days since the operation"""

from datetime import date
from typing import Iterable, List

from dealer_finance.domain.models import AgingBucketSummary, AgingSummary, DebtAgingItem, Ticket
from dealer_finance.utils.date_utils import days_between

AGING_BUCKETS = ("0-30", "31-60", "61-90", "90+")


def aging_bucket(days_overdue: int) -> str:
    """
    Map days since operation to a bucket.

    Boundaries are inclusive on the upper end:
    - <= 30: 0-30 (also tickets dated in the future)
    - 31 - 60: 31-60
    - 61 - 90: 61-90
    - > 90: 90+
    """
    if days_overdue <= 30:
        return "0-30"
    elif days_overdue <= 60:
        return "31-60"
    elif days_overdue <= 90:
        return "61-90"
    else:
        return "90+"


def _to_item(ticket: Ticket, today: date) -> DebtAgingItem:
    days = days_between(ticket.operation_date, today) if ticket.operation_date else 0
    return DebtAgingItem(
        ticket_id=ticket.ticket_id,
        client_code=ticket.client_code,
        client_name=ticket.client_name,
        operation_date=ticket.operation_date,
        total_sale=ticket.total_sale,
        total_used=ticket.total_used,
        total_payments=ticket.total_payments,
        balance=ticket.final_balance,
        days_overdue=days,
        aging_bucket=aging_bucket(days),
    )


def classify(tickets: Iterable[Ticket], today: date, min_balance: float = 0.0) -> List[DebtAgingItem]:
    """Aging items for every ticket with a balance above min_balance, oldest first"""
    items = [_to_item(t, today) for t in tickets if t.final_balance > min_balance]
    items.sort(key=lambda i: (-i.days_overdue, i.ticket_id))
    return items


def tickets_without_payments(
    tickets: Iterable[Ticket], today: date, min_balance: float = 0.0
) -> List[DebtAgingItem]:
    """Stricter view: outstanding tickets that never received a payment"""
    return classify((t for t in tickets if not t.payments), today, min_balance)


def aging_summary(items: Iterable[DebtAgingItem]) -> AgingSummary:
    """Balance total and count per bucket. All four buckets are always present."""
    summary: AgingSummary = {bucket: AgingBucketSummary() for bucket in AGING_BUCKETS}
    for item in items:
        bucket = summary[item.aging_bucket]
        bucket.total += item.balance
        bucket.count += 1
    return summary
