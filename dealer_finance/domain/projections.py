"""Ticket lookup, search and collection projections built on reconstructed tickets"""

from datetime import date
from typing import Dict, Iterable, List, Optional

from dealer_finance.domain.ledger import build_ticket, group_by_ticket
from dealer_finance.domain.models import (
    FuturePayment,
    MonthlyPaymentSummary,
    PendingBalance,
    RawTransactionRow,
    Ticket,
    TicketSearchResult,
)


def find_ticket(rows: Iterable[RawTransactionRow], ticket_id: str) -> Optional[Ticket]:
    """Rebuild a single ticket, or None when no row carries the id"""
    group = group_by_ticket(rows).get(ticket_id)
    if not group:
        return None
    return build_ticket(ticket_id, group)


def tickets_for_client(rows: Iterable[RawTransactionRow], client_code: str) -> List[Ticket]:
    """Tickets whose first row belongs to the client"""
    return [
        build_ticket(ticket_id, group)
        for ticket_id, group in group_by_ticket(rows).items()
        if group[0].client_code == client_code
    ]


def search_tickets(rows: Iterable[RawTransactionRow], query: str) -> TicketSearchResult:
    """
    Free-text search used by the dashboard search box.

    Order of precedence:
    1. Exact ticket id
    2. Exact client code
    3. Case-insensitive substring of ticket id, client name or client code
    """
    groups = group_by_ticket(rows)
    needle = query.strip()
    lowered = needle.lower()

    if needle in groups:
        return TicketSearchResult(kind="ticket", tickets=[build_ticket(needle, groups[needle])])

    client_tickets = [
        build_ticket(ticket_id, group)
        for ticket_id, group in groups.items()
        if group[0].client_code == needle
    ]
    if client_tickets:
        return TicketSearchResult(kind="client", tickets=client_tickets, client_name=client_tickets[0].client_name)

    if not lowered:
        return TicketSearchResult(kind="not_found")

    matches = [
        build_ticket(ticket_id, group)
        for ticket_id, group in groups.items()
        if lowered in ticket_id.lower()
        or lowered in group[0].client_name.lower()
        or lowered in group[0].client_code.lower()
    ]
    if not matches:
        return TicketSearchResult(kind="not_found")

    unique_clients = {t.client_code for t in matches}
    client_name = matches[0].client_name if len(unique_clients) == 1 else None
    return TicketSearchResult(kind="client", tickets=matches, client_name=client_name)


def future_payments(tickets: Iterable[Ticket], today: date) -> List[FuturePayment]:
    """
    Payments falling due on or after today.

    The due date is the check due date when present, otherwise the payment date.
    """
    result = []
    for ticket in tickets:
        for payment in ticket.payments:
            due = payment.check_due_date or payment.date
            if due < today:
                continue
            result.append(
                FuturePayment(
                    ticket_id=ticket.ticket_id,
                    client_code=ticket.client_code,
                    client_name=ticket.client_name,
                    due_date=due,
                    detail=payment.detail,
                    receipt_number=payment.receipt_number,
                    amount_usd=payment.amount_usd,
                    amount_ars=payment.amount_ars,
                )
            )

    result.sort(key=lambda p: (p.due_date, p.ticket_id))
    return result


def payments_by_month(payments: Iterable[FuturePayment]) -> List[MonthlyPaymentSummary]:
    """Group scheduled collections by (year, month), chronologically"""
    buckets: Dict[tuple[int, int], List[FuturePayment]] = {}
    for payment in payments:
        buckets.setdefault((payment.due_date.year, payment.due_date.month), []).append(payment)

    return [
        MonthlyPaymentSummary(
            year=year,
            month=month,
            payments=items,
            total_usd=sum(p.amount_usd for p in items),
            total_ars=sum(p.amount_ars for p in items),
            count=len(items),
        )
        for (year, month), items in sorted(buckets.items())
    ]


def pending_balances(tickets: Iterable[Ticket], min_balance: float = 0.0) -> List[PendingBalance]:
    """Outstanding balance per client, largest first"""
    by_client: Dict[str, PendingBalance] = {}
    for ticket in tickets:
        if ticket.final_balance <= min_balance:
            continue
        entry = by_client.setdefault(
            ticket.client_code,
            PendingBalance(
                client_code=ticket.client_code,
                client_name=ticket.client_name,
                tickets=[],
                total_pending=0.0,
            ),
        )
        entry.tickets.append(ticket.ticket_id)
        entry.total_pending += ticket.final_balance

    return sorted(by_client.values(), key=lambda c: c.total_pending, reverse=True)
