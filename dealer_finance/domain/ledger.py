"""Ledger reconstruction - turns raw operation rows into tickets with running balances"""

from typing import Dict, Iterable, List, Optional

from dealer_finance.domain.models import (
    ClientSummary,
    Payment,
    Product,
    RawTransactionRow,
    Ticket,
    TicketSummary,
    TotalByTicket,
    UsedItem,
    is_payment_row,
    is_sale_row,
)
from dealer_finance.utils.numbers import round_cents

DEFAULT_PAYMENT_METHOD = "Financiación"
DEFAULT_PAYMENT_DETAIL = "Pago"
DEFAULT_USED_ITEM = "Usado"

SETTLED_THRESHOLD = 100.0
PENDING_THRESHOLD = 1000.0


def group_by_ticket(rows: Iterable[RawTransactionRow]) -> Dict[str, List[RawTransactionRow]]:
    """
    Group rows by ticket id, keeping source order inside each group.

    Rows without a ticket id are skipped.
    """
    groups: Dict[str, List[RawTransactionRow]] = {}
    for row in rows:
        if not row.ticket_id:
            continue
        groups.setdefault(row.ticket_id, []).append(row)
    return groups


def build_ticket(ticket_id: str, rows: List[RawTransactionRow]) -> Ticket:
    """
    Build one ticket from its rows.

    Steps:
    1. Sale rows become products (with their trade-in, if any)
    2. initial balance = sum of product totals - sum of trade-in values
    3. Payment rows become payments, in the order they appear in the rows
    4. Each payment's running balance is the previous balance minus its USD
       amount, rounded to cents. The fold is never re-sorted by date.
    5. final balance = initial balance - total payments, rounded to cents

    A ticket without sale rows is valid (discounts or payments against a
    prior balance) and starts at 0.
    """
    first = rows[0]

    products = [
        Product(
            id=f"{ticket_id}-p{idx}",
            description=row.product,
            quantity=row.quantity,
            unit_price=row.unit_price,
            total_price=row.line_total,
            used_item=(
                UsedItem(description=row.used_item or DEFAULT_USED_ITEM, value=row.used_item_value)
                if row.used_item_value > 0
                else None
            ),
        )
        for idx, row in enumerate(r for r in rows if is_sale_row(r))
    ]

    total_sale = sum(p.total_price for p in products)
    total_used = sum(p.used_item.value for p in products if p.used_item)
    initial_balance = total_sale - total_used

    payments = []
    balance = initial_balance
    for idx, row in enumerate(r for r in rows if is_payment_row(r)):
        balance -= row.amount_usd
        payments.append(
            Payment(
                id=f"{ticket_id}-pay{idx}",
                date=row.payment_date,
                detail=row.instrument or DEFAULT_PAYMENT_DETAIL,
                receipt_number=row.receipt,
                check_due_date=row.check_due_date,
                amount_ars=row.amount_ars,
                exchange_rate=row.exchange_rate,
                amount_usd=row.amount_usd,
                running_balance=round_cents(balance),
            )
        )

    total_payments = sum(p.amount_usd for p in payments)

    # First non-empty note on any row of the ticket
    observation = next((row.note for row in rows if row.note), "")

    return Ticket(
        ticket_id=ticket_id,
        client_code=first.client_code,
        client_name=first.client_name,
        operation_date=first.operation_date,
        payment_method=first.payment_method or DEFAULT_PAYMENT_METHOD,
        observations=observation,
        products=products,
        payments=payments,
        total_sale=total_sale,
        total_used=total_used,
        initial_balance=initial_balance,
        total_payments=total_payments,
        final_balance=round_cents(initial_balance - total_payments),
    )


def reconstruct(rows: Iterable[RawTransactionRow]) -> Dict[str, Ticket]:
    """Main entry point: rebuild every ticket present in the row set"""
    return {ticket_id: build_ticket(ticket_id, group) for ticket_id, group in group_by_ticket(rows).items()}


def all_tickets(rows: Iterable[RawTransactionRow]) -> List[Ticket]:
    """Every ticket, sorted by ticket id (string order)"""
    return sorted(reconstruct(rows).values(), key=lambda t: t.ticket_id)


def aggregate_totals(rows: Iterable[RawTransactionRow]) -> List[TotalByTicket]:
    """
    Flat per-ticket totals computed straight from the rows.

    Independent of build_ticket:
    - venta: line totals of sale rows
    - usados: trade-in values of any row carrying one
    - pagos: USD amounts of rows with a payment date
    - saldo: venta - usados - pagos, rounded to cents

    Sorted by ticket id as strings ("100" before "20").
    """
    result = []
    for ticket_id, group in group_by_ticket(rows).items():
        venta = sum(r.line_total for r in group if is_sale_row(r))
        usados = sum(r.used_item_value for r in group if r.used_item_value > 0)
        pagos = sum(r.amount_usd for r in group if r.payment_date is not None and r.amount_usd)

        result.append(
            TotalByTicket(
                client_name=group[0].client_name,
                ticket_id=ticket_id,
                venta_usd=venta,
                usados_usd=usados,
                pagos_usd=pagos,
                saldo_final=round_cents(venta - usados - pagos),
            )
        )

    result.sort(key=lambda t: t.ticket_id)
    return result


def ticket_status(
    final_balance: float,
    settled_threshold: float = SETTLED_THRESHOLD,
    pending_threshold: float = PENDING_THRESHOLD,
) -> str:
    """
    Classify a ticket by its final balance.

    - saldado: |balance| below settled_threshold (overpayments count as settled)
    - pendiente: balance above pending_threshold
    - proceso: anything in between, including larger credit balances
    """
    if abs(final_balance) < settled_threshold:
        return "saldado"
    elif final_balance > pending_threshold:
        return "pendiente"
    else:
        return "proceso"


def summarize_client(
    tickets: List[Ticket],
    settled_threshold: float = SETTLED_THRESHOLD,
    pending_threshold: float = PENDING_THRESHOLD,
) -> Optional[ClientSummary]:
    """Roll up a client's tickets. Returns None for an empty list."""
    if not tickets:
        return None

    summaries = [
        TicketSummary(
            ticket_id=t.ticket_id,
            client_name=t.client_name,
            sale_usd=t.total_sale,
            used_usd=t.total_used,
            initial_balance=t.initial_balance,
            payments_usd=t.total_payments,
            final_balance=t.final_balance,
            status=ticket_status(t.final_balance, settled_threshold, pending_threshold),
        )
        for t in tickets
    ]

    return ClientSummary(
        client_code=tickets[0].client_code,
        client_name=tickets[0].client_name,
        tickets=summaries,
        total_sale=sum(t.total_sale for t in tickets),
        total_used=sum(t.total_used for t in tickets),
        total_payments=sum(t.total_payments for t in tickets),
        total_balance=sum(t.final_balance for t in tickets),
    )
