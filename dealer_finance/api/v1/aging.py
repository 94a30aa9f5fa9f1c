"""Debt aging and collection projection endpoints"""

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from dealer_finance.api.v1.schemas import (
    AgingResponse,
    AgingSummaryResponse,
    PaymentProjectionResponse,
    PendingBalanceSchema,
)
from dealer_finance.api.dependencies import get_rows
from dealer_finance.config import settings
from dealer_finance.domain.aging import aging_summary, classify, tickets_without_payments
from dealer_finance.domain.ledger import all_tickets
from dealer_finance.domain.models import RawTransactionRow
from dealer_finance.domain.projections import future_payments, payments_by_month, pending_balances
from dealer_finance.infrastructure.observability.metrics import record_aging, record_calculation

router = APIRouter()

AS_OF = Query(None, description="Reference date, defaults to today")


@router.get("/aging", response_model=AgingResponse)
def get_aging(as_of: Optional[date] = AS_OF, rows: List[RawTransactionRow] = Depends(get_rows)):
    """Every ticket with an outstanding balance, bucketed by days since the operation"""
    today = as_of or date.today()
    items = classify(all_tickets(rows), today, settings.aging_min_balance)
    record_calculation("aging")
    return AgingResponse(as_of=today, items=items, total_balance=sum(i.balance for i in items))


@router.get("/aging/without-payments", response_model=AgingResponse)
def get_aging_without_payments(as_of: Optional[date] = AS_OF, rows: List[RawTransactionRow] = Depends(get_rows)):
    """Outstanding tickets that never received a payment"""
    today = as_of or date.today()
    items = tickets_without_payments(all_tickets(rows), today, settings.aging_min_balance)
    return AgingResponse(as_of=today, items=items, total_balance=sum(i.balance for i in items))


@router.get("/aging/summary", response_model=AgingSummaryResponse)
def get_aging_summary(as_of: Optional[date] = AS_OF, rows: List[RawTransactionRow] = Depends(get_rows)):
    """Balance and ticket count for each of the four buckets"""
    today = as_of or date.today()
    summary = aging_summary(classify(all_tickets(rows), today, settings.aging_min_balance))
    record_aging(summary)
    return AgingSummaryResponse(as_of=today, buckets=summary)


@router.get("/projections/payments", response_model=PaymentProjectionResponse)
def get_payment_projection(as_of: Optional[date] = AS_OF, rows: List[RawTransactionRow] = Depends(get_rows)):
    """Scheduled collections from today on, listed and grouped by month"""
    today = as_of or date.today()
    payments = future_payments(all_tickets(rows), today)
    return PaymentProjectionResponse(as_of=today, payments=payments, months=payments_by_month(payments))


@router.get("/projections/pending", response_model=List[PendingBalanceSchema])
def get_pending_balances(rows: List[RawTransactionRow] = Depends(get_rows)):
    """Outstanding balance per client, largest first"""
    return pending_balances(all_tickets(rows), settings.aging_min_balance)
