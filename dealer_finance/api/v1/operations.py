"""Operations import, ticket lookup and client summary endpoints"""

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from dealer_finance.api.v1.schemas import (
    ClientSummarySchema,
    ImportRequest,
    ImportResponse,
    SearchResponse,
    TicketSchema,
    TotalByTicketSchema,
)
from dealer_finance.api.dependencies import get_request_id, get_rows
from dealer_finance.config import settings
from dealer_finance.domain.ledger import aggregate_totals, all_tickets, group_by_ticket, summarize_client
from dealer_finance.domain.models import RawTransactionRow
from dealer_finance.domain.projections import find_ticket, search_tickets, tickets_for_client
from dealer_finance.infrastructure.database.repositories import OperationRepository
from dealer_finance.infrastructure.database.session import get_db
from dealer_finance.infrastructure.observability.metrics import operations_imported_counter

router = APIRouter()


@router.put("/operations", response_model=ImportResponse)
def import_operations(request_body: ImportRequest, request: Request, db: Session = Depends(get_db)):
    """
    Replace the stored operations with a new import.

    The row order of the request is kept; payments fold in that order.
    """
    request_id = get_request_id(request)
    rows = [row.to_domain() for row in request_body.rows]

    try:
        stored = OperationRepository(db).replace_all(rows)
        db.commit()
    except Exception as e:
        db.rollback()
        logging.error(f"Import failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    operations_imported_counter.inc(stored)
    logging.info("Operations imported", extra={"request_id": request_id, "rows": stored})

    return ImportResponse(stored=stored, tickets=len(group_by_ticket(rows)))


@router.get("/operations/totals", response_model=List[TotalByTicketSchema])
def get_totals(rows: List[RawTransactionRow] = Depends(get_rows)):
    """cliente | boleto | venta | usados | pagos | saldo for every ticket"""
    return aggregate_totals(rows)


@router.get("/tickets", response_model=List[TicketSchema])
def list_tickets(rows: List[RawTransactionRow] = Depends(get_rows)):
    return all_tickets(rows)


@router.get("/tickets/search", response_model=SearchResponse)
def search(
    q: str = Query(..., min_length=1, description="Ticket id, client code or part of a client name"),
    rows: List[RawTransactionRow] = Depends(get_rows),
):
    return search_tickets(rows, q)


@router.get("/tickets/{ticket_id}", response_model=TicketSchema)
def get_ticket(ticket_id: str, rows: List[RawTransactionRow] = Depends(get_rows)):
    ticket = find_ticket(rows, ticket_id)
    if ticket is None:
        raise HTTPException(status_code=404, detail="Ticket not found")
    return ticket


@router.get("/clients/{client_code}/summary", response_model=ClientSummarySchema)
def get_client_summary(client_code: str, rows: List[RawTransactionRow] = Depends(get_rows)):
    """Per-ticket status and grand totals for one client"""
    summary = summarize_client(
        tickets_for_client(rows, client_code),
        settled_threshold=settings.settled_threshold,
        pending_threshold=settings.pending_threshold,
    )
    if summary is None:
        raise HTTPException(status_code=404, detail="Client has no tickets")
    return summary
