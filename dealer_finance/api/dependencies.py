"""Dependency injection for FastAPI endpoints"""

from typing import List
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from dealer_finance.domain.interest import RateTable, default_rate_table
from dealer_finance.domain.inflation import InflationIndex, default_inflation_index
from dealer_finance.domain.models import RawTransactionRow
from dealer_finance.infrastructure.clients.fx import FxRateClient
from dealer_finance.infrastructure.database.repositories import OperationRepository
from dealer_finance.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_fx_client() -> FxRateClient:
    """Provide FX quote client instance"""
    return FxRateClient()


def get_rate_table() -> RateTable:
    """Provide the statutory interest rate table"""
    return default_rate_table()


def get_inflation_index() -> InflationIndex:
    """Provide the monthly CPI series"""
    return default_inflation_index()


def get_rows(db: Session = Depends(get_db)) -> List[RawTransactionRow]:
    """Load the stored operations row set in import order"""
    return OperationRepository(db).list_rows()
