"""POST /v1/calculators/* - amortization, interest, refinancing and inflation calculators"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from dealer_finance.api.v1.schemas import (
    AmortizationRequest,
    AmortizationResponse,
    InflationRequest,
    InflationResponse,
    InterestRequest,
    InterestResponse,
    RefinancingRequest,
    RefinancingResponse,
)
from dealer_finance.api.dependencies import (
    get_fx_client,
    get_inflation_index,
    get_rate_table,
    get_request_id,
)
from dealer_finance.domain.amortization import calculate_rates, french_schedule, schedule_totals
from dealer_finance.domain.exceptions import FxRateAPIError, InvalidInputError
from dealer_finance.domain.inflation import InflationIndex
from dealer_finance.domain.interest import RateTable, accrue_interest
from dealer_finance.domain.refinancing import debt_in_pesos, propose
from dealer_finance.infrastructure.clients.fx import FxRateClient
from dealer_finance.infrastructure.observability.logging import log_calculation
from dealer_finance.infrastructure.observability.metrics import fx_fetch_failures_counter, record_calculation

router = APIRouter(prefix="/calculators")


def _invalid(request_id: str, e: InvalidInputError) -> HTTPException:
    logging.warning(f"Invalid calculation input: {e}", extra={"request_id": request_id})
    return HTTPException(status_code=422, detail=str(e))


def _elapsed_ms(start_time: float) -> float:
    return (time.time() - start_time) * 1000


@router.post("/amortization", response_model=AmortizationResponse)
def amortization(request_body: AmortizationRequest, request: Request):
    """French-system schedule with TNA/TEM/TEA and optional IVA on interest"""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        rates = calculate_rates(request_body.tna, request_body.periodicity)
        schedule = french_schedule(
            request_body.capital,
            request_body.periods,
            request_body.tna,
            periodicity=request_body.periodicity,
            include_tax=request_body.include_tax,
            tax_rate=request_body.tax_rate,
        )
    except InvalidInputError as e:
        raise _invalid(request_id, e)

    record_calculation("amortization")
    log_calculation(request_id, "amortization", _elapsed_ms(start_time), periods=request_body.periods)

    return AmortizationResponse(rates=rates, schedule=schedule, totals=schedule_totals(schedule))


@router.post("/interest", response_model=InterestResponse)
def interest(
    request_body: InterestRequest,
    request: Request,
    table: RateTable = Depends(get_rate_table),
):
    """Resarcitorio and punitorio interest on a late tax debt, split by rate period"""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        accrual = accrue_interest(table, request_body.principal, request_body.from_date, request_body.to_date)
    except InvalidInputError as e:
        raise _invalid(request_id, e)

    record_calculation("interest")
    log_calculation(request_id, "interest", _elapsed_ms(start_time), days=accrual.total_days)

    return accrual


@router.post("/refinancing", response_model=RefinancingResponse)
async def refinancing(
    request_body: RefinancingRequest,
    request: Request,
    fx_client: FxRateClient = Depends(get_fx_client),
):
    """
    Direct-rate refinancing proposals for an outstanding debt.

    Flow:
    1. Fetch the official USD sell rate when a USD debt comes without one
    2. Convert the debt to pesos
    3. Build one proposal per requested (installments, monthly_rate) option
    """
    start_time = time.time()
    request_id = get_request_id(request)

    exchange_rate = request_body.exchange_rate
    if request_body.currency == "USD" and exchange_rate is None:
        try:
            quote = await fx_client.get_official_rate()
        except FxRateAPIError as e:
            fx_fetch_failures_counter.inc()
            logging.error(f"FX API error: {e}", extra={"request_id": request_id})
            raise HTTPException(status_code=503, detail="FX quote service unavailable")
        exchange_rate = quote.sell

    try:
        pesos = debt_in_pesos(request_body.debt_amount, request_body.currency, exchange_rate)
        proposals = [
            propose(
                pesos,
                option.installments,
                option.monthly_rate,
                request_body.first_due_date,
                fixed_anchor=request_body.fixed_anchor,
            )
            for option in request_body.proposals
        ]
    except InvalidInputError as e:
        raise _invalid(request_id, e)

    record_calculation("refinancing")
    log_calculation(request_id, "refinancing", _elapsed_ms(start_time), options=len(proposals))

    return RefinancingResponse(
        debt_in_pesos=pesos,
        exchange_rate=exchange_rate if request_body.currency == "USD" else None,
        proposals=proposals,
    )


@router.post("/inflation", response_model=InflationResponse)
def inflation(
    request_body: InflationRequest,
    request: Request,
    index: InflationIndex = Depends(get_inflation_index),
):
    """Compounded CPI between two months (both inclusive) and the restated amount"""
    start_time = time.time()
    request_id = get_request_id(request)

    result = index.compound(
        request_body.from_year,
        request_body.from_month,
        request_body.to_year,
        request_body.to_month,
    )
    if result is None:
        logging.warning(
            "No inflation data for the requested range",
            extra={"request_id": request_id},
        )
        years = index.years()
        detail = "The end month must be after the start month and the range must contain published data"
        if years:
            detail += f" (published years: {years[0]}-{years[-1]})"
        raise HTTPException(status_code=422, detail=detail)

    record_calculation("inflation")
    log_calculation(request_id, "inflation", _elapsed_ms(start_time), months=result.months_counted)

    return InflationResponse(
        original_amount=request_body.amount,
        adjusted_amount=result.adjust(request_body.amount),
        total_percent=result.total_percent,
        avg_monthly_percent=result.avg_monthly_percent,
        annualized_percent=result.annualized_percent,
        months_counted=result.months_counted,
        per_month=result.per_month,
    )
