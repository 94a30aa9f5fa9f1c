"""GET /v1/fx/oficial - official USD/ARS quote"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from dealer_finance.api.v1.schemas import ExchangeRateSchema
from dealer_finance.api.dependencies import get_fx_client, get_request_id
from dealer_finance.domain.exceptions import FxRateAPIError
from dealer_finance.infrastructure.clients.fx import FxRateClient
from dealer_finance.infrastructure.observability.metrics import fx_fetch_failures_counter

router = APIRouter()


@router.get("/fx/oficial", response_model=ExchangeRateSchema)
async def get_official_rate(request: Request, fx_client: FxRateClient = Depends(get_fx_client)):
    request_id = get_request_id(request)

    try:
        return await fx_client.get_official_rate()
    except FxRateAPIError as e:
        fx_fetch_failures_counter.inc()
        logging.error(f"FX API error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="FX quote service unavailable")
