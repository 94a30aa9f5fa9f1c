"""FX quote HTTP client for the official USD/ARS rate"""

import httpx
from dealer_finance.domain.models import ExchangeRate
from dealer_finance.domain.exceptions import FxRateAPIError
from dealer_finance.config import settings


class FxRateClient:
    """Client for the public Argentine FX quote API (BNA official rate)"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.fx_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def get_official_rate(self) -> ExchangeRate:
        """
        Fetch the official USD quote.

        Raises:
            FxRateAPIError: On timeout, HTTP errors, or a quote without a positive sell rate
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(f"{self.base_url}/v1/dolares/oficial")
                response.raise_for_status()
                data = response.json()

                sell = float(data["venta"])
                if sell <= 0:
                    raise ValueError(f"non-positive sell rate {sell}")

                return ExchangeRate(
                    buy=float(data.get("compra") or 0),
                    sell=sell,
                    updated_at=data.get("fechaActualizacion"),
                )

            except httpx.TimeoutException as e:
                raise FxRateAPIError(f"FX API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise FxRateAPIError(f"FX API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise FxRateAPIError(f"FX API unreachable: {e}") from e
            except (KeyError, ValueError, TypeError) as e:
                raise FxRateAPIError(f"Invalid quote data from FX API: {e}") from e
