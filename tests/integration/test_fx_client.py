"""Integration tests for the FX quote client against the mock FX server"""

import httpx
import pytest
from dealer_finance.domain.exceptions import FxRateAPIError
from dealer_finance.infrastructure.clients.fx import FxRateClient
from mock.fx_server.main import app as fx_mock_app


@pytest.mark.asyncio
async def test_get_official_rate():
    client = FxRateClient(base_url="http://fx.test", transport=httpx.ASGITransport(app=fx_mock_app))

    quote = await client.get_official_rate()

    assert quote.buy == 1435
    assert quote.sell == 1485
    assert quote.updated_at == "2025-11-14T15:00:00.000Z"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(503),
        httpx.Response(200, json={"compra": 1435}),
        httpx.Response(200, json={"compra": 1435, "venta": 0}),
        httpx.Response(200, json={"compra": 1435, "venta": "n/a"}),
    ],
)
async def test_get_official_rate_errors(response):
    client = FxRateClient(base_url="http://fx.test", transport=httpx.MockTransport(lambda request: response))

    with pytest.raises(FxRateAPIError):
        await client.get_official_rate()


@pytest.mark.asyncio
async def test_get_official_rate_timeout():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    client = FxRateClient(base_url="http://fx.test", transport=httpx.MockTransport(handler))

    with pytest.raises(FxRateAPIError, match="timeout"):
        await client.get_official_rate()


@pytest.mark.asyncio
async def test_get_official_rate_unreachable():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = FxRateClient(base_url="http://fx.test", transport=httpx.MockTransport(handler))

    with pytest.raises(FxRateAPIError, match="unreachable"):
        await client.get_official_rate()
