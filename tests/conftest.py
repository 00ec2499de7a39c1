from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest
from fastapi import FastAPI, Request

QUOTE_JSON: dict[str, Any] = {
    "estCheckoutTimeMs": 25000,
    "estFeeBreakdown": {
        "appFeeLabel": "Fun.xyz fee",
        "appFeePercent": 0.0,
        "appFeeUsd": 0.0,
        "fillCostPercent": 0.12,
        "fillCostUsd": 0.012,
        "gasUsd": 0.31,
        "maxSlippage": 0.5,
        "minReceived": 9.63,
        "swapImpact": 0.01,
        "swapImpactUsd": 0.001,
        "totalImpact": 0.34,
        "totalImpactUsd": 0.034,
    },
    "estInputUsd": 10.0,
    "estOutputUsd": 9.68,
    "estToTokenBaseUnit": "9680000",
    "questId": "0x7c5f1e3b9a",
}

SUPPORTED_ASSETS_JSON: dict[str, Any] = {
    "supportedAssets": [
        {
            "chainId": "1",
            "chainName": "Ethereum",
            "token": {
                "name": "USD Coin",
                "symbol": "USDC",
                "address": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
                "decimals": 6,
            },
            "minCheckoutUsd": 45,
        },
        {
            "chainId": "8253038",
            "chainName": "Bitcoin",
            "token": {"name": "Bitcoin", "symbol": "BTC", "address": "bc1native", "decimals": 8},
            "minCheckoutUsd": 9.5,
        },
    ]
}

ADDRESSES_JSON: dict[str, Any] = {
    "address": {
        "evm": "0x23566f8b2E82aDfCf01846E54899d110e97AC053",
        "svm": "CrvTBvzryYxBHbWu2TiQpcqD5M7Le7iBKzVmEj3f36Jb",
        "btc": "bc1q8eau83qffxcj8ht4hsjdza3lha9r3egfqysj3g",
    },
    "note": "Only certain chains and tokens are supported.",
}

STATUS_JSON: dict[str, Any] = {
    "transactions": [
        {
            "fromChainId": "8253038",
            "fromTokenAddress": "bc1native",
            "fromAmountBaseUnit": "13566",
            "toChainId": "137",
            "toTokenAddress": "0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174",
            "status": "COMPLETED",
            "txHash": "0xd1f2e0c4",
            "createdTimeMs": 1757646914535,
        },
        {
            "fromChainId": "1",
            "fromTokenAddress": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
            "fromAmountBaseUnit": "50000000",
            "toChainId": "137",
            "toTokenAddress": "0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174",
            "status": "DEPOSIT_DETECTED",
        },
    ]
}


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def mock_client() -> Callable[..., httpx.Client]:
    """Build an ``httpx.Client`` whose transport replies via ``handler``."""

    def _build(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(handler))

    return _build


@pytest.fixture
def stub_app() -> FastAPI:
    """In-process stand-in for the bridge API; records what it receives in ``app.state.seen``."""
    app = FastAPI()
    app.state.seen = []

    def _record(request: Request, body: Any = None) -> None:
        app.state.seen.append(
            {"method": request.method, "path": request.url.path, "query": request.url.query, "body": body}
        )

    @app.get("/supported-assets")
    def supported_assets(request: Request) -> dict[str, Any]:
        _record(request)
        return SUPPORTED_ASSETS_JSON

    @app.post("/quote")
    async def quote(request: Request) -> dict[str, Any]:
        _record(request, await request.json())
        return QUOTE_JSON

    @app.post("/deposit")
    async def deposit(request: Request) -> dict[str, Any]:
        _record(request, await request.json())
        return ADDRESSES_JSON

    @app.post("/withdraw")
    async def withdraw(request: Request) -> dict[str, Any]:
        _record(request, await request.json())
        return ADDRESSES_JSON

    @app.get("/status/{address}")
    def status(address: str, request: Request) -> dict[str, Any]:
        _record(request)
        return STATUS_JSON

    return app
