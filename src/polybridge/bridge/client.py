"""HTTP clients for the bridge API.

Each call sends exactly one request and ends in a typed response or one of
the errors in ``polybridge.common.errors``. There are no retries.

Endpoints:
- GET  /supported-assets
- POST /quote
- POST /deposit
- POST /withdraw
- GET  /status/{address}
"""
from __future__ import annotations
import logging
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from polybridge.common.config import ClientConfig
from polybridge.common.errors import HttpStatusError, ParseError, TransportError
from polybridge.common.query import to_json_body, to_query_string
from polybridge.common.schema import (
    DepositRequest,
    DepositResponse,
    QuoteRequest,
    QuoteResponse,
    StatusRequest,
    StatusResponse,
    SupportedAssetsRequest,
    SupportedAssetsResponse,
    WithdrawRequest,
    WithdrawResponse,
)

LOGGER = logging.getLogger("polybridge.bridge.client")

T = TypeVar("T")


def decode(response_type: type[T], text: str) -> T:
    """Decode ``text`` into ``response_type`` or raise ``ParseError``."""
    try:
        if isinstance(response_type, type) and issubclass(response_type, BaseModel):
            return response_type.model_validate_json(text)  # type: ignore[return-value]
        return TypeAdapter(response_type).validate_json(text)
    except ValidationError as e:
        LOGGER.warning("Response did not match %s: %s", getattr(response_type, "__name__", response_type), e)
        raise ParseError(e, text) from e


def _status_path(req: StatusRequest) -> str:
    return f"status/{quote(req.address, safe='')}"


class _BaseClient:
    client: httpx.Client | httpx.AsyncClient

    def __init__(self, base_url: str | None, config: ClientConfig | None) -> None:
        self.config = config or ClientConfig()
        self.base_url = (base_url or self.config.base_url).rstrip("/")

    def url(self, path: str, query: str = "") -> str:
        """Join ``path`` beneath the base URL and append the query suffix."""
        return f"{self.base_url}/{path.lstrip('/')}{query}"

    def _get_request(self, path: str, params: Any) -> httpx.Request:
        return self.client.build_request("GET", self.url(path, to_query_string(params)))

    def _post_request(self, path: str, body: Any) -> httpx.Request:
        return self.client.build_request("POST", self.url(path), json=to_json_body(body))

    @staticmethod
    def _status_error(request: httpx.Request, response: httpx.Response, body: str) -> HttpStatusError:
        LOGGER.warning("%s %s -> HTTP %s", request.method, request.url, response.status_code)
        return HttpStatusError(response.status_code, body)


class BridgeClient(_BaseClient):
    """Blocking client backed by ``httpx.Client``."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        client: httpx.Client | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        super().__init__(base_url, config)
        self._owns_client = client is None
        self.client = client or httpx.Client(headers=self.config.headers)

    def __enter__(self) -> "BridgeClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def _execute(self, request: httpx.Request, response_type: type[T]) -> T:
        LOGGER.debug("%s %s", request.method, request.url)
        try:
            response = self.client.send(request, stream=True)
        except httpx.RequestError as e:
            LOGGER.warning("%s %s failed: %s", request.method, request.url, e)
            raise TransportError(e) from e

        try:
            if not response.is_success:
                # Best-effort body; the status error is raised either way.
                try:
                    response.read()
                    body = response.text
                except (httpx.HTTPError, httpx.StreamError) as e:
                    LOGGER.debug("Could not read error body: %s", e)
                    body = ""
                raise self._status_error(request, response, body)
            try:
                response.read()
            except httpx.RequestError as e:
                raise TransportError(e) from e
            return decode(response_type, response.text)
        finally:
            response.close()

    def get(self, path: str, params: Any, response_type: type[T]) -> T:
        return self._execute(self._get_request(path, params), response_type)

    def post(self, path: str, body: Any, response_type: type[T]) -> T:
        return self._execute(self._post_request(path, body), response_type)

    def get_supported_assets(self) -> SupportedAssetsResponse:
        return self.get("supported-assets", SupportedAssetsRequest(), SupportedAssetsResponse)

    def get_quote(self, req: QuoteRequest) -> QuoteResponse:
        return self.post("quote", req, QuoteResponse)

    def create_deposit_addresses(self, req: DepositRequest) -> DepositResponse:
        return self.post("deposit", req, DepositResponse)

    def create_withdrawal_addresses(self, req: WithdrawRequest) -> WithdrawResponse:
        return self.post("withdraw", req, WithdrawResponse)

    def get_status(self, req: StatusRequest) -> StatusResponse:
        return self.get(_status_path(req), req, StatusResponse)


class AsyncBridgeClient(_BaseClient):
    """Asyncio client backed by ``httpx.AsyncClient``; suspends only on network I/O."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        super().__init__(base_url, config)
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(headers=self.config.headers)

    async def __aenter__(self) -> "AsyncBridgeClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def _execute(self, request: httpx.Request, response_type: type[T]) -> T:
        LOGGER.debug("%s %s", request.method, request.url)
        try:
            response = await self.client.send(request, stream=True)
        except httpx.RequestError as e:
            LOGGER.warning("%s %s failed: %s", request.method, request.url, e)
            raise TransportError(e) from e

        try:
            if not response.is_success:
                try:
                    await response.aread()
                    body = response.text
                except (httpx.HTTPError, httpx.StreamError) as e:
                    LOGGER.debug("Could not read error body: %s", e)
                    body = ""
                raise self._status_error(request, response, body)
            try:
                await response.aread()
            except httpx.RequestError as e:
                raise TransportError(e) from e
            return decode(response_type, response.text)
        finally:
            await response.aclose()

    async def get(self, path: str, params: Any, response_type: type[T]) -> T:
        return await self._execute(self._get_request(path, params), response_type)

    async def post(self, path: str, body: Any, response_type: type[T]) -> T:
        return await self._execute(self._post_request(path, body), response_type)

    async def get_supported_assets(self) -> SupportedAssetsResponse:
        return await self.get("supported-assets", SupportedAssetsRequest(), SupportedAssetsResponse)

    async def get_quote(self, req: QuoteRequest) -> QuoteResponse:
        return await self.post("quote", req, QuoteResponse)

    async def create_deposit_addresses(self, req: DepositRequest) -> DepositResponse:
        return await self.post("deposit", req, DepositResponse)

    async def create_withdrawal_addresses(self, req: WithdrawRequest) -> WithdrawResponse:
        return await self.post("withdraw", req, WithdrawResponse)

    async def get_status(self, req: StatusRequest) -> StatusResponse:
        return await self.get(_status_path(req), req, StatusResponse)
