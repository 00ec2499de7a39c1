"""
polybridge: typed client bindings for the Polymarket bridge API.

Provides:
- Blocking and asyncio clients (httpx) for quotes, deposits, withdrawals and status
- Pydantic request/response models with camelCase wire names
- A query-string encoder usable with any request model
"""
from __future__ import annotations

from polybridge.bridge.client import AsyncBridgeClient, BridgeClient
from polybridge.common.config import DEFAULT_BASE_URL, ClientConfig, load_config
from polybridge.common.errors import BridgeError, HttpStatusError, ParseError, TransportError
from polybridge.common.logging_setup import setup_logging

__all__ = [
    "AsyncBridgeClient",
    "BridgeClient",
    "BridgeError",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "HttpStatusError",
    "ParseError",
    "TransportError",
    "load_config",
    "setup_logging",
]
