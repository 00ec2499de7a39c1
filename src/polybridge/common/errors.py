"""Error types raised by the bridge client.

Every request ends in a value or exactly one of:
- TransportError: the HTTP call itself could not complete
- HttpStatusError: the server answered with a non-2xx status
- ParseError: a 2xx body did not match the expected schema
"""
from __future__ import annotations


class BridgeError(Exception):
    """Base class for request outcomes other than success."""


class TransportError(BridgeError):
    """Connection, DNS, TLS or timeout failure."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"HTTP request failed: {cause}")
        self.cause = cause


class HttpStatusError(BridgeError):
    """Non-success status; carries the raw body for diagnosis."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"HTTP {status} error: {body}")
        self.status = status
        self.body = body


class ParseError(BridgeError):
    """Success status whose body could not be decoded into the response type."""

    def __init__(self, error: Exception, raw: str) -> None:
        super().__init__(f"Failed to parse JSON: {error}\nRaw response: {raw}")
        self.error = error
        self.raw = raw


class ConfigError(ValueError):
    """Configuration file is malformed."""
