"""Request encoding: query strings for GET, JSON bodies for POST."""
from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import BaseModel

LOGGER = logging.getLogger("polybridge.common.query")


def _wire_fields(value: BaseModel | Mapping[str, Any] | None) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, BaseModel):
        # exclude=True fields (path parameters) are dropped by model_dump
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, Mapping):
        return {str(k): v for k, v in value.items() if v is not None}
    raise TypeError(f"cannot encode {type(value).__name__} as request parameters")


def to_query_string(value: BaseModel | Mapping[str, Any] | None) -> str:
    """
    Encode a request value as a URL query-string suffix.

    List and tuple values become repeated keys (``k=a&k=b``). Returns ``""``
    when there is nothing to encode, and also when encoding fails.

    Args:
        value: Request model, plain mapping or None.

    Returns:
        ``""`` or ``"?"`` followed by URL-encoded pairs.
    """
    try:
        params = str(httpx.QueryParams(_wire_fields(value)))
    except Exception as e:
        LOGGER.debug("Query encoding failed, sending no parameters: %s", e)
        return ""
    return f"?{params}" if params else ""


def to_json_body(value: BaseModel | Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Wire-named JSON payload for ``value``; None when there is no body."""
    if value is None:
        return None
    return _wire_fields(value)
