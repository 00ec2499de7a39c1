"""Pydantic models for bridge API requests and responses.

Attributes are snake_case; the wire format is lowerCamelCase. Responses are
decoded in strict mode so a number sent as a string fails instead of being
coerced.
"""
from __future__ import annotations
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
        extra="ignore",
    )


class RequestModel(WireModel):
    model_config = ConfigDict(frozen=True)


# --- supported-assets -------------------------------------------------------

class SupportedAssetsRequest(RequestModel):
    """The endpoint takes no parameters."""


class Token(WireModel):
    name: str
    symbol: str
    address: str
    decimals: int


class SupportedAsset(WireModel):
    chain_id: str
    chain_name: str
    token: Token
    min_checkout_usd: float


class SupportedAssetsResponse(WireModel):
    supported_assets: list[SupportedAsset]


# --- quote ------------------------------------------------------------------

class QuoteRequest(RequestModel):
    """Amount is in the source token's base units, as a decimal string."""
    from_amount_base_unit: str
    from_chain_id: str
    from_token_address: str
    recipient_address: str
    to_chain_id: str
    to_token_address: str


class FeeBreakdown(WireModel):
    app_fee_label: str
    app_fee_percent: float
    app_fee_usd: float
    fill_cost_percent: float
    fill_cost_usd: float
    gas_usd: float
    max_slippage: float
    min_received: float
    swap_impact: float
    swap_impact_usd: float
    total_impact: float
    total_impact_usd: float


class QuoteResponse(WireModel):
    est_checkout_time_ms: int
    est_fee_breakdown: FeeBreakdown
    est_input_usd: float
    est_output_usd: float
    est_to_token_base_unit: str
    quote_id: str = Field(
        validation_alias=AliasChoices("quoteId", "questId"),
        serialization_alias="quoteId",
    )


# --- deposit / withdraw -----------------------------------------------------

class DepositAddresses(WireModel):
    """One deposit address per chain family."""
    evm: str
    svm: str
    btc: str


class DepositRequest(RequestModel):
    address: str


class DepositResponse(WireModel):
    address: DepositAddresses
    note: str | None = None


class WithdrawRequest(RequestModel):
    address: str
    to_chain_id: str
    to_token_address: str
    recipient_addr: str


class WithdrawResponse(WireModel):
    address: DepositAddresses
    note: str | None = None


# --- status -----------------------------------------------------------------

class TransactionStatus(str, Enum):
    DEPOSIT_DETECTED = "DEPOSIT_DETECTED"
    PROCESSING = "PROCESSING"
    ORIGIN_TX_CONFIRMED = "ORIGIN_TX_CONFIRMED"
    SUBMITTED = "SUBMITTED"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class StatusRequest(RequestModel):
    # Interpolated into the URL path, never sent as a query parameter.
    address: str = Field(exclude=True)


class BridgeTransaction(WireModel):
    from_chain_id: str
    from_token_address: str
    from_amount_base_unit: str
    to_chain_id: str
    to_token_address: str
    # Plain str so statuses added server-side still decode.
    status: str
    tx_hash: str | None = None
    created_time_ms: int | None = None


class StatusResponse(WireModel):
    transactions: list[BridgeTransaction]
