"""Webhook payload models.

Plaid sends one JSON shape for every webhook; ``webhook_type`` selects the
category and ``webhook_code`` the event within it. Codes the library does not
know yet are kept as plain strings, and payloads of an unknown category parse
into ``UnknownWebhook``.
"""

import datetime as dt
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from plaid_client.models.common import ErrorResponse, PlaidEnum


class ItemWebhookCode(PlaidEnum):
    ERROR = "ERROR"
    NEW_ACCOUNTS_AVAILABLE = "NEW_ACCOUNTS_AVAILABLE"
    PENDING_EXPIRATION = "PENDING_EXPIRATION"
    USER_PERMISSION_REVOKED = "USER_PERMISSION_REVOKED"
    WEBHOOK_UPDATE_ACKNOWLEDGED = "WEBHOOK_UPDATE_ACKNOWLEDGED"


class TransactionsWebhookCode(PlaidEnum):
    INITIAL_UPDATE = "INITIAL_UPDATE"
    HISTORICAL_UPDATE = "HISTORICAL_UPDATE"
    DEFAULT_UPDATE = "DEFAULT_UPDATE"
    TRANSACTIONS_REMOVED = "TRANSACTIONS_REMOVED"
    SYNC_UPDATES_AVAILABLE = "SYNC_UPDATES_AVAILABLE"


class AuthWebhookCode(PlaidEnum):
    AUTOMATICALLY_VERIFIED = "AUTOMATICALLY_VERIFIED"
    VERIFICATION_EXPIRED = "VERIFICATION_EXPIRED"
    DEFAULT_UPDATE = "DEFAULT_UPDATE"


class HoldingsWebhookCode(PlaidEnum):
    DEFAULT_UPDATE = "DEFAULT_UPDATE"


class InvestmentsTransactionsWebhookCode(PlaidEnum):
    DEFAULT_UPDATE = "DEFAULT_UPDATE"
    HISTORICAL_UPDATE = "HISTORICAL_UPDATE"


class WebhookBase(BaseModel):
    # Plaid adds fields over time; keep them so payloads survive a round trip
    model_config = ConfigDict(extra="allow")

    error: Optional[ErrorResponse] = Field(None, description="Error associated with the event")
    environment: Optional[str] = Field(None, description="Environment that sent the webhook")


class ItemWebhook(WebhookBase):
    """Item status changes."""

    webhook_type: Literal["ITEM"] = "ITEM"
    webhook_code: Union[ItemWebhookCode, str] = Field(..., union_mode="left_to_right")
    item_id: str
    consent_expiration_time: Optional[dt.datetime] = Field(
        None, description="Set for PENDING_EXPIRATION"
    )
    new_webhook_url: Optional[str] = Field(None, description="Set for WEBHOOK_UPDATE_ACKNOWLEDGED")


class TransactionsWebhook(WebhookBase):
    """New, updated or removed transactions."""

    webhook_type: Literal["TRANSACTIONS"] = "TRANSACTIONS"
    webhook_code: Union[TransactionsWebhookCode, str] = Field(..., union_mode="left_to_right")
    item_id: str
    new_transactions: Optional[int] = None
    removed_transactions: Optional[List[str]] = None
    initial_update_complete: Optional[bool] = None
    historical_update_complete: Optional[bool] = None


class AuthWebhook(WebhookBase):
    """Micro-deposit verification results."""

    webhook_type: Literal["AUTH"] = "AUTH"
    webhook_code: Union[AuthWebhookCode, str] = Field(..., union_mode="left_to_right")
    item_id: str
    account_id: Optional[str] = None


class HoldingsWebhook(WebhookBase):
    webhook_type: Literal["HOLDINGS"] = "HOLDINGS"
    webhook_code: Union[HoldingsWebhookCode, str] = Field(..., union_mode="left_to_right")
    item_id: str
    new_holdings: Optional[int] = None
    updated_holdings: Optional[int] = None


class InvestmentsTransactionsWebhook(WebhookBase):
    webhook_type: Literal["INVESTMENTS_TRANSACTIONS"] = "INVESTMENTS_TRANSACTIONS"
    webhook_code: Union[InvestmentsTransactionsWebhookCode, str] = Field(
        ..., union_mode="left_to_right"
    )
    item_id: str
    new_investments_transactions: Optional[int] = None
    canceled_investments_transactions: Optional[int] = None


class UnknownWebhook(WebhookBase):
    """Webhook of a category this library does not model."""

    webhook_type: str
    webhook_code: str


Webhook = Union[
    ItemWebhook,
    TransactionsWebhook,
    AuthWebhook,
    HoldingsWebhook,
    InvestmentsTransactionsWebhook,
    UnknownWebhook,
]
