"""Response models for Plaid API."""

import datetime as dt
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field

from plaid_client.models.common import Account, ErrorResponse, Item


class PlaidResponse(BaseModel):
    """Base class for response bodies."""

    request_id: Optional[str] = Field(None, description="Request identifier for troubleshooting")


class AccountsResponse(PlaidResponse):
    """Response of ``/accounts/get`` and ``/accounts/balance/get``."""

    accounts: List[Account] = Field(default_factory=list)
    item: Item


class AchNumbers(BaseModel):
    account_id: str
    account: str
    routing: str
    wire_routing: Optional[str] = None


class EftNumbers(BaseModel):
    account_id: str
    account: str
    institution: str
    branch: str


class InternationalNumbers(BaseModel):
    account_id: str
    iban: str
    bic: str


class BacsNumbers(BaseModel):
    account_id: str
    account: str
    sort_code: str


class AccountNumbers(BaseModel):
    """Identifying numbers for electronic transfers, grouped by scheme."""

    ach: List[AchNumbers] = Field(default_factory=list)
    eft: List[EftNumbers] = Field(default_factory=list)
    international: List[InternationalNumbers] = Field(default_factory=list)
    bacs: List[BacsNumbers] = Field(default_factory=list)


class AuthResponse(PlaidResponse):
    """Response of ``/auth/get``."""

    accounts: List[Account] = Field(default_factory=list)
    numbers: AccountNumbers
    item: Item


class IdentityResponse(PlaidResponse):
    """Response of ``/identity/get``. Each account carries its ``owners``."""

    accounts: List[Account] = Field(default_factory=list)
    item: Item


class Location(BaseModel):
    address: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    store_number: Optional[str] = None


class Transaction(BaseModel):
    """Account transaction. Positive amounts are outflows."""

    transaction_id: str = Field(..., description="Transaction identifier")
    account_id: str = Field(..., description="Account the transaction belongs to")
    amount: float = Field(..., description="Settled value of the transaction")
    iso_currency_code: Optional[str] = None
    unofficial_currency_code: Optional[str] = None
    date: dt.date
    authorized_date: Optional[dt.date] = None
    datetime: Optional[dt.datetime] = None
    name: Optional[str] = None
    merchant_name: Optional[str] = None
    original_description: Optional[str] = None
    pending: bool = False
    pending_transaction_id: Optional[str] = None
    category: Optional[List[str]] = None
    category_id: Optional[str] = None
    payment_channel: Optional[str] = None
    transaction_type: Optional[str] = None
    transaction_code: Optional[str] = None
    account_owner: Optional[str] = None
    location: Optional[Location] = None
    payment_meta: Optional[Dict[str, Any]] = None


class TransactionsResponse(PlaidResponse):
    """Response of ``/transactions/get``."""

    accounts: List[Account] = Field(default_factory=list)
    transactions: List[Transaction] = Field(default_factory=list)
    total_transactions: int = Field(..., description="Total transactions in the date range")
    item: Item


class LinkTokenCreateResponse(PlaidResponse):
    link_token: str
    expiration: dt.datetime


class PublicTokenExchangeResponse(PlaidResponse):
    access_token: str
    item_id: str


class PublicTokenCreateResponse(PlaidResponse):
    public_token: str
    expiration: Optional[dt.datetime] = None


class SandboxPublicTokenCreateResponse(PlaidResponse):
    public_token: str


class SandboxFireWebhookResponse(PlaidResponse):
    webhook_fired: bool


class ProcessorTokenCreateResponse(PlaidResponse):
    processor_token: str


class ItemStatus(BaseModel):
    investments: Optional[Dict[str, Any]] = None
    transactions: Optional[Dict[str, Any]] = None
    last_webhook: Optional[Dict[str, Any]] = None


class ItemGetResponse(PlaidResponse):
    item: Item
    status: Optional[ItemStatus] = None


class ItemRemoveResponse(PlaidResponse):
    pass


class Breakdown(BaseModel):
    success: float
    error_plaid: float
    error_institution: float
    refresh_interval: Optional[str] = None


class RequestStatus(BaseModel):
    status: Optional[str] = None
    last_status_change: Optional[dt.datetime] = None
    breakdown: Optional[Breakdown] = None


class InstitutionStatus(BaseModel):
    item_logins: Optional[RequestStatus] = None
    transactions_updates: Optional[RequestStatus] = None
    auth: Optional[RequestStatus] = None
    identity: Optional[RequestStatus] = None
    investments_updates: Optional[RequestStatus] = None
    liabilities_updates: Optional[RequestStatus] = None
    liabilities: Optional[RequestStatus] = None
    investments: Optional[RequestStatus] = None
    health_incidents: Optional[List[Dict[str, Any]]] = None


class Institution(BaseModel):
    institution_id: str
    name: str
    products: List[str] = Field(default_factory=list)
    country_codes: List[str] = Field(default_factory=list)
    url: Optional[str] = None
    primary_color: Optional[str] = None
    logo: Optional[str] = None
    routing_numbers: List[str] = Field(default_factory=list)
    oauth: bool = False
    status: Optional[InstitutionStatus] = None
    payment_initiation_metadata: Optional[Dict[str, Any]] = None
    auth_metadata: Optional[Dict[str, Any]] = None


class InstitutionGetByIdResponse(PlaidResponse):
    institution: Institution


__all__ = [
    "AccountNumbers",
    "AccountsResponse",
    "AchNumbers",
    "AuthResponse",
    "BacsNumbers",
    "EftNumbers",
    "ErrorResponse",
    "IdentityResponse",
    "Institution",
    "InstitutionGetByIdResponse",
    "InstitutionStatus",
    "InternationalNumbers",
    "ItemGetResponse",
    "ItemRemoveResponse",
    "ItemStatus",
    "LinkTokenCreateResponse",
    "Location",
    "PlaidResponse",
    "ProcessorTokenCreateResponse",
    "PublicTokenCreateResponse",
    "PublicTokenExchangeResponse",
    "SandboxFireWebhookResponse",
    "SandboxPublicTokenCreateResponse",
    "Transaction",
    "TransactionsResponse",
]
