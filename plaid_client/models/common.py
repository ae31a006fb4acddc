"""Types shared by Plaid requests, responses and webhooks."""

import datetime as dt
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class PlaidEnum(str, Enum):
    """String enum that renders as its wire value."""

    def __str__(self) -> str:
        return self.value


class ErrorType(PlaidEnum):
    """Broad categorization of a Plaid error."""

    ITEM_ERROR = "ITEM_ERROR"
    INSTITUTION_ERROR = "INSTITUTION_ERROR"
    API_ERROR = "API_ERROR"
    ASSET_REPORT_ERROR = "ASSET_REPORT_ERROR"
    PAYMENT_ERROR = "PAYMENT_ERROR"
    BANK_TRANSFER_ERROR = "BANK_TRANSFER_ERROR"
    DEPOSIT_SWITCH_ERROR = "DEPOSIT_SWITCH_ERROR"
    INCOME_VERIFICATION_ERROR = "INCOME_VERIFICATION_ERROR"
    SANDBOX_ERROR = "SANDBOX_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_RESULT = "INVALID_RESULT"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    RECAPTCHA_ERROR = "RECAPTCHA_ERROR"
    OAUTH_ERROR = "OAUTH_ERROR"


class ErrorResponse(BaseModel):
    """Plaid error object, returned on failed requests and inside webhooks."""

    error_type: Union[ErrorType, str] = Field(
        ..., union_mode="left_to_right", description="Error classification"
    )
    error_code: str = Field(..., description="Specific error code")
    error_message: str = Field(..., description="Developer-facing message")
    display_message: Optional[str] = Field(None, description="User-facing message")
    request_id: Optional[str] = Field(None, description="Request identifier")
    causes: Optional[List[Dict[str, Any]]] = Field(None, description="Underlying causes")
    status: Optional[int] = Field(None, description="HTTP status code of the error")
    documentation_url: Optional[str] = Field(None, description="Documentation page")
    suggested_action: Optional[str] = Field(None, description="Suggested resolution")


class AccountType(PlaidEnum):
    """Account types."""

    DEPOSITORY = "depository"
    CREDIT = "credit"
    LOAN = "loan"
    INVESTMENT = "investment"
    BROKERAGE = "brokerage"
    OTHER = "other"


class VerificationStatus(PlaidEnum):
    """Micro-deposit verification status of an Auth account."""

    PENDING_AUTOMATIC_VERIFICATION = "pending_automatic_verification"
    PENDING_MANUAL_VERIFICATION = "pending_manual_verification"
    AUTOMATICALLY_VERIFIED = "automatically_verified"
    MANUALLY_VERIFIED = "manually_verified"
    VERIFICATION_EXPIRED = "verification_expired"
    VERIFICATION_FAILED = "verification_failed"


class Products(PlaidEnum):
    """Plaid products."""

    TRANSACTIONS = "transactions"
    AUTH = "auth"
    IDENTITY = "identity"
    ASSETS = "assets"
    INVESTMENTS = "investments"
    LIABILITIES = "liabilities"
    PAYMENT_INITIATION = "payment_initiation"


class CountryCode(PlaidEnum):
    """Supported ISO-3166-1 alpha-2 country codes."""

    US = "US"
    CA = "CA"
    ES = "ES"
    FR = "FR"
    GB = "GB"
    IE = "IE"
    NL = "NL"


class Balances(BaseModel):
    """Balance of an account. Amounts the institution does not report are ``None``."""

    available: Optional[float] = Field(None, description="Funds available to withdraw")
    current: Optional[float] = Field(None, description="Total funds in or owed by the account")
    limit: Optional[float] = Field(None, description="Credit limit or overdraft limit")
    iso_currency_code: Optional[str] = Field(None, description="ISO 4217 currency code")
    unofficial_currency_code: Optional[str] = Field(None, description="Unofficial currency code")
    last_updated_datetime: Optional[dt.datetime] = Field(None, description="Last balance refresh")


class HistoricalBalance(BaseModel):
    date: dt.date
    current: float
    iso_currency_code: Optional[str] = None
    unofficial_currency_code: Optional[str] = None


class PhoneNumber(BaseModel):
    data: str
    primary: Optional[bool] = None
    type: Optional[str] = Field(None, description="home, work, office, mobile or other")


class EmailAddress(BaseModel):
    data: str
    primary: Optional[bool] = None
    type: Optional[str] = Field(None, description="primary, secondary or other")


class AddressData(BaseModel):
    street: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class Address(BaseModel):
    data: AddressData
    primary: Optional[bool] = None


class Owner(BaseModel):
    """Account holder information returned by Identity."""

    names: List[str] = Field(default_factory=list)
    phone_numbers: List[PhoneNumber] = Field(default_factory=list)
    emails: List[EmailAddress] = Field(default_factory=list)
    addresses: List[Address] = Field(default_factory=list)


class Account(BaseModel):
    """Financial institution account associated with an Item."""

    account_id: str = Field(..., description="Plaid account identifier")
    balances: Balances = Field(..., description="Account balances")
    mask: Optional[str] = Field(None, description="Last 2-4 characters of the account number")
    name: str = Field(..., description="Account name")
    official_name: Optional[str] = Field(None, description="Official name from the institution")
    type: AccountType = Field(..., description="Account type")
    subtype: Optional[str] = Field(None, description="Account subtype")
    verification_status: Optional[VerificationStatus] = Field(None, description="Auth verification status")
    historical_balances: List[HistoricalBalance] = Field(default_factory=list)
    owners: List[Owner] = Field(default_factory=list)
    days_available: Optional[int] = None


class Item(BaseModel):
    """Metadata about a linked Item."""

    item_id: str = Field(..., description="Item identifier")
    institution_id: Optional[str] = Field(None, description="Institution identifier")
    webhook: Optional[str] = Field(None, description="Webhook URL registered for the Item")
    error: Optional[ErrorResponse] = Field(None, description="Error state of the Item")
    available_products: List[str] = Field(default_factory=list)
    billed_products: List[str] = Field(default_factory=list)
    products: Optional[List[str]] = None
    consent_expiration_time: Optional[dt.datetime] = None
    update_type: Optional[str] = None
