"""Data models for Plaid API."""

from plaid_client.models.common import (
    Account,
    AccountType,
    Address,
    AddressData,
    Balances,
    CountryCode,
    EmailAddress,
    ErrorResponse,
    ErrorType,
    HistoricalBalance,
    Item,
    Owner,
    PhoneNumber,
    Products,
    VerificationStatus,
)
from plaid_client.models.requests import (
    AccessTokenRequest,
    AccountIdsOptions,
    AccountsRequest,
    BalanceOptions,
    BalanceRequest,
    InstitutionGetByIdRequest,
    InstitutionOptions,
    LinkTokenCreateRequest,
    LinkTokenUser,
    PaymentInitiationConfiguration,
    PlaidRequest,
    ProcessorTokenCreateRequest,
    PublicTokenExchangeRequest,
    SandboxFireWebhookRequest,
    SandboxPublicTokenCreateRequest,
    SandboxPublicTokenOptions,
    TransactionsOptions,
    TransactionsRequest,
)
from plaid_client.models.responses import (
    AccountNumbers,
    AccountsResponse,
    AuthResponse,
    IdentityResponse,
    Institution,
    InstitutionGetByIdResponse,
    ItemGetResponse,
    ItemRemoveResponse,
    LinkTokenCreateResponse,
    PlaidResponse,
    ProcessorTokenCreateResponse,
    PublicTokenCreateResponse,
    PublicTokenExchangeResponse,
    SandboxFireWebhookResponse,
    SandboxPublicTokenCreateResponse,
    Transaction,
    TransactionsResponse,
)

__all__ = [
    "Account",
    "AccountType",
    "Address",
    "AddressData",
    "Balances",
    "CountryCode",
    "EmailAddress",
    "ErrorResponse",
    "ErrorType",
    "HistoricalBalance",
    "Item",
    "Owner",
    "PhoneNumber",
    "Products",
    "VerificationStatus",
    "AccessTokenRequest",
    "AccountIdsOptions",
    "AccountsRequest",
    "BalanceOptions",
    "BalanceRequest",
    "InstitutionGetByIdRequest",
    "InstitutionOptions",
    "LinkTokenCreateRequest",
    "LinkTokenUser",
    "PaymentInitiationConfiguration",
    "PlaidRequest",
    "ProcessorTokenCreateRequest",
    "PublicTokenExchangeRequest",
    "SandboxFireWebhookRequest",
    "SandboxPublicTokenCreateRequest",
    "SandboxPublicTokenOptions",
    "TransactionsOptions",
    "TransactionsRequest",
    "AccountNumbers",
    "AccountsResponse",
    "AuthResponse",
    "IdentityResponse",
    "Institution",
    "InstitutionGetByIdResponse",
    "ItemGetResponse",
    "ItemRemoveResponse",
    "LinkTokenCreateResponse",
    "PlaidResponse",
    "ProcessorTokenCreateResponse",
    "PublicTokenCreateResponse",
    "PublicTokenExchangeResponse",
    "SandboxFireWebhookResponse",
    "SandboxPublicTokenCreateResponse",
    "Transaction",
    "TransactionsResponse",
]
