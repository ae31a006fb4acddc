"""Request models for Plaid API."""

from datetime import date
from typing import Optional, List, Dict, Any
from pydantic import AwareDatetime, BaseModel, Field, field_validator, model_validator

from plaid_client.models.common import CountryCode, Products


def _drop_empty(data: Dict[str, Any]) -> Dict[str, Any]:
    cleaned = {}
    for key, value in data.items():
        if isinstance(value, dict):
            value = _drop_empty(value)
            if not value:
                continue
        cleaned[key] = value
    return cleaned


class PlaidRequest(BaseModel):
    """Base class for request bodies.

    Credentials are not part of the model; they are merged in when the body
    is built.
    """

    def to_payload(self) -> Dict[str, Any]:
        """Serialize for the wire.

        Fields that were never set or are ``None`` are omitted, and so are
        nested objects left empty by that, e.g. an ``options`` with no option.
        """
        return _drop_empty(self.model_dump(mode="json", exclude_unset=True, exclude_none=True))


class AccountIdsOptions(BaseModel):
    """Options restricting a request to some accounts of the Item."""

    account_ids: Optional[List[str]] = Field(None, description="Accounts to retrieve")

    @field_validator("account_ids")
    @classmethod
    def drop_empty_account_ids(cls, v):
        """The API rejects an empty list; treat it as unset."""
        return v or None


class BalanceOptions(AccountIdsOptions):
    """Options for the balance request."""

    # Plaid rejects timestamps without an offset
    min_last_updated_datetime: Optional[AwareDatetime] = Field(
        None, description="Oldest acceptable balance refresh time"
    )


class TransactionsOptions(AccountIdsOptions):
    """Options for the transactions request."""

    count: Optional[int] = Field(None, description="Number of transactions to fetch", ge=1, le=500)
    offset: Optional[int] = Field(None, description="Offset for pagination", ge=0)
    include_original_description: Optional[bool] = Field(None)


class AccountsRequest(PlaidRequest):
    """Body of ``/accounts/get``, ``/auth/get`` and ``/identity/get``."""

    access_token: str = Field(..., description="Item access token")
    options: Optional[AccountIdsOptions] = Field(None)


class BalanceRequest(PlaidRequest):
    """Body of ``/accounts/balance/get``."""

    access_token: str = Field(..., description="Item access token")
    options: Optional[BalanceOptions] = Field(None)


class TransactionsRequest(PlaidRequest):
    """Body of ``/transactions/get``."""

    access_token: str = Field(..., description="Item access token")
    start_date: date = Field(..., description="Earliest transaction date")
    end_date: date = Field(..., description="Latest transaction date")
    options: Optional[TransactionsOptions] = Field(None)

    @model_validator(mode="after")
    def validate_date_range(self):
        """Validate that end_date is not before start_date."""
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class LinkTokenUser(BaseModel):
    """End user of the Link flow."""

    client_user_id: str = Field(..., description="Your unique identifier for the user")
    legal_name: Optional[str] = None
    phone_number: Optional[str] = None
    email_address: Optional[str] = None


class PaymentInitiationConfiguration(BaseModel):
    payment_id: str


class LinkTokenCreateRequest(PlaidRequest):
    """Body of ``/link/token/create``."""

    client_name: str = Field(..., description="Application name displayed in Link", max_length=30)
    language: str = Field("en", description="Link display language")
    country_codes: List[CountryCode] = Field(..., min_length=1)
    user: LinkTokenUser
    products: Optional[List[Products]] = Field(None, description="Omit in update mode")
    webhook: Optional[str] = None
    access_token: Optional[str] = Field(None, description="Launch Link in update mode for this Item")
    link_customization_name: Optional[str] = None
    redirect_uri: Optional[str] = None
    android_package_name: Optional[str] = None
    account_filters: Optional[Dict[str, Any]] = None
    institution_id: Optional[str] = None
    payment_initiation: Optional[PaymentInitiationConfiguration] = None

    @field_validator("products")
    @classmethod
    def drop_empty_products(cls, v):
        """The API rejects an empty list; treat it as unset."""
        return v or None


class PublicTokenExchangeRequest(PlaidRequest):
    """Body of ``/item/public_token/exchange``."""

    public_token: str


class AccessTokenRequest(PlaidRequest):
    """Body of endpoints that only take an access token."""

    access_token: str


class ProcessorTokenCreateRequest(PlaidRequest):
    """Body of ``/processor/token/create``."""

    access_token: str
    account_id: str
    processor: str = Field(..., description="Processor name, e.g. 'dwolla'")


class InstitutionOptions(BaseModel):
    include_optional_metadata: Optional[bool] = None
    include_status: Optional[bool] = None
    include_auth_metadata: Optional[bool] = None
    include_payment_initiation_metadata: Optional[bool] = None


class InstitutionGetByIdRequest(PlaidRequest):
    """Body of ``/institutions/get_by_id``."""

    institution_id: str
    country_codes: List[CountryCode] = Field(..., min_length=1)
    options: Optional[InstitutionOptions] = None


class SandboxPublicTokenOptions(BaseModel):
    webhook: Optional[str] = None
    override_username: Optional[str] = None
    override_password: Optional[str] = None


class SandboxPublicTokenCreateRequest(PlaidRequest):
    """Body of ``/sandbox/public_token/create``."""

    institution_id: str
    initial_products: List[Products] = Field(..., min_length=1)
    options: Optional[SandboxPublicTokenOptions] = None


class SandboxFireWebhookRequest(PlaidRequest):
    """Body of ``/sandbox/item/fire_webhook``."""

    access_token: str
    webhook_code: str = Field(..., description="Webhook code to fire, e.g. 'DEFAULT_UPDATE'")
