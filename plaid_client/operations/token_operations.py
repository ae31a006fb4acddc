"""Token operations for Plaid API."""

from typing import Any, Dict, List, Optional, Union

from plaid_client.operations.base import BaseOperations
from plaid_client.models.common import CountryCode, Products
from plaid_client.models.requests import (
    AccessTokenRequest,
    LinkTokenCreateRequest,
    ProcessorTokenCreateRequest,
    PublicTokenExchangeRequest,
)
from plaid_client.models.responses import (
    LinkTokenCreateResponse,
    ProcessorTokenCreateResponse,
    PublicTokenCreateResponse,
    PublicTokenExchangeResponse,
)


class TokenOperations(BaseOperations):
    """Link, public, access and processor token endpoints."""

    async def create_link_token(
        self,
        client_name: str,
        client_user_id: str,
        country_codes: List[Union[CountryCode, str]],
        language: str = "en",
        products: Optional[List[Union[Products, str]]] = None,
        webhook: Optional[str] = None,
        access_token: Optional[str] = None,
        link_customization_name: Optional[str] = None,
        redirect_uri: Optional[str] = None,
        android_package_name: Optional[str] = None,
        account_filters: Optional[Dict[str, Any]] = None,
        payment_id: Optional[str] = None,
    ) -> LinkTokenCreateResponse:
        """Create a link token to initialize Link.

        Args:
            client_name: Application name displayed in Link
            client_user_id: Your unique identifier for the end user
            country_codes: Countries to offer institutions from
            language: Link display language
            products: Products to enable; omit when launching update mode
            webhook: URL to receive Item webhooks
            access_token: Launch Link in update mode for this Item
            link_customization_name: Dashboard customization to apply
            redirect_uri: OAuth redirect URI
            android_package_name: Android package name for OAuth
            account_filters: Account type/subtype filters
            payment_id: Payment to initiate, for Payment Initiation

        Returns:
            Link token and its expiration

        Raises:
            InvalidParametersError: If client_name is too long or a country or
                product is not supported
            ApiError: For API errors
        """
        request = self._build_request(
            LinkTokenCreateRequest,
            client_name=client_name,
            language=language,
            country_codes=country_codes,
            user={"client_user_id": client_user_id},
            products=products,
            webhook=webhook,
            access_token=access_token,
            link_customization_name=link_customization_name,
            redirect_uri=redirect_uri,
            android_package_name=android_package_name,
            account_filters=account_filters,
            payment_initiation={"payment_id": payment_id} if payment_id else None,
        )
        return await self._call("/link/token/create", request, LinkTokenCreateResponse)

    async def exchange_public_token(self, public_token: str) -> PublicTokenExchangeResponse:
        """Exchange a public token from Link for an access token."""
        request = self._build_request(PublicTokenExchangeRequest, public_token=public_token)
        return await self._call(
            "/item/public_token/exchange", request, PublicTokenExchangeResponse
        )

    async def create_public_token(self, access_token: str) -> PublicTokenCreateResponse:
        """Create a public token for an existing Item, e.g. for legacy update mode."""
        request = self._build_request(AccessTokenRequest, access_token=access_token)
        return await self._call("/item/public_token/create", request, PublicTokenCreateResponse)

    async def create_processor_token(
        self,
        access_token: str,
        account_id: str,
        processor: str,
    ) -> ProcessorTokenCreateResponse:
        """Create a token granting a third-party processor access to one account."""
        request = self._build_request(
            ProcessorTokenCreateRequest,
            access_token=access_token,
            account_id=account_id,
            processor=processor,
        )
        return await self._call(
            "/processor/token/create", request, ProcessorTokenCreateResponse
        )
