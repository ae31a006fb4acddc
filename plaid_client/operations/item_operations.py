"""Item and institution operations for Plaid API."""

from typing import List, Union

from plaid_client.operations.base import BaseOperations
from plaid_client.models.common import CountryCode
from plaid_client.models.requests import AccessTokenRequest, InstitutionGetByIdRequest
from plaid_client.models.responses import (
    InstitutionGetByIdResponse,
    ItemGetResponse,
    ItemRemoveResponse,
)


class ItemOperations(BaseOperations):
    """Item lifecycle and institution metadata endpoints."""

    async def get_item(self, access_token: str) -> ItemGetResponse:
        """Get Item metadata and status."""
        request = self._build_request(AccessTokenRequest, access_token=access_token)
        return await self._call("/item/get", request, ItemGetResponse)

    async def remove_item(self, access_token: str) -> ItemRemoveResponse:
        """Remove an Item. The access token is invalid afterwards."""
        request = self._build_request(AccessTokenRequest, access_token=access_token)
        return await self._call("/item/remove", request, ItemRemoveResponse)

    async def get_institution_by_id(
        self,
        institution_id: str,
        country_codes: List[Union[CountryCode, str]],
        include_optional_metadata: bool = False,
        include_status: bool = False,
        include_auth_metadata: bool = False,
        include_payment_initiation_metadata: bool = False,
    ) -> InstitutionGetByIdResponse:
        """Get details about a financial institution.

        Args:
            institution_id: Plaid institution identifier
            country_codes: Countries the institution is looked up in
            include_optional_metadata: Include logo, colour and URL
            include_status: Include institution health status
            include_auth_metadata: Include supported Auth methods
            include_payment_initiation_metadata: Include Payment Initiation support

        Returns:
            Institution details

        Raises:
            InvalidParametersError: If a country code is not supported
            ApiError: For API errors
        """
        # False flags are left out rather than sent
        options = {
            "include_optional_metadata": include_optional_metadata or None,
            "include_status": include_status or None,
            "include_auth_metadata": include_auth_metadata or None,
            "include_payment_initiation_metadata": include_payment_initiation_metadata or None,
        }

        request = self._build_request(
            InstitutionGetByIdRequest,
            institution_id=institution_id,
            country_codes=country_codes,
            options=options,
        )
        return await self._call("/institutions/get_by_id", request, InstitutionGetByIdResponse)
