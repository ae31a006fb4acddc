"""Account operations for Plaid API."""

from datetime import date, datetime
from typing import List, Optional

from plaid_client.operations.base import BaseOperations
from plaid_client.models.requests import AccountsRequest, BalanceRequest, TransactionsRequest
from plaid_client.models.responses import (
    AccountsResponse,
    AuthResponse,
    IdentityResponse,
    TransactionsResponse,
)


class AccountOperations(BaseOperations):
    """Account data endpoints of an Item."""

    def _accounts_request(self, access_token: str, account_ids: Optional[List[str]]) -> AccountsRequest:
        return self._build_request(
            AccountsRequest,
            access_token=access_token,
            options={"account_ids": account_ids},
        )

    async def get_accounts(
        self,
        access_token: str,
        account_ids: Optional[List[str]] = None,
    ) -> AccountsResponse:
        """Get the accounts of an Item.

        Balances returned here may be cached; use ``get_balances`` for
        real-time values.

        Args:
            access_token: Item access token
            account_ids: Restrict the response to these accounts

        Returns:
            Accounts and Item metadata

        Raises:
            ApiError: For API errors
        """
        request = self._accounts_request(access_token, account_ids)
        return await self._call("/accounts/get", request, AccountsResponse)

    async def get_balances(
        self,
        access_token: str,
        account_ids: Optional[List[str]] = None,
        min_last_updated_datetime: Optional[datetime] = None,
    ) -> AccountsResponse:
        """Get real-time balances of an Item's accounts.

        Args:
            access_token: Item access token
            account_ids: Restrict the response to these accounts
            min_last_updated_datetime: Oldest acceptable balance refresh;
                only honoured by some institutions

        Returns:
            Accounts with fresh balances and Item metadata

        Raises:
            InvalidParametersError: If min_last_updated_datetime has no timezone
            ApiError: For API errors
        """
        request = self._build_request(
            BalanceRequest,
            access_token=access_token,
            options={
                "account_ids": account_ids,
                "min_last_updated_datetime": min_last_updated_datetime,
            },
        )
        return await self._call("/accounts/balance/get", request, AccountsResponse)

    async def get_auth(
        self,
        access_token: str,
        account_ids: Optional[List[str]] = None,
    ) -> AuthResponse:
        """Get account and routing numbers of an Item's accounts."""
        request = self._accounts_request(access_token, account_ids)
        return await self._call("/auth/get", request, AuthResponse)

    async def get_identity(
        self,
        access_token: str,
        account_ids: Optional[List[str]] = None,
    ) -> IdentityResponse:
        """Get account holder names, emails, phone numbers and addresses."""
        request = self._accounts_request(access_token, account_ids)
        return await self._call("/identity/get", request, IdentityResponse)

    async def get_transactions(
        self,
        access_token: str,
        start_date: date,
        end_date: date,
        account_ids: Optional[List[str]] = None,
        count: Optional[int] = None,
        offset: Optional[int] = None,
        include_original_description: Optional[bool] = None,
    ) -> TransactionsResponse:
        """Get transactions of an Item in a date range.

        Args:
            access_token: Item access token
            start_date: Earliest transaction date
            end_date: Latest transaction date
            account_ids: Restrict the response to these accounts
            count: Number of transactions to fetch (1-500)
            offset: Number of transactions to skip, for pagination
            include_original_description: Include the raw description

        Returns:
            One page of transactions with the total count

        Raises:
            InvalidParametersError: If the date range or paging options are invalid
            ApiError: For API errors
        """
        request = self._build_request(
            TransactionsRequest,
            access_token=access_token,
            start_date=start_date,
            end_date=end_date,
            options={
                "account_ids": account_ids,
                "count": count,
                "offset": offset,
                "include_original_description": include_original_description,
            },
        )
        return await self._call("/transactions/get", request, TransactionsResponse)
