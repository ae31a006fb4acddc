"""Sandbox-only helpers for Plaid API."""

from typing import List, Optional, Union

from plaid_client.operations.base import BaseOperations
from plaid_client.models.common import Products
from plaid_client.models.requests import SandboxFireWebhookRequest, SandboxPublicTokenCreateRequest
from plaid_client.models.responses import (
    SandboxFireWebhookResponse,
    SandboxPublicTokenCreateResponse,
)


class SandboxOperations(BaseOperations):
    """Endpoints that only exist in the Sandbox environment."""

    async def create_public_token(
        self,
        institution_id: str,
        initial_products: List[Union[Products, str]],
        webhook: Optional[str] = None,
        override_username: Optional[str] = None,
        override_password: Optional[str] = None,
    ) -> SandboxPublicTokenCreateResponse:
        """Create a public token without going through Link.

        Args:
            institution_id: Sandbox institution, e.g. ``ins_109508``
            initial_products: Products to initialize the Item with
            webhook: URL to receive Item webhooks
            override_username: Test username, defaults to ``user_good``
            override_password: Test password, defaults to ``pass_good``

        Returns:
            Public token to exchange for an access token

        Raises:
            InvalidParametersError: If no product or an unknown product is given
            ApiError: For API errors
        """
        request = self._build_request(
            SandboxPublicTokenCreateRequest,
            institution_id=institution_id,
            initial_products=initial_products,
            options={
                "webhook": webhook,
                "override_username": override_username,
                "override_password": override_password,
            },
        )
        return await self._call(
            "/sandbox/public_token/create", request, SandboxPublicTokenCreateResponse
        )

    async def fire_webhook(
        self,
        access_token: str,
        webhook_code: str = "DEFAULT_UPDATE",
    ) -> SandboxFireWebhookResponse:
        """Make the Sandbox send a webhook for an Item."""
        request = self._build_request(
            SandboxFireWebhookRequest, access_token=access_token, webhook_code=webhook_code
        )
        return await self._call(
            "/sandbox/item/fire_webhook", request, SandboxFireWebhookResponse
        )
