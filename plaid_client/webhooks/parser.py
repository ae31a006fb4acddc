import json
from typing import Any, Dict, Mapping, Type, Union

from pydantic import ValidationError

from plaid_client.client.exceptions import DecodingError
from plaid_client.webhooks.models import (
    AuthWebhook,
    HoldingsWebhook,
    InvestmentsTransactionsWebhook,
    ItemWebhook,
    TransactionsWebhook,
    UnknownWebhook,
    Webhook,
    WebhookBase,
)

WEBHOOK_TYPES: Dict[str, Type[WebhookBase]] = {
    "ITEM": ItemWebhook,
    "TRANSACTIONS": TransactionsWebhook,
    "AUTH": AuthWebhook,
    "HOLDINGS": HoldingsWebhook,
    "INVESTMENTS_TRANSACTIONS": InvestmentsTransactionsWebhook,
}


def parse_webhook(payload: Union[str, bytes, Mapping[str, Any]]) -> Webhook:
    """Parse an inbound webhook body into its category model.

    Args:
        payload: Raw JSON body, or the already decoded object

    Returns:
        The webhook of the category named by ``webhook_type``, or an
        ``UnknownWebhook`` for categories without a model

    Raises:
        DecodingError: If the payload is not a webhook object
    """
    if isinstance(payload, (str, bytes)):
        raw = payload if isinstance(payload, str) else payload.decode("utf-8", errors="replace")
        try:
            data = json.loads(payload)
        except ValueError as e:
            raise DecodingError(f"Webhook body is not valid JSON: {e}", body=raw) from e
    else:
        raw = None
        data = payload

    if not isinstance(data, Mapping):
        raise DecodingError("Webhook body is not a JSON object", body=raw)

    webhook_type = data.get("webhook_type")
    if not isinstance(webhook_type, str):
        raise DecodingError("Webhook body has no webhook_type", body=raw)

    model = WEBHOOK_TYPES.get(webhook_type, UnknownWebhook)
    try:
        return model.model_validate(dict(data))
    except ValidationError as e:
        raise DecodingError(f"Invalid {webhook_type} webhook: {e}", body=raw) from e
