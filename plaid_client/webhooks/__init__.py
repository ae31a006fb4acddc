"""Webhook payload parsing for the Plaid client."""

from plaid_client.webhooks.models import (
    AuthWebhook,
    AuthWebhookCode,
    HoldingsWebhook,
    HoldingsWebhookCode,
    InvestmentsTransactionsWebhook,
    InvestmentsTransactionsWebhookCode,
    ItemWebhook,
    ItemWebhookCode,
    TransactionsWebhook,
    TransactionsWebhookCode,
    UnknownWebhook,
    Webhook,
)
from plaid_client.webhooks.parser import WEBHOOK_TYPES, parse_webhook

__all__ = [
    "AuthWebhook",
    "AuthWebhookCode",
    "HoldingsWebhook",
    "HoldingsWebhookCode",
    "InvestmentsTransactionsWebhook",
    "InvestmentsTransactionsWebhookCode",
    "ItemWebhook",
    "ItemWebhookCode",
    "TransactionsWebhook",
    "TransactionsWebhookCode",
    "UnknownWebhook",
    "Webhook",
    "WEBHOOK_TYPES",
    "parse_webhook",
]
