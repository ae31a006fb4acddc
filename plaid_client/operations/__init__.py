"""Operations modules for Plaid API."""

from plaid_client.operations.base import BaseOperations
from plaid_client.operations.token_operations import TokenOperations
from plaid_client.operations.account_operations import AccountOperations
from plaid_client.operations.item_operations import ItemOperations
from plaid_client.operations.sandbox_operations import SandboxOperations

__all__ = [
    "BaseOperations",
    "TokenOperations",
    "AccountOperations",
    "ItemOperations",
    "SandboxOperations",
]
