import pytest

from plaid_client.auth.credentials import Credentials, Environment


@pytest.fixture
def credentials():
    """Sandbox credentials for testing."""
    return Credentials(
        client_id="test_client_id",
        secret="test_secret_value",
        environment=Environment.SANDBOX,
    )


@pytest.fixture
def account_payload():
    """Account as returned by /accounts/get."""
    return {
        "account_id": "BxBXxLj1m4HMXBm9WZZmCWVbPjX16EHwv99vp",
        "balances": {
            "available": 100,
            "current": 110,
            "limit": None,
            "iso_currency_code": "USD",
            "unofficial_currency_code": None,
        },
        "mask": "0000",
        "name": "Plaid Checking",
        "official_name": "Plaid Gold Standard 0% Interest Checking",
        "subtype": "checking",
        "type": "depository",
    }


@pytest.fixture
def item_payload():
    """Item metadata as embedded in account responses."""
    return {
        "available_products": ["balance", "identity"],
        "billed_products": ["auth", "transactions"],
        "consent_expiration_time": None,
        "error": None,
        "institution_id": "ins_109508",
        "item_id": "Ed6bjNrDLJfGvZWwnkQlfxwoNz54B5C97ejBr",
        "webhook": "https://www.genericwebhookurl.com/webhook",
    }


@pytest.fixture
def error_payload():
    """Plaid error body."""
    return {
        "error_type": "ITEM_ERROR",
        "error_code": "ITEM_LOGIN_REQUIRED",
        "error_message": "the login details of this item have changed (credentials, MFA, or required user action) and a user login is required to update this information.",
        "display_message": "The login details of this item have changed. Please log in again.",
        "request_id": "HNTDNrA8F1shFEW",
        "causes": [],
        "status": 400,
        "documentation_url": "https://plaid.com/docs/?ref=error#item-errors",
        "suggested_action": None,
    }
