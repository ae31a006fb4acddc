from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from plaid_client.models.common import CountryCode, Products
from plaid_client.models.requests import (
    AccessTokenRequest,
    AccountIdsOptions,
    AccountsRequest,
    BalanceOptions,
    BalanceRequest,
    InstitutionGetByIdRequest,
    LinkTokenCreateRequest,
    LinkTokenUser,
    ProcessorTokenCreateRequest,
    PublicTokenExchangeRequest,
    SandboxFireWebhookRequest,
    SandboxPublicTokenCreateRequest,
    TransactionsOptions,
    TransactionsRequest,
)


class TestPayloads:

    def test_unset_optionals_omitted(self):
        """Test optional fields that were not set never reach the wire."""
        request = AccountsRequest(access_token="access-sandbox-123")

        assert request.to_payload() == {"access_token": "access-sandbox-123"}

    def test_empty_account_ids_dropped(self):
        """Test an empty account list is treated as unset."""
        options = AccountIdsOptions(account_ids=[])

        assert options.account_ids is None
        assert AccountsRequest(access_token="a", options=options).to_payload() == {
            "access_token": "a",
        }

    def test_empty_options_omitted(self):
        """Test an options object with no option set is not sent."""
        request = BalanceRequest(
            access_token="a",
            options={"account_ids": None, "min_last_updated_datetime": None},
        )

        assert request.to_payload() == {"access_token": "a"}

    def test_defaults_not_sent_unless_set(self):
        """Test fields left at their default are not sent."""
        request = LinkTokenCreateRequest(
            client_name="Plaid Test App",
            country_codes=["US"],
            user={"client_user_id": "user-id"},
        )

        assert "language" not in request.to_payload()

    def test_account_ids_included(self):
        """Test account ids are nested under options."""
        request = AccountsRequest(
            access_token="access-sandbox-123",
            options=AccountIdsOptions(account_ids=["acc1", "acc2"]),
        )

        assert request.to_payload() == {
            "access_token": "access-sandbox-123",
            "options": {"account_ids": ["acc1", "acc2"]},
        }

    def test_balance_min_last_updated_datetime(self):
        """Test the balance freshness option is serialized as ISO 8601."""
        request = BalanceRequest(
            access_token="access-sandbox-123",
            options=BalanceOptions(
                min_last_updated_datetime=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
            ),
        )

        payload = request.to_payload()

        assert payload["options"] == {"min_last_updated_datetime": "2024-01-15T10:30:00Z"}

    def test_balance_datetime_with_offset(self):
        """Test a non-UTC offset is kept on the wire."""
        options = BalanceOptions(
            min_last_updated_datetime=datetime(2024, 1, 15, 10, 30, tzinfo=timezone(timedelta(hours=2))),
        )

        payload = BalanceRequest(access_token="a", options=options).to_payload()

        assert payload["options"]["min_last_updated_datetime"] == "2024-01-15T10:30:00+02:00"

    def test_balance_naive_datetime_rejected(self):
        """Test a datetime without timezone is rejected."""
        with pytest.raises(ValidationError):
            BalanceOptions(min_last_updated_datetime=datetime(2024, 1, 15, 10, 30))


class TestTransactionsRequest:

    def test_dates_serialized(self):
        """Test dates are sent as YYYY-MM-DD."""
        request = TransactionsRequest(
            access_token="access-sandbox-123",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 31),
        )

        assert request.to_payload() == {
            "access_token": "access-sandbox-123",
            "start_date": "2024-01-01",
            "end_date": "2024-01-31",
        }

    def test_same_day_range(self):
        """Test a single-day range is valid."""
        request = TransactionsRequest(
            access_token="access-sandbox-123",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 1),
        )

        assert request.start_date == request.end_date

    def test_invalid_date_range(self):
        """Test end_date before start_date is rejected."""
        with pytest.raises(ValidationError):
            TransactionsRequest(
                access_token="access-sandbox-123",
                start_date=date(2024, 1, 31),
                end_date=date(2024, 1, 1),
            )

    @pytest.mark.parametrize("count", [0, 501])
    def test_count_bounds(self, count):
        """Test count must be within 1-500."""
        with pytest.raises(ValidationError):
            TransactionsOptions(count=count)


class TestLinkTokenCreateRequest:

    def test_minimal_payload(self):
        """Test the payload of a minimal link token request."""
        request = LinkTokenCreateRequest(
            client_name="Plaid Test App",
            country_codes=[CountryCode.US],
            user=LinkTokenUser(client_user_id="user-id"),
            products=[Products.AUTH, "transactions"],
        )

        assert request.to_payload() == {
            "client_name": "Plaid Test App",
            "country_codes": ["US"],
            "user": {"client_user_id": "user-id"},
            "products": ["auth", "transactions"],
        }

    def test_empty_products_dropped(self):
        """Test update mode requests omit products."""
        request = LinkTokenCreateRequest(
            client_name="Plaid Test App",
            country_codes=["US"],
            user=LinkTokenUser(client_user_id="user-id"),
            products=[],
            access_token="access-sandbox-123",
        )

        payload = request.to_payload()

        assert "products" not in payload
        assert payload["access_token"] == "access-sandbox-123"

    def test_client_name_length(self):
        """Test client names longer than Link displays are rejected."""
        with pytest.raises(ValidationError):
            LinkTokenCreateRequest(
                client_name="x" * 31,
                country_codes=["US"],
                user=LinkTokenUser(client_user_id="user-id"),
            )

    def test_unknown_country_code(self):
        """Test unsupported country codes are rejected before sending."""
        with pytest.raises(ValidationError):
            LinkTokenCreateRequest(
                client_name="Plaid Test App",
                country_codes=["XX"],
                user=LinkTokenUser(client_user_id="user-id"),
            )


@pytest.mark.parametrize(
    "request_model,payload",
    [
        (AccessTokenRequest, {"access_token": "access-sandbox-123"}),
        (AccountsRequest, {"access_token": "access-sandbox-123", "options": {"account_ids": ["acc1"]}}),
        (
            BalanceRequest,
            {
                "access_token": "access-sandbox-123",
                "options": {"min_last_updated_datetime": "2024-01-15T10:30:00Z"},
            },
        ),
        (
            TransactionsRequest,
            {
                "access_token": "access-sandbox-123",
                "start_date": "2024-01-01",
                "end_date": "2024-01-31",
                "options": {"count": 250, "offset": 500, "include_original_description": True},
            },
        ),
        (
            LinkTokenCreateRequest,
            {
                "client_name": "Plaid Test App",
                "country_codes": ["US", "CA"],
                "user": {"client_user_id": "user-id", "email_address": "user@example.com"},
                "products": ["auth"],
                "redirect_uri": "https://example.com/oauth",
                "account_filters": {"depository": {"account_subtypes": ["checking"]}},
            },
        ),
        (PublicTokenExchangeRequest, {"public_token": "public-sandbox-abc"}),
        (
            ProcessorTokenCreateRequest,
            {"access_token": "access-sandbox-123", "account_id": "acc1", "processor": "dwolla"},
        ),
        (
            InstitutionGetByIdRequest,
            {"institution_id": "ins_109508", "country_codes": ["US"], "options": {"include_auth_metadata": True}},
        ),
        (
            SandboxPublicTokenCreateRequest,
            {
                "institution_id": "ins_109508",
                "initial_products": ["transactions"],
                "options": {"override_username": "user_good", "override_password": "pass_good"},
            },
        ),
        (SandboxFireWebhookRequest, {"access_token": "access-sandbox-123", "webhook_code": "DEFAULT_UPDATE"}),
    ],
)
def test_request_round_trip(request_model, payload):
    """Test a request body parses and serializes back unchanged."""
    assert request_model.model_validate(payload).to_payload() == payload
