from datetime import datetime

import pytest
from dateutil import tz

from agentcost.errors import ArgumentError, ConfigurationError
from agentcost.validation import parse_arguments, parse_date, validate_credentials


class TestValidateCredentials:
    def test_accepts_both_values(self) -> "None":
        validate_credentials("contoso", "pat-123")

    @pytest.mark.parametrize("organization", [None, ""])
    def test_missing_organization(self, organization: "str | None") -> "None":
        with pytest.raises(ConfigurationError, match="AZURE_DEVOPS_ORG"):
            validate_credentials(organization, "pat-123")

    @pytest.mark.parametrize("token", [None, ""])
    def test_missing_token(self, token: "str | None") -> "None":
        with pytest.raises(ConfigurationError, match="AZURE_DEVOPS_PAT"):
            validate_credentials("contoso", token)


class TestParseDate:
    def test_bare_date_is_midnight_utc(self) -> "None":
        assert parse_date("2023-01-01") == datetime(2023, 1, 1, tzinfo=tz.UTC)

    def test_keeps_explicit_offset(self) -> "None":
        parsed = parse_date("2023-01-01T10:00:00+02:00")
        assert parsed == datetime(2023, 1, 1, 8, tzinfo=tz.UTC)

    def test_slash_separated_date(self) -> "None":
        assert parse_date("2023/01/01") == datetime(2023, 1, 1, tzinfo=tz.UTC)

    def test_month_name_date(self) -> "None":
        assert parse_date("Jan 1 2023") == datetime(2023, 1, 1, tzinfo=tz.UTC)

    def test_free_form_timestamp_is_utc(self) -> "None":
        assert parse_date("March 31, 2023 18:30") == datetime(
            2023, 3, 31, 18, 30, tzinfo=tz.UTC
        )

    def test_malformed_date(self) -> "None":
        with pytest.raises(ArgumentError, match="not-a-date"):
            parse_date("not-a-date")


class TestParseArguments:
    def test_valid_arguments(self) -> "None":
        arguments = parse_arguments("1", "2023-01-01", "2023-03-31")

        assert arguments.pool_id == "1"
        assert arguments.window.date_from == datetime(2023, 1, 1, tzinfo=tz.UTC)
        assert arguments.window.date_through == datetime(2023, 3, 31, tzinfo=tz.UTC)

    @pytest.mark.parametrize("pool_id", [None, ""])
    def test_missing_pool_id(self, pool_id: "str | None") -> "None":
        with pytest.raises(ArgumentError, match="azureDevOpsAgentCloudId"):
            parse_arguments(pool_id, "2023-01-01", "2023-03-31")

    @pytest.mark.parametrize(
        ("date_from", "date_through"),
        [(None, "2023-03-31"), ("2023-01-01", None), ("", "")],
    )
    def test_missing_dates(
        self, date_from: "str | None", date_through: "str | None"
    ) -> "None":
        with pytest.raises(ArgumentError, match="dateFrom and dateThrough"):
            parse_arguments("1", date_from, date_through)

    def test_reversed_dates_are_accepted(self) -> "None":
        arguments = parse_arguments("1", "2023-03-31", "2023-01-01")
        assert arguments.window.date_from > arguments.window.date_through

    def test_zero_length_window_is_accepted(self) -> "None":
        arguments = parse_arguments("1", "2023-01-01", "2023-01-01")
        assert arguments.window.date_from == arguments.window.date_through
