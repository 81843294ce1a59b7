from datetime import datetime

from dateutil import parser as dateutil_parser

from agentcost.errors import ArgumentError, ConfigurationError
from agentcost.models import ReportArguments, ReportWindow, as_utc


def validate_credentials(organization: "str | None", access_token: "str | None") -> "None":
    """
    fails before any network activity when the organization or
    personal access token is missing.
    """
    if not organization:
        raise ConfigurationError("Please set the AZURE_DEVOPS_ORG environment variable.")

    if not access_token:
        raise ConfigurationError("Please set the AZURE_DEVOPS_PAT environment variable.")


def parse_date(value: "str") -> "datetime":
    """
    parses a calendar date or timestamp. ISO-8601 is tried first,
    then free-form strings such as "2023/01/01" or "Jan 1 2023".
    Values without an offset are UTC.
    """
    try:
        return as_utc(dateutil_parser.isoparse(value))
    except ValueError:
        pass

    try:
        return as_utc(dateutil_parser.parse(value))
    except (ValueError, OverflowError) as e:
        raise ArgumentError(f"Could not parse date: {value!r}") from e


def parse_arguments(
    pool_id: "str | None",
    date_from: "str | None",
    date_through: "str | None",
) -> "ReportArguments":
    if not pool_id:
        raise ArgumentError("Please provide an azureDevOpsAgentCloudId argument.")

    if not date_from or not date_through:
        raise ArgumentError("Please provide a dateFrom and dateThrough argument.")

    window = ReportWindow(
        date_from=parse_date(date_from),
        date_through=parse_date(date_through),
    )

    # neither the ordering nor the length of the window is checked,
    # the estimate uses the absolute distance between the two dates
    return ReportArguments(pool_id=pool_id, window=window)
