from datetime import datetime, timedelta
from typing import Callable

import pytest
from dateutil import tz

from agentcost.models import JobRecord, ReportArguments, ReportWindow

JobFactory = Callable[..., JobRecord]


@pytest.fixture()
def window() -> "ReportWindow":
    """
    a 30 day window, i.e. exactly one month for the estimate.
    """
    return ReportWindow(
        date_from=datetime(2023, 1, 1, tzinfo=tz.UTC),
        date_through=datetime(2023, 1, 31, tzinfo=tz.UTC),
    )


@pytest.fixture()
def arguments(window: "ReportWindow") -> "ReportArguments":
    return ReportArguments(pool_id="1", window=window)


@pytest.fixture()
def make_job() -> "JobFactory":
    """
    builds a JobRecord that connected at `connected` and ran
    for `minutes`.
    """

    def _make(
        vm_image: "str | None",
        connected: "datetime | None" = datetime(2023, 1, 10, tzinfo=tz.UTC),
        minutes: "float" = 10,
    ) -> "JobRecord":
        released = connected + timedelta(minutes=minutes) if connected else None
        return JobRecord(
            vm_image=vm_image,
            agent_connected_time=connected,
            release_request_time=released,
        )

    return _make
