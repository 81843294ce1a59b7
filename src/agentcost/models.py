from dataclasses import dataclass
from datetime import datetime
from typing import Any

from dateutil import parser as dateutil_parser
from dateutil import tz

WINDOWS = "Windows"
MACOS = "macOS"
UBUNTU = "Ubuntu"


def as_utc(value: "datetime") -> "datetime":
    """
    attaches UTC to naive datetimes so every comparison in the
    pipeline happens between aware values.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=tz.UTC)
    return value


def _parse_timestamp(value: "str | None") -> "datetime | None":
    if not value:
        return None
    # Azure DevOps emits 7 fractional digits, isoparse truncates to microseconds
    return as_utc(dateutil_parser.isoparse(value))


@dataclass(frozen=True, slots=True)
class JobRecord:
    """
    JobRecord represents a single agent request
    from the job history of an agent pool.
    """

    vm_image: "str | None"
    # when the agent picked up the job
    agent_connected_time: "datetime | None"
    # when the job asked to release its agent
    release_request_time: "datetime | None"

    @classmethod
    def from_api(cls, item: "dict[str, Any]") -> "JobRecord":
        spec = item.get("agentSpecification") or {}
        # the field shows up under both casings depending on
        # how the pipeline requested the image
        vm_image = spec.get("vmImage")
        if vm_image is None:
            vm_image = spec.get("VMImage")

        return cls(
            vm_image=vm_image,
            agent_connected_time=_parse_timestamp(item.get("agentConnectedTime")),
            release_request_time=_parse_timestamp(item.get("releaseRequestTime")),
        )


@dataclass(frozen=True, slots=True)
class JobList:
    records: "tuple[JobRecord, ...]"
    # total reported by the API, may be larger than the
    # number of records that end up included in the report
    count: "int"


@dataclass(frozen=True, slots=True)
class Usage:
    job_count: "int" = 0
    duration_in_minutes: "int" = 0

    def add(self, other: "Usage") -> "Usage":
        return Usage(
            job_count=self.job_count + other.job_count,
            duration_in_minutes=self.duration_in_minutes + other.duration_in_minutes,
        )


@dataclass(frozen=True, slots=True)
class OSCategoryEstimate:
    """
    OSCategoryEstimate is the observed usage of one OS category
    extended with its monthly projection.
    """

    job_count: "int"
    duration_in_minutes: "int"
    cost_per_minute: "float"
    duration_in_minutes_estimate_per_month: "int"
    cost_estimate_per_month: "float"


@dataclass(frozen=True, slots=True)
class ReportWindow:
    # both bounds are inclusive and timezone-aware
    date_from: "datetime"
    date_through: "datetime"


@dataclass(frozen=True, slots=True)
class ReportArguments:
    pool_id: "str"
    window: "ReportWindow"
