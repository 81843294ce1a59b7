from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Mapping

import structlog

from agentcost.errors import ArgumentError, UnknownCategoryError
from agentcost.models import (
    MACOS,
    UBUNTU,
    WINDOWS,
    JobList,
    OSCategoryEstimate,
    Usage,
)

logger = structlog.get_logger()

# hosted agent price per minute of usage, by OS category
COST_PER_MINUTE: "dict[str, float]" = {
    WINDOWS: 0.016,
    MACOS: 0.08,
    UBUNTU: 0.008,
}

# months are approximated as 30 days on purpose
DAYS_PER_MONTH = 30

_SECONDS_PER_DAY = 24 * 60 * 60


def round_half_up(value: "float", precision: "int" = 0) -> "float":
    """
    rounds halves away from zero instead of to the nearest even digit,
    so 2.5 becomes 3 and 0.125 becomes 0.13 at two places.
    """
    quantum = Decimal(1).scaleb(-precision)
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def usage_by_image(
    job_list: "JobList",
    date_from: "datetime",
    date_through: "datetime",
) -> "dict[str, Usage]":
    """
    sums job count and duration per VM image for every job that
    connected within [date_from, date_through]. Jobs without an
    image or without both timestamps are skipped.
    """
    usage: "dict[str, Usage]" = {}

    for record in job_list.records:
        if not record.vm_image:
            logger.debug("job_skipped", reason="no_vm_image")
            continue

        connected = record.agent_connected_time
        released = record.release_request_time
        if connected is None or released is None:
            logger.debug("job_skipped", reason="missing_timestamp", vm_image=record.vm_image)
            continue

        # filtering on connect time alone is close enough, a job
        # straddling the boundary is counted wholly on one side
        if connected < date_from or connected > date_through:
            logger.debug("job_skipped", reason="outside_window", vm_image=record.vm_image)
            continue

        minutes = abs((released - connected).total_seconds()) / 60
        job = Usage(job_count=1, duration_in_minutes=int(round_half_up(minutes)))
        usage[record.vm_image] = usage.get(record.vm_image, Usage()).add(job)

    return usage


def included_job_count(usage: "Mapping[str, Usage]") -> "int":
    return sum(u.job_count for u in usage.values())


def classify_image(image: "str") -> "str":
    """
    maps a VM image name to its OS category by substring.
    """
    lowered = image.lower()

    if "win" in lowered or "vs" in lowered:
        return WINDOWS
    if "mac" in lowered:
        return MACOS
    if "ubuntu" in lowered:
        return UBUNTU

    raise UnknownCategoryError(f"Unknown OS category for image: {image}")


def usage_by_os_category(usage: "Mapping[str, Usage]") -> "dict[str, Usage]":
    by_category: "dict[str, Usage]" = {}

    for image, image_usage in usage.items():
        category = classify_image(image)
        logger.debug("image_classified", vm_image=image, os_category=category)
        by_category[category] = by_category.get(category, Usage()).add(image_usage)

    return by_category


def months_in_range(date_from: "datetime", date_through: "datetime") -> "float":
    days = abs((date_through - date_from).total_seconds()) / _SECONDS_PER_DAY
    return days / DAYS_PER_MONTH


def estimate_per_month(
    usage: "Mapping[str, Usage]",
    date_from: "datetime",
    date_through: "datetime",
) -> "dict[str, OSCategoryEstimate]":
    """
    scales observed usage up (or down) to a 30 day month and prices
    it with the per-minute rate of each OS category. A zero length
    window is only an error once there is usage to scale.
    """
    estimates: "dict[str, OSCategoryEstimate]" = {}
    months = months_in_range(date_from, date_through)

    for category, category_usage in usage.items():
        cost_per_minute = COST_PER_MINUTE.get(category)
        if cost_per_minute is None:
            raise UnknownCategoryError(f"Unknown OS category: {category}")

        if months == 0:
            raise ArgumentError(
                "dateFrom and dateThrough must not be the same instant."
            )

        minutes_per_month = int(
            round_half_up(category_usage.duration_in_minutes / months)
        )

        estimates[category] = OSCategoryEstimate(
            job_count=category_usage.job_count,
            duration_in_minutes=category_usage.duration_in_minutes,
            cost_per_minute=cost_per_minute,
            duration_in_minutes_estimate_per_month=minutes_per_month,
            cost_estimate_per_month=round_half_up(minutes_per_month * cost_per_minute, 2),
        )

    return estimates


def total_cost_per_month(estimates: "Mapping[str, OSCategoryEstimate]") -> "float":
    total = sum(e.cost_estimate_per_month for e in estimates.values())
    return round_half_up(total, 2)
