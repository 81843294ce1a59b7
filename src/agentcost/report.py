import sys
from typing import Mapping, TextIO

from agentcost.models import JobList, OSCategoryEstimate, Usage


def _format_usage(usage: "Usage") -> "str":
    return f"jobs={usage.job_count} minutes={usage.duration_in_minutes}"


class Reporter:
    """
    Reporter prints each stage of the pipeline as plain key/value
    lines. Every section ends with a blank line.
    """

    def __init__(self, stream: "TextIO | None" = None) -> "None":
        self._stream = stream if stream is not None else sys.stdout

    def _write(self, *lines: "str") -> "None":
        for line in lines:
            print(line, file=self._stream)
        print(file=self._stream)

    def usage_by_image(self, usage: "Mapping[str, Usage]") -> "None":
        self._write(
            "Usage by image:",
            *(f"  {image}: {_format_usage(u)}" for image, u in usage.items()),
        )

    def job_counts(self, job_list: "JobList", included: "int") -> "None":
        self._write(f"Job count in all data: {job_list.count}")
        self._write(f"Job count included: {included}")

    def usage_by_os_category(self, usage: "Mapping[str, Usage]") -> "None":
        self._write(
            "Usage by OS category:",
            *(f"  {category}: {_format_usage(u)}" for category, u in usage.items()),
        )

    def estimates(self, estimates: "Mapping[str, OSCategoryEstimate]") -> "None":
        self._write(
            "Usage by OS category per month:",
            *(
                f"  {category}: jobs={e.job_count}"
                f" minutes={e.duration_in_minutes}"
                f" cost_per_minute={e.cost_per_minute}"
                f" minutes_per_month={e.duration_in_minutes_estimate_per_month}"
                f" cost_per_month={e.cost_estimate_per_month}"
                for category, e in estimates.items()
            ),
        )

    def total(self, total_cost: "float") -> "None":
        self._write(f"Total cost estimate per month: {total_cost}")
