from typing import Protocol

from agentcost.models import JobList


class JobSource(Protocol):
    """
    JobSource stands as the protocol a job history backend
    must satisfy.

    A source returns the full job history of one agent pool
    in a single call, without pagination.
    """

    async def fetch_jobs(self, pool_id: "str") -> "JobList": ...

    async def close(self) -> "None": ...
