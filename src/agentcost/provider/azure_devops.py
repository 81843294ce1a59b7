import httpx
import structlog

from agentcost.models import JobList, JobRecord

logger = structlog.get_logger()

AZURE_DEVOPS_BASE_URL = "https://dev.azure.com"
API_VERSION = "7.0"


class AzureDevOpsClient:
    """
    AzureDevOpsClient implements the JobSource protocol on top of the
    Azure DevOps distributed task API. It lists the agent requests of
    an agent cloud in a single call.

    See https://learn.microsoft.com/en-us/rest/api/azure/devops/distributedtask/requests/list
    """

    def __init__(self, organization: "str", access_token: "str") -> "None":
        self._organization = organization
        # the token goes into the header as-is, matching how the
        # agent cloud endpoint has been called so far
        headers: "dict[str, str]" = {"Authorization": f"Basic {access_token}"}
        self._client: "httpx.AsyncClient" = httpx.AsyncClient(
            timeout=None,
            headers=headers,
        )

    async def close(self) -> "None":
        """
        closes the underlying HTTP client.
        """
        await self._client.aclose()

    def requests_url(self, pool_id: "str") -> "str":
        return (
            f"{AZURE_DEVOPS_BASE_URL}/{self._organization}"
            f"/_apis/distributedtask/agentclouds/{pool_id}/requests"
        )

    async def fetch_jobs(self, pool_id: "str") -> "JobList":
        """
        fetches the job history of the given agent cloud.
        """
        url = self.requests_url(pool_id)

        logger.info("fetch_jobs", organization=self._organization, pool_id=pool_id)
        resp = await self._client.get(url, params={"api-version": API_VERSION})
        resp.raise_for_status()

        data = resp.json()
        records = tuple(JobRecord.from_api(item) for item in data.get("value", []))
        count = data.get("count", len(records))

        logger.info("jobs_fetched", count=count, record_count=len(records))
        return JobList(records=records, count=count)
