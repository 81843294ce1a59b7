import structlog

from agentcost import aggregation
from agentcost.models import ReportArguments
from agentcost.provider.base import JobSource
from agentcost.report import Reporter

logger = structlog.get_logger()


async def run_report(
    source: "JobSource",
    arguments: "ReportArguments",
    reporter: "Reporter",
) -> "float":
    """
    fetches the job history of the pool and walks it through every
    aggregation step, printing each intermediate result. Nothing is
    caught here: the first failure aborts the remaining steps.
    Returns the total monthly cost estimate.
    """
    window = arguments.window
    job_list = await source.fetch_jobs(arguments.pool_id)

    by_image = aggregation.usage_by_image(
        job_list, window.date_from, window.date_through
    )
    reporter.usage_by_image(by_image)

    included = aggregation.included_job_count(by_image)
    reporter.job_counts(job_list, included)

    by_category = aggregation.usage_by_os_category(by_image)
    reporter.usage_by_os_category(by_category)

    estimates = aggregation.estimate_per_month(
        by_category, window.date_from, window.date_through
    )
    reporter.estimates(estimates)

    total = aggregation.total_cost_per_month(estimates)
    reporter.total(total)

    logger.info(
        "report_complete",
        pool_id=arguments.pool_id,
        jobs_total=job_list.count,
        jobs_included=included,
        total_cost_per_month=total,
    )
    return total
