import asyncio

import structlog

from agentcost.cli import parse_args
from agentcost.logging import setup_logging
from agentcost.models import ReportArguments
from agentcost.pipeline import run_report
from agentcost.provider.azure_devops import AzureDevOpsClient
from agentcost.report import Reporter
from agentcost.validation import parse_arguments, validate_credentials

logger = structlog.get_logger()


async def _run(client: "AzureDevOpsClient", arguments: "ReportArguments") -> "float":
    try:
        return await run_report(client, arguments, Reporter())
    finally:
        await client.close()


def main(argv: "list[str] | None" = None) -> "None":
    config = parse_args(argv)
    setup_logging(config.log_level)

    # both checks run before any network activity
    validate_credentials(config.organization, config.access_token)
    arguments = parse_arguments(config.pool_id, config.date_from, config.date_through)

    logger.debug(
        "report_window",
        pool_id=arguments.pool_id,
        date_from=arguments.window.date_from.isoformat(),
        date_through=arguments.window.date_through.isoformat(),
    )

    client = AzureDevOpsClient(
        organization=config.organization,
        access_token=config.access_token,
    )
    asyncio.run(_run(client, arguments))


if __name__ == "__main__":
    main()
