import argparse

from agentcost.config import Config


def parse_args(argv: "list[str] | None" = None) -> "Config":
    parser = argparse.ArgumentParser(
        prog="agentcost",
        description="Estimate monthly Azure DevOps hosted agent cost by OS category",
        epilog=(
            "Requires AZURE_DEVOPS_ORG and AZURE_DEVOPS_PAT environment variables. "
            "Example: agentcost 1 2023-01-01 2023-03-31"
        ),
    )
    # positionals are optional here so missing values surface as
    # ArgumentError from the validator instead of an argparse exit
    parser.add_argument(
        "pool_id",
        nargs="?",
        help="Agent cloud (pool) identifier",
    )
    parser.add_argument(
        "date_from",
        nargs="?",
        help="Start of the reporting window, e.g. 2023-01-01",
    )
    parser.add_argument(
        "date_through",
        nargs="?",
        help="End of the reporting window, e.g. 2023-03-31",
    )
    parser.add_argument(
        "--log.level",
        dest="log_level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Log level (default: info)",
    )

    args = parser.parse_args(argv)
    config = Config.from_env()
    config.pool_id = args.pool_id
    config.date_from = args.date_from
    config.date_through = args.date_through
    config.log_level = args.log_level
    return config
