import os
from dataclasses import dataclass


@dataclass
class Config:
    organization: "str" = ""
    # personal access token, sent as-is in the Authorization header
    access_token: "str" = ""

    # positional arguments, validated later by agentcost.validation
    pool_id: "str | None" = None
    date_from: "str | None" = None
    date_through: "str | None" = None

    log_level: "str" = "info"

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            organization=os.environ.get("AZURE_DEVOPS_ORG", ""),
            access_token=os.environ.get("AZURE_DEVOPS_PAT", ""),
        )
