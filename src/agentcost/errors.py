class AgentCostError(Exception):
    """
    base class for all errors raised by agentcost.
    """


class ConfigurationError(AgentCostError):
    """
    raised when a required environment variable is missing.
    """


class ArgumentError(AgentCostError):
    """
    raised when a command-line argument is missing or unusable.
    """


class UnknownCategoryError(AgentCostError):
    """
    raised when an image or OS category has no known classification
    or cost rate.
    """
