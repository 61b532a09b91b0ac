"""
Flow Runner Factory.
Returns the appropriate protocol execution engine adapter based on configuration.
"""

from typing import Optional
from .flows.base import BaseFlowRunner
from .flows.http_runner import HttpFlowRunner


class UnsupportedFlowRunnerError(Exception):
    """Raised when an unsupported flow runner is requested"""
    pass


def get_flow_runner(
    runner_name: Optional[str] = None,
    **kwargs
) -> BaseFlowRunner:
    """
    Factory function to get the configured flow runner.

    Args:
        runner_name: Runner name ("http"). If None, uses FLOW_RUNNER from config.
        **kwargs: Additional arguments passed to the runner constructor
                 (e.g., endpoint_url, token, timeout)

    Returns:
        Initialized flow runner instance

    Raises:
        UnsupportedFlowRunnerError: If runner_name is not supported
        ValueError: If the runner is missing required configuration

    Example:
        >>> runner = get_flow_runner("http", endpoint_url="https://registry.example/_dr/epptool")
    """
    from .config import FLOW_RUNNER

    runner = (runner_name or FLOW_RUNNER).lower().strip()

    if runner == "http":
        return HttpFlowRunner(**kwargs)

    raise UnsupportedFlowRunnerError(
        f"Unsupported flow runner: '{runner}'. "
        f"Supported runners: http"
    )
