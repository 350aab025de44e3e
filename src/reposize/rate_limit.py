import logging
from datetime import datetime
from typing import Any, Dict

from .github_client import GitHubClient

logger = logging.getLogger(__name__)


def format_rate_limit(data: Dict[str, Any]) -> str:
    """Describe the remaining quota from a /rate_limit payload."""
    rate = data.get("rate") or {}
    remaining = rate.get("remaining")
    reset = rate.get("reset")

    reset_str = "null"
    if reset is not None:
        try:
            reset_str = datetime.fromtimestamp(int(reset)).strftime("%Y-%m-%d %H:%M:%S")
        except (TypeError, ValueError, OverflowError, OSError):
            reset_str = str(reset)

    remaining_str = "null" if remaining is None else str(remaining)
    return f"API rate limit: {remaining_str} requests remaining, resets at {reset_str}"


def report_rate_limit(client: GitHubClient) -> str:
    """Query the rate-limit endpoint and return the formatted report."""
    report = format_rate_limit(client.get_rate_limit())
    logger.debug(report)
    return report
