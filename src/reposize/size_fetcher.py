import logging
import re
from typing import Optional, Tuple

from .config import Config
from .github_client import GitHubClient
from .models import RepositoryInfo
from .units import convert_size

logger = logging.getLogger(__name__)

REPO_URL_PATTERN = re.compile(r"^https?://[^/]+/([^/]+)/([^/]+)")


def parse_repo_url(url: str) -> Tuple[str, str]:
    """Extract (owner, repo) from an https://<host>/<owner>/<repo> URL.

    URLs that don't have that shape give back empty strings; the API calls
    made with them then fail and the report is filled with nulls.
    """
    match = REPO_URL_PATTERN.match(url.strip())
    if not match:
        return "", ""
    owner, name = match.groups()
    name = name.removesuffix(".git")
    return owner, name


class RepositorySizeFetcher:
    """Looks up the size and metadata of repositories through the API."""

    def __init__(self, config: Config, client: Optional[GitHubClient] = None):
        self.config = config
        self.client = client or GitHubClient(config.api_url, config.token)

    def fetch(self, url: str) -> RepositoryInfo:
        """Build the RepositoryInfo for a single repository URL.

        Args:
            url: Repository URL as given on the command line

        Returns:
            RepositoryInfo with the size converted to the configured unit

        Raises:
            InvalidUnitError: If the configured unit is not recognised
        """
        owner, repo = parse_repo_url(url)
        logger.debug(f"Parsed {url}: owner={owner} repo={repo}")

        if self.config.full_size:
            size_kb = self.compute_full_size(owner, repo)
        else:
            size_kb = self.client.get_repository(owner, repo).get("size") or 0

        metadata = self.client.get_repository(owner, repo)
        logger.debug(f"Computed size for {owner}/{repo}: {size_kb} KB")

        return RepositoryInfo(
            url=url,
            size_raw=size_kb,
            displayed_size=convert_size(size_kb, self.config.unit),
            unit=self.config.unit,
            language=metadata.get("language"),
            stars=metadata.get("stargazers_count"),
            forks=metadata.get("forks_count"),
            last_commit=metadata.get("updated_at"),
        )

    def compute_full_size(self, owner: str, repo: str) -> int:
        """Sum blob sizes over every branch's tree, in kilobytes.

        Each branch's byte total is floor-divided to KB before it is added,
        so the result is a lower bound of the true total.
        """
        total_kb = 0
        for branch in self.client.list_branches(owner, repo):
            name = branch.get("name")
            if not name:
                continue
            # the commit sha avoids putting the branch name in the URL path
            ref = (branch.get("commit") or {}).get("sha") or name
            branch_bytes = sum(
                entry.get("size") or 0
                for entry in self.client.get_tree(owner, repo, ref)
                if entry.get("type") == "blob"
            )
            branch_kb = branch_bytes // 1024
            logger.debug(f"Branch {name}: {branch_bytes} bytes ({branch_kb} KB)")
            total_kb += branch_kb
        return total_kb
