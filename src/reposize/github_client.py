import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from .config import DEFAULT_API_URL

logger = logging.getLogger(__name__)

BRANCHES_PER_PAGE = 100


class GitHubClient:
    """Minimal client for the GitHub REST endpoints this tool needs.

    Failed calls are not raised to the caller: a network error, a non-200
    response or a body that isn't JSON all come back as an empty payload,
    so missing fields simply show up as null in the report.
    """

    def __init__(self, api_url: str = DEFAULT_API_URL, token: Optional[str] = None):
        self.api_url = api_url.rstrip("/")
        self.headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "repo-size-reporter/0.1",
        }
        if token:
            self.headers["Authorization"] = f"Bearer {token}"

    def get_repository(self, owner: str, repo: str) -> Dict[str, Any]:
        """GET /repos/{owner}/{repo}"""
        data = self._get(f"/repos/{owner}/{repo}")
        return data if isinstance(data, dict) else {}

    def list_branches(self, owner: str, repo: str) -> List[Dict[str, Any]]:
        """List branches, first page only (up to 100)."""
        data = self._get(f"/repos/{owner}/{repo}/branches",
                         params={"per_page": BRANCHES_PER_PAGE})
        return data if isinstance(data, list) else []

    def get_tree(self, owner: str, repo: str, ref: str) -> List[Dict[str, Any]]:
        """Return the recursive tree entries for a branch or commit."""
        data = self._get(f"/repos/{owner}/{repo}/git/trees/{quote(ref, safe='')}",
                         params={"recursive": "1"})
        if not isinstance(data, dict):
            return []
        return data.get("tree") or []

    def get_rate_limit(self) -> Dict[str, Any]:
        """GET /rate_limit"""
        data = self._get("/rate_limit")
        return data if isinstance(data, dict) else {}

    def _get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.api_url}{endpoint}"
        logger.debug(f"GET {url} params={params}")
        try:
            response = requests.get(url, headers=self.headers, params=params)
        except requests.RequestException as e:
            logger.warning(f"Request to {url} failed: {e}")
            return {}

        if response.status_code != 200:
            logger.warning(f"GitHub API returned HTTP {response.status_code} for {url}")
            return {}

        try:
            return response.json()
        except ValueError:
            logger.warning(f"Response from {url} is not valid JSON")
            return {}
