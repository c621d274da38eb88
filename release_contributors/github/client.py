"""GitHub REST API client using requests."""

import logging
from typing import Any, Dict, Optional

import requests

from ..config import Config
from ..models import RepoIdentity


USER_AGENT = "release-contributors"


class GitHubClient:
    """Thin wrapper over the GitHub REST API."""

    def __init__(self, config: Config, logger: Optional[logging.Logger] = None,
                 session: Optional[requests.Session] = None):
        """Initialize GitHub client.

        Args:
            config: Configuration object containing GitHub settings
            logger: Logger instance
            session: Optional pre-built session (mostly for tests)
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": USER_AGENT,
        })
        if config.github_token:
            self.session.headers["Authorization"] = f"Bearer {config.github_token}"

    def get_commit(self, repo: RepoIdentity, sha: str) -> Dict[str, Any]:
        """Get a commit with its linked GitHub author.

        Args:
            repo: Repository owning the commit
            sha: Commit id

        Returns:
            Decoded JSON payload

        Raises:
            requests.RequestException: On network errors, timeouts and
                non-success responses
            ValueError: If the body is not a JSON object
        """
        url = f"{self.config.github_api_url}/repos/{repo.owner}/{repo.name}/commits/{sha}"
        self.logger.debug(f"GET {url}")

        response = self.session.get(url, timeout=self.config.request_timeout)
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected response for commit {sha}")
        return data
