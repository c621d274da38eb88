"""Read-only access to local git history through the git executable."""

import logging
import re
import subprocess
from typing import List, Optional, Dict

from ..models import RepoIdentity


# ASCII unit separator; cannot appear in author names or emails
FIELD_SEPARATOR = "\x1f"
LOG_FORMAT = "%an%x1f%ae%x1f%H"

GITHUB_REMOTE_RE = re.compile(r'github\.com[:/]([^/]+)/([^/]+?)(?:\.git)?/?$')


def parse_github_remote(remote_url: str) -> Optional[RepoIdentity]:
    """Extract owner and repository name from a GitHub remote URL.

    Handles both ``git@github.com:owner/repo.git`` and
    ``https://github.com/owner/repo`` forms.
    """
    match = GITHUB_REMOTE_RE.search(remote_url.strip())
    if not match:
        return None
    return RepoIdentity(owner=match.group(1), name=match.group(2))


class GitClient:
    """Wrapper around the git command line for one repository."""

    def __init__(self, repo_path: str = ".", logger: Optional[logging.Logger] = None):
        """Initialize git client.

        Args:
            repo_path: Working tree to run git in
            logger: Logger instance
        """
        self.repo_path = repo_path
        self.logger = logger or logging.getLogger(__name__)

    def _run(self, *args: str) -> str:
        """Run a git command and return its stdout without trailing newlines.

        Failures are logged and reported as empty output.
        """
        command = ["git", *args]
        try:
            result = subprocess.run(
                command,
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=True,
            )
        except subprocess.CalledProcessError as e:
            self.logger.error(f"Error executing git command: {' '.join(args)}")
            if e.stderr:
                self.logger.error(e.stderr.strip())
            return ""
        except OSError as e:
            self.logger.error(f"Error executing git command: {' '.join(args)}: {e}")
            return ""
        return result.stdout.rstrip("\n")

    def list_tags(self) -> List[str]:
        """List tags, newest version first.

        Returns:
            Tag names sorted by version ordering, empty if there are none
        """
        output = self._run("tag", "--sort=-version:refname")
        return [line for line in output.split("\n") if line]

    def list_commits(self, to_ref: str, from_ref: Optional[str] = None) -> List[Dict[str, str]]:
        """List non-merge commits reachable from ``to_ref`` but not ``from_ref``.

        Args:
            to_ref: Upper bound (tag, branch or commit)
            from_ref: Optional lower bound; all history up to ``to_ref`` if None

        Returns:
            List of commit data in log order (newest first)
        """
        rev_range = f"{from_ref}..{to_ref}" if from_ref else to_ref
        output = self._run("log", rev_range, "--no-merges", f"--format={LOG_FORMAT}", "--")

        commits = []
        for line in output.split("\n"):
            if not line:
                continue
            parts = line.split(FIELD_SEPARATOR)
            if len(parts) != 3:
                self.logger.debug(f"Skipping malformed log line: {line!r}")
                continue
            author_name, author_email, sha = parts
            commits.append({
                'id': sha,
                'author_name': author_name,
                'author_email': author_email,
            })

        return commits

    def get_remote_url(self, remote: str = "origin") -> str:
        return self._run("remote", "get-url", remote)

    def get_repo_info(self, remote: str = "origin") -> Optional[RepoIdentity]:
        """Resolve the GitHub repository behind a remote.

        Returns:
            Repository identity or None if the remote is missing or not on GitHub
        """
        remote_url = self.get_remote_url(remote)
        if not remote_url:
            return None

        repo = parse_github_remote(remote_url)
        if repo is None:
            self.logger.debug(f"Remote {remote} is not a GitHub repository: {remote_url}")
        return repo
