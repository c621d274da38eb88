"""Local git access."""

from .client import GitClient, parse_github_remote

__all__ = ["GitClient", "parse_github_remote"]
