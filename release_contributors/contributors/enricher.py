"""Best-effort enrichment of contributors with GitHub profile data."""

import logging
from typing import List, Optional

import requests

from ..config import Config
from ..github import GitHubClient
from ..models import Contributor, EnrichmentOutcome, Profile, RepoIdentity


logger = logging.getLogger(__name__)


def lookup_profile(client: GitHubClient, repo: RepoIdentity,
                   contributor: Contributor) -> EnrichmentOutcome:
    """Resolve the GitHub profile behind a contributor's first commit.

    Never raises: any failure is reported through the outcome's ``error``.
    """
    if not contributor.commits:
        return EnrichmentOutcome(contributor=contributor, error="no commits recorded")

    sha = contributor.commits[0]
    try:
        payload = client.get_commit(repo, sha)
        profile = Profile.from_commit_payload(payload)
    except requests.Timeout:
        return EnrichmentOutcome(
            contributor=contributor,
            error=f"timed out after {client.config.request_timeout}s",
        )
    except (requests.RequestException, ValueError) as e:
        return EnrichmentOutcome(contributor=contributor, error=str(e))

    return EnrichmentOutcome(contributor=contributor, profile=profile)


def enrich_contributors(contributors: List[Contributor], repo: Optional[RepoIdentity],
                        config: Config, client: Optional[GitHubClient] = None) -> List[Contributor]:
    """Attach GitHub usernames, avatars and profile links where possible.

    Does nothing without a token or a repository identity. Lookups run one
    at a time in input order; a failed lookup leaves that contributor as it
    was and does not affect the others.

    Args:
        contributors: Contributors to enrich in place
        repo: GitHub repository the commits belong to
        config: Configuration with token, API URL and timeout
        client: Optional client to use instead of building one from config

    Returns:
        The same contributors, in the same order
    """
    if not config.github_token or repo is None:
        logger.debug("Skipping GitHub enrichment (no token or no GitHub remote)")
        return contributors

    client = client or GitHubClient(config)

    resolved = 0
    for contributor in contributors:
        outcome = lookup_profile(client, repo, contributor)
        if outcome.ok:
            contributor.apply_profile(outcome.profile)
            if not outcome.profile.is_empty:
                resolved += 1
        else:
            logger.warning(f"Error fetching GitHub data for {contributor.name}: {outcome.error}")

    logger.info(f"  Enriched {resolved}/{len(contributors)} contributor(s) from {repo.slug}")
    return contributors
