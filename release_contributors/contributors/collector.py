"""Reduce the commits of a release range to unique contributors."""

import logging
from typing import Dict, Iterable, List, Mapping

from ..models import Contributor, ReleaseRange


logger = logging.getLogger(__name__)


def contributors_from_commits(commits: Iterable[Mapping[str, str]]) -> List[Contributor]:
    """Group commits by lower-cased author email.

    The first commit seen for an email fixes the contributor's display name;
    later commits only add to the commit list.

    Args:
        commits: Commit data with 'id', 'author_name' and 'author_email'

    Returns:
        Contributors in order of first appearance
    """
    by_email: Dict[str, Contributor] = {}

    for commit in commits:
        key = commit['author_email'].lower()
        contributor = by_email.get(key)
        if contributor is None:
            contributor = Contributor(name=commit['author_name'], email=key)
            by_email[key] = contributor
        contributor.add_commit(commit['id'])

    return list(by_email.values())


def collect_contributors(git_client, release_range: ReleaseRange) -> List[Contributor]:
    """Collect the contributors of one release.

    Args:
        git_client: GitClient for the repository
        release_range: Tag range to scan

    Returns:
        Contributors for the range; empty if it has no commits or git failed
    """
    commits = git_client.list_commits(release_range.tag, release_range.previous_tag)
    logger.debug(f"{len(commits)} non-merge commit(s) in {release_range.git_range}")
    return contributors_from_commits(commits)
