"""Per-release and all-release contributor report generation."""

import logging
from typing import List, Optional, Sequence

from ..config import Config
from ..errors import NoTagsFoundError, TagNotFoundError
from ..github import GitHubClient
from ..models import ReleaseRange, RenderRequest, FORMAT_MARKDOWN
from .collector import collect_contributors
from .enricher import enrich_contributors
from .render import render
from .sorter import sort_contributors


RELEASE_SEPARATOR = "\n---\n\n"

logger = logging.getLogger(__name__)


def release_ranges(tags: Sequence[str]) -> List[ReleaseRange]:
    """Pair each tag with the next older one; the oldest starts history."""
    return [
        ReleaseRange(tag=tag, previous_tag=tags[i + 1] if i + 1 < len(tags) else None)
        for i, tag in enumerate(tags)
    ]


def resolve_release_range(tags: Sequence[str], tag: Optional[str] = None) -> ReleaseRange:
    """Find the range for one release.

    Args:
        tags: Tags newest first
        tag: Release to report on; the latest release when None

    Returns:
        Range from the previous tag (if any) to the requested one

    Raises:
        NoTagsFoundError: If there are no tags and no explicit tag was given
        TagNotFoundError: If the requested tag does not exist
    """
    if tag is None:
        if not tags:
            raise NoTagsFoundError()
        tag = tags[0]

    for rng in release_ranges(tags):
        if rng.tag == tag:
            return rng
    raise TagNotFoundError(tag)


def generate_for_release(git_client, config: Config, tag: str, previous_tag: Optional[str] = None,
                         fmt: str = FORMAT_MARKDOWN, detailed: bool = False,
                         github_client: Optional[GitHubClient] = None) -> Optional[str]:
    """Generate the contributors section for one release.

    Args:
        git_client: GitClient for the repository
        config: Run configuration
        tag: Release tag
        previous_tag: Previous release tag, None for the initial release
        fmt: 'markdown', 'json' or 'html'
        detailed: Detailed list instead of avatar badges
        github_client: Optional client used for enrichment

    Returns:
        Rendered document, or None when the release has no contributors
    """
    release_range = ReleaseRange(tag=tag, previous_tag=previous_tag)
    logger.info(f"Processing release: {release_range.describe()}")

    contributors = collect_contributors(git_client, release_range)
    if not contributors:
        logger.info("  No contributors found")
        return None

    logger.info(f"  Found {len(contributors)} contributor(s)")

    repo = git_client.get_repo_info() if config.github_token else None
    contributors = enrich_contributors(contributors, repo, config, github_client)
    contributors = sort_contributors(contributors, config.sort_by)

    request = RenderRequest(
        contributors=contributors,
        release_label=tag,
        format=fmt,
        detailed=detailed,
    )
    return render(request, config.display)


def generate_for_all_releases(git_client, config: Config, fmt: str = FORMAT_MARKDOWN,
                              detailed: bool = False,
                              github_client: Optional[GitHubClient] = None) -> str:
    """Generate contributor sections for every release, newest first.

    Releases without contributors are skipped.

    Returns:
        Sections joined by RELEASE_SEPARATOR, empty if none were produced

    Raises:
        NoTagsFoundError: If the repository has no tags
    """
    tags = git_client.list_tags()
    if not tags:
        raise NoTagsFoundError()

    logger.info(f"Found {len(tags)} release(s)")

    if config.github_token and github_client is None:
        github_client = GitHubClient(config)

    results = []
    for rng in release_ranges(tags):
        result = generate_for_release(
            git_client, config, rng.tag, rng.previous_tag, fmt, detailed, github_client
        )
        if result:
            results.append(result)

    return RELEASE_SEPARATOR.join(results)
