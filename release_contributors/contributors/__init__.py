"""Contributor collection, enrichment, ordering and rendering."""

from .collector import collect_contributors, contributors_from_commits
from .enricher import enrich_contributors, lookup_profile
from .sorter import sort_contributors
from .render import render
from .pipeline import (
    RELEASE_SEPARATOR,
    generate_for_release,
    generate_for_all_releases,
    release_ranges,
    resolve_release_range,
)

__all__ = [
    "collect_contributors",
    "contributors_from_commits",
    "enrich_contributors",
    "lookup_profile",
    "sort_contributors",
    "render",
    "RELEASE_SEPARATOR",
    "generate_for_release",
    "generate_for_all_releases",
    "release_ranges",
    "resolve_release_range",
]
