"""Contributor ordering."""

import unicodedata
from typing import List, Sequence, Tuple

from ..models import Contributor


SORT_BY_COMMITS = "commits"
SORT_BY_NAME = "name"
SORT_BY_ALPHABETICAL = "alphabetical"

SORT_KEYS = (SORT_BY_COMMITS, SORT_BY_NAME, SORT_BY_ALPHABETICAL)


def collation_key(name: str) -> Tuple[str, str]:
    """Approximate locale collation: accents and case only break ties.

    Ties fall back to the name with its case swapped, so lowercase sorts
    ahead of uppercase as it does under ICU root collation.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name.swapcase()


def sort_contributors(contributors: Sequence[Contributor], sort_by: str = SORT_BY_COMMITS) -> List[Contributor]:
    """Order contributors for display.

    Args:
        contributors: Contributors to order
        sort_by: 'commits' (most first), 'name' or 'alphabetical'; any other
            value keeps the input order

    Returns:
        A new list; the input is not modified
    """
    key = (sort_by or "").lower()

    if key == SORT_BY_COMMITS:
        return sorted(contributors, key=lambda c: c.commit_count, reverse=True)
    if key in (SORT_BY_NAME, SORT_BY_ALPHABETICAL):
        return sorted(contributors, key=lambda c: collation_key(c.name))
    return list(contributors)
