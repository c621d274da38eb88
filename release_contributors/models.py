"""Data types flowing through the contributors pipeline."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


FORMAT_MARKDOWN = "markdown"
FORMAT_JSON = "json"
FORMAT_HTML = "html"

FORMATS = (FORMAT_MARKDOWN, FORMAT_JSON, FORMAT_HTML)


class Contributor(BaseModel):
    """A unique commit author within one release range.

    ``email`` is the lower-cased dedup key. ``commits`` keeps the order in
    which commits were met while scanning history, newest first. The profile
    fields stay None until enrichment resolves them.
    """

    name: str
    email: str
    commits: List[str] = Field(default_factory=list)
    commit_count: int = 0
    username: Optional[str] = None
    avatar_url: Optional[str] = None
    profile_url: Optional[str] = None

    def add_commit(self, sha: str) -> None:
        self.commits.append(sha)
        self.commit_count += 1

    def apply_profile(self, profile: "Profile") -> None:
        """Attach the profile fields that were resolved, leave the rest alone."""
        if profile.username is not None:
            self.username = profile.username
        if profile.avatar_url is not None:
            self.avatar_url = profile.avatar_url
        if profile.profile_url is not None:
            self.profile_url = profile.profile_url


class ReleaseRange(BaseModel):
    """Commits reachable from ``tag`` but not from ``previous_tag``.

    A missing ``previous_tag`` marks the initial release, whose range is all
    history up to ``tag``.
    """

    model_config = ConfigDict(frozen=True)

    tag: str
    previous_tag: Optional[str] = None

    @property
    def git_range(self) -> str:
        if self.previous_tag:
            return f"{self.previous_tag}..{self.tag}"
        return self.tag

    def describe(self) -> str:
        if self.previous_tag:
            return f"{self.tag} (from {self.previous_tag})"
        return f"{self.tag} (initial release)"


class RepoIdentity(BaseModel):
    model_config = ConfigDict(frozen=True)

    owner: str
    name: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"


class Profile(BaseModel):
    """Public profile data for the author of a commit."""

    model_config = ConfigDict(frozen=True)

    username: Optional[str] = None
    avatar_url: Optional[str] = None
    profile_url: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.username is None and self.avatar_url is None and self.profile_url is None

    @classmethod
    def from_commit_payload(cls, payload: Dict[str, Any]) -> "Profile":
        """Build a profile from a GitHub ``GET /commits/{sha}`` response.

        The ``author`` object is null when the commit email is not linked to
        an account; empty strings are treated as missing.
        """
        author = payload.get('author') or {}
        if not isinstance(author, dict):
            author = {}
        return cls(
            username=author.get('login') or None,
            avatar_url=author.get('avatar_url') or None,
            profile_url=author.get('html_url') or None,
        )


class EnrichmentOutcome(BaseModel):
    """Result of one profile lookup.

    Either ``profile`` is set (the lookup succeeded) or ``error`` describes
    why the contributor is passed through unenriched.
    """

    model_config = ConfigDict(frozen=True)

    contributor: Contributor
    profile: Optional[Profile] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.profile is not None


class RenderRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    contributors: List[Contributor]
    release_label: str
    format: str = FORMAT_MARKDOWN
    detailed: bool = False
