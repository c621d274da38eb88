"""
Pytest configuration and fixtures
"""
import pytest

from release_contributors.config import Config
from release_contributors.models import RepoIdentity


@pytest.fixture
def repo():
    return RepoIdentity(owner="acme", name="rocket")


@pytest.fixture
def config():
    return Config(github_token=None)


@pytest.fixture
def token_config():
    return Config(github_token="test-token", request_timeout=2)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate config discovery from the developer's machine."""
    for name in (
        "GITHUB_TOKEN",
        "GH_TOKEN",
        "RELEASE_CONTRIBUTORS_GITHUB_TOKEN",
        "RELEASE_CONTRIBUTORS_GITHUB_API_URL",
        "RELEASE_CONTRIBUTORS_REPO_PATH",
        "RELEASE_CONTRIBUTORS_SORT_BY",
        "RELEASE_CONTRIBUTORS_INCLUDE_EMAIL",
        "RELEASE_CONTRIBUTORS_INCLUDE_AVATAR",
        "RELEASE_CONTRIBUTORS_REQUEST_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    return tmp_path
