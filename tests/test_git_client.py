import os
import shutil
import subprocess

import pytest

from release_contributors.git import GitClient, parse_github_remote


@pytest.mark.parametrize("url,owner,name", [
    ("git@github.com:acme/rocket.git", "acme", "rocket"),
    ("https://github.com/acme/rocket.git", "acme", "rocket"),
    ("https://github.com/acme/rocket", "acme", "rocket"),
    ("https://github.com/acme/rocket/\n", "acme", "rocket"),
    ("ssh://git@github.com/acme/rocket.js.git", "acme", "rocket.js"),
])
def test_parse_github_remote(url, owner, name):
    repo = parse_github_remote(url)

    assert (repo.owner, repo.name) == (owner, name)


@pytest.mark.parametrize("url", [
    "https://gitlab.com/acme/rocket.git",
    "",
    "/srv/git/rocket.git",
])
def test_parse_non_github_remote(url):
    assert parse_github_remote(url) is None


def test_missing_directory_degrades_to_empty(tmp_path):
    client = GitClient(str(tmp_path / "does-not-exist"))

    assert client.list_tags() == []
    assert client.list_commits("v1.0.0") == []
    assert client.get_repo_info() is None


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def git(repo_dir, *args, author=None):
    env = dict(os.environ)
    env.update({
        "GIT_CONFIG_GLOBAL": os.devnull,
        "GIT_CONFIG_NOSYSTEM": "1",
        "GIT_COMMITTER_NAME": "Release Bot",
        "GIT_COMMITTER_EMAIL": "bot@example.com",
    })
    if author:
        env["GIT_AUTHOR_NAME"], env["GIT_AUTHOR_EMAIL"] = author
    subprocess.run(["git", *args], cwd=repo_dir, env=env, check=True, capture_output=True)


def commit_as(repo_dir, name, email, message):
    git(repo_dir, "commit", "--allow-empty", "-m", message, author=(name, email))


@pytest.fixture
def history(tmp_path):
    """v1.0.0 (Alice), then two Alice and one Bob commits, a merge, v1.1.0."""
    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    git(repo_dir, "init", "-q", "-b", "main")
    commit_as(repo_dir, "Alice", "alice@example.com", "initial")
    git(repo_dir, "tag", "v1.0.0")

    git(repo_dir, "checkout", "-q", "-b", "feature")
    commit_as(repo_dir, "Bob", "Bob@Example.com", "feature work")
    git(repo_dir, "checkout", "-q", "main")
    commit_as(repo_dir, "Alice", "alice@example.com", "fix one")
    commit_as(repo_dir, "alice", "ALICE@example.com", "fix two")
    git(repo_dir, "merge", "--no-ff", "-q", "-m", "merge feature", "feature",
        author=("Merger", "merger@example.com"))
    git(repo_dir, "tag", "v1.1.0")
    git(repo_dir, "tag", "v1.10.0")
    git(repo_dir, "remote", "add", "origin", "git@github.com:acme/rocket.git")
    return repo_dir


@requires_git
def test_list_tags_uses_version_order(history):
    assert GitClient(str(history)).list_tags() == ["v1.10.0", "v1.1.0", "v1.0.0"]


@requires_git
def test_list_commits_in_range_skips_merges(history):
    commits = GitClient(str(history)).list_commits("v1.1.0", "v1.0.0")

    emails = sorted(c['author_email'].lower() for c in commits)
    assert emails == ["alice@example.com", "alice@example.com", "bob@example.com"]
    assert all(len(c['id']) == 40 for c in commits)


@requires_git
def test_list_commits_initial_release(history):
    commits = GitClient(str(history)).list_commits("v1.0.0")

    assert [(c['author_name'], c['author_email']) for c in commits] == [("Alice", "alice@example.com")]


@requires_git
def test_list_commits_unknown_tag_is_empty(history):
    assert GitClient(str(history)).list_commits("v9.9.9", "v1.0.0") == []


@requires_git
def test_repo_info_from_origin(history):
    repo = GitClient(str(history)).get_repo_info()

    assert repo.slug == "acme/rocket"
