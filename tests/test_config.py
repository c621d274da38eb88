import json

import pytest
from pydantic import ValidationError

from release_contributors.config import (
    Config,
    create_sample_config,
    find_config_file,
    get_config,
    load_json_config,
)


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_defaults(clean_env):
    config = get_config()

    assert config.github_token is None
    assert config.github_api_url == "https://api.github.com"
    assert config.sort_by == "commits"
    assert config.display.include_avatar is True
    assert config.display.include_email is False
    assert config.config_file is None


def test_config_is_immutable(clean_env):
    config = get_config()

    with pytest.raises(ValidationError):
        config.github_token = "changed"


def test_file_then_env_then_overrides(clean_env, monkeypatch):
    path = write_json(clean_env / "custom.json", {
        "github_token": "from-file",
        "sort_by": "name",
        "include_email": True,
    })
    monkeypatch.setenv("GITHUB_TOKEN", "from-env")

    config = get_config(path, sort_by="commits", include_avatar=None)

    assert config.github_token == "from-env"
    assert config.sort_by == "commits"
    assert config.include_email is True
    assert config.include_avatar is True
    assert config.config_file == path


def test_environment_beats_config_file_for_every_field(clean_env, monkeypatch):
    path = write_json(clean_env / "custom.json", {
        "request_timeout": 30,
        "include_email": True,
        "include_avatar": False,
    })
    monkeypatch.setenv("RELEASE_CONTRIBUTORS_REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("RELEASE_CONTRIBUTORS_INCLUDE_EMAIL", "false")

    config = get_config(path)

    assert config.request_timeout == 5.0
    assert config.include_email is False
    assert config.include_avatar is False


def test_gh_token_fallback(clean_env, monkeypatch):
    monkeypatch.setenv("GH_TOKEN", "gh-token")

    assert get_config().github_token == "gh-token"


def test_prefixed_token_wins(clean_env, monkeypatch):
    monkeypatch.setenv("GH_TOKEN", "gh-token")
    monkeypatch.setenv("RELEASE_CONTRIBUTORS_GITHUB_TOKEN", "own-token")

    assert get_config().github_token == "own-token"


def test_discovers_config_in_working_directory(clean_env):
    write_json(clean_env / "release-contributors.json", {"sort_by": "Alphabetical"})

    assert find_config_file() == "release-contributors.json"
    assert get_config().sort_by == "alphabetical"


def test_broken_config_file_is_ignored(clean_env, caplog):
    path = clean_env / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    config = get_config(str(path))

    assert config.sort_by == "commits"
    assert "Ignoring config file" in caplog.text


def test_load_json_config_rejects_non_object(clean_env):
    path = write_json(clean_env / "list.json", [1, 2])

    with pytest.raises(ValueError):
        load_json_config(path)


def test_load_json_config_missing_file(clean_env):
    with pytest.raises(ValueError, match="Error loading config file"):
        load_json_config(str(clean_env / "missing.json"))


@pytest.mark.parametrize("value,expected", [
    ("https://api.github.com/", "https://api.github.com"),
    ("ghe.example.com/api/v3", "https://ghe.example.com/api/v3"),
    ("http://localhost:8080", "http://localhost:8080"),
])
def test_api_url_normalization(clean_env, value, expected):
    assert Config(github_api_url=value).github_api_url == expected


def test_blank_token_is_none(clean_env):
    assert Config(github_token="   ").github_token is None


def test_timeout_must_be_positive(clean_env):
    with pytest.raises(ValidationError):
        Config(request_timeout=0)


def test_sample_config_round_trips(clean_env):
    create_sample_config("sample.json")

    config = get_config("sample.json")

    assert config.github_token == "your-github-token-here"
    assert config.request_timeout == 10.0
