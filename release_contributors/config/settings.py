"""Configuration management for release-contributors."""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "release-contributors.json"


class DisplayOptions(BaseModel):
    """Presentation switches consumed by the renderer."""

    model_config = ConfigDict(frozen=True)

    include_email: bool = False
    include_avatar: bool = True


class Config(BaseSettings):
    """Configuration settings for release-contributors."""

    model_config = SettingsConfigDict(
        env_prefix="RELEASE_CONTRIBUTORS_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    github_api_url: str = "https://api.github.com"
    github_token: Optional[str] = None
    repo_path: str = "."
    include_email: bool = False
    include_avatar: bool = True
    sort_by: str = "commits"
    request_timeout: float = 10.0
    config_file: Optional[str] = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Explicit values, then the environment, then the JSON config file."""
        sources = [init_settings, env_settings]
        config_file = init_settings.init_kwargs.get('config_file')
        if config_file:
            sources.append(JsonConfigSettingsSource(settings_cls, json_file=config_file))
        return tuple(sources)

    @field_validator('github_api_url')
    @classmethod
    def normalize_github_api_url(cls, v):
        """Ensure the API URL has a protocol and no trailing slash."""
        if v and not v.startswith(('http://', 'https://')):
            v = f"https://{v}"
        return v.rstrip('/')

    @field_validator('github_token')
    @classmethod
    def blank_token_is_none(cls, v):
        if v is not None:
            v = v.strip() or None
        return v

    @field_validator('sort_by')
    @classmethod
    def normalize_sort_by(cls, v):
        return v.strip().lower()

    @field_validator('request_timeout')
    @classmethod
    def positive_timeout(cls, v):
        if v <= 0:
            raise ValueError("request_timeout must be positive")
        return v

    @property
    def display(self) -> DisplayOptions:
        """Display options handed to the renderer."""
        return DisplayOptions(
            include_email=self.include_email,
            include_avatar=self.include_avatar,
        )


def load_json_config(config_path: str) -> dict:
    """Load configuration from JSON file.

    Args:
        config_path: Path to JSON configuration file

    Returns:
        Configuration dictionary

    Raises:
        ValueError: If the file is missing, unreadable or not a JSON object
    """
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Error loading config file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a JSON object")
    return data


def find_config_file() -> Optional[str]:
    """Find configuration file in common locations.

    Returns:
        Path to config file or None if not found
    """
    search_paths = [
        DEFAULT_CONFIG_FILE,
        f".{DEFAULT_CONFIG_FILE}",
        f"~/.{DEFAULT_CONFIG_FILE}",
        "~/.config/release-contributors/config.json",
    ]

    for path_str in search_paths:
        path = Path(path_str).expanduser()
        if path.exists() and path.is_file():
            return str(path)

    return None


def get_config(config_file: Optional[str] = None, **overrides) -> Config:
    """Load configuration from a JSON file, the environment and overrides.

    Precedence, lowest first: config file, environment variables, keyword
    overrides. Overrides whose value is None are ignored.

    Args:
        config_file: Optional path to JSON config file
        **overrides: Values set explicitly by the caller (e.g. CLI flags)

    Returns:
        Configuration object
    """
    config_data = {}

    json_config_path = config_file or find_config_file()
    if json_config_path:
        try:
            load_json_config(json_config_path)
            config_data['config_file'] = json_config_path
        except ValueError as e:
            logger.warning(f"Ignoring config file: {e}")

    # Generic token variables are only a fallback for the prefixed one
    github_token = (
        os.getenv('RELEASE_CONTRIBUTORS_GITHUB_TOKEN')
        or os.getenv('GITHUB_TOKEN')
        or os.getenv('GH_TOKEN')
    )
    if github_token is not None:
        config_data['github_token'] = github_token

    config_data.update({k: v for k, v in overrides.items() if v is not None})

    return Config(**config_data)


def create_sample_config(path: str = DEFAULT_CONFIG_FILE) -> None:
    """Create a sample configuration file.

    Args:
        path: Path where to create the sample config file
    """
    sample_config = {
        "github_api_url": "https://api.github.com",
        "github_token": "your-github-token-here",
        "include_email": False,
        "include_avatar": True,
        "sort_by": "commits",
        "request_timeout": 10,
    }

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(sample_config, f, indent=2)
        f.write('\n')
