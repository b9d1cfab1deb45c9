"""Configuration for postkit.

Settings come from three places, highest priority first:

1. Environment variables (``POSTKIT_SECTION__KEY``, e.g. ``POSTKIT_PATHS__CONTENT_DIR``)
2. ``postkit.toml`` in the site root or any parent directory
3. Defaults matching the Astro blog layout (``src/content/blog`` + ``public/blog-assets``)
"""

from __future__ import annotations

import logging
import os
import tomllib
from copy import deepcopy
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from postkit.constants import DEFAULT_DESCRIPTION_LENGTH
from postkit.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "postkit.toml"
_ENV_PREFIX = "POSTKIT_"


class PathsSettings(BaseModel):
    """Site directory layout, relative to the site root."""

    content_dir: str = Field(
        default="src/content/blog",
        description="Directory holding one content file per post",
    )
    asset_root: str = Field(
        default="public/blog-assets",
        description="Directory holding one asset directory per post",
    )
    feed_path: str = Field(
        default="dist/rss.xml",
        description="Where `postkit feed` writes the RSS document",
    )
    content_extension: str = Field(
        default=".mdx",
        description="File extension of post content files",
    )
    post_url_prefix: str = Field(
        default="/blog",
        description="URL prefix of published posts",
    )
    asset_url_prefix: str = Field(
        default="/blog-assets",
        description="URL prefix under which the asset root is served",
    )

    @field_validator("content_dir", "asset_root", "feed_path", mode="after")
    @classmethod
    def validate_safe_path(cls, v: str) -> str:
        """Validate path is relative and does not contain traversal sequences."""
        if not v:
            msg = "Path must not be empty"
            raise ValueError(msg)
        path = Path(v)
        if path.is_absolute():
            msg = f"Path must be relative, not absolute: {v}"
            raise ValueError(msg)
        if any(part == ".." for part in path.parts):
            msg = f"Path must not contain traversal sequences ('..'): {v}"
            raise ValueError(msg)
        return v

    @field_validator("content_extension", mode="after")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2 or "/" in v:
            msg = f"Content extension must look like '.mdx', got: {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("post_url_prefix", "asset_url_prefix", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class FeedSettings(BaseModel):
    """RSS channel metadata."""

    title: str = "Blog"
    description: str = "Technical insights, tutorials, and thoughts"
    site_url: str | None = Field(
        default=None,
        description="Absolute site URL used to build item links (e.g. https://example.com)",
    )
    author: str | None = None
    language: str = "en-us"
    description_length: int = Field(default=DEFAULT_DESCRIPTION_LENGTH, gt=0)


class PostkitConfig(BaseSettings):
    """Root configuration for postkit.

    Supports environment variable overrides with the pattern
    POSTKIT_SECTION__KEY (e.g., POSTKIT_FEED__SITE_URL).
    """

    paths: PathsSettings = Field(default_factory=PathsSettings)
    feed: FeedSettings = Field(default_factory=FeedSettings)

    model_config = SettingsConfigDict(
        extra="forbid",
        validate_assignment=True,
        env_prefix=_ENV_PREFIX,
        env_nested_delimiter="__",
    )


def find_postkit_config(start_dir: Path) -> Path | None:
    """Search upward for postkit.toml.

    Args:
        start_dir: Starting directory for upward search

    Returns:
        Path to config file if found, else None

    """
    current = start_dir.expanduser().resolve()
    for candidate in (current, *current.parents):
        config_path = candidate / CONFIG_FILENAME
        if config_path.is_file():
            return config_path
    return None


def _collect_env_override_paths() -> set[tuple[str, ...]]:
    """Return the set of config paths defined via environment variables."""
    env_paths: set[tuple[str, ...]] = set()

    for key in os.environ:
        if not key.startswith(_ENV_PREFIX):
            continue
        parts = [part.lower() for part in key[len(_ENV_PREFIX) :].split("__") if part]
        if parts:
            env_paths.add(tuple(parts))

    return env_paths


def _merge_config(
    base: dict[str, Any],
    override: dict[str, Any],
    env_override_paths: set[tuple[str, ...]],
    current_path: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Merge override into base, skipping keys provided via env vars."""
    merged = deepcopy(base)

    for key, value in override.items():
        path = (*current_path, str(key).lower())
        if path in env_override_paths:
            continue

        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_config(merged[key], value, env_override_paths, path)
        else:
            merged[key] = value

    return merged


def _format_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{' -> '.join(str(part) for part in item['loc'])}: {item['msg']}" for item in error.errors()
    )


def load_postkit_config(config_path: Path | None = None) -> PostkitConfig:
    """Load configuration from a postkit.toml file merged over env and defaults.

    Args:
        config_path: Explicit TOML file. ``None`` means environment and defaults only.

    Returns:
        Validated PostkitConfig instance

    Raises:
        ConfigError: If the file cannot be parsed or contains invalid values

    """
    try:
        base_config = PostkitConfig()
    except ValidationError as e:
        msg = f"Invalid {_ENV_PREFIX}* environment override: {_format_validation_error(e)}"
        raise ConfigError(msg) from e

    if config_path is None:
        return base_config

    logger.debug("Loading config from %s", config_path)
    try:
        file_data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse {config_path}: {e}"
        raise ConfigError(msg) from e

    merged = _merge_config(base_config.model_dump(mode="json"), file_data, _collect_env_override_paths())
    try:
        return PostkitConfig.model_validate(merged)
    except ValidationError as e:
        msg = f"Configuration validation failed for {config_path}: {_format_validation_error(e)}"
        raise ConfigError(msg) from e
