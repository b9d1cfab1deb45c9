"""Configuration loading and site path resolution."""

from postkit.config.settings import (
    FeedSettings,
    PathsSettings,
    PostkitConfig,
    find_postkit_config,
    load_postkit_config,
)
from postkit.config.site import SitePaths, load_site, resolve_site_paths

__all__ = [
    "FeedSettings",
    "PathsSettings",
    "PostkitConfig",
    "SitePaths",
    "find_postkit_config",
    "load_postkit_config",
    "load_site",
    "resolve_site_paths",
]
