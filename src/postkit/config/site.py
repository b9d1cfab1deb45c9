"""Resolved filesystem layout of a blog site."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from postkit.config.settings import PostkitConfig, find_postkit_config, load_postkit_config
from postkit.constants import ASSET_KINDS, AssetKind
from postkit.utils.paths import safe_path_join

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SitePaths:
    """Absolute directories of a site plus the URL conventions tied to them."""

    site_root: Path
    content_dir: Path
    asset_root: Path
    feed_path: Path
    content_extension: str
    post_url_prefix: str
    asset_url_prefix: str

    def post_path(self, slug: str) -> Path:
        """Content file for ``slug``; raises PathTraversalError for unsafe slugs."""
        return safe_path_join(self.content_dir, f"{slug}{self.content_extension}")

    def asset_dir(self, slug: str) -> Path:
        """Asset directory for ``slug``; raises PathTraversalError for unsafe slugs."""
        return safe_path_join(self.asset_root, slug)

    def asset_subdir(self, slug: str, kind: AssetKind) -> Path:
        return self.asset_dir(slug) / kind.value

    def asset_subdirs(self, slug: str) -> tuple[Path, ...]:
        asset_dir = self.asset_dir(slug)
        return tuple(asset_dir / kind.value for kind in ASSET_KINDS)

    def post_url(self, slug: str) -> str:
        return f"{self.post_url_prefix}/{slug}/"

    def asset_url(self, slug: str, kind: AssetKind, filename: str) -> str:
        return f"{self.asset_url_prefix}/{slug}/{kind.value}/{filename}"

    def relative(self, path: Path) -> str:
        """Render ``path`` relative to the site root when possible."""
        try:
            return path.resolve().relative_to(self.site_root).as_posix()
        except ValueError:
            return str(path)


def resolve_site_paths(site_root: Path, config: PostkitConfig) -> SitePaths:
    """Build absolute site paths from a site root and configuration."""
    root = site_root.expanduser().resolve()
    paths = config.paths
    return SitePaths(
        site_root=root,
        content_dir=root / paths.content_dir,
        asset_root=root / paths.asset_root,
        feed_path=root / paths.feed_path,
        content_extension=paths.content_extension,
        post_url_prefix=paths.post_url_prefix,
        asset_url_prefix=paths.asset_url_prefix,
    )


def load_site(site_root: Path | None = None) -> tuple[PostkitConfig, SitePaths]:
    """Locate postkit.toml from ``site_root`` (default: cwd) and resolve the site.

    When a config file is found in a parent directory, that directory becomes
    the site root.
    """
    start = (site_root or Path.cwd()).expanduser().resolve()
    config_path = find_postkit_config(start)
    config = load_postkit_config(config_path)
    root = config_path.parent if config_path is not None else start
    logger.debug("Using site root %s", root)
    return config, resolve_site_paths(root, config)
