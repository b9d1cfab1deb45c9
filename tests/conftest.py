from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from postkit.config import PostkitConfig, SitePaths, resolve_site_paths
from postkit.constants import AssetKind


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer POSTKIT_* overrides out of the tests."""
    for key in list(os.environ):
        if key.startswith("POSTKIT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def site(tmp_path: Path) -> SitePaths:
    """An empty site using the default layout."""
    return resolve_site_paths(tmp_path, PostkitConfig())


def render_post_file(
    title: str,
    *,
    pub_date: str = "2024-01-15T10:00:00.000Z",
    draft: bool = False,
    category: str | None = None,
    body: str = "An opening paragraph.\n\n## Section\n\nMore text.",
) -> str:
    lines = ["---", f'title: "{title}"', f"pubDate: {pub_date}", f"draft: {'true' if draft else 'false'}"]
    if category is not None:
        lines.append(f'category: "{category}"')
    lines.append("---")
    return "\n".join(lines) + "\n\n" + body + "\n"


@pytest.fixture
def make_post(site: SitePaths) -> Callable[..., Path]:
    """Write a content file for ``slug``; keyword arguments go to ``render_post_file``."""

    def _make(slug: str, title: str | None = None, *, raw: str | None = None, **kwargs) -> Path:
        site.content_dir.mkdir(parents=True, exist_ok=True)
        path = site.content_dir / f"{slug}{site.content_extension}"
        content = raw if raw is not None else render_post_file(title or slug.replace("-", " ").title(), **kwargs)
        path.write_text(content, encoding="utf-8")
        return path

    return _make


@pytest.fixture
def make_asset(site: SitePaths) -> Callable[..., Path]:
    """Create an asset file of ``size`` bytes under ``<asset_root>/<slug>/<kind>/``."""

    def _make(slug: str, kind: AssetKind, name: str, size: int = 0) -> Path:
        directory = site.asset_root / slug / kind.value
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_bytes(b"\0" * size)
        return path

    return _make


@pytest.fixture
def make_asset_dirs(site: SitePaths) -> Callable[[str], Path]:
    """Create the three empty asset subdirectories for ``slug``."""

    def _make(slug: str) -> Path:
        for kind in AssetKind:
            (site.asset_root / slug / kind.value).mkdir(parents=True, exist_ok=True)
        return site.asset_root / slug

    return _make
