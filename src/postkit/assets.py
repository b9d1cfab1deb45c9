"""Asset management over the ``<content_dir>/<slug>.mdx`` + ``<asset_root>/<slug>/`` convention.

Every operation reads the filesystem fresh and returns plain report objects;
rendering them for a terminal is the CLI's job.
"""

from __future__ import annotations

import logging
import shlex
import shutil
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from postkit.constants import ASSET_KINDS, BYTES_PER_KB, BYTES_PER_MB, AssetKind
from postkit.exceptions import NotFoundError, ParseError, UsageError
from postkit.utils.frontmatter_utils import parse_post_file

if TYPE_CHECKING:
    from pathlib import Path

    from postkit.config.site import SitePaths

logger = logging.getLogger(__name__)

LIST_USAGE = "blog-assets list <post-slug>"
DELETE_USAGE = "blog-assets delete <post-slug>"

_SPECIAL_NAMES = frozenset({".", ".."})


@dataclass(frozen=True, slots=True)
class AssetFile:
    name: str
    size_bytes: int

    @property
    def size_kb(self) -> float:
        return self.size_bytes / BYTES_PER_KB


@dataclass(frozen=True, slots=True)
class AssetGroup:
    """Files of one fixed subdirectory (``images``, ``videos`` or ``data``)."""

    kind: AssetKind
    files: tuple[AssetFile, ...]

    @property
    def is_empty(self) -> bool:
        return not self.files


@dataclass(frozen=True, slots=True)
class AssetListing:
    slug: str
    asset_dir: Path
    exists: bool
    groups: tuple[AssetGroup, ...] = ()


@dataclass(frozen=True, slots=True)
class PostSummary:
    """One row of the ``posts`` report; ``error`` is set when metadata could not be read."""

    slug: str
    title: str | None = None
    draft: bool = False
    category: str | None = None
    asset_count: int = 0
    error: str | None = None


@dataclass(frozen=True, slots=True)
class OrphanReport:
    slug: str
    asset_dir: Path
    files: dict[AssetKind, tuple[str, ...]] = field(default_factory=dict)
    removal_command: str = ""

    @property
    def file_count(self) -> int:
        return sum(len(names) for names in self.files.values())

    @property
    def is_empty(self) -> bool:
        return self.file_count == 0


@dataclass(frozen=True, slots=True)
class PostUsage:
    slug: str
    asset_count: int
    size_bytes: int
    has_asset_dir: bool

    @property
    def size_mb(self) -> float:
        return self.size_bytes / BYTES_PER_MB


@dataclass(frozen=True, slots=True)
class AuditReport:
    posts: tuple[PostUsage, ...]

    @property
    def post_count(self) -> int:
        return len(self.posts)

    @property
    def total_assets(self) -> int:
        return sum(usage.asset_count for usage in self.posts)

    @property
    def total_size_bytes(self) -> int:
        return sum(usage.size_bytes for usage in self.posts)

    @property
    def total_size_mb(self) -> float:
        return self.total_size_bytes / BYTES_PER_MB

    @property
    def average_assets_per_post(self) -> float:
        if not self.posts:
            return 0.0
        return self.total_assets / self.post_count


@dataclass(frozen=True, slots=True)
class DeleteResult:
    slug: str
    post_path: Path
    asset_dir: Path
    assets_removed: bool


def _require_slug(slug: str | None, usage: str) -> str:
    if slug is None or not slug.strip():
        msg = "Please provide a post slug"
        raise UsageError(msg, usage=usage)
    return slug.strip()


def _list_files(directory: Path) -> tuple[AssetFile, ...]:
    """Regular files directly inside ``directory``, sorted by name."""
    files = [
        AssetFile(name=entry.name, size_bytes=entry.stat().st_size)
        for entry in directory.iterdir()
        if entry.is_file()
    ]
    return tuple(sorted(files, key=lambda asset: asset.name))


class AssetManager:
    """Inspects and maintains post content files and their asset directories."""

    def __init__(self, paths: SitePaths) -> None:
        self.paths = paths

    # -- enumerations -------------------------------------------------------

    def enumerate_posts(self) -> list[str]:
        """Slugs of all content files, sorted."""
        content_dir = self.paths.content_dir
        if not content_dir.is_dir():
            logger.debug("Content directory %s does not exist", content_dir)
            return []

        extension = self.paths.content_extension
        return sorted(
            entry.name[: -len(extension)]
            for entry in content_dir.iterdir()
            if entry.is_file() and entry.name.endswith(extension) and len(entry.name) > len(extension)
        )

    def enumerate_asset_directories(self) -> list[str]:
        """Names of all asset directories, sorted; empty when the asset root is missing."""
        asset_root = self.paths.asset_root
        if not asset_root.is_dir():
            return []
        return sorted(entry.name for entry in asset_root.iterdir() if entry.is_dir())

    def _stored_asset_dir(self, name: str) -> Path | None:
        """Asset directory for a name read from disk, or None for ``.`` and ``..``.

        Enumerated names are single directory entries, so they are joined
        without resolving; a symlinked asset directory stays inside the report.
        """
        if name in _SPECIAL_NAMES:
            return None
        return self.paths.asset_root / name

    def post_file(self, slug: str) -> Path:
        """Content file of an enumerated post, joined without resolving."""
        return self.paths.content_dir / f"{slug}{self.paths.content_extension}"

    def _asset_groups(self, asset_dir: Path | None) -> tuple[AssetGroup, ...]:
        if asset_dir is None:
            return ()
        return tuple(
            AssetGroup(kind=kind, files=_list_files(asset_dir / kind.value))
            for kind in ASSET_KINDS
            if (asset_dir / kind.value).is_dir()
        )

    def count_assets(self, slug: str) -> int:
        """Number of asset files of a post enumerated from the content directory."""
        return sum(len(group.files) for group in self._asset_groups(self._stored_asset_dir(slug)))

    # -- operations ---------------------------------------------------------

    def list_assets(self, slug: str | None) -> AssetListing:
        """Files of one post's asset directory, grouped by subdirectory."""
        slug = _require_slug(slug, LIST_USAGE)
        asset_dir = self.paths.asset_dir(slug)
        if not asset_dir.is_dir():
            return AssetListing(slug=slug, asset_dir=asset_dir, exists=False)
        return AssetListing(slug=slug, asset_dir=asset_dir, exists=True, groups=self._asset_groups(asset_dir))

    def list_posts(self) -> list[PostSummary]:
        """Metadata and asset counts of every post.

        A post whose content file cannot be read or parsed is reported with
        ``error`` set; the remaining posts are still processed.
        """
        summaries: list[PostSummary] = []
        for slug in self.enumerate_posts():
            try:
                parsed = parse_post_file(self.post_file(slug))
            except (OSError, UnicodeDecodeError, ParseError) as exc:
                logger.warning("Could not read metadata for %s: %s", slug, exc)
                summaries.append(PostSummary(slug=slug, error=str(exc)))
                continue

            header = parsed.header
            summaries.append(
                PostSummary(
                    slug=slug,
                    title=header.title,
                    draft=header.draft,
                    category=header.category,
                    asset_count=self.count_assets(slug),
                )
            )
        return summaries

    def find_orphans(self) -> list[OrphanReport]:
        """Asset directories whose slug has no content file. Never deletes anything."""
        posts = set(self.enumerate_posts())
        orphans = [name for name in self.enumerate_asset_directories() if name not in posts]

        reports: list[OrphanReport] = []
        for slug in orphans:
            asset_dir = self.paths.asset_root / slug
            files = {
                group.kind: tuple(asset.name for asset in group.files)
                for group in self._asset_groups(asset_dir)
                if not group.is_empty
            }
            removal_target = f"{self.paths.relative(self.paths.asset_root)}/{slug}"
            reports.append(
                OrphanReport(
                    slug=slug,
                    asset_dir=asset_dir,
                    files=files,
                    removal_command=f"rm -rf {shlex.quote(removal_target)}",
                )
            )
        return reports

    def audit(self) -> AuditReport:
        """Per-post asset counts and sizes plus totals."""
        usages: list[PostUsage] = []
        for slug in self.enumerate_posts():
            asset_dir = self._stored_asset_dir(slug)
            if asset_dir is None or not asset_dir.is_dir():
                usages.append(PostUsage(slug=slug, asset_count=0, size_bytes=0, has_asset_dir=False))
                continue

            groups = self._asset_groups(asset_dir)
            usages.append(
                PostUsage(
                    slug=slug,
                    asset_count=sum(len(group.files) for group in groups),
                    size_bytes=sum(asset.size_bytes for group in groups for asset in group.files),
                    has_asset_dir=True,
                )
            )
        return AuditReport(posts=tuple(usages))

    def delete_post(self, slug: str | None) -> DeleteResult:
        """Remove a post's content file and, if present, its asset directory.

        Raises:
            UsageError: If no slug is given.
            NotFoundError: If the post has no content file.

        """
        slug = _require_slug(slug, DELETE_USAGE)
        post_path = self.paths.post_path(slug)
        asset_dir = self.paths.asset_dir(slug)

        if not post_path.is_file():
            raise NotFoundError(slug, post_path)

        post_path.unlink()
        logger.info("Deleted %s", post_path)

        assets_removed = False
        if asset_dir.is_dir():
            shutil.rmtree(asset_dir)
            assets_removed = True
            logger.info("Deleted %s", asset_dir)
        else:
            logger.debug("No asset directory to delete for %s", slug)

        return DeleteResult(slug=slug, post_path=post_path, asset_dir=asset_dir, assets_removed=assets_removed)
