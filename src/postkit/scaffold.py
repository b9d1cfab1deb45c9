"""Post scaffolding: a templated content file plus empty asset directories."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from postkit.config.site import SitePaths
from postkit.constants import AssetKind
from postkit.exceptions import ConflictError, ValidationError
from postkit.utils.paths import slugify

logger = logging.getLogger(__name__)

POST_TEMPLATE = "post.mdx.jinja2"
HERO_IMAGE_FILENAME = "hero.jpg"
_TEMPLATES_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True, slots=True)
class ScaffoldResult:
    """Paths produced by :func:`create_post`."""

    slug: str
    post_path: Path
    asset_dir: Path
    asset_subdirs: tuple[Path, ...]
    post_url: str
    hero_image_url: str


def format_pub_date(moment: datetime) -> str:
    """Format a timestamp as sortable ISO-8601 UTC with milliseconds, e.g. ``2024-05-01T09:30:00.000Z``."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _template_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(),
        keep_trailing_newline=True,
    )


def render_post(title: str, slug: str, paths: SitePaths, *, now: datetime | None = None) -> str:
    """Render the content file for a new post."""
    template = _template_environment().get_template(POST_TEMPLATE)
    return template.render(
        # A JSON string is a valid double-quoted YAML scalar, so quotes in titles survive.
        title_literal=json.dumps(title, ensure_ascii=False),
        pub_date=format_pub_date(now or datetime.now(UTC)),
        hero_image=paths.asset_url(slug, AssetKind.IMAGES, HERO_IMAGE_FILENAME),
    )


def create_post(title: str | None, paths: SitePaths, *, now: datetime | None = None) -> ScaffoldResult:
    """Create a draft post and its asset directories.

    Args:
        title: Human-readable post title.
        paths: Resolved site layout.
        now: Publish timestamp to record; defaults to the current UTC time.

    Returns:
        ScaffoldResult describing everything that was created.

    Raises:
        ValidationError: If the title is missing or yields an empty slug.
        ConflictError: If a content file for the slug already exists.

    """
    if title is None or not title.strip():
        msg = "Please provide a title for your blog post"
        raise ValidationError(msg)

    slug = slugify(title)
    if not slug:
        msg = f"Title {title!r} does not contain any letters or digits to build a slug from"
        raise ValidationError(msg)

    post_path = paths.post_path(slug)
    if post_path.exists():
        raise ConflictError(slug, post_path)

    paths.content_dir.mkdir(parents=True, exist_ok=True)

    asset_subdirs = paths.asset_subdirs(slug)
    for subdir in asset_subdirs:
        subdir.mkdir(parents=True, exist_ok=True)
        logger.debug("Ensured asset directory %s", subdir)

    content = render_post(title, slug, paths, now=now)
    try:
        with post_path.open("x", encoding="utf-8") as handle:
            handle.write(content)
    except FileExistsError as exc:
        raise ConflictError(slug, post_path) from exc

    logger.info("Created post %s at %s", slug, post_path)
    return ScaffoldResult(
        slug=slug,
        post_path=post_path,
        asset_dir=paths.asset_dir(slug),
        asset_subdirs=asset_subdirs,
        post_url=paths.post_url(slug),
        hero_image_url=paths.asset_url(slug, AssetKind.IMAGES, HERO_IMAGE_FILENAME),
    )


__all__ = ["ScaffoldResult", "create_post", "format_pub_date", "render_post"]
