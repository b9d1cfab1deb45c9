"""RSS feed of published posts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from email.utils import format_datetime
from typing import TYPE_CHECKING
from urllib.parse import urljoin
from xml.etree.ElementTree import Element, SubElement, tostring

from postkit.description import extract_description
from postkit.exceptions import ParseError
from postkit.utils.frontmatter_utils import parse_post_file

if TYPE_CHECKING:
    from datetime import datetime
    from pathlib import Path

    from postkit.assets import AssetManager
    from postkit.config.settings import FeedSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FeedItem:
    slug: str
    title: str
    pub_date: datetime
    description: str
    link: str


def _absolute(url: str, site_url: str | None) -> str:
    if not site_url:
        return url
    return urljoin(site_url.rstrip("/") + "/", url.lstrip("/"))


def build_feed_items(manager: AssetManager, settings: FeedSettings) -> list[FeedItem]:
    """Project every published post into a feed item, newest first.

    Drafts are left out. Posts whose header block cannot be parsed are skipped
    with a warning so one broken file does not take the feed down.
    """
    paths = manager.paths
    items: list[FeedItem] = []
    for slug in manager.enumerate_posts():
        post_path = manager.post_file(slug)
        try:
            parsed = parse_post_file(post_path)
        except (UnicodeDecodeError, ParseError) as exc:
            logger.warning("Skipping %s in feed: %s", slug, exc)
            continue

        if parsed.header.draft:
            continue

        items.append(
            FeedItem(
                slug=slug,
                title=parsed.header.title,
                pub_date=parsed.header.pub_date,
                description=extract_description(parsed.body, settings.description_length),
                link=_absolute(paths.post_url(slug), settings.site_url),
            )
        )

    items.sort(key=lambda item: item.pub_date, reverse=True)
    return items


def render_rss(items: list[FeedItem], settings: FeedSettings) -> str:
    """Serialize feed items to an RSS 2.0 document."""
    root = Element("rss", attrib={"version": "2.0"})
    channel = SubElement(root, "channel")
    SubElement(channel, "title").text = settings.title
    SubElement(channel, "link").text = settings.site_url or "/"
    SubElement(channel, "description").text = settings.description
    SubElement(channel, "language").text = settings.language

    for item in items:
        item_el = SubElement(channel, "item")
        SubElement(item_el, "title").text = item.title
        SubElement(item_el, "link").text = item.link
        SubElement(item_el, "guid", attrib={"isPermaLink": "true" if settings.site_url else "false"}).text = item.link
        SubElement(item_el, "pubDate").text = format_datetime(item.pub_date)
        SubElement(item_el, "description").text = item.description
        if settings.author:
            SubElement(item_el, "author").text = settings.author

    return "<?xml version='1.0' encoding='UTF-8'?>\n" + tostring(root, encoding="unicode")


def write_feed(output_path: Path, xml_content: str) -> Path:
    """Write the rendered feed, creating parent directories as needed."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(xml_content, encoding="utf-8")
    logger.info("Wrote feed to %s", output_path)
    return output_path
