"""Parsing of the YAML header block at the top of post content files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING, Any

import frontmatter
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from postkit.exceptions import ParseError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class PostHeader(BaseModel):
    """Validated header block of a post."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: str = Field(min_length=1)
    pub_date: datetime = Field(alias="pubDate")
    draft: bool = False
    hero_image: str | None = Field(default=None, alias="heroImage")
    category: str | None = None
    reading_time: int | None = Field(default=None, alias="readingTime")

    @field_validator("pub_date", mode="before")
    @classmethod
    def _coerce_pub_date(cls, value: Any) -> Any:
        # YAML turns `2024-01-01` into a date; treat it as midnight UTC.
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime(value.year, value.month, value.day, tzinfo=UTC)
        return value

    @field_validator("pub_date", mode="after")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


@dataclass(frozen=True, slots=True)
class ParsedPost:
    """A content file split into its validated header and its body."""

    header: PostHeader
    body: str


def split_header_block(content: str, *, source: Path | None = None) -> tuple[dict[str, Any], str]:
    """Split ``content`` into the raw header mapping and the body.

    Raises:
        ParseError: If the header block is missing, unterminated, not valid YAML
            or not a mapping.

    """
    handler = frontmatter.YAMLHandler()
    if not handler.detect(content):
        raise ParseError(source, "file does not start with a '---' header block")

    try:
        raw_header, body = handler.split(content)
    except ValueError as exc:
        raise ParseError(source, "header block is not terminated by a '---' line") from exc

    try:
        metadata = yaml.safe_load(raw_header)
    except yaml.YAMLError as exc:
        raise ParseError(source, f"header block is not valid YAML: {exc}") from exc

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise ParseError(source, f"header block must be a mapping, got {type(metadata).__name__}")

    return metadata, body.lstrip("\r\n")


def parse_post(content: str, *, source: Path | None = None) -> ParsedPost:
    """Parse and validate a full content file.

    Raises:
        ParseError: On any structural or field-level problem.

    """
    metadata, body = split_header_block(content, source=source)
    try:
        header = PostHeader.model_validate(metadata)
    except PydanticValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ParseError(source, problems) from exc
    return ParsedPost(header=header, body=body)


def parse_post_file(path: Path, *, encoding: str = "utf-8") -> ParsedPost:
    """Read a content file and parse it.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid text in ``encoding``.
        ParseError: If the header block is invalid.

    """
    content = path.read_text(encoding=encoding)
    logger.debug("Parsing header block of %s", path)
    return parse_post(content, source=path)
