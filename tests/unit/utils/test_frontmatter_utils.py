"""Unit tests for header block parsing."""

from datetime import UTC, datetime
from pathlib import Path

import pytest

from postkit.exceptions import ParseError
from postkit.utils.frontmatter_utils import parse_post, parse_post_file, split_header_block

VALID_POST = """---
title: "Shipping a Tiny CLI"
pubDate: 2024-03-02T08:30:00.000Z
draft: false
heroImage: "/blog-assets/shipping-a-tiny-cli/images/hero.jpg"
category: "tooling"
---

First paragraph.
"""


def test_parse_post_reads_all_fields():
    parsed = parse_post(VALID_POST)

    assert parsed.header.title == "Shipping a Tiny CLI"
    assert parsed.header.pub_date == datetime(2024, 3, 2, 8, 30, tzinfo=UTC)
    assert parsed.header.draft is False
    assert parsed.header.hero_image == "/blog-assets/shipping-a-tiny-cli/images/hero.jpg"
    assert parsed.header.category == "tooling"
    assert parsed.body == "First paragraph.\n"


def test_parse_post_defaults_draft_and_optional_fields():
    parsed = parse_post('---\ntitle: "x"\npubDate: 2024-01-01\n---\nbody')

    assert parsed.header.draft is False
    assert parsed.header.category is None
    assert parsed.header.hero_image is None


def test_bare_date_becomes_midnight_utc():
    parsed = parse_post('---\ntitle: "x"\npubDate: 2024-01-01\n---\n')
    assert parsed.header.pub_date == datetime(2024, 1, 1, tzinfo=UTC)


def test_naive_timestamp_is_assumed_utc():
    parsed = parse_post('---\ntitle: "x"\npubDate: "2024-01-01T12:00:00"\n---\n')
    assert parsed.header.pub_date.tzinfo is not None
    assert parsed.header.pub_date == datetime(2024, 1, 1, 12, tzinfo=UTC)


def test_unknown_keys_are_tolerated():
    parsed = parse_post('---\ntitle: "x"\npubDate: 2024-01-01\ntags: [a, b]\n---\n')
    assert parsed.header.title == "x"


INVALID_POSTS = {
    "no_header": "Just a body, no header block.",
    "unterminated": '---\ntitle: "x"\npubDate: 2024-01-01\n',
    "bad_yaml": '---\ntitle: "x\npubDate: [\n---\n',
    "not_a_mapping": "---\n- a\n- b\n---\n",
    "missing_title": "---\npubDate: 2024-01-01\n---\n",
    "missing_pub_date": '---\ntitle: "x"\n---\n',
    "empty_title": '---\ntitle: ""\npubDate: 2024-01-01\n---\n',
    "non_boolean_draft": '---\ntitle: "x"\npubDate: 2024-01-01\ndraft: maybe\n---\n',
    "empty_header": "---\n---\nbody",
}


@pytest.mark.parametrize("content", INVALID_POSTS.values(), ids=INVALID_POSTS.keys())
def test_malformed_headers_raise_parse_error(content):
    with pytest.raises(ParseError):
        parse_post(content)


def test_parse_error_names_the_source(tmp_path: Path):
    path = tmp_path / "broken.mdx"
    path.write_text("no header", encoding="utf-8")

    with pytest.raises(ParseError) as exc_info:
        parse_post_file(path)

    assert exc_info.value.path == path
    assert "broken.mdx" in str(exc_info.value)


def test_split_header_block_keeps_horizontal_rules_in_body():
    metadata, body = split_header_block('---\ntitle: "x"\n---\n\nintro\n\n---\n\nfooter\n')

    assert metadata == {"title": "x"}
    assert "---" in body
    assert body.startswith("intro")
