"""Unit tests for configuration loading and site resolution."""

from pathlib import Path

import pytest

from postkit.config import PostkitConfig, find_postkit_config, load_postkit_config, load_site
from postkit.exceptions import ConfigError


def test_defaults_match_the_blog_layout():
    config = PostkitConfig()

    assert config.paths.content_dir == "src/content/blog"
    assert config.paths.asset_root == "public/blog-assets"
    assert config.paths.content_extension == ".mdx"
    assert config.feed.description_length == 160


def test_env_overrides_nested_values(monkeypatch):
    monkeypatch.setenv("POSTKIT_PATHS__CONTENT_EXTENSION", ".md")
    monkeypatch.setenv("POSTKIT_FEED__SITE_URL", "https://example.com")

    config = PostkitConfig()

    assert config.paths.content_extension == ".md"
    assert config.feed.site_url == "https://example.com"


def test_file_values_merge_over_defaults(tmp_path: Path):
    config_path = tmp_path / "postkit.toml"
    config_path.write_text('[paths]\ncontent_dir = "content/posts"\n\n[feed]\ntitle = "Notes"\n', encoding="utf-8")

    config = load_postkit_config(config_path)

    assert config.paths.content_dir == "content/posts"
    assert config.paths.asset_root == "public/blog-assets"
    assert config.feed.title == "Notes"


def test_env_wins_over_file(tmp_path: Path, monkeypatch):
    config_path = tmp_path / "postkit.toml"
    config_path.write_text('[feed]\ntitle = "From file"\n', encoding="utf-8")
    monkeypatch.setenv("POSTKIT_FEED__TITLE", "From env")

    assert load_postkit_config(config_path).feed.title == "From env"


INVALID_FILES = {
    "bad_toml": "[paths\ncontent_dir = 1",
    "absolute_path": '[paths]\ncontent_dir = "/etc"\n',
    "traversal": '[paths]\nasset_root = "../elsewhere"\n',
    "bad_extension": '[paths]\ncontent_extension = "mdx"\n',
    "unknown_section": "[mystery]\nkey = 1\n",
}


@pytest.mark.parametrize("content", INVALID_FILES.values(), ids=INVALID_FILES.keys())
def test_invalid_files_raise_config_error(tmp_path: Path, content: str):
    config_path = tmp_path / "postkit.toml"
    config_path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_postkit_config(config_path)


def test_find_config_searches_parents(tmp_path: Path):
    (tmp_path / "postkit.toml").write_text("", encoding="utf-8")
    nested = tmp_path / "src" / "content"
    nested.mkdir(parents=True)

    assert find_postkit_config(nested) == (tmp_path / "postkit.toml").resolve()


def test_load_site_uses_config_directory_as_root(tmp_path: Path):
    (tmp_path / "postkit.toml").write_text('[paths]\nasset_root = "static/assets"\n', encoding="utf-8")
    nested = tmp_path / "drafts"
    nested.mkdir()

    config, paths = load_site(nested)

    assert paths.site_root == tmp_path.resolve()
    assert paths.asset_root == tmp_path.resolve() / "static" / "assets"
    assert config.paths.asset_root == "static/assets"


def test_load_site_without_config_uses_start_directory(tmp_path: Path):
    _, paths = load_site(tmp_path)

    assert paths.site_root == tmp_path.resolve()
    assert paths.post_path("hello") == tmp_path.resolve() / "src" / "content" / "blog" / "hello.mdx"
    assert paths.post_url("hello") == "/blog/hello/"
