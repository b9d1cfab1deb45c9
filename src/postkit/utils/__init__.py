"""Utility helpers shared across postkit."""

from postkit.utils.frontmatter_utils import ParsedPost, PostHeader, parse_post, parse_post_file
from postkit.utils.paths import PathTraversalError, safe_path_join, slugify

__all__ = [
    "ParsedPost",
    "PathTraversalError",
    "PostHeader",
    "parse_post",
    "parse_post_file",
    "safe_path_join",
    "slugify",
]
