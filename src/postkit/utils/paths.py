"""Slug derivation and path safety utilities."""

import re
from pathlib import Path

from postkit.exceptions import PostkitError


class PathTraversalError(PostkitError):
    """Raised when a path would escape its intended directory."""


_DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-+")


def slugify(text: str | None) -> str:
    """Convert a post title into a URL- and filesystem-safe slug.

    ASCII letters, digits and underscores survive; accented and other
    non-ASCII letters are dropped along with punctuation. Whitespace runs
    (any Unicode whitespace) become a single hyphen and hyphen runs are
    collapsed.

    Args:
        text: Human-readable title.

    Returns:
        Slug string, possibly empty when the title has no word characters.

    Examples:
        >>> slugify("Hello, World!  2024")
        'hello-world-2024'
        >>> slugify("  -- Spaced   out --  ")
        'spaced-out'
        >>> slugify("../../etc/passwd")
        'etcpasswd'
        >>> slugify("Café Déjà vu")
        'caf-dj-vu'
        >>> slugify("!!!")
        ''

    """
    if text is None:
        return ""

    slug = _DISALLOWED_CHARS.sub("", text.lower())
    slug = _WHITESPACE_RUN.sub("-", slug)
    slug = _HYPHEN_RUN.sub("-", slug)
    return slug.strip("-")


def safe_path_join(base_dir: Path, *parts: str) -> Path:
    r"""Safely join path parts and ensure result stays within base_dir.

    Args:
        base_dir: Base directory that result must stay within
        *parts: Path parts to join

    Returns:
        Resolved path guaranteed to be within base_dir

    Raises:
        PathTraversalError: If resulting path would escape base_dir

    Examples:
        >>> base = Path("/site/public/blog-assets")
        >>> safe_path_join(base, "hello-world")
        PosixPath('/site/public/blog-assets/hello-world')
        >>> safe_path_join(base, "../../etc/passwd")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        PathTraversalError: Path traversal detected

    """
    if any(Path(part).is_absolute() for part in parts):
        absolute_part = next(part for part in parts if Path(part).is_absolute())
        msg = f"Absolute paths not allowed: {absolute_part}"
        raise PathTraversalError(msg)

    base_resolved = base_dir.resolve()
    candidate_path = base_resolved.joinpath(*parts)

    try:
        candidate_resolved = candidate_path.resolve()
        candidate_resolved.relative_to(base_resolved)
    except (ValueError, OSError) as err:
        msg = f"Path traversal detected: joining {parts} to {base_dir} would escape base directory"
        raise PathTraversalError(msg) from err

    if candidate_resolved == base_resolved:
        msg = f"Path {parts} resolves to the base directory {base_dir} itself"
        raise PathTraversalError(msg)

    return candidate_resolved
