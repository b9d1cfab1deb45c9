"""Centralized exceptions for postkit."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class PostkitError(Exception):
    """Base exception for all postkit errors."""


class UsageError(PostkitError):
    """Raised when a command is missing a required argument."""

    def __init__(self, message: str, usage: str | None = None) -> None:
        self.usage = usage
        super().__init__(message)


class ValidationError(PostkitError):
    """Raised when user input cannot produce a valid post."""


class NotFoundError(PostkitError):
    """Raised when a slug has no content file."""

    def __init__(self, slug: str, path: Path) -> None:
        self.slug = slug
        self.path = path
        super().__init__(f"Post not found: {slug}")


class ConflictError(PostkitError):
    """Raised when a content file already exists for a slug."""

    def __init__(self, slug: str, path: Path) -> None:
        self.slug = slug
        self.path = path
        super().__init__(f'Blog post "{path.name}" already exists!')


class ParseError(PostkitError):
    """Raised when a content file's header block is missing or malformed."""

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        where = f" in '{path}'" if path is not None else ""
        super().__init__(f"Invalid header block{where}: {reason}")


class ConfigError(PostkitError):
    """Raised when postkit.toml or environment overrides are invalid."""
