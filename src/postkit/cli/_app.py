"""Shared CLI bootstrap: console, common options and site loading."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from postkit.config import PostkitConfig, SitePaths, load_site
from postkit.logging_setup import configure_logging

console = Console(highlight=False)

SiteRootOption = Annotated[
    Path | None,
    typer.Option(
        "--site-root",
        "-C",
        help="Site root directory (default: nearest directory with postkit.toml, else cwd)",
        file_okay=False,
    ),
]
DebugOption = Annotated[
    bool,
    typer.Option("--debug", help="Show full tracebacks and debug logging"),
]


def bootstrap(site_root: Path | None, *, debug: bool = False) -> tuple[PostkitConfig, SitePaths]:
    """Configure logging and resolve the site for one command invocation."""
    configure_logging("DEBUG" if debug else None)
    return load_site(site_root)


__all__ = ["DebugOption", "SiteRootOption", "bootstrap", "console"]
