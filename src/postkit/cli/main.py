"""Main Typer application for postkit."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from postkit.assets import AssetManager
from postkit.cli._app import DebugOption, SiteRootOption, bootstrap, console
from postkit.cli.assets import assets_app
from postkit.cli.errorhandler import handle_cli_errors
from postkit.cli.new_post import new_post
from postkit.feed import build_feed_items, render_rss, write_feed

app = typer.Typer(
    name="postkit",
    help="Authoring helpers for a static blog: scaffold posts, manage their assets, build the RSS feed.",
    add_completion=False,
    no_args_is_help=True,
)
app.add_typer(assets_app, name="assets")
app.command(name="new")(new_post)


@app.command()
def feed(
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Where to write the RSS document (default: paths.feed_path)"),
    ] = None,
    site_root: SiteRootOption = None,
    debug: DebugOption = False,
) -> None:
    """Build the RSS feed of published (non-draft) posts."""
    with handle_cli_errors(debug=debug):
        config, paths = bootstrap(site_root, debug=debug)
        items = build_feed_items(AssetManager(paths), config.feed)
        target = write_feed(output or paths.feed_path, render_rss(items, config.feed))
        console.print(f"[green]✅ Wrote {len(items)} items to {escape(paths.relative(target))}[/green]")
