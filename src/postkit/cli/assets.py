"""`blog-assets`: inspect and maintain post asset directories."""

from __future__ import annotations

from typing import Annotated

import typer

from postkit.assets import AssetManager
from postkit.cli._app import DebugOption, SiteRootOption, bootstrap, console
from postkit.cli.errorhandler import handle_cli_errors
from postkit.cli.reports import (
    render_asset_listing,
    render_audit,
    render_delete,
    render_orphans,
    render_post_summaries,
)
from postkit.constants import AssetCommand

assets_app = typer.Typer(
    name="assets",
    help="Blog asset management: list posts and assets, find orphans, audit usage, delete posts.",
    add_completion=False,
    no_args_is_help=True,
)

SlugArgument = Annotated[
    str | None,
    typer.Argument(help="Post slug (content file name without extension)", show_default=False),
]


@assets_app.command(AssetCommand.POSTS.value)
def posts(site_root: SiteRootOption = None, debug: DebugOption = False) -> None:
    """List all blog posts with metadata."""
    with handle_cli_errors(debug=debug):
        _, paths = bootstrap(site_root, debug=debug)
        render_post_summaries(console, AssetManager(paths).list_posts())


@assets_app.command(AssetCommand.LIST.value)
def list_assets(slug: SlugArgument = None, site_root: SiteRootOption = None, debug: DebugOption = False) -> None:
    """List all assets for a specific post."""
    with handle_cli_errors(debug=debug):
        _, paths = bootstrap(site_root, debug=debug)
        render_asset_listing(console, AssetManager(paths).list_assets(slug), paths)


@assets_app.command(AssetCommand.CLEANUP.value)
def cleanup(site_root: SiteRootOption = None, debug: DebugOption = False) -> None:
    """Find and list orphaned asset directories (nothing is deleted)."""
    with handle_cli_errors(debug=debug):
        _, paths = bootstrap(site_root, debug=debug)
        render_orphans(console, AssetManager(paths).find_orphans())


@assets_app.command(AssetCommand.AUDIT.value)
def audit(site_root: SiteRootOption = None, debug: DebugOption = False) -> None:
    """Show asset usage statistics."""
    with handle_cli_errors(debug=debug):
        _, paths = bootstrap(site_root, debug=debug)
        render_audit(console, AssetManager(paths).audit())


@assets_app.command(AssetCommand.DELETE.value)
def delete(slug: SlugArgument = None, site_root: SiteRootOption = None, debug: DebugOption = False) -> None:
    """Delete a post and all its assets."""
    with handle_cli_errors(debug=debug):
        _, paths = bootstrap(site_root, debug=debug)
        render_delete(console, AssetManager(paths).delete_post(slug), paths)


def main() -> None:
    """Entry point for the `blog-assets` script."""
    assets_app()
