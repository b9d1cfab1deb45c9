"""`new-post`: scaffold a draft post and its asset directories."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape
from rich.panel import Panel

from postkit.cli._app import DebugOption, SiteRootOption, bootstrap, console
from postkit.cli.errorhandler import handle_cli_errors
from postkit.config import SitePaths
from postkit.scaffold import ScaffoldResult, create_post

new_post_app = typer.Typer(
    name="new-post",
    help="Create a new draft blog post with its asset directories.",
    add_completion=False,
)


def _next_steps(result: ScaffoldResult, paths: SitePaths) -> str:
    post_file = paths.relative(result.post_path)
    asset_dir = paths.relative(result.asset_dir)
    subdir_lines = "\n".join(
        f"  • {paths.relative(subdir)}/ - Place {subdir.name} here" for subdir in result.asset_subdirs
    )
    return (
        f"[bold green]✅ Blog post created successfully![/bold green]\n\n"
        f"File: {escape(post_file)}\n"
        f"URL: {escape(result.post_url)}\n"
        f"Assets: {escape(asset_dir)}/\n\n"
        f"Asset directories created:\n{escape(subdir_lines)}\n\n"
        "[bold]Next steps:[/bold]\n"
        "1. Write your content\n"
        "2. Add assets to the created directories\n"
        f"3. Reference assets using: {escape(result.hero_image_url)}\n"
        "4. Set draft: false when ready to publish\n"
        "5. Commit and push to deploy"
    )


@new_post_app.command()
def new_post(
    title: Annotated[
        str | None,
        typer.Argument(help='Post title, e.g. "Your Blog Post Title"', show_default=False),
    ] = None,
    site_root: SiteRootOption = None,
    debug: DebugOption = False,
) -> None:
    """Create a new draft post from a title."""
    with handle_cli_errors(debug=debug):
        _, paths = bootstrap(site_root, debug=debug)
        result = create_post(title, paths)
        console.print(
            Panel(
                _next_steps(result, paths),
                title="📝 New Post",
                border_style="green",
            )
        )


def main() -> None:
    """Entry point for the `new-post` script."""
    new_post_app()
