"""Terminal rendering of asset manager reports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape

if TYPE_CHECKING:
    from rich.console import Console

    from postkit.assets import AssetListing, AuditReport, DeleteResult, OrphanReport, PostSummary
    from postkit.config.site import SitePaths


def render_asset_listing(console: Console, listing: AssetListing, paths: SitePaths) -> None:
    if not listing.exists:
        console.print(f"No assets directory found for: {escape(listing.slug)}")
        return

    console.print(f"Assets for: {escape(listing.slug)}")
    console.print(f"Directory: {escape(paths.relative(listing.asset_dir))}")
    console.print()
    for group in listing.groups:
        console.print(f"{group.kind.value}/")
        if group.is_empty:
            console.print("  (empty)")
        for asset in group.files:
            console.print(f"  {escape(asset.name)} ({asset.size_kb:.1f}KB)")
        console.print()


def render_post_summaries(console: Console, summaries: list[PostSummary]) -> None:
    if not summaries:
        console.print("No blog posts found")
        return

    console.print(f"All Blog Posts ({len(summaries)} total)")
    console.print()
    for summary in summaries:
        if summary.error is not None:
            console.print(f"{escape(summary.slug)} [red](error reading metadata)[/red]")
            console.print()
            continue

        status = " (DRAFT)" if summary.draft else ""
        console.print(escape(summary.slug))
        console.print(f"   Title: {escape(summary.title or summary.slug)}{status}")
        if summary.category:
            console.print(f"   Category: {escape(summary.category)}")
        if summary.asset_count > 0:
            console.print(f"   Assets: {summary.asset_count} files")
        console.print()


def render_orphans(console: Console, orphans: list[OrphanReport]) -> None:
    if not orphans:
        console.print("[green]✅ No orphaned asset directories found[/green]")
        return

    console.print(f"Found {len(orphans)} orphaned asset directories:")
    console.print()
    for orphan in orphans:
        console.print(escape(orphan.slug))
        for kind, names in orphan.files.items():
            console.print(f"  {kind.value}: {escape(', '.join(names))}")
        if orphan.is_empty:
            console.print("  (empty directory)")
        console.print()

    console.print("🗑️  To remove these directories, run:")
    for orphan in orphans:
        console.print(escape(orphan.removal_command), soft_wrap=True)


def render_audit(console: Console, report: AuditReport) -> None:
    console.print("Asset Audit Report")
    console.print(f"Posts: {report.post_count}")
    console.print()

    for usage in report.posts:
        if not usage.has_asset_dir:
            console.print(f"[yellow]⚠️  {escape(usage.slug)}: No asset directory[/yellow]")
        elif usage.asset_count == 0:
            console.print(f"{escape(usage.slug)}: No assets")
        else:
            console.print(f"{escape(usage.slug)}: {usage.asset_count} assets ({usage.size_mb:.1f}MB)")

    console.print()
    console.print("Summary:")
    console.print(f"   Total assets: {report.total_assets}")
    console.print(f"   Total size: {report.total_size_mb:.1f}MB")
    console.print(f"   Average per post: {report.average_assets_per_post:.1f} assets")


def render_delete(console: Console, result: DeleteResult, paths: SitePaths) -> None:
    console.print(f"🗑️  Deleting post: {escape(result.slug)}")
    console.print(f"   ✅ Deleted: {escape(paths.relative(result.post_path))}")
    if result.assets_removed:
        console.print(f"   ✅ Deleted: {escape(paths.relative(result.asset_dir))}/")
    else:
        console.print("   ℹ️  No assets directory to delete")
    console.print()
    console.print("[green]✅ Post and assets deleted successfully![/green]")
