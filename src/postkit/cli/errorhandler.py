"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.markup import escape

from postkit.exceptions import (
    ConfigError,
    ConflictError,
    NotFoundError,
    ParseError,
    PostkitError,
    UsageError,
    ValidationError,
)
from postkit.utils.paths import PathTraversalError

console = Console(stderr=True)

USAGE_EXIT_CODE = 2
FAILURE_EXIT_CODE = 1


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Usage errors exit with status 2 (like any other command-line usage
    mistake); every other failure exits with status 1.

    Args:
        debug: If True, re-raise instead of printing a user-friendly error.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit, typer.Exit):
        raise
    except UsageError as e:
        if debug:
            raise
        console.print(f"[bold red]❌ {escape(str(e))}[/bold red]")
        if e.usage:
            console.print(f"Usage: {escape(e.usage)}")
        raise typer.Exit(USAGE_EXIT_CODE) from e
    except ValidationError as e:
        if debug:
            raise
        console.print(f"[bold red]❌ {escape(str(e))}[/bold red]")
        raise typer.Exit(FAILURE_EXIT_CODE) from e
    except NotFoundError as e:
        if debug:
            raise
        console.print(f"[bold red]❌ Post not found:[/bold red] {escape(e.slug)}")
        raise typer.Exit(FAILURE_EXIT_CODE) from e
    except ConflictError as e:
        if debug:
            raise
        console.print(f"[bold red]❌ {escape(str(e))}[/bold red]")
        raise typer.Exit(FAILURE_EXIT_CODE) from e
    except PathTraversalError as e:
        if debug:
            raise
        console.print(f"[bold red]🚫 Unsafe slug:[/bold red] {escape(str(e))}")
        raise typer.Exit(FAILURE_EXIT_CODE) from e
    except ParseError as e:
        if debug:
            raise
        console.print(f"[bold red]📖 Invalid post:[/bold red] {escape(str(e))}")
        raise typer.Exit(FAILURE_EXIT_CODE) from e
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]⚙️ Configuration Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(FAILURE_EXIT_CODE) from e
    except PostkitError as e:
        if debug:
            raise
        console.print(f"[bold red]🚨 Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(FAILURE_EXIT_CODE) from e
    except Exception as e:
        if debug:
            console.print_exception(show_locals=False)
            raise typer.Exit(FAILURE_EXIT_CODE) from e

        console.print(f"[bold red]💥 An unexpected error occurred:[/bold red] {escape(str(e))}")
        console.print("[dim]Run with [bold]--debug[/bold] for more details.[/dim]")
        raise typer.Exit(FAILURE_EXIT_CODE) from e
