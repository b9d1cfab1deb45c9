from pathlib import Path
from unittest.mock import patch

import pytest
import typer

from postkit.cli.errorhandler import handle_cli_errors
from postkit.exceptions import ConfigError, ConflictError, NotFoundError, ParseError, UsageError, ValidationError
from postkit.utils.paths import PathTraversalError


def _printed(mock_print) -> list[str]:
    return [str(arg) for call in mock_print.call_args_list for arg in call[0]]


def test_usage_error_exits_with_two_and_prints_usage():
    with patch("postkit.cli.errorhandler.console.print") as mock_print:
        with pytest.raises(typer.Exit) as excinfo:
            with handle_cli_errors(debug=False):
                raise UsageError("Please provide a post slug", usage="blog-assets list <post-slug>")

    assert excinfo.value.exit_code == 2
    printed = _printed(mock_print)
    assert any("Please provide a post slug" in arg for arg in printed)
    assert any("blog-assets list <post-slug>" in arg for arg in printed)


@pytest.mark.parametrize(
    ("error", "fragment"),
    [
        (ValidationError("Please provide a title"), "Please provide a title"),
        (NotFoundError("ghost", Path("ghost.mdx")), "Post not found"),
        (ConflictError("dup", Path("dup.mdx")), "already exists"),
        (ParseError(Path("bad.mdx"), "missing title"), "Invalid post"),
        (ConfigError("bad config"), "Configuration Error"),
        (PathTraversalError("escape"), "Unsafe slug"),
    ],
)
def test_domain_errors_exit_with_one(error, fragment):
    with patch("postkit.cli.errorhandler.console.print") as mock_print:
        with pytest.raises(typer.Exit) as excinfo:
            with handle_cli_errors(debug=False):
                raise error

    assert excinfo.value.exit_code == 1
    assert any(fragment in arg for arg in _printed(mock_print))


def test_debug_mode_re_raises_domain_errors():
    with pytest.raises(NotFoundError):
        with handle_cli_errors(debug=True):
            raise NotFoundError("ghost", Path("ghost.mdx"))


def test_unexpected_exception_is_reported():
    with patch("postkit.cli.errorhandler.console.print") as mock_print:
        with pytest.raises(typer.Exit) as excinfo:
            with handle_cli_errors(debug=False):
                raise OSError("disk on fire")

    assert excinfo.value.exit_code == 1
    assert any("An unexpected error occurred" in arg for arg in _printed(mock_print))


def test_typer_exit_passes_through():
    with pytest.raises(typer.Exit) as excinfo:
        with handle_cli_errors(debug=False):
            raise typer.Exit(0)

    assert excinfo.value.exit_code == 0
