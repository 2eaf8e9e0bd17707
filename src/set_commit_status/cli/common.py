"""Common CLI option factories and helpers.

This module centralizes reusable CLI options and provides:
- `run_async_command`: Unified async execution with error handling for CLI commands
- `validate_repo`: owner/name parsing with a friendly error
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Annotated, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

# All CLI output goes to stderr
console = Console(stderr=True)

T = TypeVar("T")


def run_async_command(
    coro: Coroutine[object, object, T],
    *,
    error_prefix: str = "Error",
) -> T:
    """Execute async code from synchronous CLI command with unified error handling.

    Uses asyncio.run() for clean event loop management. Catches exceptions,
    prints user-friendly error messages, and exits with code 1.

    Args:
        coro: Async coroutine to execute
        error_prefix: Prefix for error messages (default: "Error")

    Returns:
        Result from the coroutine

    Raises:
        typer.Exit: Re-raised from deliberate exits, or raised with code 1 on error
    """
    try:
        return asyncio.run(coro)
    except typer.Exit:
        raise
    except Exception as e:
        # Upstream bodies are shown verbatim, unwrapped and unstyled
        console.print(
            f"[red]{error_prefix}:[/red] {escape(str(e))}",
            soft_wrap=True,
            highlight=False,
        )
        raise typer.Exit(1) from None


# Annotated aliases keep typer.Option calls out of default arguments.

RepoOption = Annotated[
    str,
    typer.Option(
        "--repo",
        "-r",
        envvar="GITHUB_REPOSITORY",
        help="Repository in owner/name format (defaults to $GITHUB_REPOSITORY)",
    ),
]

ShaOption = Annotated[
    str,
    typer.Option(
        "--sha",
        envvar="GITHUB_SHA",
        help="Commit SHA to attach the status to (defaults to $GITHUB_SHA)",
    ),
]

TokenOption = Annotated[
    str | None,
    typer.Option(
        "--token",
        "-t",
        envvar="GITHUB_TOKEN",
        show_envvar=True,
        help="GitHub token (falls back to settings)",
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
]

QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Suppress non-error output (WARNING level).",
    ),
]


def validate_repo(repo: str) -> tuple[str, str]:
    """Parse and validate a single repository string.

    Args:
        repo: Repository string in owner/name format

    Returns:
        Tuple of (owner, name)

    Raises:
        typer.Exit(1): If format is invalid
    """
    from set_commit_status.schemas import parse_repo_string

    try:
        return parse_repo_string(repo)
    except ValueError:
        console.print("[red]Error:[/red] Repository must be in owner/name format")
        raise typer.Exit(1) from None
