"""Main CLI application for set-commit-status."""

from pathlib import Path
from typing import Annotated

import typer

from set_commit_status import __version__
from set_commit_status.cli.common import (
    QuietOption,
    RepoOption,
    ShaOption,
    TokenOption,
    VerboseOption,
    console,
    run_async_command,
    validate_repo,
)
from set_commit_status.config import get_settings
from set_commit_status.github import (
    InvalidCommitStateError,
    setup_client,
)
from set_commit_status.logging import setup_logging
from set_commit_status.schemas import CommitStatusRequest, is_commit_state

app = typer.Typer(
    name="set-commit-status",
    help="Set a GitHub commit status, waiting out API rate limits.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"set-commit-status version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    state: Annotated[
        str,
        typer.Option(
            "--state",
            "-s",
            help="Commit state: success, pending, failure or error.",
        ),
    ],
    repo: RepoOption,
    sha: ShaOption,
    token: TokenOption = None,
    context: Annotated[
        str | None,
        typer.Option("--context", "-c", help="Label that differentiates this status."),
    ] = None,
    description: Annotated[
        str | None,
        typer.Option("--description", "-d", help="Short description of the status."),
    ] = None,
    target_url: Annotated[
        str | None,
        typer.Option("--target-url", help="URL to associate with the status."),
    ] = None,
    allow_forks: Annotated[
        bool,
        typer.Option("--allow-forks", help="Allow setting statuses on commits from forks."),
    ] = False,
    max_retries: Annotated[
        int | None,
        typer.Option("--max-retries", min=0, help="Retries when rate limited (default 3)."),
    ] = None,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Set the status of a commit.

    Examples:
        set-commit-status --state pending --repo octo/hello-world --sha abc123
        GITHUB_REPOSITORY=octo/hello-world GITHUB_SHA=abc123 set-commit-status -s success
    """
    settings = get_settings()
    log_config = settings.logging

    setup_logging(
        level=settings.log_level,
        verbose=verbose,
        quiet=quiet,
        log_file=Path(log_config.log_file) if log_config.log_file else None,
        rotation=log_config.rotation,
        retention=log_config.retention,
        serialize=log_config.serialize,
    )

    owner, name = validate_repo(repo)

    async def _set_status() -> None:
        if not is_commit_state(state):
            raise InvalidCommitStateError(state)

        request = CommitStatusRequest(
            owner=owner,
            repo=name,
            sha=sha,
            state=state,
            allow_forks=allow_forks,
            context=context,
            description=description,
            target_url=target_url,
        )
        async with setup_client(
            token or settings.github_token,
            max_retries=settings.retry.max_retries if max_retries is None else max_retries,
            base_url=settings.github_api_url,
            timeout=settings.retry.request_timeout,
        ) as client:
            await client.set_commit_status(request)

    run_async_command(_set_status(), error_prefix="Failed to set commit status")

    if not quiet:
        console.print(f"Set {state} status on {owner}/{name}@{sha[:7]}")


if __name__ == "__main__":
    app()
