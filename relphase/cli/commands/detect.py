"""Detect command - print which release workflow phase should run."""

from __future__ import annotations

import json
import os
from pathlib import Path

import typer

from relphase.cli.commands._helpers import exit_on_error, yes_no
from relphase.cli.context import build_context
from relphase.core.config import DetectionConfig
from relphase.core.errors import ErrorCode
from relphase.github.event import load_event_context
from relphase.github.http import RealHttpClient
from relphase.github.pulls import github_lookup
from relphase.output.console import ConsoleProtocol, Style
from relphase.phase.detect import detect_workflow_phase, detect_workflow_phase_sync
from relphase.phase.model import EventContext, PhaseDetectionResult, WorkflowPhase

PHASE_DESCRIPTIONS: dict[WorkflowPhase, str] = {
    "branch-management": "Create or update the release branch with changesets",
    "validation": "Validate the release branch (build, test, lint)",
    "publishing": "Publish packages and create GitHub releases",
    "close-issues": "Close linked issues after release PR merge",
    "none": "No release action needed",
}


def _first_line(message: str) -> str:
    lines = message.splitlines()
    return lines[0] if lines else ""


def _print_configuration(config: DetectionConfig, console: ConsoleProtocol, *, has_token: bool) -> None:
    console.header("Configuration")
    console.print(f"  target branch:  {config.target_branch}")
    console.print(f"  release branch: {config.release_branch}")
    console.print(f"  token:          {yes_no(has_token)}", Style.DIM)


def _render_result(
    result: PhaseDetectionResult,
    event: EventContext,
    console: ConsoleProtocol,
) -> None:
    console.header("Git context")
    console.print(f"  branch:         {event.branch}")
    if result.commit_message:
        console.print(f"  commit:         {_first_line(result.commit_message)}", Style.DIM)
    console.print(f"  on main:        {yes_no(result.is_main_branch)}")
    console.print(f"  on release:     {yes_no(result.is_release_branch)}")
    console.print(f"  release commit: {yes_no(result.is_release_commit)}")
    if result.merged_release_pr_number is not None:
        console.print(f"  merged PR:      #{result.merged_release_pr_number}")
    if result.is_pull_request_event:
        console.print(f"  PR merged:      {yes_no(result.is_pr_merged)}")
        console.print(f"  release PR:     {yes_no(result.is_release_pr_merged)}")

    console.header("Workflow phase")
    console.print(f"  phase:          {result.phase}", Style.BOLD)
    console.print(f"  description:    {PHASE_DESCRIPTIONS[result.phase]}")
    console.print(f"  reason:         {result.reason}")
    console.newline()

    if result.should_continue:
        console.success(f"Workflow should proceed with phase: {result.phase}")
    else:
        console.info(f"No action needed: {result.reason}")


def run_detection(
    event: EventContext,
    config: DetectionConfig,
    console: ConsoleProtocol,
    *,
    token: str | None,
) -> PhaseDetectionResult:
    if token:
        lookup = github_lookup(RealHttpClient(token=token))
        return detect_workflow_phase(event, config, lookup, console)

    console.warning("No token provided, using message-only detection (less accurate for release commits)")
    return detect_workflow_phase_sync(event, config)


def detect(
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help="TOML file with a [branches] table (release, target)",
    ),
    release_branch: str | None = typer.Option(
        None,
        "--release-branch",
        envvar="RELPHASE_RELEASE_BRANCH",
        help="Branch holding pending release changes [default: changeset-release/main]",
    ),
    target_branch: str | None = typer.Option(
        None,
        "--target-branch",
        envvar="RELPHASE_TARGET_BRANCH",
        help="Branch releases are merged into [default: main]",
    ),
    token: str | None = typer.Option(
        None,
        "--token",
        envvar="GITHUB_TOKEN",
        show_default=False,
        help="GitHub token; enables the associated pull request lookup",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Detect the release workflow phase for the current GitHub Actions event."""
    ctx = build_context(config_path=config_path, stderr=as_json)
    config = ctx.config.with_overrides(
        release_branch=release_branch,
        target_branch=target_branch,
    )

    event = exit_on_error(load_event_context(os.environ), ctx.console, ErrorCode.ENV_ERROR)

    if not as_json:
        _print_configuration(config, ctx.console, has_token=bool(token))

    result = run_detection(event, config, ctx.console, token=token)

    if as_json:
        typer.echo(json.dumps(result.as_dict(), indent=2))
        return

    _render_result(result, event, ctx.console)
