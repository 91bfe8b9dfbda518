"""Decide which release workflow phase a CI event should run.

One decision tree, two ways of answering "is the head of the target branch
a release commit?":

- detect_workflow_phase asks the GitHub API which pull requests contain the
  commit and falls back to commit-message heuristics if the lookup fails.
- detect_workflow_phase_sync only uses the heuristics.

Rules, first match wins:

1. pull_request event, merged, release -> target branch: close-issues
2. pull_request event, open, release -> target branch: validation
3. any other pull_request event: none
4. push to target branch, release commit: publishing
5. push to target branch, not a release commit: branch-management
6. push to release branch: validation
7. anything else: none
"""

from __future__ import annotations

from collections.abc import Callable

from relphase.core.config import DetectionConfig
from relphase.core.result import Err, Ok
from relphase.github.pulls import AssociatedPullRequest, PullRequestLookup
from relphase.output.console import ConsoleProtocol
from relphase.phase.heuristics import is_release_commit_message, truncate_commit_message
from relphase.phase.model import (
    EventContext,
    PhaseDetectionResult,
    ReleaseCommitEvidence,
    WorkflowPhase,
)

__all__ = [
    "decide",
    "detect_workflow_phase",
    "detect_workflow_phase_sync",
    "evidence_from_message",
    "find_merged_release_pr",
]

ResolveReleaseCommit = Callable[[], ReleaseCommitEvidence]


def decide(
    context: EventContext,
    config: DetectionConfig,
    resolve_release_commit: ResolveReleaseCommit,
    *,
    report_pr_numbers: bool,
) -> PhaseDetectionResult:
    """Run the decision tree.

    Args:
        context: The triggering event
        config: Release and target branch names
        resolve_release_commit: Called at most once, and only for a
            non pull_request event on the target branch
        report_pr_numbers: Whether merged_release_pr_number may be set

    Returns:
        A fresh PhaseDetectionResult
    """
    rel = config.release_branch
    tgt = config.target_branch

    branch = context.branch
    is_release_branch = branch == rel
    is_main_branch = branch == tgt

    is_pr_event = context.is_pull_request_event
    pr = context.pull_request if is_pr_event else None
    is_pr_merged = pr is not None and pr.merged
    is_release_pr = pr is not None and pr.head_ref == rel and pr.base_ref == tgt
    is_release_pr_merged = is_release_pr and is_pr_merged

    is_release_commit = False
    pr_number: int | None = None
    phase: WorkflowPhase

    if is_pr_event:
        if pr is None:
            phase = "none"
            reason = f"Pull request event without pull request data (expected {rel} to {tgt})"
        elif is_release_pr_merged:
            phase = "close-issues"
            reason = f"Merged release PR #{pr.number} from {rel} to {tgt}"
            pr_number = pr.number
        elif is_release_pr:
            phase = "validation"
            reason = f"Open PR #{pr.number} from {rel} to {tgt}"
        else:
            phase = "none"
            reason = (
                f"PR #{pr.number} ({pr.head_ref} -> {pr.base_ref}) "
                f"is not a release PR from {rel} to {tgt}"
            )
    elif is_main_branch:
        evidence = resolve_release_commit()
        is_release_commit = evidence.is_release_commit
        if is_release_commit:
            phase = "publishing"
            pr_number = evidence.pr_number
            if pr_number is not None:
                reason = f"Merged release PR #{pr_number} detected for push to {tgt}"
            else:
                reason = f"Push to {tgt} matches release commit message pattern"
        else:
            phase = "branch-management"
            reason = f"Push to {tgt} (not a release commit)"
    elif is_release_branch:
        phase = "validation"
        reason = "Push to release branch"
    else:
        phase = "none"
        reason = f"Not on {tgt} or {rel} branch"

    return PhaseDetectionResult(
        phase=phase,
        reason=reason,
        is_release_branch=is_release_branch,
        is_main_branch=is_main_branch,
        is_release_commit=is_release_commit,
        is_pull_request_event=is_pr_event,
        is_pr_merged=is_pr_merged,
        is_release_pr_merged=is_release_pr_merged,
        commit_message=truncate_commit_message(context.commit_message),
        merged_release_pr_number=pr_number if report_pr_numbers else None,
    )


def evidence_from_message(context: EventContext, config: DetectionConfig) -> ReleaseCommitEvidence:
    return ReleaseCommitEvidence(
        is_release_commit=is_release_commit_message(
            context.commit_message,
            owner=context.repo_owner,
            release_branch=config.release_branch,
        )
    )


def find_merged_release_pr(
    pulls: list[AssociatedPullRequest],
    config: DetectionConfig,
) -> AssociatedPullRequest | None:
    """First merged PR from the release branch into the target branch, in API order."""
    for pr in pulls:
        if (
            pr.is_merged
            and pr.head_ref == config.release_branch
            and pr.base_ref == config.target_branch
        ):
            return pr
    return None


def detect_workflow_phase(
    context: EventContext,
    config: DetectionConfig,
    lookup: PullRequestLookup,
    console: ConsoleProtocol,
) -> PhaseDetectionResult:
    """Detect the phase, confirming release commits through the API.

    A failed lookup is reported as a warning and never aborts detection;
    the commit-message heuristics decide instead.
    """

    def resolve() -> ReleaseCommitEvidence:
        match lookup(context.repo_owner, context.repo_name, context.commit_sha):
            case Ok(pulls):
                merged = find_merged_release_pr(pulls, config)
                if merged is None:
                    return ReleaseCommitEvidence(is_release_commit=False)
                return ReleaseCommitEvidence(is_release_commit=True, pr_number=merged.number)
            case Err(error):
                console.warning(
                    f"Failed to check for associated PRs: {error}; "
                    "falling back to commit message detection"
                )
                return evidence_from_message(context, config)

    return decide(context, config, resolve, report_pr_numbers=True)


def detect_workflow_phase_sync(
    context: EventContext,
    config: DetectionConfig,
) -> PhaseDetectionResult:
    """Detect the phase from local information only.

    merged_release_pr_number is never set in this mode.
    """
    return decide(
        context,
        config,
        lambda: evidence_from_message(context, config),
        report_pr_numbers=False,
    )
