from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

WorkflowPhase = Literal[
    "branch-management",
    "validation",
    "publishing",
    "close-issues",
    "none",
]

PULL_REQUEST_EVENTS = frozenset({"pull_request", "pull_request_target"})


@dataclass(frozen=True, slots=True)
class PullRequestInfo:
    """Pull request fields carried by a pull_request event payload."""

    number: int
    merged: bool
    head_ref: str
    base_ref: str


@dataclass(frozen=True, slots=True)
class EventContext:
    """The CI trigger being classified. Read-only input to detection."""

    ref: str
    event_name: str
    commit_sha: str
    repo_owner: str
    repo_name: str
    commit_message: str | None = None
    pull_request: PullRequestInfo | None = None

    @property
    def branch(self) -> str:
        return self.ref.removeprefix("refs/heads/")

    @property
    def is_pull_request_event(self) -> bool:
        return self.event_name in PULL_REQUEST_EVENTS


@dataclass(frozen=True, slots=True)
class ReleaseCommitEvidence:
    """Outcome of asking "did this push come from a merged release PR?"."""

    is_release_commit: bool
    # Only the API lookup can name the PR.
    pr_number: int | None = None


@dataclass(frozen=True, slots=True)
class PhaseDetectionResult:
    phase: WorkflowPhase
    reason: str
    is_release_branch: bool
    is_main_branch: bool
    is_release_commit: bool
    is_pull_request_event: bool
    is_pr_merged: bool
    is_release_pr_merged: bool
    commit_message: str
    merged_release_pr_number: int | None = None

    @property
    def should_continue(self) -> bool:
        return self.phase != "none"

    def as_dict(self) -> dict[str, object]:
        return {
            "phase": self.phase,
            "reason": self.reason,
            "should_continue": self.should_continue,
            "is_release_branch": self.is_release_branch,
            "is_main_branch": self.is_main_branch,
            "is_release_commit": self.is_release_commit,
            "merged_release_pr_number": self.merged_release_pr_number,
            "is_pull_request_event": self.is_pull_request_event,
            "is_pr_merged": self.is_pr_merged,
            "is_release_pr_merged": self.is_release_pr_merged,
            "commit_message": self.commit_message,
        }
