"""Read the triggering event from the GitHub Actions runner environment."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from relphase.core.result import Err, Ok, Result
from relphase.core.structured import StrDict, as_str_dict, get_bool, get_int, get_raw_str, get_table
from relphase.phase.model import EventContext, PullRequestInfo

__all__ = [
    "EventError",
    "event_context_from_payload",
    "load_event_context",
    "parse_event_payload",
    "pull_request_from_payload",
]

_REQUIRED_ENV = ("GITHUB_REF", "GITHUB_EVENT_NAME", "GITHUB_SHA", "GITHUB_REPOSITORY")


@dataclass(frozen=True, slots=True)
class EventError:
    kind: Literal["missing_env", "invalid_repository", "invalid_payload"]
    message: str
    hint: str | None = None


def pull_request_from_payload(payload: Mapping[str, object]) -> PullRequestInfo | None:
    """Extract the pull request fields, or None if any required field is missing."""
    pr = get_table(payload, "pull_request")
    if pr is None:
        return None

    number = get_int(pr, "number")
    head = get_table(pr, "head")
    base = get_table(pr, "base")
    if number is None or head is None or base is None:
        return None

    head_ref = get_raw_str(head, "ref")
    base_ref = get_raw_str(base, "ref")
    if head_ref is None or base_ref is None:
        return None

    return PullRequestInfo(
        number=number,
        merged=get_bool(pr, "merged") is True,
        head_ref=head_ref,
        base_ref=base_ref,
    )


def _head_commit_message(payload: Mapping[str, object]) -> str | None:
    head_commit = get_table(payload, "head_commit")
    if head_commit is None:
        return None
    # Keep the raw message; heuristics match on exact text.
    return get_raw_str(head_commit, "message")


def event_context_from_payload(
    payload: Mapping[str, object],
    *,
    ref: str,
    event_name: str,
    commit_sha: str,
    repo_owner: str,
    repo_name: str,
) -> EventContext:
    """Build an EventContext from the webhook payload and the runner metadata."""
    return EventContext(
        ref=ref,
        event_name=event_name,
        commit_sha=commit_sha,
        repo_owner=repo_owner,
        repo_name=repo_name,
        commit_message=_head_commit_message(payload),
        pull_request=pull_request_from_payload(payload),
    )


def parse_event_payload(path: Path) -> Result[StrDict, EventError]:
    try:
        data_obj: object = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return Err(
            EventError(
                kind="invalid_payload",
                message=f"event payload not found: {path}",
                hint="GITHUB_EVENT_PATH must point to the webhook payload",
            )
        )
    except (OSError, UnicodeDecodeError) as e:
        return Err(EventError(kind="invalid_payload", message=f"cannot read {path}: {e}"))
    except json.JSONDecodeError as e:
        return Err(EventError(kind="invalid_payload", message=f"invalid JSON in {path}: {e}"))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(EventError(kind="invalid_payload", message="event payload must be an object"))
    return Ok(data)


def load_event_context(environ: Mapping[str, str]) -> Result[EventContext, EventError]:
    """Build an EventContext from GITHUB_* variables and the event payload file.

    GITHUB_EVENT_PATH is optional; without it the payload is treated as empty
    (no commit message, no pull request).
    """
    missing = [name for name in _REQUIRED_ENV if not environ.get(name)]
    if missing:
        return Err(
            EventError(
                kind="missing_env",
                message=f"missing environment: {', '.join(missing)}",
                hint="run inside GitHub Actions or export the GITHUB_* variables",
            )
        )

    repository = environ["GITHUB_REPOSITORY"]
    owner, sep, name = repository.partition("/")
    if not sep or not owner or not name or "/" in name:
        return Err(
            EventError(
                kind="invalid_repository",
                message=f"GITHUB_REPOSITORY must be owner/name, got: {repository}",
            )
        )

    payload: StrDict = {}
    event_path = environ.get("GITHUB_EVENT_PATH")
    if event_path:
        parsed = parse_event_payload(Path(event_path))
        if isinstance(parsed, Err):
            return parsed
        payload = parsed.value

    return Ok(
        event_context_from_payload(
            payload,
            ref=environ["GITHUB_REF"],
            event_name=environ["GITHUB_EVENT_NAME"],
            commit_sha=environ["GITHUB_SHA"],
            repo_owner=owner,
            repo_name=name,
        )
    )
