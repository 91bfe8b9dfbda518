"""Commit-message heuristics for spotting release commits without the API."""

from __future__ import annotations

COMMIT_MESSAGE_LIMIT = 100
_ELLIPSIS = "..."


def _matches_merge_pattern(message: str, *, owner: str, release_branch: str) -> bool:
    if f"from {owner}/{release_branch}" in message:
        return True
    if f"Merge branch '{release_branch}'" in message:
        return True
    return "Merge pull request" in message and release_branch in message


def _matches_version_pattern(message: str) -> bool:
    if "chore: version packages" in message:
        return True
    if "version packages" in message.lower():
        return True
    return message.startswith("chore: release")


def is_release_commit_message(
    message: str | None,
    *,
    owner: str,
    release_branch: str,
) -> bool:
    """Return True if the head commit message looks like a merged release PR.

    Matches either a merge of the release branch (GitHub merge commit,
    `git merge` message) or the version-bump commit changesets creates.
    """
    text = message or ""
    return _matches_merge_pattern(
        text, owner=owner, release_branch=release_branch
    ) or _matches_version_pattern(text)


def truncate_commit_message(message: str | None, limit: int = COMMIT_MESSAGE_LIMIT) -> str:
    text = message or ""
    if len(text) <= limit:
        return text
    return text[:limit] + _ELLIPSIS
