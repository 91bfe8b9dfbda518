from __future__ import annotations

import pytest

from relphase.phase.heuristics import is_release_commit_message, truncate_commit_message

RELEASE = "changeset-release/main"


def _matches(message: str | None) -> bool:
    return is_release_commit_message(message, owner="acme", release_branch=RELEASE)


@pytest.mark.parametrize(
    "message",
    [
        "Merge pull request #12 from acme/changeset-release/main",
        "Merge branch 'changeset-release/main' into main",
        "Merge pull request #3 from fork/x\n\nchangeset-release/main",
        "chore: version packages",
        "Version Packages (#44)",
        "ci: VERSION PACKAGES",
        "chore: release v1.2.3",
    ],
)
def test_release_messages_match(message: str) -> None:
    assert _matches(message)


@pytest.mark.parametrize(
    "message",
    [
        "feat: add new feature",
        "Merge pull request #12 from acme/feature/x",
        "Merge branch 'main' into feature",
        "fix: chore: release notes typo",
        "",
        None,
    ],
)
def test_other_messages_do_not_match(message: str | None) -> None:
    assert not _matches(message)


def test_owner_is_part_of_the_from_pattern() -> None:
    message = "Squash from acme/changeset-release/main"
    assert _matches(message)
    assert not is_release_commit_message(message, owner="other", release_branch=RELEASE)


def test_release_branch_is_configurable() -> None:
    assert is_release_commit_message(
        "Merge branch 'release/next' into develop",
        owner="acme",
        release_branch="release/next",
    )


class TestTruncateCommitMessage:
    def test_short_message_unchanged(self) -> None:
        assert truncate_commit_message("fix: typo") == "fix: typo"

    def test_exactly_limit_unchanged(self) -> None:
        message = "x" * 100
        assert truncate_commit_message(message) == message

    def test_over_limit_gets_ellipsis(self) -> None:
        result = truncate_commit_message("y" * 101)
        assert len(result) == 103
        assert result == "y" * 100 + "..."

    def test_none_is_empty(self) -> None:
        assert truncate_commit_message(None) == ""

    @pytest.mark.parametrize("length", [0, 1, 99, 100, 101, 250])
    def test_length_law(self, length: int) -> None:
        result = truncate_commit_message("m" * length)
        expected = length if length <= 100 else 103
        assert len(result) == expected
