"""Result type for explicit error handling.

Every boundary that can fail (reading the event payload, loading the config
file, calling the GitHub API) returns a Result instead of raising, so the
caller decides whether a failure is fatal or recoverable.

Usage:
    match list_pull_requests_for_commit(http, owner, repo, sha):
        case Ok(pulls):
            ...
        case Err(error):
            console.warning(str(error))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Represents a successful result containing a value."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Represents a failed result containing an error."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Union[Ok[T], Err[E]]
