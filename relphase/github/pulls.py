"""Pull requests associated with a commit (GitHub REST API)."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import quote

from relphase.core.result import Err, Ok, Result
from relphase.core.structured import as_obj_list, as_str_dict, get_int, get_raw_str, get_table
from relphase.github.http import GITHUB_API_URL, HttpError

if TYPE_CHECKING:
    from relphase.github.http import HttpClient

__all__ = [
    "AssociatedPullRequest",
    "PullRequestLookup",
    "github_lookup",
    "list_pull_requests_for_commit",
]


@dataclass(frozen=True, slots=True)
class AssociatedPullRequest:
    number: int
    merged_at: str | None
    head_ref: str
    base_ref: str

    @property
    def is_merged(self) -> bool:
        return self.merged_at is not None


PullRequestLookup = Callable[[str, str, str], Result[list[AssociatedPullRequest], HttpError]]


def list_pull_requests_for_commit(
    http: HttpClient,
    owner: str,
    repo: str,
    sha: str,
) -> Result[list[AssociatedPullRequest], HttpError]:
    """List pull requests associated with a commit, in API order.

    Args:
        http: HTTP client to use
        owner: Repository owner (user or organization)
        repo: Repository name
        sha: Commit SHA

    Returns:
        Ok with the parsed pull requests (malformed entries skipped), or
        Err with HttpError if the request failed or the body is not a list.
    """
    url = f"{GITHUB_API_URL}/repos/{quote(owner)}/{quote(repo)}/commits/{quote(sha)}/pulls"
    result = http.get_json(url)
    if isinstance(result, Err):
        return result

    raw = as_obj_list(result.value)
    if raw is None:
        return Err(HttpError(url=url, status=0, message="Expected JSON array of pull requests"))

    out: list[AssociatedPullRequest] = []
    for item in raw:
        d = as_str_dict(item)
        if d is None:
            continue

        number = get_int(d, "number")
        head = get_table(d, "head")
        base = get_table(d, "base")
        if number is None or head is None or base is None:
            continue

        head_ref = get_raw_str(head, "ref")
        base_ref = get_raw_str(base, "ref")
        if head_ref is None or base_ref is None:
            continue

        out.append(
            AssociatedPullRequest(
                number=number,
                merged_at=get_raw_str(d, "merged_at"),
                head_ref=head_ref,
                base_ref=base_ref,
            )
        )

    return Ok(out)


def github_lookup(http: HttpClient) -> PullRequestLookup:
    """Bind an HttpClient into a PullRequestLookup."""

    def lookup(
        owner: str, repo: str, sha: str
    ) -> Result[list[AssociatedPullRequest], HttpError]:
        return list_pull_requests_for_commit(http, owner, repo, sha)

    return lookup
