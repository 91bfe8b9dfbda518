"""GitHub Actions environment and REST API access."""

from .event import EventError, load_event_context
from .http import HttpClient, HttpError, MockHttpClient, RealHttpClient
from .pulls import AssociatedPullRequest, github_lookup, list_pull_requests_for_commit

__all__ = [
    "AssociatedPullRequest",
    "EventError",
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
    "github_lookup",
    "list_pull_requests_for_commit",
    "load_event_context",
]
