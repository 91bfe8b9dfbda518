"""HTTP client abstraction for the GitHub REST API.

This module provides:
- HttpClient: Protocol for HTTP operations (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation for testing
"""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from relphase import __version__
from relphase.core.result import Err, Ok, Result

__all__ = [
    "GITHUB_API_URL",
    "HttpClient",
    "RealHttpClient",
    "MockHttpClient",
    "HttpError",
]

GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network errors)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP operations.

    Allows injecting mock clients in tests so no real network call is made.
    """

    def get_json(self, url: str) -> Result[object, HttpError]:
        """Fetch URL and parse the body as JSON (object or array)."""
        ...


class RealHttpClient:
    """Real HTTP client using urllib.

    Sends the GitHub API headers and, when a token is given, a bearer
    Authorization header. A single request is made per call; there is no
    retry policy.
    """

    def __init__(
        self,
        token: str | None = None,
        timeout: float = 10.0,
        user_agent: str = f"relphase/{__version__}",
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._token = token
        self._ssl_context = ssl.create_default_context()

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _request(self, url: str) -> Result[bytes, HttpError]:
        try:
            req = urllib.request.Request(url, headers=self._headers())
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                return Ok(response.read())
        except urllib.error.HTTPError as e:
            return Err(HttpError(url=url, status=e.code, message=str(e.reason)))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Request timed out"))
        except ValueError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))
        except OSError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))

    def get_json(self, url: str) -> Result[object, HttpError]:
        result = self._request(url)
        if isinstance(result, Err):
            return result

        try:
            data: object = json.loads(result.value.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(HttpError(url=url, status=0, message=f"JSON parse error: {e}"))
        return Ok(data)


class MockHttpClient:
    """Mock HTTP client for testing.

    Usage:
        client = MockHttpClient()
        client.set_json("https://api.github.com/repos/o/r/commits/abc/pulls", [])
        result = client.get_json("https://api.github.com/repos/o/r/commits/abc/pulls")
        assert result == Ok([])
    """

    def __init__(self) -> None:
        self._json_responses: dict[str, object] = {}
        self.calls: list[tuple[str, str]] = []

    def set_json(self, url: str, response: object) -> None:
        """Set JSON response (or an HttpError) for URL."""
        self._json_responses[url] = response

    def get_json(self, url: str) -> Result[object, HttpError]:
        self.calls.append(("get_json", url))

        if url not in self._json_responses:
            return Err(HttpError(url=url, status=404, message="Not found (mock)"))

        response = self._json_responses[url]
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(response)
