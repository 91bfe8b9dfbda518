"""Error codes for CLI exit status.

These values map to shell exit codes. Phase detection itself never fails;
the codes only describe failures of the surrounding CLI (bad config file,
unreadable CI environment).
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success (including the "none" phase)
    - 1: User error (bad options, invalid config file)
    - 2: Environment error (missing CI variables, unreadable event payload)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
