"""Tests for relphase.core.errors module."""

from relphase.core.errors import ErrorCode


def test_values_are_stable() -> None:
    assert ErrorCode.OK == 0
    assert ErrorCode.USER_ERROR == 1
    assert ErrorCode.ENV_ERROR == 2


def test_usable_as_exit_code() -> None:
    assert int(ErrorCode.ENV_ERROR) == 2
