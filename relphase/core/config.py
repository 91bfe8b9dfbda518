"""Typed configuration loading and access.

The only tunables are the two branch names the phase detector compares
against. They can come from a TOML file:

    [branches]
    release = "changeset-release/main"
    target = "main"

and are overridden by CLI options.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "DEFAULT_RELEASE_BRANCH",
    "DEFAULT_TARGET_BRANCH",
    "ConfigError",
    "DetectionConfig",
    "load_config",
]

DEFAULT_RELEASE_BRANCH = "changeset-release/main"
DEFAULT_TARGET_BRANCH = "main"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class DetectionConfig:
    """Branch names used by phase detection."""

    release_branch: str = DEFAULT_RELEASE_BRANCH
    target_branch: str = DEFAULT_TARGET_BRANCH

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> DetectionConfig:
        """Create DetectionConfig from a mapping (parsed TOML)."""
        branches: StrDict = get_table(data, "branches") or {}
        return cls(
            release_branch=get_str(branches, "release") or DEFAULT_RELEASE_BRANCH,
            target_branch=get_str(branches, "target") or DEFAULT_TARGET_BRANCH,
        )

    def with_overrides(
        self,
        *,
        release_branch: str | None = None,
        target_branch: str | None = None,
    ) -> DetectionConfig:
        """Return a copy with non-empty overrides applied."""
        return replace(
            self,
            release_branch=release_branch or self.release_branch,
            target_branch=target_branch or self.target_branch,
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[DetectionConfig, ConfigError]:
    """Load and parse detection configuration from a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(DetectionConfig) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    branches = result.value.get("branches")
    if branches is not None and as_str_dict(branches) is None:
        return Err(ConfigError("[branches] must be a table", path=path))

    return Ok(DetectionConfig.from_dict(result.value))

