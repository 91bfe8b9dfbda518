"""Tests for relphase.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from relphase.core.config import (
    DEFAULT_RELEASE_BRANCH,
    DEFAULT_TARGET_BRANCH,
    DetectionConfig,
    load_config,
)
from relphase.core.result import Err, Ok


class TestDetectionConfig:
    def test_defaults(self) -> None:
        config = DetectionConfig()
        assert config.release_branch == "changeset-release/main"
        assert config.target_branch == "main"

    def test_frozen(self) -> None:
        config = DetectionConfig()
        with pytest.raises(AttributeError):
            config.target_branch = "dev"  # type: ignore[misc]

    def test_from_dict(self) -> None:
        config = DetectionConfig.from_dict({"branches": {"release": "release/next", "target": "develop"}})
        assert config == DetectionConfig(release_branch="release/next", target_branch="develop")

    def test_from_dict_blank_values_use_defaults(self) -> None:
        config = DetectionConfig.from_dict({"branches": {"release": "  ", "target": 3}})
        assert config.release_branch == DEFAULT_RELEASE_BRANCH
        assert config.target_branch == DEFAULT_TARGET_BRANCH

    def test_with_overrides(self) -> None:
        config = DetectionConfig().with_overrides(release_branch=None, target_branch="develop")
        assert config.release_branch == DEFAULT_RELEASE_BRANCH
        assert config.target_branch == "develop"

    def test_with_overrides_ignores_empty(self) -> None:
        assert DetectionConfig().with_overrides(release_branch="", target_branch="") == DetectionConfig()


class TestLoadConfig:
    def test_load_valid(self, tmp_path: Path) -> None:
        path = tmp_path / "relphase.toml"
        path.write_text('[branches]\nrelease = "rel"\ntarget = "trunk"\n', encoding="utf-8")

        result = load_config(path)

        assert result == Ok(DetectionConfig(release_branch="rel", target_branch="trunk"))

    def test_load_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "relphase.toml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == Ok(DetectionConfig())

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")

        assert isinstance(result, Err)
        assert "not found" in result.error.message
        assert result.error.path == tmp_path / "missing.toml"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "relphase.toml"
        path.write_text("[branches\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message

    def test_branches_not_a_table(self, tmp_path: Path) -> None:
        path = tmp_path / "relphase.toml"
        path.write_text('branches = "main"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "[branches]" in result.error.message
