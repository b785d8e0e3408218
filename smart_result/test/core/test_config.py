"""Tests for smart_result.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from smart_result.core.config import (
    CheckConfig,
    Config,
    ConfigError,
    DiagnosticsConfig,
    load_config,
    load_config_or_default,
)
from smart_result.core.result import Err, Ok


class TestDefaults:
    def test_diagnostics_defaults(self) -> None:
        config = DiagnosticsConfig()
        assert config.enabled is True
        assert config.traceback is True
        assert config.show_locals is False
        assert config.width is None

    def test_check_defaults(self) -> None:
        assert CheckConfig().allow_reserved is False

    def test_frozen(self) -> None:
        config = DiagnosticsConfig()
        with pytest.raises(AttributeError):
            config.enabled = False  # type: ignore[misc]


class TestFromDict:
    def test_empty(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_full(self) -> None:
        config = Config.from_dict(
            {
                "diagnostics": {"enabled": False, "traceback": False, "show_locals": True, "width": 120},
                "check": {"allow_reserved": True},
            }
        )
        assert config.diagnostics == DiagnosticsConfig(
            enabled=False, traceback=False, show_locals=True, width=120
        )
        assert config.check.allow_reserved is True

    def test_wrong_types_fall_back_to_defaults(self) -> None:
        config = Config.from_dict({"diagnostics": {"traceback": "yes"}, "check": "nope"})
        assert config.diagnostics.traceback is True
        assert config.check.allow_reserved is False

    @pytest.mark.parametrize("width", [0, -5, "wide", True])
    def test_invalid_width(self, width: object) -> None:
        with pytest.raises(ValueError, match="width"):
            Config.from_dict({"diagnostics": {"width": width}})


class TestLoadConfig:
    def test_load_valid(self, tmp_path: Path) -> None:
        path = tmp_path / "smart-result.toml"
        path.write_text(
            "[diagnostics]\ntraceback = false\nwidth = 80\n\n[check]\nallow_reserved = true\n",
            encoding="utf-8",
        )
        result = load_config(path)
        assert isinstance(result, Ok)
        assert result.value.diagnostics.traceback is False
        assert result.value.diagnostics.width == 80
        assert result.value.check.allow_reserved is True

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.toml"
        result = load_config(path)
        assert isinstance(result, Err)
        assert result.error == ConfigError(f"Config file not found: {path}", path=path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("[diagnostics\n", encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid TOML syntax" in result.error.message

    def test_invalid_structure(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("[diagnostics]\nwidth = -1\n", encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message
        assert result.error.path == path

    def test_directory_is_an_error(self, tmp_path: Path) -> None:
        result = load_config(tmp_path)
        assert isinstance(result, Err)


class TestLoadConfigOrDefault:
    def test_missing_gives_defaults(self, tmp_path: Path) -> None:
        assert load_config_or_default(tmp_path / "missing.toml") == Config()

    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "c.toml"
        path.write_text("[diagnostics]\nenabled = false\n", encoding="utf-8")
        assert load_config_or_default(path).diagnostics.enabled is False
