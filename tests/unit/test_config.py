"""Tests for vecalc.toml loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from vecalc.core.config import (
    LanguageConfig,
    VecalcConfig,
    config_from_dict,
    find_config,
    load_config,
    resolve_config,
)
from vecalc.core.errors import ConfigError


class TestLanguageConfig:
    def test_defaults(self) -> None:
        language = LanguageConfig()
        assert language.assignment_symbol == "="
        assert language.operators == frozenset("+-*/=")

    def test_colon_symbol(self) -> None:
        assert ":" in LanguageConfig(assignment_symbol=":").operators

    @pytest.mark.parametrize("symbol", ["", "==", "+", "a", "1", "(", ",", ".", " "])
    def test_invalid_symbols(self, symbol: str) -> None:
        with pytest.raises(ConfigError):
            LanguageConfig(assignment_symbol=symbol)


class TestLoadConfig:
    def test_full_file(self, tmp_path: Path) -> None:
        path = tmp_path / "vecalc.toml"
        path.write_text(
            """
[language]
assignment_symbol = ":"

[shell]
prompt = "calc> "
banner = false
quit_on_empty_line = false

[logging]
level = "debug"
"""
        )
        config = load_config(path)
        assert config.language.assignment_symbol == ":"
        assert config.shell.prompt == "calc> "
        assert config.shell.banner is False
        assert config.shell.quit_on_empty_line is False
        assert config.log_level == "DEBUG"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "vecalc.toml"
        path.write_text("")
        assert load_config(path) == VecalcConfig()

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "vecalc.toml"
        path.write_text("[language\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / "nope.toml")

    def test_table_must_be_table(self) -> None:
        with pytest.raises(ConfigError, match=r"\[shell\]"):
            config_from_dict({"shell": "yes"})

    def test_banner_must_be_bool(self) -> None:
        with pytest.raises(ConfigError, match="banner"):
            config_from_dict({"shell": {"banner": "yes"}})

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ConfigError, match="Unknown log level"):
            config_from_dict({"logging": {"level": "chatty"}})

    def test_log_level_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VECALC_LOG_LEVEL", "info")
        config = config_from_dict({"logging": {"level": "ERROR"}})
        assert config.log_level == "INFO"


class TestFindConfig:
    def test_finds_file_in_directory(self, tmp_path: Path) -> None:
        path = tmp_path / "vecalc.toml"
        path.write_text("")
        assert find_config(tmp_path) == path

    def test_nothing_found(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "custom.toml"
        monkeypatch.setenv("VECALC_CONFIG", str(custom))
        assert find_config(tmp_path) == custom

    def test_resolve_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert resolve_config() == VecalcConfig()
