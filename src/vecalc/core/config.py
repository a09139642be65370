"""
Configuration for VECALC sessions.

Settings are read from a ``vecalc.toml`` file:

    [language]
    assignment_symbol = "="

    [shell]
    prompt = ">>> "
    banner = true
    quit_on_empty_line = true

    [logging]
    level = "WARNING"

Environment overrides:
    - VECALC_CONFIG: path to the TOML file (instead of ./vecalc.toml)
    - VECALC_LOG_LEVEL: log level (instead of [logging].level)
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from vecalc.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "vecalc.toml"
VECALC_CONFIG_VAR = "VECALC_CONFIG"
VECALC_LOG_LEVEL_VAR = "VECALC_LOG_LEVEL"

# Characters with a fixed meaning in the grammar
RESERVED_CHARACTERS = frozenset("+-*/()[],.")

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class LanguageConfig:
    """Grammar settings."""

    assignment_symbol: str = "="

    def __post_init__(self) -> None:
        symbol = self.assignment_symbol
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ConfigError(f"assignment_symbol must be a single character, got {symbol!r}")
        if symbol.isalnum() or symbol.isspace() or symbol in RESERVED_CHARACTERS:
            raise ConfigError(f"assignment_symbol {symbol!r} collides with the grammar")

    @property
    def operators(self) -> frozenset[str]:
        """Operator set used to terminate identifiers."""
        return frozenset("+-*/") | {self.assignment_symbol}


@dataclass(frozen=True)
class ShellConfig:
    """Interactive shell settings."""

    prompt: str = ">>> "
    banner: bool = True
    quit_on_empty_line: bool = True


@dataclass(frozen=True)
class VecalcConfig:
    """Complete session configuration."""

    language: LanguageConfig = field(default_factory=LanguageConfig)
    shell: ShellConfig = field(default_factory=ShellConfig)
    log_level: str = "WARNING"


def load_config(path: Path) -> VecalcConfig:
    """Load configuration from a TOML file.

    Raises:
        ConfigError: If the file cannot be read or holds invalid values.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    logger.debug("Loaded config from %s", path)
    return config_from_dict(data)


def config_from_dict(data: dict) -> VecalcConfig:
    """Build a VecalcConfig from parsed TOML data."""
    language_data = _table(data, "language")
    shell_data = _table(data, "shell")
    logging_data = _table(data, "logging")

    language = LanguageConfig(
        assignment_symbol=language_data.get("assignment_symbol", "="),
    )

    prompt = shell_data.get("prompt", ">>> ")
    if not isinstance(prompt, str):
        raise ConfigError(f"shell.prompt must be a string, got {prompt!r}")
    shell = ShellConfig(
        prompt=prompt,
        banner=_bool(shell_data, "banner", True),
        quit_on_empty_line=_bool(shell_data, "quit_on_empty_line", True),
    )

    log_level = os.environ.get(VECALC_LOG_LEVEL_VAR) or logging_data.get("level", "WARNING")
    return VecalcConfig(language=language, shell=shell, log_level=_log_level(log_level))


def find_config(start: Path | None = None) -> Path | None:
    """Locate the config file.

    VECALC_CONFIG wins over ``vecalc.toml`` in ``start`` (default: cwd).
    """
    override = os.environ.get(VECALC_CONFIG_VAR, "").strip()
    if override:
        return Path(override)

    candidate = (start or Path.cwd()) / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None


def resolve_config(path: Path | None = None) -> VecalcConfig:
    """Load ``path`` if given, else the discovered config, else defaults."""
    config_path = path or find_config()
    if config_path is None:
        return config_from_dict({})
    return load_config(config_path)


def _table(data: dict, name: str) -> dict:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] must be a table")
    return value


def _bool(data: dict, key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}")
    return value


def _log_level(value: object) -> str:
    level = str(value).upper().strip()
    if level not in _LOG_LEVELS:
        raise ConfigError(
            f"Unknown log level '{value}'. Valid values: {', '.join(sorted(_LOG_LEVELS))}"
        )
    return level
