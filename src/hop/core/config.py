"""Application configuration management.

Handles loading and validating configuration from multiple sources:
    - An optional TOML config file
    - Environment variables (HOP_* prefix)
    - Default values

Key components:
    - HopConfig: Main configuration model
    - load_config(): Safe config loading with fallback
    - ConfigLoadResult: Metadata about config source
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from contextlib import nullcontext
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from unittest.mock import patch

from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    SettingsError,
)

from hop.core.paths import app_config_dir
from hop.core.result import ConfigDirUnavailable

CONFIG_ENV_VAR = "HOP_CONFIG"
CONFIG_FILENAME = "config.toml"
SHORTCUTS_FILENAME = "paths.csv"


class ConfigError(RuntimeError):
    """Raised when configuration cannot be loaded or validated."""


class HopConfig(BaseSettings):
    """Application-wide configuration."""

    model_config = SettingsConfigDict(
        env_prefix="HOP_",
        extra="ignore",
    )

    store_dir: Path | None = Field(
        default=None,
        description="Directory holding paths.csv (defaults to the platform config dir).",
    )
    finder: str = Field(default="fzf", description="Interactive fuzzy finder executable.")
    finder_args: list[str] = Field(
        default_factory=lambda: ["--height", "40%", "--reverse"],
        description="Extra arguments passed to the fuzzy finder.",
    )
    log_level: str = Field(default="WARNING", description="Log level for hop output.")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
    ]:
        # Ensure environment variables override config file entries.
        return (env_settings, init_settings, dotenv_settings, file_secret_settings)

    def shortcuts_path(self) -> Path:
        """Location of the shortcut file.

        Raises:
            ConfigDirUnavailable: If no store_dir is set and the platform
                config directory cannot be determined.
        """
        base = self.store_dir.expanduser() if self.store_dir else app_config_dir()
        return base / SHORTCUTS_FILENAME


@dataclass
class ConfigLoadResult:
    path: Path | None
    file_loaded: bool
    env_overrides: set[str]
    error: str | None = None


def _resolve_config_path(config_path: Path | None, env_vars: Mapping[str, str]) -> Path | None:
    candidate = config_path or env_vars.get(CONFIG_ENV_VAR)
    if candidate:
        return Path(candidate).expanduser()
    try:
        return app_config_dir() / CONFIG_FILENAME
    except ConfigDirUnavailable:
        return None


def _read_config_file(path: Path | None) -> dict[str, Any]:
    if path is None or not path.exists():
        return {}

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Syntax error in {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    return data


def _detect_env_overrides(env_vars: Mapping[str, str]) -> set[str]:
    """Detect which fields are overridden by environment variables."""
    prefix = HopConfig.model_config.get("env_prefix", "")
    return {
        field
        for field in HopConfig.model_fields
        if f"{prefix}{field}".upper() in env_vars
    }


def load_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> tuple[HopConfig, ConfigLoadResult]:
    """
    Load configuration with Safe Mode fallback.
    If the file is invalid, returns default config + error message.
    """
    env_vars: Mapping[str, str] = os.environ if env is None else {**os.environ, **env}
    env_overrides = _detect_env_overrides(env_vars)

    error: str | None = None
    file_loaded = False
    file_data: dict[str, Any] = {}

    context_manager = (
        patch.dict(os.environ, env_vars, clear=False) if env is not None else nullcontext()
    )

    with context_manager:
        resolved_path = _resolve_config_path(config_path, env_vars)
        try:
            file_data = _read_config_file(resolved_path)
            file_loaded = resolved_path is not None and resolved_path.exists()
        except ConfigError as exc:
            error = str(exc)

        try:
            config = HopConfig(**file_data)
        except (ValidationError, SettingsError) as exc:
            error = str(exc)
            config = HopConfig.model_construct()

    load_result = ConfigLoadResult(
        path=resolved_path,
        file_loaded=file_loaded,
        env_overrides=env_overrides,
        error=error,
    )

    return config, load_result
