"""Layered settings for the shieldctl CLI.

Highest priority first:

1. CLI flags, passed by Click as init kwargs
2. ``SHIELDCTL_*`` environment variables (``__`` separates nested keys,
   e.g. ``SHIELDCTL_VALIDATION__STRICT_WITHDRAW_COLLATERAL=true``)
3. ``shieldctl.toml``
4. Defaults baked into the section models
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from shieldctl.config.discovery import read_toml, resolve_config
from shieldctl.config.models import OutputConfig, PluginsConfig, ValidationConfig

# TOML file for the settings object under construction; set by from_cli().
_toml_path: ContextVar[Path | None] = ContextVar("shieldctl_toml_path", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a single TOML file.

    No file contributes nothing.  A file with bad syntax is a usage error.
    """

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = self._load(path) if path is not None else {}

    @staticmethod
    def _load(path: Path) -> dict[str, Any]:
        try:
            return read_toml(path)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


class ShieldSettings(BaseSettings):
    """Everything a CLI invocation needs to know, frozen.

    Attributes:
        config_path: The TOML file that was read, or None.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="SHIELDCTL_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _toml_path.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> ShieldSettings:
        """Build settings for one CLI invocation.

        *config_path* is the ``--config`` value; without it the file is
        discovered from *cwd*.
        """
        toml_path = resolve_config(config_path, cwd)
        token = _toml_path.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _toml_path.reset(token)
