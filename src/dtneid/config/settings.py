"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``DTNEID_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``dtneid.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from dtneid.config.discovery import find_config
from dtneid.config.models import CodecConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from the dtneid.toml file named by ``config_path``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class DtnEidSettings(BaseSettings):
    """Settings for the dtneid CLI, frozen after construction.

    Attributes:
        config_path: TOML file the sections were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DTNEID_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    codec: CodecConfig = Field(default_factory=CodecConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        init_kwargs: dict[str, Any] = getattr(init_settings, "init_kwargs", {})
        toml_path = init_kwargs.get("config_path")
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, Path(toml_path) if toml_path else None),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> DtnEidSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* that is not a file is ignored; otherwise
        dtneid.toml is discovered by walking up from *start* (default: cwd).
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)
        return cls(config_path=toml_path, **cli_flags)
