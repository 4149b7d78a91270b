"""Settings objects — CLI flags, env vars, and TOML config.

``DateFmtSettings`` priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``DATEFMT_*`` prefix
  3. TOML file    — ``datefmt.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

``FormatSettings`` is separate: it reads the un-prefixed ``DATE_FORMAT``,
``TIME_FORMAT`` and ``DATETIME_FORMAT`` variables and is rebuilt on every
call so a changed environment is picked up immediately.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from datefmt.config.discovery import find_config
from datefmt.config.models import LocaleConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``datefmt.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class DateFmtSettings(BaseSettings):
    """Unified settings for the datefmt CLI.

    Attributes:
        config_path: The TOML file the settings were read from, or None.
        locale: ``[locale]`` section.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DATEFMT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    locale: LocaleConfig = Field(default_factory=LocaleConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> DateFmtSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* when it names a file, otherwise
        discovers ``datefmt.toml`` by walking up from *start* (default: cwd).
        CLI flags are merged as highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None


class FormatSettings(BaseSettings):
    """Explicit LDML patterns overriding locale-aware output.

    Unset (or empty) variables leave the matching field as None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "",
        "env_ignore_empty": True,
    }

    date_format: str | None = None
    time_format: str | None = None
    datetime_format: str | None = None


def load_format_settings() -> FormatSettings:
    """Read the format overrides from the current environment."""
    return FormatSettings()
