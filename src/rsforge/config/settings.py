"""Unified settings: CLI flags and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. TOML file: ``rsforge.toml`` from ``--config`` or walk-up discovery
  3. Code defaults: baked into the section models

Environment variables are not consulted.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from rsforge.config.discovery import find_config
from rsforge.config.models import CargoConfig, GitConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``rsforge.toml`` file."""

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


class ForgeSettings(BaseSettings):
    """Unified settings for the rsforge CLI.

    Stored on the :class:`~rsforge.commands._context.AppContext` created by
    the root group.

    Attributes:
        workdir: Directory projects are scaffolded into and ``add`` runs in.
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {"frozen": True}

    workdir: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    cargo: CargoConfig = Field(default_factory=CargoConfig)
    git: GitConfig = Field(default_factory=GitConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """CLI kwargs first, then TOML; env and dotenv sources are dropped."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        workdir: Path | None = None,
        **cli_flags: Any,
    ) -> ForgeSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* must exist; otherwise ``rsforge.toml`` is
        discovered by walking up from *workdir*. A file whose values do not
        fit the section models is reported as a ``click.ClickException``.
        """
        import click

        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if not p.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
            toml_path = p
        else:
            toml_path = find_config(workdir)

        _tls.toml_path = toml_path
        try:
            return cls(
                workdir=workdir or Path.cwd(),
                config_path=toml_path,
                **cli_flags,
            )
        except ValidationError as exc:
            msg = f"Invalid config in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None
