"""Unified settings — init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — values passed by the embedding host
  2. Env vars     — ``DPHTX_*`` prefix
  3. TOML file    — ``dphtx.toml`` discovered via walk-up
  4. Code defaults

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`dphtx.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from dphtx.config.discovery import find_config
from dphtx.config.models import RuleConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``dphtx.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise ValueError(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class LintSettings(BaseSettings):
    """Settings for evaluating assistant packages.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        verbose: Debug-level logging for the ``dphtx`` logger.
        log_json: JSON log lines instead of the console renderer.
        max_workers: Rules evaluated concurrently per document (1 = sequential).
        ignored_object_ids: ``do_objectID`` values whose nodes are never reported.
        rules: Per-rule overrides layered over each package's default config.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DPHTX_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    verbose: bool = False
    log_json: bool = False
    max_workers: int = Field(default=1, ge=1)
    ignored_object_ids: list[str] = Field(default_factory=list)
    rules: dict[str, RuleConfig] = Field(default_factory=dict)

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
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> LintSettings:
        """Construct settings, discovering ``dphtx.toml`` unless *config_path* is given.

        An explicit *config_path* that does not exist is ignored, as if no
        file had been found.
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
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
