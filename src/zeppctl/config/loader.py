"""Load :class:`ZeppelinSettings` from a YAML file."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from zeppctl.config.models import ZeppelinSettings
from zeppctl.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


class SettingsLoader:
    """Load and validate a settings YAML file into a :class:`ZeppelinSettings`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> ZeppelinSettings:
        """Read YAML, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before YAML parsing. An empty file
        yields the default settings.

        Raises:
            ConfigError: On read errors, YAML parse errors, or validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read {self._path}: {exc}") from exc

        expanded = os.path.expandvars(raw)

        try:
            data: Any = yaml.safe_load(expanded)
        except yaml.YAMLError as exc:
            raise ConfigError(f"YAML parse error: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Settings YAML must be a mapping")

        try:
            return ZeppelinSettings.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc
