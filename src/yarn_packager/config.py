"""Configuration for the yarn packager.

Settings are read from a JSON document shaped like::

    {
        "packagerOptions": {
            "noFrozenLockfile": false,
            "ignoreScripts": false,
            "networkConcurrency": 8
        },
        "ignoredErrors": ["YN0060"]
    }

The document is checked against a JSON Schema before use. ``packagerOptions``
keeps the camelCase names the build pipeline already uses for its packager
options; ``ignoredErrors`` lists stderr prefixes that do not make a failed
dependency listing fatal.
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

CONFIG_PATH_ENV_VAR = "YARN_PACKAGER_CONFIG"

PACKAGER_OPTIONS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "noFrozenLockfile": {"type": "boolean"},
        "ignoreScripts": {"type": "boolean"},
        "networkConcurrency": {"type": "integer", "minimum": 1},
    },
    "additionalProperties": False,
}

SETTINGS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "packagerOptions": PACKAGER_OPTIONS_SCHEMA,
        "ignoredErrors": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
        },
    },
    "additionalProperties": False,
}


class ConfigError(RuntimeError):
    """Raised when the configuration cannot be loaded or is invalid."""


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def _validate(document: Any, schema: dict[str, Any]) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(
        validator.iter_errors(document),
        key=lambda e: "/".join(str(p) for p in e.path),
    )
    if errors:
        raise ConfigError("Invalid packager configuration:\n" + _format_errors(errors))


@dataclass(slots=True, frozen=True)
class PackagerOptions:
    """Options translated into ``yarn install`` flags."""

    no_frozen_lockfile: bool = False
    ignore_scripts: bool = False
    network_concurrency: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PackagerOptions:
        """Create options from the camelCase mapping, validating it first."""
        document = dict(data)
        _validate(document, PACKAGER_OPTIONS_SCHEMA)
        return cls(
            no_frozen_lockfile=document.get("noFrozenLockfile", False),
            ignore_scripts=document.get("ignoreScripts", False),
            network_concurrency=document.get("networkConcurrency"),
        )

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "noFrozenLockfile": self.no_frozen_lockfile,
            "ignoreScripts": self.ignore_scripts,
        }
        if self.network_concurrency is not None:
            data["networkConcurrency"] = self.network_concurrency
        return data

    def install_args(self) -> list[str]:
        args: list[str] = []
        if not self.no_frozen_lockfile:
            args.append("--frozen-lockfile")
        if self.ignore_scripts:
            args.append("--ignore-scripts")
        if self.network_concurrency:
            args.extend(["--network-concurrency", str(self.network_concurrency)])
        return args


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    packager_options: PackagerOptions = field(default_factory=PackagerOptions)
    ignored_errors: tuple[str, ...] = ()


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. YARN_PACKAGER_CONFIG environment variable
    3. None, meaning built-in defaults
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings from a JSON file.

    Args:
        path: Optional path to the config file. If not provided, uses the
            YARN_PACKAGER_CONFIG env var or falls back to default settings.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)
    if config_path is None:
        return Settings()

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    _validate(data, SETTINGS_SCHEMA)

    return Settings(
        packager_options=PackagerOptions.from_dict(data.get("packagerOptions", {})),
        ignored_errors=tuple(data.get("ignoredErrors", [])),
    )
