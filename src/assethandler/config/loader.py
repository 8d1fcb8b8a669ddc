"""Configuration loading for the asset handler."""

from __future__ import annotations

import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from assethandler.core.container import compile_file_regex

DEFAULT_CONFIG_PATH = Path("config/default.yaml")
LOCAL_CONFIG_PATH = Path("config/local.yaml")


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    path: Path | None = None
    level: str = Field(default="info")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        if not isinstance(value, str):
            raise TypeError("Logging level must be a string.")
        normalized = value.strip().lower()
        if normalized not in {"debug", "info", "warn", "warning", "error", "critical"}:
            raise ValueError(f"Unsupported logging level: {value!r}")
        return normalized


class ContainerSettings(BaseModel):
    """Settings for a single asset container."""

    model_config = ConfigDict(extra="forbid")

    url: str
    path: str | None = None
    print_pattern: str
    file_regex: str | None = None
    versioned: bool = False

    @field_validator("print_pattern")
    @classmethod
    def _require_pattern(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("print_pattern must not be empty.")
        return value

    @field_validator("file_regex")
    @classmethod
    def _validate_regex(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            compile_file_regex(value)
        except re.error as exc:
            raise ValueError(f"Invalid file_regex {value!r}: {exc}") from exc
        return value


class ConfigModel(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    version: int = 1
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    containers: dict[str, ContainerSettings] = Field(default_factory=dict)

    @field_validator("containers", mode="before")
    @classmethod
    def _normalize_containers(cls, value: Any) -> dict[str, Any]:
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise TypeError("containers must be a mapping of name -> container settings.")
        for key in value:
            if not isinstance(key, str) or not key.strip():
                raise TypeError("Container names must be non-empty strings.")
        return value


@dataclass(slots=True)
class Config:
    """Validated configuration with convenience helpers."""

    model: ConfigModel
    raw: Mapping[str, Any] = field(repr=False)
    loaded_from: tuple[str, ...] = field(default_factory=tuple, repr=False)

    @property
    def logging(self) -> LoggingSettings:
        """Return logging settings."""

        return self.model.logging

    @property
    def containers(self) -> dict[str, ContainerSettings]:
        """Return container settings in declaration order."""

        return self.model.containers

    def get_container(self, name: str) -> ContainerSettings:
        """Fetch container settings by name."""

        try:
            return self.model.containers[name]
        except KeyError as exc:
            raise KeyError(f"Container '{name}' is not defined.") from exc

    def model_dump(self) -> Mapping[str, Any]:
        """Expose the parsed configuration as a mapping."""

        return self.model.model_dump()


def load_config(path: Path | None = None) -> Config:
    """Load configuration from defaults/local overrides, or from an explicit config document."""

    merged: dict[str, Any] = {}
    loaded_from: list[str] = []

    if path is not None:
        override_path = _resolve_path(path)
        if override_path is None or not override_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
        merged = _merge_dicts(merged, _read_yaml(override_path))
        loaded_from.append(str(override_path))
    else:
        default_candidate = _resolve_path(DEFAULT_CONFIG_PATH)
        packaged_default = _resolve_packaged_path(DEFAULT_CONFIG_PATH)
        if default_candidate and default_candidate.exists():
            merged = _merge_dicts(merged, _read_yaml(default_candidate))
            loaded_from.append(str(default_candidate))
        elif packaged_default and packaged_default.exists():
            merged = _merge_dicts(merged, _read_yaml(packaged_default))
            loaded_from.append(str(packaged_default))
        else:
            packaged_payload = _read_packaged_yaml("assethandler.config", "default.yaml")
            if packaged_payload is not None:
                merged = _merge_dicts(merged, packaged_payload)
                loaded_from.append("assethandler.config:default.yaml")

        local_candidate = _resolve_path(LOCAL_CONFIG_PATH)
        if local_candidate and local_candidate.exists():
            merged = _merge_dicts(merged, _read_yaml(local_candidate))
            loaded_from.append(str(local_candidate))

    if not merged:
        raise FileNotFoundError("No configuration data could be loaded.")

    try:
        model = ConfigModel.model_validate(merged)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc

    return Config(model=model, raw=merged, loaded_from=tuple(loaded_from))


def _resolve_path(path: Path) -> Path | None:
    """Resolve configuration paths relative to the current working directory."""

    if path is None:
        return None
    return path if path.is_absolute() else Path.cwd() / path


def _resolve_packaged_path(path: Path) -> Path | None:
    """Resolve paths embedded in packaged binaries (e.g., PyInstaller)."""

    base = getattr(sys, "_MEIPASS", None)
    if not base:
        return None
    return Path(base) / path


def _read_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML file into a dictionary."""

    content = path.read_text(encoding="utf-8")
    data = yaml.safe_load(content) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {path} must define a mapping at the top level.")
    return data


def _read_packaged_yaml(package: str, name: str) -> dict[str, Any] | None:
    """Read YAML embedded in a Python package via importlib.resources."""

    try:
        content = resources.files(package).joinpath(name).read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    data = yaml.safe_load(content) or {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Packaged configuration {package}:{name} must define a mapping at the top level."
        )
    return data


def _merge_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two dictionaries, with override values taking precedence.

    Nested mappings keep the key order of ``base``; new keys from ``override`` are
    appended, so container declaration order survives local overrides.
    """

    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value
    return result
