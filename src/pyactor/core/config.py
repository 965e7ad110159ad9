# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Library settings: packaged defaults, an optional YAML/TOML file, PYACTOR_* env vars."""

from __future__ import annotations

import dataclasses
import importlib.resources
import os
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, TypeVar

import yaml  # type: ignore[import-untyped]

T = TypeVar("T")

DEFAULTS_RESOURCE = "pyactor-defaults.yaml"
ENV_PREFIX = "PYACTOR_"

_PREFIX_ATTR = "__pyactor_config_prefix__"


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a dataclass as bindable to the settings under *prefix*.

    Usage:
        @config_properties(prefix="pyactor.logging")
        @dataclass
        class LoggingProperties:
            format: str = "console"
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _PREFIX_ATTR, prefix)
        return cls

    return decorator


def env_name(key: str) -> str:
    """Environment variable overriding *key*: ``pyactor.logging.format`` -> ``PYACTOR_LOGGING_FORMAT``."""
    return ENV_PREFIX + key.removeprefix("pyactor.").upper().replace(".", "_").replace("-", "_")


def _merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = _merge(current, value)
        else:
            merged[key] = value
    return merged


def _read(path: Path) -> dict[str, Any]:
    if path.suffix == ".toml":
        with open(path, "rb") as f:
            return tomllib.load(f)
    with open(path) as f:
        return yaml.safe_load(f) or {}


class Config:
    """Nested settings read by dotted key.

    Scalar values can be overridden with ``PYACTOR_*`` environment
    variables (see :func:`env_name`); nested sections cannot.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data or {})
        self._sources: list[str] = []

    @classmethod
    def defaults(cls) -> Config:
        """Settings holding only the packaged defaults."""
        resource = importlib.resources.files("pyactor.resources").joinpath(DEFAULTS_RESOURCE)
        config = cls(yaml.safe_load(resource.read_text(encoding="utf-8")) or {})
        config._sources = [DEFAULTS_RESOURCE]
        return config

    @classmethod
    def from_file(cls, path: str | Path, load_defaults: bool = True) -> Config:
        """Load *path* (YAML, or TOML by suffix) over the packaged defaults.

        A missing file is skipped.
        """
        path = Path(path)
        config = cls.defaults() if load_defaults else cls()
        if path.is_file():
            config._data = _merge(config._data, _read(path))
            config._sources.append(str(path))
        return config

    @property
    def loaded_sources(self) -> list[str]:
        """Files merged into this config, in order."""
        return list(self._sources)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value at dotted *key*, or *default* when unset."""
        value = self._lookup(key)
        if not isinstance(value, Mapping):
            override = os.environ.get(env_name(key))
            if override is not None:
                return override
        return default if value is None else value

    def get_section(self, prefix: str) -> dict[str, Any]:
        section = self._lookup(prefix)
        return dict(section) if isinstance(section, Mapping) else {}

    def bind(self, properties_cls: type[T]) -> T:
        """Build a :func:`config_properties` dataclass from its section.

        Fields left unset keep their dataclass defaults.
        """
        prefix = getattr(properties_cls, _PREFIX_ATTR, None)
        if prefix is None or not dataclasses.is_dataclass(properties_cls):
            raise TypeError(f"{properties_cls.__name__} is not a @config_properties dataclass")
        values: dict[str, Any] = {}
        for field in dataclasses.fields(properties_cls):
            value = self.get(f"{prefix}.{field.name}")
            if value is not None:
                values[field.name] = value
        return properties_cls(**values)

    def _lookup(self, key: str) -> Any:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, Mapping):
                return None
            node = node.get(part)
        return node
