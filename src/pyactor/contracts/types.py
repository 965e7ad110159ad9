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
"""Type descriptors — primitive kinds and nominal types for rule type checks."""

from __future__ import annotations

import datetime
import numbers
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Any

from pyactor.kernel.exceptions import ContractDefinitionError


class PrimitiveKind(StrEnum):
    """Built-in value kinds understood by rule type checks."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    NUMERIC = "numeric"
    HASH = "hash"
    ARRAY = "array"
    BOOLEAN = "boolean"
    SYMBOL = "symbol"
    TIME = "time"
    DATE = "date"


_ALIASES: dict[str, PrimitiveKind] = {
    "str": PrimitiveKind.STRING,
    "int": PrimitiveKind.INTEGER,
    "number": PrimitiveKind.NUMERIC,
    "map": PrimitiveKind.HASH,
    "dict": PrimitiveKind.HASH,
    "list": PrimitiveKind.ARRAY,
    "sequence": PrimitiveKind.ARRAY,
    "bool": PrimitiveKind.BOOLEAN,
    "enum": PrimitiveKind.SYMBOL,
    "datetime": PrimitiveKind.TIME,
}


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_numeric(value: Any) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


_CHECKS: dict[PrimitiveKind, Callable[[Any], bool]] = {
    PrimitiveKind.STRING: lambda v: isinstance(v, str),
    PrimitiveKind.INTEGER: _is_integer,
    PrimitiveKind.FLOAT: lambda v: isinstance(v, float),
    PrimitiveKind.NUMERIC: _is_numeric,
    PrimitiveKind.HASH: lambda v: isinstance(v, Mapping),
    PrimitiveKind.ARRAY: lambda v: isinstance(v, (list, tuple)),
    PrimitiveKind.BOOLEAN: lambda v: isinstance(v, bool),
    PrimitiveKind.SYMBOL: lambda v: isinstance(v, Enum),
    PrimitiveKind.TIME: lambda v: isinstance(v, datetime.datetime),
    PrimitiveKind.DATE: lambda v: isinstance(v, datetime.date),
}


@dataclass(frozen=True)
class Primitive:
    """A built-in value kind, checked by runtime type inspection."""

    kind: PrimitiveKind
    label: str

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Nominal:
    """A class checked with ``isinstance`` semantics."""

    cls: type

    def __str__(self) -> str:
        return self.cls.__name__


TypeDescriptor = Primitive | Nominal


def resolve_type(descriptor: Any) -> TypeDescriptor:
    """Turn a user-supplied type argument into a :data:`TypeDescriptor`.

    Accepts a primitive kind name (``"integer"``, ``"str"``, ...), a
    :class:`PrimitiveKind` member, an existing descriptor, or any class.

    Raises:
        ContractDefinitionError: If *descriptor* is none of the above.
    """
    if isinstance(descriptor, (Primitive, Nominal)):
        return descriptor
    if isinstance(descriptor, str):
        label = descriptor.value if isinstance(descriptor, PrimitiveKind) else descriptor
        kind = _ALIASES.get(label)
        if kind is None:
            try:
                kind = PrimitiveKind(label)
            except ValueError:
                raise ContractDefinitionError(
                    f"Unknown type '{label}'. Expected one of "
                    f"{sorted({k.value for k in PrimitiveKind} | set(_ALIASES))} or a class",
                    code="CONTRACT_INVALID_TYPE",
                ) from None
        return Primitive(kind=kind, label=label)
    if isinstance(descriptor, type):
        return Nominal(cls=descriptor)
    raise ContractDefinitionError(
        f"Type must be a kind name or a class, got {type(descriptor).__name__}",
        code="CONTRACT_INVALID_TYPE",
    )


def matches_type(value: Any, descriptor: TypeDescriptor) -> bool:
    """Return ``True`` if *value* satisfies *descriptor*."""
    if isinstance(descriptor, Primitive):
        return _CHECKS[descriptor.kind](value)
    return isinstance(value, descriptor.cls)
