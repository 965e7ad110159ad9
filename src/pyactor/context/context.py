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
"""Context — mutable state carrier for one actor invocation or organized chain."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from pyactor.kernel.exceptions import Failure

logger = logging.getLogger(__name__)


@runtime_checkable
class Compensable(Protocol):
    """Anything the context can ask to undo its forward operation."""

    def rollback(self) -> Any: ...


def normalize_key(key: Any) -> str:
    """Return the canonical attribute name for *key*.

    ``str`` keys and ``str``-valued enum members naming the same attribute
    map to the same interned string.
    """
    if isinstance(key, Enum) and isinstance(key.value, str):
        key = key.value
    if not isinstance(key, str):
        raise TypeError(f"Context keys must be str or a str-valued Enum, got {type(key).__name__}")
    return sys.intern(key)


class Context:
    """Dynamically keyed record tracking success/failure and completed actors.

    Attributes are set and read by name, either through the mapping protocol
    (``ctx["user"]``), the explicit accessors (``ctx.get("user")``), or plain
    attribute access (``ctx.user``). Reading a name that was never written
    yields ``None``.

    The context also owns rollback: every actor that completes against it is
    recorded, and :meth:`rollback` compensates them in reverse order.

    Usage::

        ctx = Context(foo="bar")
        ctx.hello = "world"
        ctx.to_dict()
        # {'foo': 'bar', 'hello': 'world'}
    """

    __slots__ = ("_table", "_failed", "_completed", "_rolled_back")

    def __init__(self, attributes: Mapping[Any, Any] | None = None, **kwargs: Any) -> None:
        object.__setattr__(self, "_table", {})
        object.__setattr__(self, "_failed", False)
        object.__setattr__(self, "_completed", [])
        object.__setattr__(self, "_rolled_back", False)
        self.update(attributes or {}, **kwargs)

    @classmethod
    def build(cls, source: Context | Mapping[Any, Any] | None = None, **kwargs: Any) -> Context:
        """Return *source* unchanged if it is already a Context, else build one.

        Identity is preserved so every actor in an organized chain shares
        exactly one context.
        """
        if isinstance(source, Context):
            if kwargs:
                source.update(kwargs)
            return source
        return cls(source, **kwargs)

    # ── attribute access ──────────────────────────────────────

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value stored under *key*, or *default* if unset."""
        return self._table.get(normalize_key(key), default)

    def set(self, key: Any, value: Any) -> Any:
        """Store *value* under *key* and return it."""
        self._table[normalize_key(key)] = value
        return value

    def update(self, attributes: Mapping[Any, Any] | None = None, **kwargs: Any) -> None:
        """Merge *attributes* and keyword arguments into the context."""
        for key, value in (attributes or {}).items():
            self.set(key, value)
        for key, value in kwargs.items():
            self.set(key, value)

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the stored attributes."""
        return dict(self._table)

    def items(self) -> Iterator[tuple[str, Any]]:
        return iter(list(self._table.items()))

    def __getitem__(self, key: Any) -> Any:
        return self.get(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: object) -> bool:
        try:
            return normalize_key(key) in self._table
        except TypeError:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._table))

    def __len__(self) -> int:
        return len(self._table)

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not found on the class.
        if name.startswith("_"):
            raise AttributeError(name)
        return self._table.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_") or hasattr(type(self), name):
            raise AttributeError(f"'{name}' is reserved on Context; use ctx['{name}'] instead")
        self.set(name, value)

    def __delattr__(self, name: str) -> None:
        self._table.pop(normalize_key(name), None)

    def __repr__(self) -> str:
        pairs = "".join(f" {key}={value!r}" for key, value in self._table.items())
        return f"<Context{pairs}>"

    # ── success / failure ─────────────────────────────────────

    @property
    def success(self) -> bool:
        """``True`` until the context is failed."""
        return not self._failed

    @property
    def failure(self) -> bool:
        """``True`` once the context has been failed; never reverts."""
        return self._failed

    def fail(self, updates: Mapping[Any, Any] | None = None, **kwargs: Any) -> None:
        """Merge *updates*, flag the context as failed and raise :class:`Failure`.

        Failing an already-failed context is legal and raises again with the
        further updates merged.
        """
        self.update(updates, **kwargs)
        object.__setattr__(self, "_failed", True)
        raise Failure(self)

    # ── rollback ──────────────────────────────────────────────

    @property
    def completed(self) -> tuple[Any, ...]:
        """Actors that completed against this context, in completion order."""
        return tuple(self._completed)

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back

    def mark_completed(self, actor: Compensable) -> None:
        """Record *actor* as completed so it is compensated on rollback."""
        self._completed.append(actor)

    def rollback(self) -> bool:
        """Compensate completed actors in reverse completion order.

        Returns ``False`` without doing anything if the context was already
        rolled back, ``True`` otherwise. Errors raised by a compensating
        operation are not caught.
        """
        if self._rolled_back:
            return False
        for actor in reversed(self._completed):
            logger.debug("Rolling back %s", type(actor).__name__)
            actor.rollback()
        object.__setattr__(self, "_rolled_back", True)
        return True
