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
"""Hook core types — HookKind, HookBinding and the Invocation continuation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class HookKind(StrEnum):
    """Position of a hook relative to the actor's core operation."""

    BEFORE = "before"
    AFTER = "after"
    AROUND = "around"


@dataclass(frozen=True)
class HookBinding:
    """A single hook attached to an actor class.

    Attributes:
        kind: Where the hook runs.
        handler: A callable taking the actor (and the :class:`Invocation`
            for around hooks), or a method name resolved on the actor at run time.
    """

    kind: HookKind
    handler: Callable[..., Any] | str

    @property
    def name(self) -> str | None:
        return self.handler if isinstance(self.handler, str) else None

    def invoke(self, actor: Any, *args: Any) -> Any:
        if isinstance(self.handler, str):
            return getattr(actor, self.handler)(*args)
        return self.handler(actor, *args)


@dataclass
class Invocation:
    """Continuation handed to an around hook.

    Calling :meth:`proceed` runs the rest of the chain (inner around hooks,
    before hooks, the core operation and after hooks). Code placed after the
    call runs once the inner chain returns. Not calling it skips the inner
    chain entirely.

    Attributes:
        actor: The actor being run.
        proceeded: Whether :meth:`proceed` has been called.
    """

    actor: Any
    _next: Callable[[], None] = field(repr=False)
    proceeded: bool = False

    def proceed(self) -> None:
        self.proceeded = True
        self._next()
