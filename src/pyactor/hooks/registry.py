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
"""Hook registry — per-class hook bindings and inherited lookup."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pyactor.hooks.decorators import HOOK_ATTR
from pyactor.hooks.types import HookBinding, HookKind
from pyactor.kernel.exceptions import HookDefinitionError

_HOOKS_ATTR = "__pyactor_hooks__"


def _own_bindings(cls: type) -> list[HookBinding]:
    bindings = vars(cls).get(_HOOKS_ATTR)
    if bindings is None:
        bindings = []
        setattr(cls, _HOOKS_ATTR, bindings)
    return bindings


def register_hooks(cls: type, kind: HookKind, *hooks: Callable[..., Any] | str) -> None:
    """Append *hooks* of the given *kind* to *cls*'s own bindings.

    Each hook is either a callable receiving the actor (plus the
    :class:`~pyactor.hooks.types.Invocation` for around hooks) or the name of
    a method resolved on the actor when the hook runs.
    """
    bindings = _own_bindings(cls)
    for hook in hooks:
        if isinstance(hook, str):
            if not hook:
                raise HookDefinitionError("Hook method name cannot be empty", code="HOOK_INVALID")
        elif not callable(hook):
            raise HookDefinitionError(
                f"{kind} hook must be callable or a method name, got {type(hook).__name__}",
                code="HOOK_INVALID",
            )
        bindings.append(HookBinding(kind=kind, handler=hook))


def collect_declared_hooks(cls: type) -> None:
    """Register methods of *cls* marked with @before/@after/@around.

    Methods are registered by name, in class-body order.
    """
    for name, attr in list(vars(cls).items()):
        kind = getattr(attr, HOOK_ATTR, None)
        if kind is not None:
            register_hooks(cls, kind, name)


def hooks_for(cls: type, kind: HookKind) -> list[HookBinding]:
    """Return every *kind* binding along *cls*'s MRO, base classes first.

    A method hook overridden under the same name in a subclass is only
    listed once, at the position where it was first declared.
    """
    result: list[HookBinding] = []
    seen: set[str] = set()
    for klass in reversed(cls.__mro__):
        for binding in vars(klass).get(_HOOKS_ATTR, ()):
            if binding.kind != kind:
                continue
            if binding.name is not None:
                if binding.name in seen:
                    continue
                seen.add(binding.name)
            result.append(binding)
    return result
