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
"""Hook decorators — @before, @after and @around for actor methods."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from pyactor.hooks.types import HookKind

F = TypeVar("F", bound=Callable[..., Any])

HOOK_ATTR = "__pyactor_hook__"


def _make_hook(kind: HookKind) -> Callable[[F], F]:
    """Create a decorator marking a method as a *kind* hook.

    The decorated function is annotated with ``__pyactor_hook__`` and
    registered on the class by the actor's subclass initialisation, in the
    order the methods appear in the class body.
    """

    def decorator(fn: F) -> F:
        setattr(fn, HOOK_ATTR, kind)
        return fn

    return decorator


before = _make_hook(HookKind.BEFORE)
after = _make_hook(HookKind.AFTER)
around = _make_hook(HookKind.AROUND)
