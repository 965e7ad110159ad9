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
"""Hook chain — composes around/before/after hooks around a core operation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from pyactor.hooks.registry import hooks_for
from pyactor.hooks.types import HookBinding, HookKind, Invocation


@dataclass(frozen=True)
class HookChain:
    """Ordered hooks for one actor class.

    Running the chain nests invocations:

    1. around hooks, first-declared outermost, each wrapping the rest;
    2. before hooks in declaration order;
    3. the core operation;
    4. after hooks in reverse declaration order, only while the context is
       still successful.

    Trailing code of an around hook runs when its continuation returns, so
    inner hooks finish first. A raised error unwinds past every trailing
    section that has not run yet.
    """

    around: tuple[HookBinding, ...] = field(default_factory=tuple)
    before: tuple[HookBinding, ...] = field(default_factory=tuple)
    after: tuple[HookBinding, ...] = field(default_factory=tuple)

    @classmethod
    def for_class(cls, actor_cls: type) -> HookChain:
        """Build the chain for *actor_cls*, including inherited hooks."""
        return cls(
            around=tuple(hooks_for(actor_cls, HookKind.AROUND)),
            before=tuple(hooks_for(actor_cls, HookKind.BEFORE)),
            after=tuple(hooks_for(actor_cls, HookKind.AFTER)),
        )

    def __len__(self) -> int:
        return len(self.around) + len(self.before) + len(self.after)

    def run(self, actor: Any, core: Callable[[], Any]) -> bool:
        """Run *core* on *actor* wrapped in every hook of this chain.

        Returns:
            ``True`` once the core operation and its before/after hooks have
            finished, ``False`` if an around hook never proceeded.
        """
        reached: list[bool] = []

        def _run_inner() -> None:
            for binding in self.before:
                binding.invoke(actor)
            core()
            if actor.context.success:
                for binding in reversed(self.after):
                    binding.invoke(actor)
            reached.append(True)

        # Build the proceed chain in reverse so the first around is outermost
        proceed_fn: Callable[[], None] = _run_inner
        for binding in reversed(self.around):
            proceed_fn = _make_around_link(binding, actor, proceed_fn)
        proceed_fn()
        return bool(reached)


def _make_around_link(binding: HookBinding, actor: Any, next_proceed: Callable[[], None]) -> Callable[[], None]:
    """Build one link in the around chain.

    Returns a callable that hands *binding* a fresh :class:`Invocation`
    whose ``proceed`` resumes *next_proceed*.
    """

    def chained() -> None:
        binding.invoke(actor, Invocation(actor=actor, _next=next_proceed))

    return chained
