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
"""Actor — a single-purpose unit of business logic run against a Context."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pyactor.context.context import Context
from pyactor.contracts.contract import Contract
from pyactor.contracts.decorators import ContractKind, effective_contract
from pyactor.hooks.chain import HookChain
from pyactor.hooks.registry import collect_declared_hooks, register_hooks
from pyactor.hooks.types import HookKind
from pyactor.kernel.exceptions import Failure
from pyactor.kernel.types import ActorState

logger = logging.getLogger(__name__)


class Actor:
    """Base class for actors.

    Subclasses override :meth:`call` with their business logic and, when the
    forward operation has a durable side effect, :meth:`rollback` to undo it.
    Both read and write :attr:`context`.

    Usage::

        class Greet(Actor):
            @expects
            def _input(c):
                c.required("name").filled("string")

            def call(self) -> None:
                self.context.greeting = f"Hello, {self.context.name}!"

        result = Greet.invoke(name="Alice")
        result.success   # True
        result.greeting  # 'Hello, Alice!'

    One invocation moves through :class:`~pyactor.kernel.types.ActorState`:
    validate the input contract, run the hook chain around :meth:`call`,
    record the actor as completed and validate the output contract. The last
    two steps are skipped when an around hook does not proceed. Any error
    raised along the way rolls the context back before it propagates.
    """

    def __init__(self, context: Context | Mapping[Any, Any] | None = None, /, **attrs: Any) -> None:
        self.context = Context.build(context, **attrs)
        self._state = ActorState.PENDING

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        collect_declared_hooks(cls)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} state={self.state} context={self.context!r}>"

    # ── entry points ──────────────────────────────────────────

    @classmethod
    def invoke(cls, context: Context | Mapping[Any, Any] | None = None, /, **attrs: Any) -> Context:
        """Run the actor and return its context, failed or not.

        Only :class:`~pyactor.kernel.exceptions.Failure` is swallowed; any
        other error propagates after rollback.
        """
        actor = cls(context, **attrs)
        actor.run()
        return actor.context

    @classmethod
    def invoke_or_raise(cls, context: Context | Mapping[Any, Any] | None = None, /, **attrs: Any) -> Context:
        """Run the actor and return its context.

        Raises:
            Failure: If the context is failed during the invocation.
        """
        actor = cls(context, **attrs)
        actor.run_or_raise()
        return actor.context

    def run(self) -> None:
        """Run this actor, swallowing :class:`Failure`."""
        try:
            self.run_or_raise()
        except Failure:
            pass

    def run_or_raise(self) -> None:
        """Run this actor with contracts, hooks, completion tracking and rollback."""
        name = type(self).__name__
        logger.debug("Invoking actor %s", name)
        try:
            self._state = ActorState.VALIDATING_INPUT
            self._validate_contract(ContractKind.INPUT)

            self._state = ActorState.RUNNING
            if type(self).hook_chain().run(self, self.call):
                self.context.mark_completed(self)

                self._state = ActorState.VALIDATING_OUTPUT
                self._validate_contract(ContractKind.OUTPUT)
            else:
                logger.debug("Actor %s skipped by an around hook", name)
        except Exception as exc:
            self._state = ActorState.FAILED
            if isinstance(exc, Failure):
                logger.debug("Actor %s failed, rolling back context", name)
            else:
                logger.warning("Actor %s raised %s, rolling back context", name, type(exc).__name__)
            self.context.rollback()
            raise
        self._state = ActorState.COMPLETED
        logger.debug("Actor %s completed", name)

    # ── overridable operations ────────────────────────────────

    def call(self) -> None:
        """The actor's business logic. Override in subclasses."""

    def rollback(self) -> None:
        """Undo a completed :meth:`call` after a downstream failure. Override if needed."""

    # ── lifecycle ─────────────────────────────────────────────

    @property
    def state(self) -> ActorState:
        if self._state in (ActorState.COMPLETED, ActorState.FAILED) and self.context.rolled_back:
            return ActorState.ROLLED_BACK
        return self._state

    def _validate_contract(self, kind: ContractKind) -> None:
        contract = effective_contract(type(self), kind)
        if contract is None:
            return
        if kind is ContractKind.OUTPUT and self.context.failure:
            return
        errors = contract.validate(self.context)
        if errors:
            logger.debug("%s contract of %s rejected context: %s", kind, type(self).__name__, errors)
            self.context.fail(errors=errors)

    # ── class-level declarations ──────────────────────────────

    @classmethod
    def input_contract(cls) -> Contract | None:
        """The effective input contract, merged across base classes."""
        return effective_contract(cls, ContractKind.INPUT)

    @classmethod
    def output_contract(cls) -> Contract | None:
        """The effective output contract, merged across base classes."""
        return effective_contract(cls, ContractKind.OUTPUT)

    @classmethod
    def hook_chain(cls) -> HookChain:
        return HookChain.for_class(cls)

    @classmethod
    def add_before_hook(cls, *hooks: Callable[..., Any] | str) -> None:
        register_hooks(cls, HookKind.BEFORE, *hooks)

    @classmethod
    def add_after_hook(cls, *hooks: Callable[..., Any] | str) -> None:
        register_hooks(cls, HookKind.AFTER, *hooks)

    @classmethod
    def add_around_hook(cls, *hooks: Callable[..., Any] | str) -> None:
        register_hooks(cls, HookKind.AROUND, *hooks)
