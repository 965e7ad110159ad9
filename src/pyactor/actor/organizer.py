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
"""Organizer — an actor that runs a fixed sequence of actors on one context."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar

from pyactor.actor.actor import Actor
from pyactor.kernel.exceptions import ActorDefinitionError


def _flatten(actors: Iterable[Any]) -> list[type[Actor]]:
    flat: list[type[Actor]] = []
    for item in actors:
        if isinstance(item, (list, tuple)):
            flat.extend(_flatten(item))
        elif isinstance(item, type) and issubclass(item, Actor):
            flat.append(item)
        else:
            raise ActorDefinitionError(
                f"Organizers can only organize Actor subclasses, got {item!r}",
                code="ORGANIZER_INVALID_ACTOR",
            )
    return flat


class Organizer(Actor):
    """Runs :attr:`organized` actors in order against the shared context.

    Each actor is invoked with :meth:`Actor.invoke_or_raise`, so the first
    failure stops the sequence. Rollback is driven by the context: actors
    that already completed are compensated in reverse order, while the
    failing actor itself is not.

    Usage::

        class PlaceOrder(Organizer):
            organized = (ReserveStock, ChargeCard, SendReceipt)
    """

    organized: ClassVar[tuple[type[Actor], ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "organized" in vars(cls):
            cls.organized = tuple(_flatten(cls.organized))

    @classmethod
    def organize(cls, *actors: type[Actor] | Iterable[type[Actor]]) -> None:
        """Declare the actors to run, in order. Nested lists are flattened."""
        if cls is Organizer:
            raise ActorDefinitionError(
                "organize() must be called on an Organizer subclass", code="ORGANIZER_INVALID_TARGET"
            )
        cls.organized = tuple(_flatten(actors))

    def call(self) -> None:
        for actor_cls in type(self).organized:
            actor_cls.invoke_or_raise(self.context)
