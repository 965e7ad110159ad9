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
"""Tests for the alternate actor names."""

from __future__ import annotations

import pyactor
from pyactor import Actor, Interactor, InteractorOrganizer, Organizer, ServiceActor


class TestAliases:
    def test_all_names_refer_to_one_class(self):
        assert ServiceActor is Actor
        assert Interactor is Actor
        assert InteractorOrganizer is Organizer

    def test_subclass_through_alias_is_an_actor(self):
        class Greet(Interactor):
            def call(self) -> None:
                self.context.greeting = "hi"

        assert issubclass(Greet, ServiceActor)
        assert Greet.invoke().greeting == "hi"

    def test_mixed_aliases_compose(self):
        class First(ServiceActor):
            def call(self) -> None:
                self.context.first = True

        class Second(Interactor):
            def call(self) -> None:
                self.context.second = True

        class Flow(InteractorOrganizer):
            organized = (First, Second)

        ctx = Flow.invoke()
        assert ctx.first and ctx.second

    def test_exported_in_public_api(self):
        for name in ("ServiceActor", "Interactor", "InteractorOrganizer"):
            assert name in pyactor.__all__
