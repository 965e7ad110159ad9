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
"""Tests for Context — attribute access, failure state and rollback."""

from __future__ import annotations

from enum import Enum

import pytest

from pyactor.context.context import Context, normalize_key
from pyactor.kernel.exceptions import Failure


class Key(Enum):
    NAME = "name"


class _Step:
    def __init__(self, log: list[str], label: str) -> None:
        self.log = log
        self.label = label

    def rollback(self) -> None:
        self.log.append(self.label)


class TestAttributeAccess:
    def test_set_then_get(self):
        ctx = Context()
        ctx.set("foo", 1)
        assert ctx.get("foo") == 1

    def test_set_returns_value(self):
        assert Context().set("foo", "bar") == "bar"

    def test_unset_attribute_is_none(self):
        ctx = Context()
        assert ctx.get("missing") is None
        assert ctx["missing"] is None
        assert ctx.missing is None

    def test_get_with_default(self):
        assert Context().get("missing", 42) == 42

    def test_attribute_and_item_forms_share_storage(self):
        ctx = Context()
        ctx.greeting = "hi"
        assert ctx["greeting"] == "hi"
        ctx["greeting"] = "hello"
        assert ctx.greeting == "hello"

    def test_enum_and_str_keys_are_equivalent(self):
        ctx = Context()
        ctx.set(Key.NAME, "Alice")
        assert ctx.get("name") == "Alice"
        ctx["name"] = "Bob"
        assert ctx[Key.NAME] == "Bob"
        assert len(ctx) == 1

    def test_non_string_key_rejected(self):
        with pytest.raises(TypeError):
            Context().set(1, "x")

    def test_normalized_keys_are_interned(self):
        assert normalize_key("".join(["na", "me"])) is normalize_key("name")

    def test_initial_attributes_and_kwargs(self):
        ctx = Context({"a": 1}, b=2)
        assert ctx.to_dict() == {"a": 1, "b": 2}

    def test_insertion_order_is_kept(self):
        ctx = Context(z=1, a=2)
        ctx.m = 3
        assert list(ctx) == ["z", "a", "m"]
        assert list(ctx.items()) == [("z", 1), ("a", 2), ("m", 3)]

    def test_contains(self):
        ctx = Context(a=None)
        assert "a" in ctx
        assert "b" not in ctx
        assert 5 not in ctx

    def test_to_dict_is_a_copy(self):
        ctx = Context(a=1)
        data = ctx.to_dict()
        data["a"] = 2
        assert ctx.a == 1

    def test_reserved_names_cannot_be_assigned_as_attributes(self):
        ctx = Context()
        with pytest.raises(AttributeError):
            ctx.success = False
        ctx["success"] = "stored"
        assert ctx.get("success") == "stored"
        assert ctx.success is True

    def test_delete_attribute(self):
        ctx = Context()
        ctx.set(Key.NAME, "Alice")
        del ctx.name
        assert "name" not in ctx
        assert Key.NAME not in ctx
        del ctx.name

    def test_repr(self):
        assert repr(Context(foo="bar", n=1)) == "<Context foo='bar' n=1>"


class TestBuild:
    def test_build_from_mapping(self):
        ctx = Context.build({"foo": "bar"})
        assert isinstance(ctx, Context)
        assert ctx.foo == "bar"

    def test_build_preserves_identity(self):
        ctx = Context(foo="bar")
        assert Context.build(ctx) is ctx

    def test_build_without_source(self):
        assert len(Context.build()) == 0


class TestFailureState:
    def test_new_context_is_successful(self):
        ctx = Context()
        assert ctx.success is True
        assert ctx.failure is False

    def test_fail_raises_and_flags(self):
        ctx = Context()
        with pytest.raises(Failure) as exc_info:
            ctx.fail()
        assert exc_info.value.context is ctx
        assert ctx.failure is True
        assert ctx.success is False

    def test_fail_merges_updates(self):
        ctx = Context(foo="bar")
        with pytest.raises(Failure):
            ctx.fail({"foo": "baz"}, reason="nope")
        assert ctx.foo == "baz"
        assert ctx.reason == "nope"

    def test_fail_again_is_legal_and_stays_failed(self):
        ctx = Context()
        with pytest.raises(Failure):
            ctx.fail(a=1)
        with pytest.raises(Failure):
            ctx.fail(b=2)
        assert ctx.failure is True
        assert ctx.to_dict() == {"a": 1, "b": 2}


class TestRollback:
    def test_rolls_back_in_reverse_completion_order(self):
        log: list[str] = []
        ctx = Context()
        for label in ("a", "b", "c"):
            ctx.mark_completed(_Step(log, label))
        assert ctx.rollback() is True
        assert log == ["c", "b", "a"]
        assert ctx.rolled_back is True

    def test_second_rollback_is_noop(self):
        log: list[str] = []
        ctx = Context()
        ctx.mark_completed(_Step(log, "a"))
        assert ctx.rollback() is True
        assert ctx.rollback() is False
        assert log == ["a"]

    def test_rollback_with_nothing_completed(self):
        ctx = Context()
        assert ctx.rollback() is True
        assert ctx.rollback() is False

    def test_completed_snapshot(self):
        ctx = Context()
        step = _Step([], "a")
        ctx.mark_completed(step)
        assert ctx.completed == (step,)

    def test_rollback_does_not_grow_completed(self):
        ctx = Context()
        ctx.mark_completed(_Step([], "a"))
        ctx.rollback()
        assert len(ctx.completed) == 1
