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
"""Tests for Rule — validation order, custom validators and freezing."""

from __future__ import annotations

import re
from types import MappingProxyType

import pytest
from pydantic import BaseModel

from pyactor.context.context import Context
from pyactor.contracts.rule import Rule
from pyactor.kernel.exceptions import ContractDefinitionError, FrozenRuleError


def _validate(rule: Rule, **attrs) -> list[str]:
    return rule.validate(Context(attrs))


class Address(BaseModel):
    street: str
    zip_code: str


class TestPresence:
    def test_required_and_missing(self):
        assert _validate(Rule("a", required=True)) == ["a is required but missing"]

    def test_required_and_none(self):
        assert _validate(Rule("a", required=True), a=None) == ["a is required but missing"]

    def test_required_and_present_without_type(self):
        assert _validate(Rule("a", required=True), a=1) == []

    def test_optional_and_missing_skips_everything(self):
        rule = Rule("a", required=False).filled("string").one_of("x")
        assert _validate(rule) == []


class TestFilled:
    def test_empty_string(self):
        rule = Rule("name", required=True).filled("string")
        assert _validate(rule, name="") == ["name must be filled but is empty"]

    def test_empty_collections(self):
        rule = Rule("items", required=True).filled()
        assert _validate(rule, items=[]) == ["items must be filled but is empty"]
        assert _validate(rule, items={}) == ["items must be filled but is empty"]

    def test_values_without_length_are_filled(self):
        rule = Rule("n", required=True).filled()
        assert _validate(rule, n=0) == []

    def test_empty_check_runs_before_type_check(self):
        rule = Rule("tags", required=True).filled("string")
        assert _validate(rule, tags=[]) == ["tags must be filled but is empty"]


class TestMaybe:
    def test_maybe_accepts_none(self):
        rule = Rule("nickname", required=False).maybe("string")
        assert _validate(rule, nickname=None) == []

    def test_maybe_checks_type_when_present(self):
        rule = Rule("nickname", required=False).maybe("string")
        assert _validate(rule, nickname=5) == ["nickname must be of type string but got int"]


class TestType:
    def test_type_mismatch_message(self):
        rule = Rule("count", required=True).filled("integer")
        assert _validate(rule, count="five") == ["count must be of type integer but got str"]

    def test_nominal_type_message(self):
        class User:
            pass

        rule = Rule("user", required=True).type(User)
        assert _validate(rule, user={}) == ["user must be of type User but got dict"]
        assert _validate(rule, user=User()) == []

    def test_type_failure_short_circuits_custom_validators(self):
        rule = Rule("age", required=True).type("integer").in_range((0, 10))
        assert _validate(rule, age="old") == ["age must be of type integer but got str"]

    def test_invalid_type_argument_rejected_at_declaration(self):
        with pytest.raises(ContractDefinitionError):
            Rule("a", required=True).type("nope")
        with pytest.raises(ContractDefinitionError):
            Rule("a", required=True).filled(3)


class TestFormat:
    def test_matches(self):
        rule = Rule("email", required=True).format(re.compile(r"@"))
        assert _validate(rule, email="a@b.c") == []

    def test_does_not_match(self):
        rule = Rule("email", required=True).format(re.compile(r"^\S+@\S+$"))
        assert _validate(rule, email="nope") == ["email does not match expected format"]

    def test_non_string_values_are_ignored(self):
        rule = Rule("email", required=True).format(re.compile(r"@"))
        assert _validate(rule, email=5) == []

    def test_requires_compiled_pattern(self):
        with pytest.raises(ContractDefinitionError):
            Rule("email", required=True).format("@")


class TestRespondsTo:
    def test_all_present(self):
        rule = Rule("io", required=True).responds_to("read", "close")

        class Stream:
            def read(self):
                return b""

            def close(self):
                pass

        assert _validate(rule, io=Stream()) == []

    def test_lists_missing_methods(self):
        rule = Rule("io", required=True).responds_to("read", "close", "upper")
        assert _validate(rule, io="text") == ["io must respond to read, close"]

    def test_requires_at_least_one_name(self):
        with pytest.raises(ContractDefinitionError):
            Rule("io", required=True).responds_to()

    def test_requires_string_names(self):
        with pytest.raises(ContractDefinitionError):
            Rule("io", required=True).responds_to(len)


class TestOneOf:
    def test_allowed(self):
        rule = Rule("status", required=True).one_of("active", "inactive")
        assert _validate(rule, status="active") == []

    def test_not_allowed(self):
        rule = Rule("status", required=True).one_of("active", "inactive")
        assert _validate(rule, status="gone") == [
            "status must be one of ['active', 'inactive'], got 'gone'"
        ]

    def test_requires_values(self):
        with pytest.raises(ContractDefinitionError):
            Rule("status", required=True).one_of()


class TestInRange:
    def test_inclusive_tuple(self):
        rule = Rule("age", required=True).in_range((18, 65))
        assert _validate(rule, age=18) == []
        assert _validate(rule, age=65) == []
        assert _validate(rule, age=17) == ["age must be in range 18..65, got 17"]
        assert _validate(rule, age=66) == ["age must be in range 18..65, got 66"]

    def test_range_object_excludes_stop(self):
        rule = Rule("n", required=True).in_range(range(1, 11))
        assert _validate(rule, n=10) == []
        assert _validate(rule, n=10.5) == ["n must be in range 1..10, got 10.5"]
        assert _validate(rule, n=11) == ["n must be in range 1..10, got 11"]

    def test_stepped_range_uses_membership(self):
        rule = Rule("n", required=True).in_range(range(0, 10, 2))
        assert _validate(rule, n=4) == []
        assert _validate(rule, n=3) == ["n must be in range 0..8, got 3"]

    def test_incomparable_value_is_out_of_range(self):
        rule = Rule("n", required=True).in_range((1, 5))
        assert _validate(rule, n="three") == ["n must be in range 1..5, got three"]

    def test_empty_range_rejected(self):
        with pytest.raises(ContractDefinitionError):
            Rule("n", required=True).in_range(range(5, 5))
        with pytest.raises(ContractDefinitionError):
            Rule("n", required=True).in_range((5, 1))

    def test_non_range_rejected(self):
        with pytest.raises(ContractDefinitionError):
            Rule("n", required=True).in_range([1, 5])


class TestSatisfies:
    def test_predicate_passes(self):
        rule = Rule("n", required=True).satisfies(lambda v: v % 2 == 0, "n must be even")
        assert _validate(rule, n=4) == []

    def test_predicate_fails_with_message(self):
        rule = Rule("n", required=True).satisfies(lambda v: v % 2 == 0, "n must be even")
        assert _validate(rule, n=3) == ["n must be even"]

    def test_default_message(self):
        rule = Rule("n", required=True).satisfies(lambda v: False)
        assert _validate(rule, n=3) == ["n is invalid"]

    def test_predicate_errors_propagate(self):
        rule = Rule("n", required=True).satisfies(lambda v: 1 / 0)
        with pytest.raises(ZeroDivisionError):
            _validate(rule, n=3)


class TestConformsTo:
    def test_valid_mapping(self):
        rule = Rule("address", required=True).conforms_to(Address)
        assert _validate(rule, address={"street": "Main", "zip_code": "123"}) == []

    def test_model_instance_passes(self):
        rule = Rule("address", required=True).conforms_to(Address)
        assert _validate(rule, address=Address(street="Main", zip_code="1")) == []

    def test_invalid_mapping_reports_fields(self):
        rule = Rule("address", required=True).conforms_to(Address)
        errors = _validate(rule, address={"street": "Main"})
        assert len(errors) == 1
        assert errors[0].startswith("address does not conform to Address: zip_code:")

    def test_non_dict_mapping_is_validated(self):
        rule = Rule("address", required=True).conforms_to(Address)
        errors = _validate(rule, address=MappingProxyType({"street": "Main"}))
        assert len(errors) == 1
        assert errors[0].startswith("address does not conform to Address: zip_code:")
        assert _validate(rule, address=MappingProxyType({"street": "Main", "zip_code": "1"})) == []

    def test_requires_model_class(self):
        with pytest.raises(ContractDefinitionError):
            Rule("address", required=True).conforms_to(dict)


class TestCustomValidatorCollection:
    def test_all_custom_errors_are_reported(self):
        rule = (
            Rule("code", required=True)
            .format(re.compile(r"^[A-Z]+$"))
            .one_of("ABC", "DEF")
        )
        assert _validate(rule, code="xyz") == [
            "code does not match expected format",
            "code must be one of ['ABC', 'DEF'], got 'xyz'",
        ]


class TestFreezing:
    def test_frozen_rule_rejects_changes(self):
        rule = Rule("a", required=True).freeze()
        assert rule.frozen
        for mutate in (
            lambda: rule.filled(),
            lambda: rule.maybe(),
            lambda: rule.type("string"),
            lambda: rule.format(re.compile("x")),
            lambda: rule.responds_to("upper"),
            lambda: rule.one_of(1),
            lambda: rule.in_range((1, 2)),
            lambda: rule.satisfies(bool),
            lambda: rule.conforms_to(Address),
        ):
            with pytest.raises(FrozenRuleError):
                mutate()

    def test_read_only_view(self):
        rule = Rule("a", required=False).maybe("integer").one_of(1, 2)
        assert rule.name == "a"
        assert rule.required is False
        assert rule.is_maybe is True
        assert rule.is_filled is False
        assert str(rule.type_descriptor) == "integer"
        assert len(rule.validators) == 1
