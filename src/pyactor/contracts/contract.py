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
"""Contract — an ordered, immutable set of rules validated against a context."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from pyactor.contracts.rule import Rule
from pyactor.kernel.exceptions import ContractDefinitionError

if TYPE_CHECKING:
    from pyactor.context.context import Context


class ContractBuilder:
    """Collects rule declarations for a single contract.

    Usage::

        def rules(c: ContractBuilder) -> None:
            c.required("email").filled("string").format(EMAIL_RE)
            c.optional("age").maybe("integer").in_range((0, 150))

        contract = Contract.define(rules)
    """

    def __init__(self) -> None:
        self._rules: dict[str, Rule] = {}

    def required(self, name: Any) -> Rule:
        """Declare a required attribute and return its rule for chaining."""
        return self._declare(name, required=True)

    def optional(self, name: Any) -> Rule:
        """Declare an optional attribute and return its rule for chaining."""
        return self._declare(name, required=False)

    def build(self) -> Contract:
        return Contract(self._rules)

    def _declare(self, name: Any, required: bool) -> Rule:
        key = _attribute_name(name)
        if key in self._rules:
            raise ContractDefinitionError(
                f"Duplicate rule for attribute '{key}'. Each attribute can only be declared once.",
                code="CONTRACT_DUPLICATE",
            )
        rule = Rule(key, required=required)
        self._rules[key] = rule
        return rule


def _attribute_name(name: Any) -> str:
    if name is None:
        raise ContractDefinitionError("Attribute name cannot be None", code="CONTRACT_INVALID_NAME")
    if isinstance(name, Enum) and isinstance(name.value, str):
        name = name.value
    if not isinstance(name, str):
        raise ContractDefinitionError(
            f"Attribute name must be a str, got {type(name).__name__}", code="CONTRACT_INVALID_NAME"
        )
    if not name:
        raise ContractDefinitionError("Attribute name cannot be empty", code="CONTRACT_INVALID_NAME")
    return name


class Contract:
    """Immutable, ordered mapping of attribute name to :class:`Rule`.

    Every rule is frozen when the contract is built. Validation concatenates
    each rule's errors in declaration order.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Mapping[str, Rule] | None = None) -> None:
        frozen = {name: rule.freeze() for name, rule in (rules or {}).items()}
        self._rules: Mapping[str, Rule] = MappingProxyType(frozen)

    @classmethod
    def define(cls, block: Callable[[ContractBuilder], Any]) -> Contract:
        """Run *block* against a fresh builder and return the frozen contract."""
        builder = ContractBuilder()
        block(builder)
        return builder.build()

    @property
    def rules(self) -> Mapping[str, Rule]:
        return self._rules

    @property
    def rule_names(self) -> list[str]:
        return list(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules.values())

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __repr__(self) -> str:
        return f"Contract({self.rule_names!r})"

    def validate(self, context: Context) -> list[str]:
        """Return every rule's error messages, in declaration order."""
        errors: list[str] = []
        for rule in self._rules.values():
            errors.extend(rule.validate(context))
        return errors

    def merge(self, other: Contract) -> Contract:
        """Return a new contract with *other*'s rules overriding this one's by name."""
        merged = dict(self._rules)
        merged.update(other.rules)
        return Contract(merged)


def merge_contracts(parent: Contract | None, child: Contract | None) -> Contract | None:
    """Combine an inherited contract with a class's own declaration."""
    if parent is None:
        return child
    if child is None:
        return parent
    return parent.merge(child)
