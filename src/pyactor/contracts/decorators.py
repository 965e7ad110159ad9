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
"""Contract decorators — @expects / @ensures and effective-contract lookup."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Any

from pyactor.contracts.contract import Contract, ContractBuilder, merge_contracts
from pyactor.kernel.exceptions import ContractDefinitionError


class ContractKind(StrEnum):
    """Which side of the core operation a contract guards."""

    INPUT = "input"
    OUTPUT = "output"


_CONTRACT_ATTRS: dict[ContractKind, str] = {
    ContractKind.INPUT: "__pyactor_input_contract__",
    ContractKind.OUTPUT: "__pyactor_output_contract__",
}


class ContractDeclaration:
    """Class-body placeholder that registers a contract on its owner class.

    Reading the attribute from the class or an instance yields the declared
    :class:`Contract` (the class's own rules, not the merged view).
    """

    def __init__(self, kind: ContractKind, contract: Contract) -> None:
        self.kind = kind
        self.contract = contract

    def __set_name__(self, owner: type, name: str) -> None:
        attr = _CONTRACT_ATTRS[self.kind]
        if attr in vars(owner):
            raise ContractDefinitionError(
                f"{owner.__name__} declares more than one {self.kind} contract",
                code="CONTRACT_DUPLICATE",
            )
        setattr(owner, attr, self.contract)

    def __get__(self, instance: Any, owner: type | None = None) -> Contract:
        return self.contract


def _make_declaration(kind: ContractKind) -> Callable[[Any], ContractDeclaration]:
    """Create a declaration decorator for the given contract *kind*.

    The returned callable accepts either a builder function (used as a
    decorator inside the class body) or a prebuilt :class:`Contract`.
    """

    def declare(source: Contract | Callable[[ContractBuilder], Any]) -> ContractDeclaration:
        if isinstance(source, Contract):
            contract = source
        elif callable(source):
            contract = Contract.define(source)
        else:
            raise ContractDefinitionError(
                f"{kind} contract must be a Contract or a builder function, got {type(source).__name__}",
                code="CONTRACT_INVALID_DECLARATION",
            )
        return ContractDeclaration(kind, contract)

    return declare


expects = _make_declaration(ContractKind.INPUT)
ensures = _make_declaration(ContractKind.OUTPUT)


def declared_contract(cls: type, kind: ContractKind) -> Contract | None:
    """Return the contract *cls* itself declares for *kind*, ignoring bases."""
    return vars(cls).get(_CONTRACT_ATTRS[kind])


def effective_contract(cls: type, kind: ContractKind) -> Contract | None:
    """Merge the *kind* contracts declared along *cls*'s MRO, most derived last.

    Recomputed on every call so later subclassing is always reflected.
    """
    result: Contract | None = None
    for klass in reversed(cls.__mro__):
        result = merge_contracts(result, declared_contract(klass, kind))
    return result
