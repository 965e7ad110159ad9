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
"""Contracts — declarative input/output validation for actors."""

from pyactor.contracts.contract import Contract, ContractBuilder, merge_contracts
from pyactor.contracts.decorators import (
    ContractDeclaration,
    ContractKind,
    declared_contract,
    effective_contract,
    ensures,
    expects,
)
from pyactor.contracts.rule import Rule
from pyactor.contracts.types import (
    Nominal,
    Primitive,
    PrimitiveKind,
    TypeDescriptor,
    matches_type,
    resolve_type,
)

__all__ = [
    "Contract",
    "ContractBuilder",
    "ContractDeclaration",
    "ContractKind",
    "Nominal",
    "Primitive",
    "PrimitiveKind",
    "Rule",
    "TypeDescriptor",
    "declared_contract",
    "effective_contract",
    "ensures",
    "expects",
    "matches_type",
    "merge_contracts",
    "resolve_type",
]
