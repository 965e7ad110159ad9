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
"""PyActor — single-purpose business actors with contracts, hooks and rollback.

``Actor`` is also exported as ``ServiceActor`` and ``Interactor``; all
three names refer to the same class.
"""

from pyactor.actor import Actor, Organizer
from pyactor.context import Context
from pyactor.contracts import Contract, ContractBuilder, Rule, ensures, expects
from pyactor.core.bootstrap import configure
from pyactor.core.config import Config
from pyactor.hooks import Invocation, after, around, before
from pyactor.kernel import (
    ActorDefinitionError,
    ActorState,
    ContractDefinitionError,
    Failure,
    FrozenRuleError,
    HookDefinitionError,
    PyActorException,
)

ServiceActor = Actor
Interactor = Actor
InteractorOrganizer = Organizer

__version__ = "1.0.0"

__all__ = [
    "Actor",
    "ActorDefinitionError",
    "ActorState",
    "Config",
    "Context",
    "Contract",
    "ContractBuilder",
    "ContractDefinitionError",
    "Failure",
    "FrozenRuleError",
    "HookDefinitionError",
    "Interactor",
    "InteractorOrganizer",
    "Invocation",
    "Organizer",
    "PyActorException",
    "Rule",
    "ServiceActor",
    "after",
    "around",
    "before",
    "configure",
    "ensures",
    "expects",
]
