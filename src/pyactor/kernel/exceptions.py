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
"""Exception hierarchy for PyActor.

All library exceptions inherit from PyActorException.

Categories:
- Failure: control-flow signal raised when a context is failed
- ContractDefinitionError / FrozenRuleError: malformed contract declarations
- HookDefinitionError: malformed hook registrations
- ActorDefinitionError: malformed organizer declarations

Only Failure is ever caught by the actor runtime. The definition errors are
defects and surface at declaration time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyactor.context.context import Context


# =============================================================================
# Base Exception
# =============================================================================


class PyActorException(Exception):
    """Base exception for all PyActor errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CONTRACT_DUPLICATE").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Control flow
# =============================================================================


class Failure(PyActorException):
    """Raised whenever a Context is explicitly failed.

    Carries the failed context. The error-swallowing entry points catch
    exactly this type and hand the context back to the caller.
    """

    def __init__(self, context: Context | None = None) -> None:
        super().__init__(repr(context), code="ACTOR_FAILURE")
        self.context = context  # type: ignore[assignment]


# =============================================================================
# Definition errors
# =============================================================================


class ContractDefinitionError(PyActorException):
    """A contract or rule declaration is malformed."""


class FrozenRuleError(ContractDefinitionError):
    """A rule was modified after its declaring block finished."""


class HookDefinitionError(PyActorException):
    """A hook registration is malformed."""


class ActorDefinitionError(PyActorException):
    """An actor or organizer declaration is malformed."""
