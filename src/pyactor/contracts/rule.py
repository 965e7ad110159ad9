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
"""Rule — validation specification for a single context attribute."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from pyactor.contracts.helpers import model_errors
from pyactor.contracts.types import TypeDescriptor, matches_type, resolve_type
from pyactor.kernel.exceptions import ContractDefinitionError, FrozenRuleError

if TYPE_CHECKING:
    from pyactor.context.context import Context

Validator = Callable[[Any], "str | None"]


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    try:
        return len(value) == 0
    except TypeError:
        return False


class Rule:
    """Required/optional, type and custom-validator checks for one attribute.

    Rules are built through :class:`~pyactor.contracts.contract.ContractBuilder`
    and frozen when the declaring block finishes; every builder method raises
    :class:`FrozenRuleError` afterwards.

    Validation runs in a fixed order and stops at the first failing category:
    missing, empty, type. Custom validators then all run and every message
    they produce is reported.
    """

    def __init__(self, name: str, required: bool) -> None:
        self._name = name
        self._required = required
        self._type: TypeDescriptor | None = None
        self._filled = False
        self._maybe = False
        self._validators: list[Validator] = []
        self._frozen = False

    # ── read-only view ────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def required(self) -> bool:
        return self._required

    @property
    def type_descriptor(self) -> TypeDescriptor | None:
        return self._type

    @property
    def is_filled(self) -> bool:
        return self._filled

    @property
    def is_maybe(self) -> bool:
        return self._maybe

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def validators(self) -> tuple[Validator, ...]:
        return tuple(self._validators)

    def __repr__(self) -> str:
        flags = ["required" if self._required else "optional"]
        if self._filled:
            flags.append("filled")
        if self._maybe:
            flags.append("maybe")
        if self._type is not None:
            flags.append(f"type={self._type}")
        return f"Rule({self._name!r}, {', '.join(flags)})"

    # ── builder methods ───────────────────────────────────────

    def filled(self, type: Any = None) -> Rule:
        """The value must be present and non-empty, optionally of *type*."""
        self._check_frozen()
        resolved = resolve_type(type) if type is not None else None
        self._filled = True
        self._type = resolved
        return self

    def maybe(self, type: Any = None) -> Rule:
        """The value may be ``None``; when present it must match *type*."""
        self._check_frozen()
        resolved = resolve_type(type) if type is not None else None
        self._maybe = True
        self._type = resolved
        return self

    def type(self, type: Any) -> Rule:
        """The value must match a primitive kind name or be an instance of a class."""
        self._check_frozen()
        self._type = resolve_type(type)
        return self

    def format(self, pattern: re.Pattern[str]) -> Rule:
        """String values must contain a match for *pattern*."""
        self._check_frozen()
        if not isinstance(pattern, re.Pattern):
            raise ContractDefinitionError(
                f"Format must be a compiled regular expression, got {type(pattern).__name__}",
                code="CONTRACT_INVALID_FORMAT",
            )
        name = self._name

        def check(value: Any) -> str | None:
            if not isinstance(value, (str, bytes)):
                return None
            return None if pattern.search(value) else f"{name} does not match expected format"

        self._validators.append(check)
        return self

    def responds_to(self, *methods: str) -> Rule:
        """The value must expose every callable attribute in *methods*."""
        self._check_frozen()
        if not methods:
            raise ContractDefinitionError(
                "At least one method name is required", code="CONTRACT_EMPTY_ARGUMENT"
            )
        for method in methods:
            if not isinstance(method, str):
                raise ContractDefinitionError(
                    f"Method name must be a str, got {type(method).__name__}",
                    code="CONTRACT_INVALID_ARGUMENT",
                )
        name = self._name

        def check(value: Any) -> str | None:
            missing = [m for m in methods if not callable(getattr(value, m, None))]
            return f"{name} must respond to {', '.join(missing)}" if missing else None

        self._validators.append(check)
        return self

    def one_of(self, *values: Any) -> Rule:
        """The value must equal one of *values*."""
        self._check_frozen()
        if not values:
            raise ContractDefinitionError(
                "At least one value is required for one_of", code="CONTRACT_EMPTY_ARGUMENT"
            )
        allowed = list(values)
        name = self._name

        def check(value: Any) -> str | None:
            if value in allowed:
                return None
            return f"{name} must be one of {allowed!r}, got {value!r}"

        self._validators.append(check)
        return self

    def in_range(self, bounds: range | tuple[Any, Any]) -> Rule:
        """The value must lie within *bounds*.

        *bounds* is either a ``range`` (stop exclusive, as usual) or an
        inclusive ``(low, high)`` pair of comparable values.
        """
        self._check_frozen()
        if isinstance(bounds, range):
            if len(bounds) == 0:
                raise ContractDefinitionError(f"Range {bounds!r} is empty", code="CONTRACT_EMPTY_ARGUMENT")
            low, high = bounds[0], bounds[-1]
            if bounds.step == 1:
                covers = lambda v: low <= v <= high  # noqa: E731
            else:
                covers = lambda v: v in bounds  # noqa: E731
        elif isinstance(bounds, tuple) and len(bounds) == 2:
            low, high = bounds
            try:
                empty = high < low
            except TypeError as exc:
                raise ContractDefinitionError(
                    f"Range bounds {bounds!r} are not comparable", code="CONTRACT_INVALID_ARGUMENT"
                ) from exc
            if empty:
                raise ContractDefinitionError(f"Range {bounds!r} is empty", code="CONTRACT_EMPTY_ARGUMENT")
            covers = lambda v: low <= v <= high  # noqa: E731
        else:
            raise ContractDefinitionError(
                f"Argument must be a range or a (low, high) tuple, got {type(bounds).__name__}",
                code="CONTRACT_INVALID_ARGUMENT",
            )
        name = self._name

        def check(value: Any) -> str | None:
            try:
                inside = covers(value)
            except TypeError:
                inside = False
            return None if inside else f"{name} must be in range {low}..{high}, got {value}"

        self._validators.append(check)
        return self

    def satisfies(self, predicate: Callable[[Any], bool], message: str | None = None) -> Rule:
        """The value must make *predicate* return a truthy result.

        Exceptions raised by *predicate* are not caught.
        """
        self._check_frozen()
        if not callable(predicate):
            raise ContractDefinitionError(
                f"Predicate must be callable, got {type(predicate).__name__}",
                code="CONTRACT_INVALID_ARGUMENT",
            )
        error = message or f"{self._name} is invalid"

        def check(value: Any) -> str | None:
            return None if predicate(value) else error

        self._validators.append(check)
        return self

    def conforms_to(self, model: type[BaseModel]) -> Rule:
        """Mapping values must validate against the pydantic *model*.

        Instances of *model* pass as-is; other non-mapping values are left
        to the type check.
        """
        self._check_frozen()
        if not (isinstance(model, type) and issubclass(model, BaseModel)):
            raise ContractDefinitionError(
                f"conforms_to requires a pydantic model class, got {model!r}",
                code="CONTRACT_INVALID_ARGUMENT",
            )
        name = self._name

        def check(value: Any) -> str | None:
            if isinstance(value, model) or not isinstance(value, Mapping):
                return None
            detail = model_errors(model, dict(value))
            return f"{name} does not conform to {model.__name__}: {detail}" if detail else None

        self._validators.append(check)
        return self

    # ── lifecycle ─────────────────────────────────────────────

    def freeze(self) -> Rule:
        """Prevent any further modification of this rule."""
        self._frozen = True
        return self

    def _check_frozen(self) -> None:
        if self._frozen:
            raise FrozenRuleError(f"Cannot modify frozen rule for '{self._name}'", code="CONTRACT_FROZEN_RULE")

    # ── validation ────────────────────────────────────────────

    def validate(self, context: Context) -> list[str]:
        """Validate the attribute in *context*; return error messages (empty if valid)."""
        value = context.get(self._name)

        if value is None:
            if self._required:
                return [f"{self._name} is required but missing"]
            return []

        if self._filled and _is_empty(value):
            return [f"{self._name} must be filled but is empty"]

        if self._type is not None and not matches_type(value, self._type):
            return [f"{self._name} must be of type {self._type} but got {type(value).__name__}"]

        errors: list[str] = []
        for check in self._validators:
            error = check(value)
            if error is not None:
                errors.append(error)
        return errors
