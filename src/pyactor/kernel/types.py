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
"""Shared kernel types."""

from __future__ import annotations

from enum import StrEnum


class ActorState(StrEnum):
    """Lifecycle state of a single actor invocation.

    ``PENDING -> VALIDATING_INPUT -> RUNNING -> VALIDATING_OUTPUT -> COMPLETED``,
    or ``FAILED`` from any validating/running state, then ``ROLLED_BACK``.
    """

    PENDING = "PENDING"
    VALIDATING_INPUT = "VALIDATING_INPUT"
    RUNNING = "RUNNING"
    VALIDATING_OUTPUT = "VALIDATING_OUTPUT"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    ROLLED_BACK = "ROLLED_BACK"
