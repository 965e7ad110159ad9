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
"""Pydantic integration helpers for contract rules."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError


def model_errors(model: type[BaseModel], data: dict[str, Any]) -> str | None:
    """Validate *data* against a Pydantic model.

    Returns:
        ``None`` when *data* is valid, otherwise a ``"loc: msg; ..."`` summary
        of every validation error.
    """
    try:
        model.model_validate(data)
    except ValidationError as exc:
        return "; ".join(
            f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in exc.errors()
        )
    return None
