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
"""Bootstrap — wire logging from configuration."""

from __future__ import annotations

from pathlib import Path

from pyactor.core.config import Config
from pyactor.logging.port import LoggingPort
from pyactor.logging.structlog_adapter import StructlogAdapter


def configure(
    config: Config | str | Path | None = None,
    adapter: LoggingPort | None = None,
) -> LoggingPort:
    """Configure PyActor logging.

    Args:
        config: A :class:`Config`, a path to a YAML/TOML file, or ``None``
            for the packaged defaults.
        adapter: Logging adapter to configure. Defaults to
            :class:`StructlogAdapter`.

    Returns:
        The configured adapter.
    """
    if config is None:
        config = Config.defaults()
    elif not isinstance(config, Config):
        config = Config.from_file(config)

    port = adapter if adapter is not None else StructlogAdapter()
    port.configure(config)
    return port
