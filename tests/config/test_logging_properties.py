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
"""Tests for LoggingProperties binding."""

from pyactor.config.properties import LoggingProperties
from pyactor.core.config import Config


class TestLoggingProperties:
    def test_bind_defaults(self):
        props = Config({}).bind(LoggingProperties)
        assert props.format == "console"
        assert props.root_level == "INFO"
        assert props.module_levels == {}

    def test_bind_packaged_defaults(self):
        props = Config.defaults().bind(LoggingProperties)
        assert props.root_level == "INFO"
        assert props.module_levels == {"pyactor": "WARNING"}

    def test_levels_are_upper_cased(self):
        config = Config({"pyactor": {"logging": {"level": {"root": "debug", "myapp": "error"}}}})
        props = config.bind(LoggingProperties)
        assert props.root_level == "DEBUG"
        assert props.module_levels == {"myapp": "ERROR"}
