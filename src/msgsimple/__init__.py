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
"""msgsimple — immutable, builder-made message sources.

Typical usage::

    from msgsimple import MapMessageSource

    source = MapMessageSource.new_builder().put("greeting", "hello").build()
    source.get_key("greeting")  # "hello"
    source.get_key("unknown")   # None
"""

from msgsimple.kernel.exceptions import (
    InvalidArgumentException,
    MsgSimpleException,
    ResourceLoadException,
    ValidationException,
)
from msgsimple.logging import configure_logging
from msgsimple.source import (
    MapMessageSource,
    MapMessageSourceBuilder,
    MessageSource,
    load_messages,
    messages_from_config,
)

__version__ = "0.4.0"

__all__ = [
    "MessageSource",
    "MapMessageSource",
    "MapMessageSourceBuilder",
    "load_messages",
    "messages_from_config",
    "configure_logging",
    "MsgSimpleException",
    "ValidationException",
    "InvalidArgumentException",
    "ResourceLoadException",
]
