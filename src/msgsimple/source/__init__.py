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
"""Message sources — the lookup port and its map-backed adapter.

Import concrete adapter types from the adapter package::

    from msgsimple.source.adapters.map_source import MapMessageSource
"""

from msgsimple.source.adapters.map_source import MapMessageSource, MapMessageSourceBuilder
from msgsimple.source.loading import load_messages, messages_from_config
from msgsimple.source.ports.outbound import MessageSource

__all__ = [
    "MessageSource",
    "MapMessageSource",
    "MapMessageSourceBuilder",
    "load_messages",
    "messages_from_config",
]
