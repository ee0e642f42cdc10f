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
"""Map-backed message source and its builder."""

from __future__ import annotations

import logging
import warnings
from collections.abc import Mapping
from types import MappingProxyType

from msgsimple.bundle.internal import check_not_null

logger = logging.getLogger(__name__)


class MapMessageSource:
    """A message source backed by an immutable key/message mapping.

    Build one through :meth:`new_builder`::

        source = (
            MapMessageSource.new_builder()
            .put("key1", "message1")
            .put("key2", "message2")
            .put_all(existing_map)
            .build()
        )

    Neither keys nor messages may be ``None``.
    """

    __slots__ = ("_messages",)

    def __init__(self, messages: Mapping[str, str]) -> None:
        """Build a source from a mapping directly.

        .. deprecated::
            Use :meth:`new_builder` instead.

        Raises:
            InvalidArgumentException: *messages* is ``None``, or at least one
                of its keys or values is ``None``.
        """
        warnings.warn(
            "MapMessageSource(messages) is deprecated, use MapMessageSource.new_builder()",
            DeprecationWarning,
            stacklevel=2,
        )
        self._messages: Mapping[str, str] = MappingProxyType(dict(_check_map(messages)))

    @classmethod
    def _snapshot(cls, messages: Mapping[str, str]) -> MapMessageSource:
        # Contents were validated entry by entry when they were put.
        source = cls.__new__(cls)
        source._messages = MappingProxyType(dict(messages))
        return source

    @staticmethod
    def new_builder() -> MapMessageSourceBuilder:
        """Create a new, empty builder."""
        return MapMessageSourceBuilder()

    def get_key(self, key: str) -> str | None:
        return self._messages.get(key)

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, key: object) -> bool:
        return key in self._messages

    def __repr__(self) -> str:
        return f"MapMessageSource(entries={len(self._messages)})"


class MapMessageSourceBuilder:
    """Mutable accumulator of key/message pairs.

    Not safe for concurrent mutation. :meth:`build` copies the current
    contents, so one builder can produce any number of independent sources.
    """

    def __init__(self) -> None:
        self._messages: dict[str, str] = {}

    def put(self, key: str, message: str) -> MapMessageSourceBuilder:
        """Add one key/message pair, replacing any existing message for *key*.

        Raises:
            InvalidArgumentException: *key* or *message* is ``None``.
        """
        key = check_not_null(key, "cfg.map.nullKey")
        self._messages[key] = check_not_null(message, "cfg.map.nullValue")
        return self

    def put_all(self, pairs: Mapping[str, str]) -> MapMessageSourceBuilder:
        """Add every pair of *pairs*, replacing existing messages.

        Stops at the first invalid entry; entries added before it are kept.

        Raises:
            InvalidArgumentException: *pairs* is ``None``, or one of its keys
                or values is ``None``.
        """
        for key, message in check_not_null(pairs, "cfg.nullMap").items():
            self.put(key, message)
        return self

    def build(self) -> MapMessageSource:
        """Build a new message source from the current contents."""
        source = MapMessageSource._snapshot(self._messages)
        logger.debug("Built map message source with %d entries", len(source))
        return source


# TODO: drop together with the deprecated MapMessageSource constructor
def _check_map(messages: Mapping[str, str]) -> Mapping[str, str]:
    check_not_null(messages, "cfg.nullMap")
    for key, message in messages.items():
        check_not_null(key, "cfg.map.nullKey")
        check_not_null(message, "cfg.map.nullValue")
    return messages
