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
"""MessageSource protocol — port for looking up a message by key."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MessageSource(Protocol):
    """Single-capability lookup interface.

    Map-backed sources, file-backed sources and anything a surrounding
    bundle chains together implement this protocol.
    """

    def get_key(self, key: str) -> str | None:
        """Return the message for *key*, or ``None`` when it is absent.

        A missing key is a normal outcome and never raises.
        """
        ...
