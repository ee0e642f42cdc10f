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
"""Internal message bundle — human-readable text for msgsimple's own errors."""

from __future__ import annotations

import importlib.resources
import logging
import threading
from typing import TYPE_CHECKING, TypeVar

from msgsimple.kernel.exceptions import InvalidArgumentException

if TYPE_CHECKING:
    from msgsimple.source.ports.outbound import MessageSource

T = TypeVar("T")

logger = logging.getLogger(__name__)

_RESOURCE_PACKAGE = "msgsimple.resources"
_RESOURCE_NAME = "messages.yaml"


class InternalBundle:
    """Resolves msgsimple's own message codes, such as ``cfg.map.nullKey``.

    Use :meth:`get_instance` for the process-wide bundle loaded from the
    packaged ``messages.yaml``.
    """

    _instance: InternalBundle | None = None
    _loading = False
    _lock = threading.RLock()

    def __init__(self, source: MessageSource) -> None:
        self._source = source

    @classmethod
    def get_instance(cls) -> InternalBundle:
        """Return the shared bundle, loading it on first use."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    if cls._loading:
                        # A check failed while the packaged messages load.
                        return cls(_NoMessages())
                    cls._loading = True
                    try:
                        cls._instance = cls(_load_packaged_messages())
                    finally:
                        cls._loading = False
        return cls._instance

    def get_message(self, code: str) -> str:
        """Return the message for *code*, or *code* itself when unknown."""
        message = self._source.get_key(code)
        return code if message is None else message

    def check_not_null(self, reference: T | None, code: str) -> T:
        """Return *reference*, raising when it is ``None``.

        Raises:
            InvalidArgumentException: *reference* is ``None``; the message is
                the bundle text for *code*.
        """
        if reference is None:
            raise InvalidArgumentException(self.get_message(code), code=code)
        return reference


def check_not_null(reference: T | None, code: str) -> T:
    """Module-level shortcut for :meth:`InternalBundle.check_not_null`.

    The shared bundle is only consulted on failure.
    """
    if reference is None:
        InternalBundle.get_instance().check_not_null(reference, code)
    return reference  # type: ignore[return-value]


class _NoMessages:
    def get_key(self, key: str) -> str | None:  # noqa: ARG002
        return None


def _load_packaged_messages() -> MessageSource:
    from msgsimple.source.loading import load_messages

    resource = importlib.resources.files(_RESOURCE_PACKAGE).joinpath(_RESOURCE_NAME)
    with importlib.resources.as_file(resource) as path:
        source = load_messages(path)
    logger.debug("Internal message bundle loaded")
    return source
