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
"""StructlogAdapter — renders msgsimple's log records with structlog."""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

from msgsimple.core.config import Config

PACKAGE_LOGGER = "msgsimple"


class StructlogAdapter:
    """Routes the ``msgsimple.*`` stdlib loggers through structlog renderers.

    Only the package logger is touched: one handler is attached to it and it
    stops propagating, so records are not rendered twice by the host's
    root handlers. Structlog's global configuration is left unchanged.

    Recognised configuration::

        msgsimple:
          logging:
            format: console      # or json
            level:
              root: WARNING      # level of the "msgsimple" logger
              source: DEBUG      # same as "msgsimple.source"
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream
        self._level: str = "WARNING"
        self._format: str = "console"
        self._module_levels: dict[str, str] = {}
        self._handler: logging.Handler | None = None

    def configure(self, config: Config) -> None:
        levels = dict(config.get_section("msgsimple.logging.level"))
        self._level = str(levels.pop("root", "WARNING")).upper()
        self._module_levels = {_qualify(name): str(level).upper() for name, level in levels.items()}
        self._format = str(config.get("msgsimple.logging.format", "console")).lower()

        self.close()
        handler = logging.StreamHandler(self._stream if self._stream is not None else sys.stderr)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=_shared_processors(),
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    self._renderer(),
                ],
            )
        )
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.addHandler(handler)
        package_logger.setLevel(_level_number(self._level))
        package_logger.propagate = False
        self._handler = handler

        for name, level in self._module_levels.items():
            logging.getLogger(name).setLevel(_level_number(level))

    def get_logger(self, name: str) -> Any:
        """Get a structlog BoundLogger writing to ``msgsimple.<name>``."""
        return structlog.wrap_logger(
            logging.getLogger(_qualify(name)),
            processors=[
                structlog.contextvars.merge_contextvars,
                *_shared_processors(),
                structlog.processors.StackInfoRenderer(),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
        )

    def close(self) -> None:
        if self._handler is None:
            return
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.removeHandler(self._handler)
        package_logger.propagate = True
        self._handler.close()
        self._handler = None

    def _renderer(self) -> structlog.types.Processor:
        if self._format == "json":
            return structlog.processors.JSONRenderer()
        return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(config: Config | None = None, stream: IO[str] | None = None) -> StructlogAdapter:
    """Set up msgsimple's logging from *config* and return the adapter."""
    adapter = StructlogAdapter(stream=stream)
    adapter.configure(config if config is not None else Config())
    return adapter


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _qualify(name: str) -> str:
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return name
    return f"{PACKAGE_LOGGER}.{name}"


def _level_number(level: str) -> int:
    value = logging.getLevelName(level)
    return value if isinstance(value, int) else logging.INFO
