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
"""Populate map-backed message sources from files and configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from msgsimple.core.config import Config
from msgsimple.kernel.exceptions import ResourceLoadException
from msgsimple.source.adapters.map_source import MapMessageSource

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")


def flatten(data: Mapping[Any, Any], prefix: str = "") -> dict[str | None, str | None]:
    """Flatten nested mappings into dot-separated keys.

    Leaves are converted with ``str()``. ``None`` keys and leaves are kept
    so the builder can reject them::

        {"greeting": {"hello": "Hello!"}}  ->  {"greeting.hello": "Hello!"}
    """
    items: dict[str | None, str | None] = {}
    for key, value in data.items():
        if key is None:
            items[None] = None if value is None else str(value)
            continue
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            items.update(flatten(value, full_key))
        else:
            items[full_key] = None if value is None else str(value)
    return items


def load_messages(path: str | Path) -> MapMessageSource:
    """Build a source from a YAML (``.yaml``/``.yml``) or JSON message file.

    Nested keys are flattened with :func:`flatten`. An empty file yields an
    empty source.

    Raises:
        ResourceLoadException: The file is missing, has an unsupported
            suffix, cannot be parsed, or does not hold a mapping.
        InvalidArgumentException: A key or message in the file is null.
    """
    path = Path(path)
    context = {"path": str(path)}
    if not path.is_file():
        raise ResourceLoadException(
            f"Message file not found: {path}", code="resource.notFound", context=context
        )

    suffix = path.suffix.lower()
    try:
        if suffix in _YAML_SUFFIXES:
            with path.open(encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        elif suffix == ".json":
            with path.open(encoding="utf-8") as fh:
                text = fh.read()
            data = json.loads(text) if text.strip() else None
        else:
            raise ResourceLoadException(
                f"Unsupported message file type '{suffix}': {path}",
                code="resource.unsupportedType",
                context=context,
            )
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ResourceLoadException(
            f"Cannot parse message file {path}: {exc}", code="resource.parseError", context=context
        ) from exc

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ResourceLoadException(
            f"Message file {path} must contain a mapping, got {type(data).__name__}",
            code="resource.notAMapping",
            context=context,
        )

    source = MapMessageSource.new_builder().put_all(flatten(data)).build()
    logger.debug("Loaded %d messages from %s", len(source), path)
    return source


def messages_from_config(config: Config, prefix: str = "msgsimple.messages") -> MapMessageSource:
    """Build a source from the configuration section under *prefix*.

    A missing section yields an empty source. The section is read as a
    whole through :meth:`Config.get_section`, so ``MSGSIMPLE_*`` environment
    overrides, which apply to single keys read with :meth:`Config.get`, do
    not affect the messages.
    """
    return MapMessageSource.new_builder().put_all(flatten(config.get_section(prefix))).build()
