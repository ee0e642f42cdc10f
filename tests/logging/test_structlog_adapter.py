"""Tests for StructlogAdapter — routing of the msgsimple.* loggers."""

import io
import json
import logging

import pytest

from msgsimple.core.config import Config
from msgsimple.logging import configure_logging
from msgsimple.logging.port import LoggingPort
from msgsimple.logging.structlog_adapter import StructlogAdapter
from msgsimple.source.adapters.map_source import MapMessageSource


def _logging_config(**section) -> Config:
    return Config({"msgsimple": {"logging": section}})


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def adapter(stream):
    adapter = StructlogAdapter(stream=stream)
    yield adapter
    adapter.close()
    for name in ("msgsimple", "msgsimple.source", "msgsimple.bundle"):
        logging.getLogger(name).setLevel(logging.NOTSET)


def _last_json_line(stream: io.StringIO) -> dict:
    return json.loads(stream.getvalue().strip().splitlines()[-1])


class TestStructlogAdapterConformance:
    def test_implements_logging_port(self):
        assert isinstance(StructlogAdapter(), LoggingPort)


class TestStructlogAdapterConfigure:
    def test_defaults(self, adapter):
        adapter.configure(Config({}))
        package_logger = logging.getLogger("msgsimple")
        assert package_logger.level == logging.WARNING
        assert package_logger.propagate is False
        assert adapter._format == "console"

    def test_root_logger_untouched(self, adapter):
        root = logging.getLogger()
        handlers_before = list(root.handlers)
        level_before = root.level
        adapter.configure(_logging_config(level={"root": "DEBUG"}))
        assert root.handlers == handlers_before
        assert root.level == level_before

    def test_reconfigure_replaces_handler(self, adapter):
        package_logger = logging.getLogger("msgsimple")
        before = len(package_logger.handlers)
        adapter.configure(Config({}))
        adapter.configure(_logging_config(format="json"))
        assert len(package_logger.handlers) == before + 1

    def test_per_module_levels_are_qualified(self, adapter):
        adapter.configure(_logging_config(level={"root": "WARNING", "source": "debug", "msgsimple.bundle": "ERROR"}))
        assert adapter._module_levels == {"msgsimple.source": "DEBUG", "msgsimple.bundle": "ERROR"}
        assert logging.getLogger("msgsimple.source").level == logging.DEBUG
        assert logging.getLogger("msgsimple.bundle").level == logging.ERROR

    def test_unknown_level_falls_back_to_info(self, adapter):
        adapter.configure(_logging_config(level={"root": "LOUD"}))
        assert logging.getLogger("msgsimple").level == logging.INFO

    def test_close_detaches_handler(self, adapter):
        package_logger = logging.getLogger("msgsimple")
        before = len(package_logger.handlers)
        adapter.configure(Config({}))
        adapter.close()
        assert len(package_logger.handlers) == before
        assert package_logger.propagate is True


class TestStructlogAdapterOutput:
    def test_library_records_rendered_as_json(self, adapter, stream):
        adapter.configure(_logging_config(format="json", level={"root": "DEBUG"}))
        MapMessageSource.new_builder().put("greeting", "hello").build()
        record = _last_json_line(stream)
        assert record["event"] == "Built map message source with 1 entries"
        assert record["logger"] == "msgsimple.source.adapters.map_source"
        assert record["level"] == "debug"
        assert "timestamp" in record

    def test_module_level_enables_debug_below_package_level(self, adapter, stream):
        adapter.configure(_logging_config(format="json", level={"root": "WARNING", "source": "DEBUG"}))
        MapMessageSource.new_builder().build()
        assert _last_json_line(stream)["event"] == "Built map message source with 0 entries"

    def test_debug_suppressed_at_default_level(self, adapter, stream):
        adapter.configure(Config({}))
        MapMessageSource.new_builder().build()
        assert stream.getvalue() == ""

    def test_get_logger_binds_structured_fields(self, adapter, stream):
        adapter.configure(_logging_config(format="json", level={"root": "INFO"}))
        adapter.get_logger("bundle").info("bundle_ready", codes=3)
        record = _last_json_line(stream)
        assert record["event"] == "bundle_ready"
        assert record["codes"] == 3
        assert record["logger"] == "msgsimple.bundle"

    def test_console_format(self, adapter, stream):
        adapter.configure(_logging_config(level={"root": "INFO"}))
        adapter.get_logger("msgsimple.source").info("source_ready")
        assert "source_ready" in stream.getvalue()


class TestConfigureLogging:
    def test_returns_configured_adapter(self, stream):
        adapter = configure_logging(_logging_config(format="json"), stream=stream)
        try:
            assert isinstance(adapter, StructlogAdapter)
            assert adapter._format == "json"
        finally:
            adapter.close()
            logging.getLogger("msgsimple").setLevel(logging.NOTSET)
