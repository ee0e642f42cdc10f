"""Tests for the internal message bundle."""

import threading

import pytest

from msgsimple.bundle import internal
from msgsimple.bundle.internal import InternalBundle, check_not_null
from msgsimple.kernel.exceptions import InvalidArgumentException
from msgsimple.source.adapters.map_source import MapMessageSource


@pytest.fixture
def fresh_bundle(monkeypatch):
    monkeypatch.setattr(InternalBundle, "_instance", None)


class TestInternalBundleSingleton:
    def test_get_instance_returns_same_bundle(self):
        assert InternalBundle.get_instance() is InternalBundle.get_instance()

    def test_get_instance_is_created_once_across_threads(self, fresh_bundle):
        seen: list[InternalBundle] = []

        def grab() -> None:
            seen.append(InternalBundle.get_instance())

        threads = [threading.Thread(target=grab) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(seen) == 8
        assert all(bundle is seen[0] for bundle in seen)


class TestPackagedMessages:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("cfg.nullMap", "map cannot be null"),
            ("cfg.map.nullKey", "null keys are not allowed in a map message source"),
            ("cfg.map.nullValue", "null values are not allowed in a map message source"),
        ],
    )
    def test_known_codes(self, code, expected):
        assert InternalBundle.get_instance().get_message(code) == expected

    def test_unknown_code_returns_code(self):
        assert InternalBundle.get_instance().get_message("cfg.nope") == "cfg.nope"


class TestCheckNotNull:
    def test_returns_reference(self):
        bundle = InternalBundle(MapMessageSource.new_builder().build())
        value = {"a": "b"}
        assert bundle.check_not_null(value, "cfg.nullMap") is value

    def test_falsy_values_are_not_null(self):
        bundle = InternalBundle(MapMessageSource.new_builder().build())
        assert bundle.check_not_null("", "cfg.map.nullValue") == ""
        assert bundle.check_not_null({}, "cfg.nullMap") == {}

    def test_raises_with_bundle_text(self):
        source = MapMessageSource.new_builder().put("custom.code", "custom text").build()
        bundle = InternalBundle(source)
        with pytest.raises(InvalidArgumentException, match="custom text") as exc_info:
            bundle.check_not_null(None, "custom.code")
        assert exc_info.value.code == "custom.code"

    def test_module_shortcut_uses_shared_bundle(self):
        with pytest.raises(InvalidArgumentException) as exc_info:
            check_not_null(None, "cfg.map.nullKey")
        assert str(exc_info.value) == "null keys are not allowed in a map message source"
        assert exc_info.value.code == "cfg.map.nullKey"

    def test_module_shortcut_does_not_load_bundle_on_success(self, fresh_bundle):
        assert check_not_null("key", "cfg.map.nullKey") == "key"
        assert InternalBundle._instance is None


class TestInvalidPackagedMessages:
    def test_null_in_packaged_messages_raises_instead_of_hanging(self, fresh_bundle, monkeypatch):
        def load_with_null_message():
            MapMessageSource.new_builder().put("cfg.map.nullKey", None)
            return MapMessageSource.new_builder().build()

        monkeypatch.setattr(internal, "_load_packaged_messages", load_with_null_message)
        errors: list[BaseException] = []

        def grab() -> None:
            try:
                InternalBundle.get_instance()
            except InvalidArgumentException as exc:
                errors.append(exc)

        thread = threading.Thread(target=grab, daemon=True)
        thread.start()
        thread.join(timeout=5)

        assert not thread.is_alive()
        assert len(errors) == 1
        assert errors[0].code == "cfg.map.nullValue"
        assert str(errors[0]) == "cfg.map.nullValue"
        assert InternalBundle._instance is None
        assert InternalBundle._loading is False
