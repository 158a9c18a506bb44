"""Tests for the configuration layer."""

import json

import pytest

from style_engine.utils.config import DEFAULT_CONFIG, Config


@pytest.fixture
def config_file(tmp_path):
    def write(content):
        path = tmp_path / "config.json"
        path.write_text(content if isinstance(content, str) else json.dumps(content))
        return str(path)
    return write


class TestDefaults:
    def test_defaults(self):
        config = Config()
        assert config.get("units.em_size") == 16.0
        assert config.get("gradients.trailing_stop_at_end") is False
        assert config.get("logging.level") == "WARNING"

    def test_missing_key(self):
        config = Config()
        assert config.get("units.rem_size") is None
        assert config.get("nothing.here", 3) == 3
        assert config.get("units.em_size.deeper", "x") == "x"

    def test_defaults_are_not_shared(self):
        Config().set("units.em_size", 99.0)
        assert DEFAULT_CONFIG["units"]["em_size"] == 16.0
        assert Config().get("units.em_size") == 16.0


class TestFile:
    def test_overrides_are_merged(self, config_file):
        path = config_file({"units": {"em_size": 12}})
        config = Config(path)
        assert config.get("units.em_size") == 12
        assert config.get("logging.level") == "WARNING"

    def test_missing_file(self, tmp_path):
        config = Config(str(tmp_path / "absent.json"))
        assert config.get("units.em_size") == 16.0

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
    def test_bad_file_keeps_defaults(self, config_file, content):
        config = Config(config_file(content))
        assert config.get_all() == DEFAULT_CONFIG

    def test_reload(self, config_file):
        path = config_file({"gradients": {"trailing_stop_at_end": True}})
        config = Config(path)
        config.set("gradients.trailing_stop_at_end", False)
        config.load()
        assert config.get("gradients.trailing_stop_at_end") is True


class TestSet:
    def test_set_nested(self):
        config = Config()
        config.set("a.b.c", 1)
        assert config.get("a.b.c") == 1
        assert config.get("a") == {"b": {"c": 1}}

    def test_set_replaces_scalar_with_section(self):
        config = Config()
        config.set("units.em_size.x", 2)
        assert config.get("units.em_size") == {"x": 2}

    def test_get_all_is_a_copy(self):
        config = Config()
        values = config.get_all()
        values["units"]["em_size"] = 1.0
        assert config.get("units.em_size") == 16.0
