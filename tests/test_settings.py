"""Tests for the settings file."""

from __future__ import annotations

import json

import pytest

from clawclean.settings import DEFAULT_MEASURE_METHOD, Settings

pytestmark = pytest.mark.usefixtures("isolate_config")


def _write(path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data if isinstance(data, str) else json.dumps(data))


class TestSettings:
    def test_defaults_without_file(self, isolate_config):
        settings = Settings()
        assert settings.path == isolate_config
        assert settings.measure_method == DEFAULT_MEASURE_METHOD == "auto"

    @pytest.mark.parametrize("method", ["auto", "du", "walk"])
    def test_valid_methods(self, isolate_config, method):
        _write(isolate_config, {"measure": {"method": method}})
        assert Settings().measure_method == method

    def test_invalid_method_warns_and_defaults(self, isolate_config, caplog):
        _write(isolate_config, {"measure": {"method": "quantum"}})

        with caplog.at_level("WARNING", logger="clawclean.settings"):
            assert Settings().measure_method == "auto"
        assert "quantum" in caplog.text

    def test_non_string_method_defaults(self, isolate_config):
        _write(isolate_config, {"measure": {"method": ["du"]}})
        assert Settings().measure_method == "auto"

    def test_measure_section_not_object(self, isolate_config, caplog):
        _write(isolate_config, {"measure": "du"})

        with caplog.at_level("WARNING", logger="clawclean.settings"):
            assert Settings().measure_method == "auto"
        assert "expected an object" in caplog.text

    def test_invalid_json_uses_defaults(self, isolate_config, caplog):
        _write(isolate_config, "{not json")

        with caplog.at_level("WARNING", logger="clawclean.settings"):
            settings = Settings()
        assert settings.measure_method == "auto"
        assert "Could not load settings" in caplog.text

    def test_non_object_top_level_ignored(self, isolate_config):
        _write(isolate_config, "[1, 2, 3]")
        assert Settings().measure_method == "auto"

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.json"
        _write(path, {"measure": {"method": "du"}})
        assert Settings(path).measure_method == "du"
