"""
Tests for smarthome.config.

Covers:
- AppConfig environment overrides
- CatalogueConfig from mappings and properties files
- load_config log level validation
- setup_logging handler bookkeeping
"""

from __future__ import annotations

import logging

import pytest

from smarthome.config import AppConfig, CatalogueConfig, load_catalogue_config, load_config, setup_logging
from smarthome.constants import DEFAULT_CATALOGUE_PATH
from smarthome.domain.exceptions import ConfigurationError


class TestAppConfig:
    def test_defaults(self, monkeypatch):
        for name in ("SMARTHOME_ENV", "SMARTHOME_DEBUG", "SMARTHOME_CATALOGUE_PATH", "SMARTHOME_SENSOR_KEY"):
            monkeypatch.delenv(name, raising=False)
        config = AppConfig()
        assert config.environment == "development"
        assert config.DEBUG is False
        assert config.catalogue_path == str(DEFAULT_CATALOGUE_PATH)
        assert config.sensor_key == "sensor"

    def test_env_overrides(self, monkeypatch, catalogue_file):
        monkeypatch.setenv("SMARTHOME_DEBUG", "yes")
        monkeypatch.setenv("SMARTHOME_CATALOGUE_PATH", str(catalogue_file))
        monkeypatch.setenv("SMARTHOME_ACTUATOR_KEY", "switches")
        config = AppConfig()
        assert config.DEBUG is True
        assert config.catalogue_path == str(catalogue_file)
        assert config.actuator_key == "switches"

    def test_blank_catalogue_path(self):
        with pytest.raises(ConfigurationError):
            AppConfig(catalogue_path="  ")

    def test_load_config_rejects_unknown_level(self, monkeypatch):
        monkeypatch.setenv("SMARTHOME_LOG_LEVEL", "CHATTY")
        with pytest.raises(ConfigurationError, match="CHATTY"):
            load_config()

    def test_load_config(self, monkeypatch):
        monkeypatch.setenv("SMARTHOME_LOG_LEVEL", "debug")
        assert load_config().log_level == "debug"


class TestCatalogueConfig:
    def test_from_mapping_splits_strings(self):
        config = CatalogueConfig.from_mapping({"sensor": "A, B,,C ", "actuator": ["X", " ", "Y"]})
        assert config.get_list("sensor") == ["A", "B", "C"]
        assert config.get_list("actuator") == ["X", "Y"]
        assert config.get_list("missing") == []

    def test_from_mapping_none(self):
        with pytest.raises(ConfigurationError, match="Invalid arguments"):
            CatalogueConfig.from_mapping(None)

    def test_from_file(self, catalogue_file):
        config = CatalogueConfig.from_file(catalogue_file)
        assert config.keys() == ["sensor", "actuator"]
        assert config.get_list("actuator") == ["SwitchOnOffActuator", "RangeActuatorInt"]
        assert config.source == str(catalogue_file)

    def test_from_file_missing(self, tmp_path):
        with pytest.raises(ConfigurationError) as excinfo:
            CatalogueConfig.from_file(tmp_path / "missing.properties")
        assert excinfo.value.detail == {"path": str(tmp_path / "missing.properties")}

    @pytest.mark.parametrize("path", [None, "", "   "])
    def test_from_file_blank(self, path):
        with pytest.raises(ConfigurationError, match="Invalid arguments"):
            CatalogueConfig.from_file(path)

    def test_packaged_default(self):
        config = CatalogueConfig.from_file(DEFAULT_CATALOGUE_PATH)
        assert len(config.get_list("sensor")) == 12
        assert len(config.get_list("actuator")) == 4

    def test_load_catalogue_config(self, app_config):
        assert load_catalogue_config(app_config).get_list("sensor") == ["TemperatureSensor", "HumiditySensor"]


class TestSetupLogging:
    @pytest.fixture()
    def clean_root(self):
        root = logging.getLogger()
        saved_handlers = list(root.handlers)
        saved_level = root.level
        yield root
        for handler in list(root.handlers):
            if handler not in saved_handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(saved_level)

    def test_adds_console_handler_once(self, clean_root):
        setup_logging()
        setup_logging()
        names = [h.name for h in clean_root.handlers]
        assert names.count("smarthome_console") == 1
        assert clean_root.level == logging.INFO

    def test_debug_and_file_handler(self, clean_root, tmp_path):
        log_file = tmp_path / "logs" / "smarthome.log"
        setup_logging(debug=True, log_file=str(log_file))
        names = [h.name for h in clean_root.handlers]
        assert "smarthome_file" in names
        assert clean_root.level == logging.DEBUG
        assert log_file.parent.is_dir()

    def test_log_level_is_applied(self, clean_root):
        setup_logging(log_level="warning")
        console = next(h for h in clean_root.handlers if h.name == "smarthome_console")
        assert clean_root.level == logging.WARNING
        assert console.level == logging.WARNING

    def test_debug_overrides_log_level(self, clean_root):
        setup_logging(debug=True, log_level="ERROR")
        assert clean_root.level == logging.DEBUG

    def test_unknown_log_level(self, clean_root):
        with pytest.raises(ConfigurationError, match="VERBOSE"):
            setup_logging(log_level="VERBOSE")
