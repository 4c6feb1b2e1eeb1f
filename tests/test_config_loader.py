import json

import pytest
from core.config_loader import ConfigLoader, config_loader
from core.service_manager import build_controller
from core.models.config_data import ControlLimits, SimulationBounds


@pytest.fixture(autouse=True)
def restore_config():
    yield
    config_loader.reload_config()


class TestConfigLoader:
    """Test configuration loading and access."""

    def test_config_loads(self):
        """Shipped config matches the documented constants."""
        assert config_loader.get_limits() == ControlLimits(level_limit=10.0, gas_limit=600)
        assert config_loader.get_bounds() == SimulationBounds()
        assert config_loader.get_tick_period_ms() == 2000
        assert config_loader.get_log_capacity() == 60
        assert config_loader.get_level_history_capacity() == 30

    def test_config_singleton(self):
        assert ConfigLoader() is config_loader

    def test_partial_file_overrides(self, tmp_path):
        path = tmp_path / "monitor_config.json"
        path.write_text(json.dumps({
            "gas_limit": 500,
            "simulation": {"level_normal": [2, 8]},
        }))

        config_loader.load_config(path)

        assert config_loader.get_limits() == ControlLimits(level_limit=10.0, gas_limit=500)
        assert config_loader.get_bounds().level_normal == (2.0, 8.0)
        assert config_loader.get_bounds().gas_leak == (0, 1023)
        assert config_loader.get_tick_period_ms() == 2000

    def test_missing_file_uses_defaults(self, tmp_path, caplog):
        config_loader.load_config(tmp_path / "absent.json")
        assert config_loader.get_limits() == ControlLimits()
        assert "not found" in caplog.text

    def test_malformed_json_uses_defaults(self, tmp_path, caplog):
        path = tmp_path / "monitor_config.json"
        path.write_text("{ not json")

        config_loader.load_config(path)

        assert config_loader.get_config().log_capacity == 60
        assert "Failed to parse" in caplog.text

    def test_inverted_bounds_use_defaults(self, tmp_path, caplog):
        path = tmp_path / "monitor_config.json"
        path.write_text(json.dumps({"simulation": {"gas_normal": [575, 90]}}))

        config_loader.load_config(path)

        assert config_loader.get_bounds() == SimulationBounds()
        assert "Invalid value" in caplog.text

    def test_bad_value_type_uses_defaults(self, tmp_path):
        path = tmp_path / "monitor_config.json"
        path.write_text(json.dumps({"tick_period_ms": "fast"}))

        config_loader.load_config(path)

        assert config_loader.get_tick_period_ms() == 2000

    @pytest.mark.parametrize("key", ["tick_period_ms", "log_capacity", "level_history_capacity"])
    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_sizes_use_defaults(self, tmp_path, caplog, key, value):
        path = tmp_path / "monitor_config.json"
        path.write_text(json.dumps({key: value, "gas_limit": 500}))

        config_loader.load_config(path)

        assert config_loader.get_config() == ConfigLoader._get_default_config()
        assert "must be positive" in caplog.text

    def test_controller_builds_after_zero_capacity(self, tmp_path):
        path = tmp_path / "monitor_config.json"
        path.write_text(json.dumps({"log_capacity": 0}))

        config_loader.load_config(path)
        controller = build_controller()

        assert controller.event_log.capacity == 60
