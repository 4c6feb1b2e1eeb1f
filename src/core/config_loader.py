import json
import logging
from pathlib import Path

from core.models.config_data import ControlLimits, SimulationBounds, configData

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and manages monitor configuration from JSON file."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
            cls._instance._config = configData()
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._config = self._get_default_config()
            self.load_config()
            self._initialized = True

    @staticmethod
    def get_config_path() -> Path:
        """Get the path to the monitor_config.json file."""
        # Config file should be in the project root/config directory
        config_path = Path(__file__).parent.parent.parent / "config" / "monitor_config.json"
        return config_path

    def load_config(self, config_path: Path | None = None):
        """Load configuration from JSON file."""
        config_path = config_path or self.get_config_path()

        # Start from defaults so a partial file only overrides what it names
        self._config = self._get_default_config()

        if not config_path.exists():
            logger.error(f"Configuration file not found: {config_path}")
            return

        try:
            with open(config_path, 'r') as f:
                json_data = json.load(f)

            defaults = self._config
            limits = ControlLimits(
                level_limit=float(json_data.get("level_limit", defaults.limits.level_limit)),
                gas_limit=int(json_data.get("gas_limit", defaults.limits.gas_limit)),
            )

            sim = json_data.get("simulation", {})
            bounds = SimulationBounds(
                level_normal=self._pair(sim, "level_normal", defaults.bounds.level_normal, float),
                level_overflow=self._pair(sim, "level_overflow", defaults.bounds.level_overflow, float),
                gas_normal=self._pair(sim, "gas_normal", defaults.bounds.gas_normal, int),
                gas_leak=self._pair(sim, "gas_leak", defaults.bounds.gas_leak, int),
            )

            self._config = configData(
                limits=limits,
                bounds=bounds,
                tick_period_ms=int(json_data.get("tick_period_ms", defaults.tick_period_ms)),
                log_capacity=int(json_data.get("log_capacity", defaults.log_capacity)),
                level_history_capacity=int(
                    json_data.get("level_history_capacity", defaults.level_history_capacity)
                ),
            )
            for name in ("tick_period_ms", "log_capacity", "level_history_capacity"):
                value = getattr(self._config, name)
                if value <= 0:
                    raise ValueError(f"{name} must be positive, got {value}")
            logger.info(f"Configuration loaded from {config_path}")

        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse configuration file: {e}")
            self._config = self._get_default_config()

        except (TypeError, ValueError) as e:
            logger.error(f"Invalid value in configuration file: {e}")
            self._config = self._get_default_config()

    @staticmethod
    def _pair(section: dict, key: str, default: tuple, cast) -> tuple:
        if key not in section:
            return default
        lo, hi = section[key]
        return cast(lo), cast(hi)

    @staticmethod
    def _get_default_config() -> configData:
        """Return default configuration."""
        return configData(limits=ControlLimits(), bounds=SimulationBounds())

    def get_config(self) -> configData:
        return self._config

    def get_limits(self) -> ControlLimits:
        return self._config.limits

    def get_bounds(self) -> SimulationBounds:
        return self._config.bounds

    def get_tick_period_ms(self) -> int:
        return self._config.tick_period_ms

    def get_log_capacity(self) -> int:
        return self._config.log_capacity

    def get_level_history_capacity(self) -> int:
        return self._config.level_history_capacity

    def reload_config(self):
        """Reload configuration from file."""
        self.load_config()
        logger.info("Configuration reloaded")


# Global singleton instance
config_loader = ConfigLoader()
