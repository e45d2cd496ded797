"""
Settings for IGC Flight Log.
These are configurable parameters that can be changed by the user.
"""

import os
import json
import logging
from typing import Dict, Any, Optional
from .constants import (
    DEFAULT_CLIMB_INTERVALS,
    DEFAULT_MAX_WORKERS,
    DURATION_ROUND_UP_MINUTES,
    MPH_PER_KPH,
)

logger = logging.getLogger("igc_flightlog.settings")


class Settings:
    """
    Application settings that can be loaded from and saved to a configuration file.
    Uses a singleton pattern to ensure only one settings instance exists.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Settings, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._settings = self._defaults()

        # Load settings from file if it exists
        self._config_dir = self._get_config_dir()
        self._config_file = os.path.join(self._config_dir, "settings.json")
        self._load_settings()

        self._initialized = True

    @staticmethod
    def _defaults() -> Dict[str, Any]:
        """Default values for every setting"""
        return {
            # Analysis settings
            "climb_intervals": list(DEFAULT_CLIMB_INTERVALS),
            "legacy_full_scan": True,
            "duration_round_up_minutes": DURATION_ROUND_UP_MINUTES,

            # Output settings
            "kml_speed_factor": MPH_PER_KPH,

            # Pipeline settings
            "max_workers": DEFAULT_MAX_WORKERS,
            "log_level": "INFO",
        }

    @staticmethod
    def _get_config_dir() -> str:
        """Get the configuration directory for the application"""
        if os.name == 'nt':  # Windows
            return os.path.join(os.environ.get('APPDATA', ''), 'IGCFlightLog')
        home_dir = os.path.expanduser("~")
        return os.path.join(home_dir, '.config', 'igc-flightlog')

    @property
    def config_file(self) -> str:
        """Path of the JSON file settings are loaded from and saved to"""
        return self._config_file

    def _load_settings(self) -> None:
        """Load settings from the configuration file"""
        if not os.path.exists(self._config_file):
            logger.debug("No settings file found, using defaults")
            return
        self.load_from_file(self._config_file)

    def load_from_file(self, path: str) -> bool:
        """
        Load settings from a JSON file, overriding the current values.

        Args:
            path: Path to the JSON settings file

        Returns:
            bool: True if the file was loaded, False otherwise
        """
        try:
            with open(path, 'r') as f:
                loaded_settings = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading settings from {path}: {e}")
            return False

        if not isinstance(loaded_settings, dict):
            logger.error(f"Settings file {path} does not contain a JSON object")
            return False

        self._settings.update(loaded_settings)
        self._config_file = path
        logger.info(f"Settings loaded from {path}")
        return True

    def save_settings(self, path: Optional[str] = None) -> bool:
        """Save current settings to the configuration file"""
        target = path or self._config_file
        try:
            directory = os.path.dirname(target)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(target, 'w') as f:
                json.dump(self._settings, f, indent=4)
            logger.info(f"Settings saved to {target}")
            return True
        except OSError as e:
            logger.error(f"Error saving settings: {e}")
            return False

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value by key"""
        return self._settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a setting value by key"""
        self._settings[key] = value

    def get_all(self) -> Dict[str, Any]:
        """Get all settings as a dictionary"""
        return self._settings.copy()

    def reset_to_defaults(self) -> None:
        """Reset all settings to their default values"""
        self._settings = self._defaults()
        logger.info("Settings reset to defaults")


# Create a global settings instance
settings = Settings()
