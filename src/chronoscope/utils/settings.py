"""
Settings management for Chronoscope

Persistent application settings (timeline tuning, window geometry,
navigation base path) stored as JSON in the user config directory.
"""

import json
import os
from typing import Optional

from chronoscope.utils.message import Log
from chronoscope.utils.paths import get_settings_path
from chronoscope.timeline.settings import TimelineSettings

# Default settings
DEFAULT_SETTINGS = {
    # Window settings
    "window_geometry": None,

    # Logging
    "log_to_file": False,

    # Timeline engine settings (TimelineSettings.to_dict())
    "timeline": {},
}


class Settings:
    """Application settings manager"""

    def __init__(self, settings_file: Optional[str] = None):
        self.settings_file = settings_file or str(get_settings_path())
        self.settings = json.loads(json.dumps(DEFAULT_SETTINGS))
        self.load_settings()

    def load_settings(self):
        """Load settings from file, creating it with defaults if missing"""
        try:
            if os.path.exists(self.settings_file):
                with open(self.settings_file, 'r', encoding='utf-8') as file:
                    saved_settings = json.load(file)
                    # Update defaults with saved settings
                    self.settings.update(saved_settings)
                    Log.info("Settings loaded successfully")
            else:
                self.save_settings()
                Log.info("Created new settings file with defaults")
        except (OSError, ValueError) as e:
            Log.error(f"Failed to load settings: {e}")
            self.settings = json.loads(json.dumps(DEFAULT_SETTINGS))

    def save_settings(self):
        """Save settings to file"""
        try:
            directory = os.path.dirname(self.settings_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.settings_file, 'w', encoding='utf-8') as file:
                json.dump(self.settings, file, indent=4)
            Log.debug("Settings saved successfully")
        except OSError as e:
            Log.error(f"Failed to save settings: {e}")

    def get(self, key, default=None):
        """Get a setting value"""
        return self.settings.get(key, default)

    def set(self, key, value):
        """Set a setting value"""
        self.settings[key] = value
        self.save_settings()

    def timeline_settings(self) -> TimelineSettings:
        """
        Timeline settings merged over defaults.

        Invalid saved values are reported and replaced by the defaults as
        a whole, so the engine never starts from a half-valid config.
        """
        data = self.get("timeline") or {}
        if not isinstance(data, dict):
            Log.error(f"Invalid timeline settings (expected an object, got {type(data).__name__}), using defaults")
            return TimelineSettings()

        try:
            timeline = TimelineSettings.from_dict(data)
            result = timeline.validate()
        except TypeError as e:
            Log.error(f"Invalid timeline settings: {e}, using defaults")
            return TimelineSettings()

        for warning in result.warnings:
            Log.warning(f"Timeline settings: {warning}")
        if not result.valid:
            Log.error(f"Invalid timeline settings ({'; '.join(result.errors)}), using defaults")
            return TimelineSettings()
        return timeline

    def save_timeline_settings(self, timeline: TimelineSettings) -> bool:
        """
        Persist timeline settings if they validate.

        Returns:
            True if saved, False if validation failed (nothing is written)
        """
        result = timeline.validate()
        if not result.valid:
            Log.error(f"Refusing to save invalid timeline settings: {'; '.join(result.errors)}")
            return False
        self.set("timeline", timeline.to_dict())
        return True


_app_settings: Optional[Settings] = None


def get_app_settings() -> Settings:
    """Shared settings instance, loaded on first use."""
    global _app_settings
    if _app_settings is None:
        _app_settings = Settings()
    return _app_settings
