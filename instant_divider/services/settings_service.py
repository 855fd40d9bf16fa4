"""Settings service for section insertion and outline configuration."""

import copy
import json
from pathlib import Path
from typing import Any

import gi

gi.require_version("GObject", "2.0")

from gi.repository import GObject

from .config_path import get_config_dir
from .markdown_outline import DEFAULT_MAX_CONTENT_LENGTH, normalize_max_content_length


# Default settings
DEFAULT_SETTINGS = {
    "section": {
        "respect_headings": True,  # insert below the nearest heading above the cursor
    },
    "outline": {
        "show_in_sidebar": True,
        "max_content_length": DEFAULT_MAX_CONTENT_LENGTH,
    },
}


class SettingsService(GObject.Object):
    """Singleton service for application settings.

    Usage:
        # Get instance
        settings = SettingsService.get_instance()

        # Get setting
        respect = settings.get("section.respect_headings")

        # Set setting (auto-saves)
        settings.set("outline.max_content_length", 20)

        # Connect to changes
        settings.connect("changed", on_any_setting_changed)
    """

    __gsignals__ = {
        # Emitted when any setting changes: callback(service, key, value)
        "changed": (GObject.SignalFlags.RUN_FIRST, None, (str, object)),
    }

    _instance: "SettingsService | None" = None

    def __init__(self, config_dir: Path | None = None):
        super().__init__()
        self.config_dir = Path(config_dir) if config_dir else get_config_dir()
        self.config_file = self.config_dir / "settings.json"
        self._settings: dict = {}
        self._ensure_config_dir()
        self._load()

    @classmethod
    def get_instance(cls) -> "SettingsService":
        """Get the singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _ensure_config_dir(self):
        """Ensure config directory exists."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

    def _load(self):
        """Load settings from disk, merging with defaults."""
        saved = {}
        if self.config_file.exists():
            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    saved = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                print(f"Failed to load settings: {e}")
            if not isinstance(saved, dict):
                saved = {}

        # Deep merge with defaults
        self._settings = self._deep_merge(DEFAULT_SETTINGS, saved)

    def _save(self):
        """Save settings to disk."""
        try:
            with open(self.config_file, "w", encoding="utf-8") as f:
                json.dump(self._settings, f, indent=2)
        except OSError as e:
            print(f"Failed to save settings: {e}")

    def _deep_merge(self, defaults: dict, overrides: dict) -> dict:
        """Deep merge overrides into defaults."""
        result = copy.deepcopy(defaults)
        for key, value in overrides.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting by dot-notation key.

        Args:
            key: Setting key like "outline.max_content_length"
            default: Default value if key not found

        Returns:
            The setting value or default
        """
        value = self._settings

        for part in key.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """Set a setting by dot-notation key.

        Automatically saves to disk and emits 'changed' signal.
        """
        parts = key.split(".")
        target = self._settings

        # Navigate to parent
        for part in parts[:-1]:
            if not isinstance(target.get(part), dict):
                target[part] = {}
            target = target[part]

        old_value = target.get(parts[-1])
        if old_value != value:
            target[parts[-1]] = value
            self._save()
            self.emit("changed", key, value)

    def reset(self, key: str | None = None) -> None:
        """Reset setting(s) to default.

        Args:
            key: Specific key to reset, or None to reset all
        """
        if key is None:
            self._settings = copy.deepcopy(DEFAULT_SETTINGS)
            self._save()
            self.emit("changed", "*", None)
            return

        default_value = DEFAULT_SETTINGS
        for part in key.split("."):
            if isinstance(default_value, dict) and part in default_value:
                default_value = default_value[part]
            else:
                return  # Key not in defaults

        self.set(key, copy.deepcopy(default_value))

    # --- Typed accessors ---

    @property
    def respect_headings(self) -> bool:
        return bool(self.get("section.respect_headings", True))

    @property
    def show_in_sidebar(self) -> bool:
        """Whether a GUI host opens the outline panel at startup.

        Read by panel hosts only; the command line host has no panel.
        """
        return bool(self.get("outline.show_in_sidebar", True))

    def get_max_content_length(self) -> int:
        """Get the divider content length, always a positive integer.

        Hand-edited or corrupt values fall back to the default.
        """
        return normalize_max_content_length(
            self.get("outline.max_content_length", DEFAULT_MAX_CONTENT_LENGTH)
        )
