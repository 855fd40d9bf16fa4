"""Configuration path utilities."""

from pathlib import Path

import gi

gi.require_version("GLib", "2.0")

from gi.repository import GLib


APP_DIR_NAME = "instant-divider"


def get_config_dir() -> Path:
    """Get the configuration directory.

    Follows XDG_CONFIG_HOME through GLib, so ~/.config/instant-divider
    on most systems.
    """
    return Path(GLib.get_user_config_dir()) / APP_DIR_NAME
