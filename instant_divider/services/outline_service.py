"""Outline service: debounced re-parsing of the active document."""

import gi

gi.require_version("GLib", "2.0")
gi.require_version("GObject", "2.0")

from gi.repository import GLib, GObject

from ..models import OutlineEntry, NavigationTarget
from .markdown_outline import (
    DEFAULT_MAX_CONTENT_LENGTH,
    OutlineParser,
    build_outline_entries,
    normalize_max_content_length,
)
from .navigation import resolve_navigation_target


class OutlineService(GObject.Object):
    """Keeps the outline panel in sync with the document being edited.

    The host feeds document text on open, on file switch and on edits;
    re-parses are debounced so a burst of keystrokes parses once.

    Usage:
        service = OutlineService(max_content_length=10)
        service.connect("outline-changed", on_outline_changed)

        # On every edit
        service.schedule_update(buffer_text)

        # When done:
        service.shutdown()
    """

    __gsignals__ = {
        # New outline available: callback(service, entries)
        "outline-changed": (GObject.SignalFlags.RUN_FIRST, None, (object,)),
    }

    # Debounce delay (ms)
    DEBOUNCE_EDIT = 500

    def __init__(self, max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH):
        super().__init__()
        self._parser = OutlineParser(max_content_length)
        self._entries: list[OutlineEntry] = []
        self._last_source: str | None = None

        # Debounce state
        self._pending_source: str | None = None
        self._timeout_id: int | None = None

        self._settings = None
        self._settings_handler_id: int | None = None

    # --- Configuration ---

    @property
    def max_content_length(self) -> int:
        return self._parser.max_content_length

    @max_content_length.setter
    def max_content_length(self, value):
        value = normalize_max_content_length(value)
        if value == self._parser.max_content_length:
            return
        self._parser.max_content_length = value

        # Re-render with the new length
        source = self._pending_source if self._pending_source is not None else self._last_source
        if source is not None:
            self.schedule_update(source)

    def bind_settings(self, settings) -> None:
        """Follow outline.max_content_length from a SettingsService."""
        self.unbind_settings()
        self._settings = settings
        self._parser.max_content_length = settings.get_max_content_length()
        self._settings_handler_id = settings.connect("changed", self._on_setting_changed)

    def unbind_settings(self) -> None:
        if self._settings is not None and self._settings_handler_id is not None:
            self._settings.disconnect(self._settings_handler_id)
        self._settings = None
        self._settings_handler_id = None

    def _on_setting_changed(self, settings, key: str, value):
        if key in ("outline.max_content_length", "*"):
            self.max_content_length = settings.get_max_content_length()

    # --- Parsing ---

    @property
    def entries(self) -> list[OutlineEntry]:
        """Outline from the most recent parse."""
        return list(self._entries)

    def generate_outline(self, source: str) -> list[OutlineEntry]:
        """Parse source immediately and return its outline."""
        if not source.strip():
            return []
        return build_outline_entries(self._parser.parse(source))

    def update(self, source: str) -> list[OutlineEntry]:
        """Parse now, replace the current outline and emit outline-changed."""
        self._cancel_pending()
        self._last_source = source
        self._entries = self.generate_outline(source)
        self.emit("outline-changed", list(self._entries))
        return self.entries

    # --- Debounce logic ---

    def schedule_update(self, source: str, delay_ms: int | None = None) -> None:
        """Schedule a debounced re-parse. The newest text wins."""
        self._cancel_pending()
        self._pending_source = source
        self._timeout_id = GLib.timeout_add(
            self.DEBOUNCE_EDIT if delay_ms is None else delay_ms,
            self._on_debounce_timeout,
        )

    def has_pending_update(self) -> bool:
        return self._timeout_id is not None

    def flush(self) -> bool:
        """Run a pending update now. Returns True if one was pending."""
        if self._pending_source is None:
            return False
        self.update(self._pending_source)
        return True

    def _on_debounce_timeout(self) -> bool:
        """Emit the pending update and clear debounce state."""
        self._timeout_id = None
        source = self._pending_source
        if source is not None:
            self.update(source)
        return False  # Don't repeat

    def _cancel_pending(self):
        if self._timeout_id is not None:
            GLib.source_remove(self._timeout_id)
            self._timeout_id = None
        self._pending_source = None

    # --- Navigation ---

    def navigation_target(self, source: str, entry: OutlineEntry) -> NavigationTarget | None:
        """Cursor position for an outline click, or None if the line is gone."""
        target = resolve_navigation_target(source, entry, self._parser)
        if target is None:
            print(f"Outline entry out of range: line {entry.line}")
        return target

    # --- Lifecycle ---

    def shutdown(self):
        """Cancel pending timeouts and drop the settings connection."""
        self._cancel_pending()
        self.unbind_settings()
