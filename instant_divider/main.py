"""Instant Divider - command line host for section insertion and outlines."""

import argparse
import json
import sys
from pathlib import Path

import gi

gi.require_version("Gio", "2.0")
gi.require_version("GLib", "2.0")

from gi.repository import Gio, GLib

from .models import EntryKind, OutlineEntry
from .services import (
    resolve_insertion_point,
    build_section_edit,
    apply_section_edit,
)
from .services.outline_service import OutlineService
from .services.settings_service import SettingsService
from .version import __version__


def format_outline(entries: list[OutlineEntry]) -> str:
    """Render entries as an indented text outline with 1-based line numbers."""
    rows = []
    for entry in entries:
        indent = "  " * (entry.level - 1)
        marker = "#" if entry.kind == EntryKind.HEADING else "-"
        rows.append(f"{indent}{marker} {entry.display_name}  :{entry.line + 1}")
    return "\n".join(rows)


def _print_outline(entries: list[OutlineEntry], as_json: bool):
    if as_json:
        print(json.dumps([entry.to_dict() for entry in entries], indent=2, ensure_ascii=False))
    elif entries:
        print(format_outline(entries))
    else:
        print("No headings or sections found")


def _read_document(path: Path) -> str | None:
    try:
        # newline="" keeps CRLF files intact for add-section
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {path}: {e}", file=sys.stderr)
        return None


def _load_settings(args) -> SettingsService:
    if args.config_dir:
        return SettingsService(config_dir=Path(args.config_dir).expanduser())
    return SettingsService.get_instance()


def cmd_outline(args) -> int:
    """Print the outline of a markdown file, optionally following edits."""
    path = Path(args.file).expanduser()
    source = _read_document(path)
    if source is None:
        return 1

    settings = _load_settings(args)
    service = OutlineService()
    service.bind_settings(settings)
    if args.max_length is not None:
        service.max_content_length = args.max_length

    if not args.watch:
        _print_outline(service.generate_outline(source), args.json)
        service.shutdown()
        return 0

    return _watch_outline(path, source, service, args.json)


# File monitor events that mean the document holds new content
RELOAD_EVENTS = (
    Gio.FileMonitorEvent.CHANGES_DONE_HINT,
    Gio.FileMonitorEvent.CREATED,
)


def on_document_event(path: Path, service: OutlineService, event_type) -> bool:
    """Queue a debounced re-parse for a file monitor event.

    Returns True if an update was scheduled. Unrelated events and
    unreadable files schedule nothing.
    """
    if event_type not in RELOAD_EVENTS:
        return False
    text = _read_document(path)
    if text is None:
        return False
    service.schedule_update(text)
    return True


def _watch_outline(path: Path, source: str, service: OutlineService, as_json: bool) -> int:
    """Re-print the outline whenever the file changes on disk."""
    loop = GLib.MainLoop()

    def on_outline_changed(_service, entries):
        _print_outline(entries, as_json)
        sys.stdout.flush()

    service.connect("outline-changed", on_outline_changed)
    service.update(source)

    monitor = Gio.File.new_for_path(str(path)).monitor_file(Gio.FileMonitorFlags.NONE, None)
    monitor.connect(
        "changed",
        lambda _monitor, _file, _other, event_type: on_document_event(path, service, event_type),
    )

    try:
        loop.run()
    except KeyboardInterrupt:
        pass
    finally:
        monitor.cancel()
        service.shutdown()
    return 0


def cmd_add_section(args) -> int:
    """Insert a divider block above the section the cursor is in."""
    path = Path(args.file).expanduser()
    source = _read_document(path)
    if source is None:
        return 1

    settings = _load_settings(args)
    respect_headings = settings.respect_headings and not args.ignore_headings

    point = resolve_insertion_point(source, args.line - 1, respect_headings)
    edit = build_section_edit(point)
    result = apply_section_edit(source, edit)

    if args.dry_run:
        sys.stdout.write(result)
        return 0

    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(result)
    except OSError as e:
        print(f"Error: Cannot write {path}: {e}", file=sys.stderr)
        return 1

    print(f"Inserted section at line {edit.line + 1}, cursor at {edit.cursor_line + 1}:{edit.cursor_char + 1}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="instant-divider",
        description="Section dividers and outlines for markdown notes",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config-dir",
        type=str,
        help="Directory holding settings.json (default: user config dir)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    outline = subparsers.add_parser("outline", help="Print headings and divider sections")
    outline.add_argument("file", help="Markdown file")
    outline.add_argument(
        "--max-length", "-m",
        type=int,
        help="Characters of divider content to show",
    )
    outline.add_argument("--json", action="store_true", help="Print entries as JSON")
    outline.add_argument("--watch", "-w", action="store_true", help="Re-print on file changes")
    outline.set_defaults(func=cmd_outline)

    add_section = subparsers.add_parser("add-section", help="Insert a divider above the current section")
    add_section.add_argument("file", help="Markdown file")
    add_section.add_argument(
        "--line", "-l",
        type=int,
        default=1,
        help="Cursor line (1-based)",
    )
    add_section.add_argument(
        "--ignore-headings",
        action="store_true",
        help="Insert after frontmatter even if a heading is above the cursor",
    )
    add_section.add_argument("--dry-run", action="store_true", help="Print the result instead of writing")
    add_section.set_defaults(func=cmd_add_section)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Application entry point."""
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
