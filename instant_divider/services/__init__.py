from .markdown_outline import (
    OutlineParser,
    parse_outline,
    build_outline_entries,
    normalize_max_content_length,
    DEFAULT_MAX_CONTENT_LENGTH,
    HEADING_PATTERN,
)
from .section_inserter import (
    resolve_insertion_point,
    find_frontmatter_end,
    build_section_edit,
    apply_section_edit,
)
from .navigation import resolve_navigation_target

# GObject-backed services (OutlineService, SettingsService) are imported from
# their own modules so the parsers stay usable without PyGObject loaded.

__all__ = [
    "OutlineParser",
    "parse_outline",
    "build_outline_entries",
    "normalize_max_content_length",
    "DEFAULT_MAX_CONTENT_LENGTH",
    "HEADING_PATTERN",
    "resolve_insertion_point",
    "find_frontmatter_end",
    "build_section_edit",
    "apply_section_edit",
    "resolve_navigation_target",
]
