"""Map outline entries to editor cursor positions."""

from ..models import EntryKind, OutlineEntry, NavigationTarget
from ..utils.lines import split_lines
from .markdown_outline import HEADING_PATTERN, OutlineParser


def resolve_navigation_target(
    source: str,
    entry: OutlineEntry,
    parser: OutlineParser | None = None,
) -> NavigationTarget | None:
    """Get the cursor position for clicking an outline entry.

    Headings put the cursor just after the "#" marker and its space.
    Dividers put it at the start of their content line. Returns None when
    the entry's line is no longer in the document.
    """
    lines = split_lines(source)
    if entry.line < 0 or entry.line >= len(lines):
        return None

    target_line = entry.line
    target_char = entry.char

    if entry.kind == EntryKind.HEADING:
        match = HEADING_PATTERN.match(lines[entry.line])
        if match:
            target_char = len(match.group(1)) + 1
    elif entry.kind == EntryKind.DIVIDER:
        parser = parser or OutlineParser()
        content_line = parser.find_divider_content_line(lines, entry.line)
        if content_line is not None:
            target_line = content_line
            target_char = 0

    # Clamp to end of line
    target_char = min(max(target_char, 0), len(lines[target_line]))

    return NavigationTarget(line=target_line, char=target_char)
