"""Compute where the "add section" command puts a new divider."""

from ..models import InsertionPoint, SectionEdit, TOP_SECTION_TEMPLATE, SECTION_TEMPLATE
from ..utils.lines import split_lines, DIVIDER_MARKER
from .markdown_outline import HEADING_PATTERN


def find_frontmatter_end(lines: list[str]) -> int:
    """Return the index of the closing frontmatter delimiter, or -1.

    Frontmatter needs an exact "---" on line 0 and another later on. An
    unclosed opening delimiter means there is no frontmatter.
    """
    if len(lines) < 2 or lines[0] != DIVIDER_MARKER:
        return -1

    for index in range(1, len(lines)):
        if lines[index] == DIVIDER_MARKER:
            return index
    return -1


def find_heading_above(lines: list[str], cursor_line: int) -> int | None:
    """Find the nearest heading strictly above the cursor line."""
    start = min(cursor_line - 1, len(lines) - 1)
    for index in range(start, -1, -1):
        if HEADING_PATTERN.match(lines[index]):
            return index
    return None


def resolve_insertion_point(
    source: str,
    cursor_line: int,
    respect_headings: bool = True,
) -> InsertionPoint:
    """Compute the line a new divider block is inserted at.

    The default is the line after the frontmatter (line 0 without one).
    With respect_headings, the line below the nearest heading above the
    cursor wins; when no heading is found the frontmatter default stays.
    """
    lines = split_lines(source)
    insert_line = find_frontmatter_end(lines) + 1

    if respect_headings:
        heading_index = find_heading_above(lines, cursor_line)
        if heading_index is not None:
            insert_line = heading_index + 1

    return InsertionPoint(
        insert_line=insert_line,
        at_document_top=insert_line == 0,
    )


def build_section_edit(point: InsertionPoint) -> SectionEdit:
    """Turn an insertion point into the text splice the editor performs."""
    if point.at_document_top:
        return SectionEdit(
            text=TOP_SECTION_TEMPLATE,
            line=0,
            cursor_line=0,
        )

    return SectionEdit(
        text=SECTION_TEMPLATE,
        line=point.insert_line,
        cursor_line=point.insert_line + 1,
    )


def apply_section_edit(source: str, edit: SectionEdit) -> str:
    """Splice a section edit into document text.

    The inserted block uses the document's own line ending. A line past
    the end of the document appends at the end, the way an editor clamps
    out-of-range positions.
    """
    newline = "\r\n" if "\r\n" in source else "\n"
    text = edit.text.replace("\n", newline)

    # Raw lines keep any "\r" so offsets index the original text
    raw_lines = source.split("\n")
    if edit.line >= len(raw_lines):
        return source + text

    line = raw_lines[edit.line].rstrip("\r")
    offset = sum(len(raw) + 1 for raw in raw_lines[:edit.line])
    offset += min(edit.char, len(line))
    return source[:offset] + text + source[offset:]
