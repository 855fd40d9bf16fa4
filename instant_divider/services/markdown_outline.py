"""Markdown outline parser for extracting headings and divider sections."""

import re
import time
from typing import Any

from ..models import (
    EntryKind,
    HeadingEntry,
    DividerEntry,
    ParsedContent,
    OutlineEntry,
)
from ..utils.lines import split_lines, is_divider_line


DEFAULT_MAX_CONTENT_LENGTH = 10

# Regex for ATX-style headings: # Heading, ## Heading, etc.
HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.+)$")


def normalize_max_content_length(value: Any) -> int:
    """Coerce a user-supplied content length to a positive integer.

    Accepts ints and integer-like strings; anything else, including zero and
    negative values, falls back to the default.
    """
    if isinstance(value, bool):
        return DEFAULT_MAX_CONTENT_LENGTH
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return DEFAULT_MAX_CONTENT_LENGTH
    if isinstance(value, int) and value > 0:
        return value
    return DEFAULT_MAX_CONTENT_LENGTH


class OutlineParser:
    """Scans markdown text for headings and dividers with content."""

    def __init__(self, max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH):
        self.max_content_length = normalize_max_content_length(max_content_length)

    def parse(self, source: str) -> ParsedContent:
        """Parse document text into headings and valid dividers."""
        lines = split_lines(source)
        result = ParsedContent()

        for index, line in enumerate(lines):
            match = HEADING_PATTERN.match(line)
            if match:
                result.headings.append(HeadingEntry(
                    level=len(match.group(1)),
                    title=match.group(2).strip(),
                    line=index,
                ))
                continue

            if is_divider_line(line):
                divider = DividerEntry(
                    line=index,
                    level=self.calculate_divider_level(lines, index),
                    content=self.extract_divider_content(lines, index),
                )
                if divider.is_valid:
                    result.dividers.append(divider)

        return result

    def find_divider_content_line(self, lines: list[str], divider_index: int) -> int | None:
        """Find the line holding a divider's content.

        Skips blank lines. Another divider or a heading ends the search
        with no result.
        """
        for index in range(divider_index + 1, len(lines)):
            stripped = lines[index].strip()
            if not stripped:
                continue
            if is_divider_line(stripped) or HEADING_PATTERN.match(stripped):
                return None
            return index
        return None

    def extract_divider_content(self, lines: list[str], divider_index: int) -> str:
        """Get the truncated content shown for a divider, or "" if it has none."""
        index = self.find_divider_content_line(lines, divider_index)
        if index is None:
            return ""
        return self.truncate(lines[index])

    def truncate(self, text: str) -> str:
        """Trim text and cut it to the configured maximum length."""
        return text.strip()[:self.max_content_length]

    def calculate_divider_level(self, lines: list[str], divider_index: int) -> int:
        """Divider level is the nearest preceding heading's level plus one.

        Blank lines and other dividers are skipped, so consecutive dividers
        under one heading share a level. Without a heading the level is 1.
        """
        for index in range(divider_index - 1, -1, -1):
            stripped = lines[index].strip()
            if not stripped or is_divider_line(stripped):
                continue
            match = HEADING_PATTERN.match(stripped)
            if match:
                return len(match.group(1)) + 1
        return 1


def build_outline_entries(parsed: ParsedContent) -> list[OutlineEntry]:
    """Merge headings and dividers into entries ordered by line."""
    stamp = int(time.time() * 1000)
    items = []

    for heading in parsed.headings:
        items.append(OutlineEntry(
            id=f"{EntryKind.HEADING.value}-{heading.line}-{stamp}",
            kind=EntryKind.HEADING,
            level=heading.level,
            title=heading.title,
            line=heading.line,
            char=heading.char,
        ))

    for divider in parsed.dividers:
        if not divider.is_valid:
            continue
        items.append(OutlineEntry(
            id=f"{EntryKind.DIVIDER.value}-{divider.line}-{stamp}",
            kind=EntryKind.DIVIDER,
            level=divider.level,
            title=divider.content,
            line=divider.line,
            char=divider.char,
        ))

    # Sort by line number
    items.sort(key=lambda x: x.line)

    return items


def parse_outline(
    source: str,
    max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH,
) -> list[OutlineEntry]:
    """Parse markdown source into a flat outline.

    Returns headings and dividers with content, ordered by line number.
    Empty or whitespace-only documents give an empty list.
    """
    if not source.strip():
        return []

    parser = OutlineParser(max_content_length)
    return build_outline_entries(parser.parse(source))
