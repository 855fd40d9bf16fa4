"""Outline models for headings and divider sections."""

from dataclasses import dataclass, field
from enum import Enum


class EntryKind(Enum):
    """Kind of outline entry."""
    HEADING = "heading"
    DIVIDER = "divider"


@dataclass
class HeadingEntry:
    """An ATX heading found in the document."""
    level: int  # 1-6
    title: str
    line: int
    char: int = 0


@dataclass
class DividerEntry:
    """A "---" line acting as a pseudo-heading.

    The content is the first text line after the divider, truncated.
    """
    line: int
    level: int
    content: str
    char: int = 0

    @property
    def is_valid(self) -> bool:
        """Dividers without content are left out of the outline."""
        return bool(self.content.strip())


@dataclass
class ParsedContent:
    """Raw scan result before merging into outline entries."""
    headings: list[HeadingEntry] = field(default_factory=list)
    dividers: list[DividerEntry] = field(default_factory=list)


@dataclass
class OutlineEntry:
    """A single navigable item of the outline panel."""
    id: str
    kind: EntryKind
    level: int
    title: str
    line: int  # 0-based
    char: int = 0

    @property
    def display_name(self) -> str:
        """Get display name for list rendering."""
        return self.title

    def to_dict(self) -> dict:
        """Serialize for JSON output."""
        return {
            "id": self.id,
            "kind": self.kind.value,
            "level": self.level,
            "title": self.title,
            "line": self.line,
            "char": self.char,
        }


@dataclass
class NavigationTarget:
    """Cursor position an outline click should move to."""
    line: int
    char: int = 0
