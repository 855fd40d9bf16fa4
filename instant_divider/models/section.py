"""Section insertion models."""

from dataclasses import dataclass


# Text inserted at the top of the document (no frontmatter, no heading above)
TOP_SECTION_TEMPLATE = "\n\n---\n\n"

# Text inserted below a heading or after frontmatter
SECTION_TEMPLATE = "\n\n\n---\n"


@dataclass
class InsertionPoint:
    """Where a new divider block goes."""
    insert_line: int
    at_document_top: bool


@dataclass
class SectionEdit:
    """A text splice for the editor to perform, plus where to put the cursor."""
    text: str
    line: int
    cursor_line: int
    char: int = 0
    cursor_char: int = 0
