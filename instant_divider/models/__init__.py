from .outline import (
    EntryKind,
    HeadingEntry,
    DividerEntry,
    ParsedContent,
    OutlineEntry,
    NavigationTarget,
)
from .section import InsertionPoint, SectionEdit, TOP_SECTION_TEMPLATE, SECTION_TEMPLATE

__all__ = [
    "EntryKind",
    "HeadingEntry",
    "DividerEntry",
    "ParsedContent",
    "OutlineEntry",
    "NavigationTarget",
    "InsertionPoint",
    "SectionEdit",
    "TOP_SECTION_TEMPLATE",
    "SECTION_TEMPLATE",
]
