"""Tests for the markdown heading and divider outline parser."""

import pytest

from instant_divider.models import EntryKind
from instant_divider.services.markdown_outline import (
    DEFAULT_MAX_CONTENT_LENGTH,
    OutlineParser,
    normalize_max_content_length,
    parse_outline,
)


def _summary(entries):
    return [(e.kind.value, e.level, e.title, e.line) for e in entries]


def test_heading_with_divider_section():
    """Divider content is truncated and nested one level under its heading."""
    text = "# Title\n\nSome text\n\n---\n\nShort note here"
    entries = parse_outline(text, max_content_length=10)

    assert _summary(entries) == [
        ("heading", 1, "Title", 0),
        ("divider", 2, "Short note", 4),
    ]


def test_divider_without_content_before_heading_is_dropped():
    entries = parse_outline("## A\n---\n## B")

    assert _summary(entries) == [
        ("heading", 2, "A", 0),
        ("heading", 2, "B", 2),
    ]


def test_empty_and_blank_documents():
    assert parse_outline("") == []
    assert parse_outline("   \n\n\t") == []


def test_plain_text_has_no_outline():
    assert parse_outline("just some words\nand more words") == []


def test_full_note(note_text):
    entries = parse_outline(note_text)

    assert _summary(entries) == [
        ("divider", 1, "title: Mee", 0),
        ("heading", 1, "Project", 4),
        ("divider", 2, "First topi", 8),
        ("heading", 2, "Details", 12),
        ("divider", 3, "Second top", 14),
        ("divider", 3, "Third", 19),
    ]


def test_lines_strictly_increasing(note_text):
    lines = [e.line for e in parse_outline(note_text)]
    assert lines == sorted(set(lines))


def test_parse_is_idempotent(note_text):
    assert _summary(parse_outline(note_text)) == _summary(parse_outline(note_text))


def test_heading_levels_and_titles():
    text = "# One\n## Two  \n###### Six\n####### Seven\n#NoSpace"
    entries = parse_outline(text)

    assert _summary(entries) == [
        ("heading", 1, "One", 0),
        ("heading", 2, "Two", 1),
        ("heading", 6, "Six", 2),
    ]


def test_divider_followed_by_divider_is_dropped():
    entries = parse_outline("# H\n---\n\n---\ncontent")

    assert _summary(entries) == [
        ("heading", 1, "H", 0),
        ("divider", 2, "content", 3),
    ]


def test_divider_at_end_of_document_is_dropped():
    assert parse_outline("text\n---\n\n") == []


def test_divider_without_heading_is_level_one():
    entries = parse_outline("intro\n---\nBody text")

    assert _summary(entries) == [("divider", 1, "Body text", 1)]


def test_indented_divider_and_content_are_trimmed():
    entries = parse_outline("# H\n   ---   \n\n     padded content\n")

    assert entries[1].kind == EntryKind.DIVIDER
    assert entries[1].title == "padded con"


def test_sibling_dividers_share_level():
    text = "## Section\n---\nalpha\n---\nbeta\n---\ngamma"
    levels = [e.level for e in parse_outline(text) if e.kind == EntryKind.DIVIDER]

    assert levels == [3, 3, 3]


def test_crlf_document():
    entries = parse_outline("# Title\r\n\r\n---\r\nNote\r\n")

    assert _summary(entries) == [
        ("heading", 1, "Title", 0),
        ("divider", 2, "Note", 2),
    ]


def test_entry_ids_are_unique_per_parse(note_text):
    entries = parse_outline(note_text)
    ids = [e.id for e in entries]

    assert len(set(ids)) == len(ids)
    assert ids[0].startswith("divider-0-")
    assert ids[1].startswith("heading-4-")


def test_entries_start_at_column_zero(note_text):
    assert all(e.char == 0 for e in parse_outline(note_text))


def test_longer_content_length():
    entries = parse_outline("---\nA fairly long content line", max_content_length=100)

    assert entries[0].title == "A fairly long content line"


class TestOutlineParserHelpers:
    """The content and level scans work on their own."""

    def test_extract_divider_content_skips_blank_lines(self):
        parser = OutlineParser(5)
        lines = ["---", "", "   ", "abcdefgh"]

        assert parser.extract_divider_content(lines, 0) == "abcde"

    def test_extract_divider_content_stops_at_heading(self):
        parser = OutlineParser()

        assert parser.extract_divider_content(["---", "", "# Next"], 0) == ""

    def test_find_divider_content_line(self):
        parser = OutlineParser()

        assert parser.find_divider_content_line(["---", "", "text"], 0) == 2
        assert parser.find_divider_content_line(["---"], 0) is None

    def test_calculate_level_skips_text_to_heading(self):
        parser = OutlineParser()
        lines = ["### Deep", "text", "", "---", "---"]

        assert parser.calculate_divider_level(lines, 4) == 4

    def test_calculate_level_defaults_to_one(self):
        assert OutlineParser().calculate_divider_level(["a", "---"], 1) == 1

    def test_parse_keeps_only_valid_dividers(self):
        parsed = OutlineParser().parse("---\n\n---\nx")

        assert [d.line for d in parsed.dividers] == [2]
        assert parsed.headings == []


@pytest.mark.parametrize(
    "value, expected",
    [
        (10, 10),
        (25, 25),
        ("15", 15),
        (" 7 ", 7),
        (0, DEFAULT_MAX_CONTENT_LENGTH),
        (-5, DEFAULT_MAX_CONTENT_LENGTH),
        ("abc", DEFAULT_MAX_CONTENT_LENGTH),
        (None, DEFAULT_MAX_CONTENT_LENGTH),
        (3.5, DEFAULT_MAX_CONTENT_LENGTH),
        (True, DEFAULT_MAX_CONTENT_LENGTH),
    ],
)
def test_normalize_max_content_length(value, expected):
    assert normalize_max_content_length(value) == expected


def test_parser_rejects_non_positive_length():
    assert OutlineParser(0).max_content_length == DEFAULT_MAX_CONTENT_LENGTH
