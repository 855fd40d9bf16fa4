"""Line splitting helpers shared by the outline parser and section inserter."""

DIVIDER_MARKER = "---"


def split_lines(source: str) -> list[str]:
    """Split document text into lines the way an editor buffer numbers them.

    CRLF endings are normalized so that a Windows file yields the same
    lines (and the same exact "---" comparisons) as a Unix one. A trailing
    newline produces a final empty line, matching the editor's line count.
    """
    return source.replace("\r\n", "\n").split("\n")


def is_divider_line(line: str) -> bool:
    """Check whether a line, ignoring surrounding whitespace, is a divider."""
    return line.strip() == DIVIDER_MARKER
