from .lines import split_lines, is_divider_line

__all__ = ["split_lines", "is_divider_line"]
