"""Instant Divider - section dividers and a heading/divider outline for markdown notes."""
