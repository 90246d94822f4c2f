"""Tracking of the current source line during scanning."""

from __future__ import annotations

from minicsem import util


class LineTracker:
    """Keeps the line number, advancing past newlines, strings and comments."""

    def __init__(self, start_line: int = 1) -> None:
        self.line_number = start_line

    def new_line(self) -> None:
        self.line_number += 1

    def handle_string(self, text: str) -> None:
        """Advance past the extra lines a string literal spans."""
        self.line_number += util.string_line_count(text) - 1

    def handle_single_comment(self, text: str) -> None:
        """Advance past the extra lines a ``//`` comment spans."""
        self.line_number += util.single_comment_line_count(text) - 1

    def handle_multi_comment(self, text: str) -> None:
        """Advance past the extra lines a ``/* */`` comment spans."""
        self.line_number += util.multi_comment_line_count(text) - 1