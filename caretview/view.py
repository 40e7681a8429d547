"""A character-grid viewport that hosts the scroll planners."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

import blessed

from .geometry import ViewportGeometryQuery, ViewportScroller


class TerminalViewport(ViewportGeometryQuery, ViewportScroller):
    """Viewport over a list of visual lines drawn on a terminal grid.

    ``block_inlays`` maps a visual line to the number of extra rows drawn
    above it (rendered doc comments, annotations). Inlays of the top line
    are scrolled out of view. Rows past the end of the buffer hold one
    virtual line each.
    """

    def __init__(
        self,
        lines: Iterable[str],
        num_rows: int = 24,
        num_columns: int = 80,
        block_inlays: Optional[Mapping[int, int]] = None,
    ):
        self.lines: list[str] = list(lines) or [""]
        self.num_rows = num_rows
        self.num_columns = num_columns
        self.block_inlays: dict[int, int] = dict(block_inlays or {})
        self.top_line = 0
        self.left_column = 0

    @classmethod
    def for_terminal(
        cls,
        lines: Iterable[str],
        terminal: Optional[blessed.Terminal] = None,
        block_inlays: Optional[Mapping[int, int]] = None,
    ) -> "TerminalViewport":
        """Size the viewport to a terminal, leaving the last row for status."""
        term = terminal or blessed.Terminal()
        return cls(
            lines,
            num_rows=max(1, term.height - 1),
            num_columns=max(1, term.width),
            block_inlays=block_inlays,
        )

    @property
    def last_line(self) -> int:
        return len(self.lines) - 1

    def _inlay_rows(self, line: int) -> int:
        if line == self.top_line:
            return 0
        return self.block_inlays.get(line, 0)

    def _clamp_top(self, line: int) -> int:
        return max(0, min(line, self.last_line))

    def _top_line_for(self, line: int, row: int) -> int:
        """Top line that puts the text of ``line`` on screen row ``row``."""
        top = line
        while top > 0:
            # Inlays of the current candidate sit between it and the line above
            previous_row = row - self.block_inlays.get(top, 0) - 1
            if previous_row < 0:
                break
            top -= 1
            row = previous_row
        return top

    # --- ViewportGeometryQuery ---

    def top_visual_line(self) -> int:
        return self.top_line

    def non_normalized_bottom_visual_line(self) -> int:
        row = 0
        line = self.top_line
        while True:
            text_row = row + self._inlay_rows(line)
            if text_row >= self.num_rows:
                # Only the inlay of this line is on screen
                return max(self.top_line, line - 1)
            row = text_row + 1
            if row >= self.num_rows:
                return line
            line += 1

    def bottom_visual_line(self) -> int:
        return min(self.non_normalized_bottom_visual_line(), self.last_line)

    def approximate_height_in_lines(self) -> int:
        return self.num_rows

    def approximate_width_in_columns(self) -> int:
        return self.num_columns

    def left_visual_column(self, line: int) -> int:
        return self.left_column

    def right_visual_column(self, line: int) -> int:
        return self.left_column + self.num_columns - 1

    def visual_line_count(self) -> int:
        return len(self.lines)

    def normalize_visual_column(self, line: int, column: int, allow_end: bool) -> int:
        length = len(self.lines[line]) if 0 <= line < len(self.lines) else 0
        last_column = length if allow_end else length - 1
        return max(0, min(column, last_column))

    # --- ViewportScroller ---

    def scroll_line_to_top(self, line: int) -> None:
        self.top_line = self._clamp_top(line)

    def scroll_line_to_bottom(self, line: int) -> None:
        self.top_line = self._clamp_top(self._top_line_for(line, self.num_rows - 1))

    def scroll_line_to_middle(self, line: int) -> None:
        self.top_line = self._clamp_top(self._top_line_for(line, self.num_rows // 2))

    def scroll_column_to_left(self, line: int, column: int) -> None:
        self.left_column = max(0, column)

    def scroll_column_to_right(self, line: int, column: int) -> None:
        self.left_column = max(0, column - self.num_columns + 1)

    def scroll_column_to_middle(self, line: int, column: int) -> None:
        self.left_column = max(0, column - self.num_columns // 2)
