"""Interfaces between the planners and the host editor surface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .model import BufferExtent, ViewportState


class ViewportGeometryQuery(ABC):
    """Read access to the current viewport and buffer geometry.

    All lines are visual lines (collapsed folds count as one line) and all
    columns are visual columns.
    """

    @abstractmethod
    def top_visual_line(self) -> int:
        """First visual line at the top of the screen."""

    @abstractmethod
    def bottom_visual_line(self) -> int:
        """Last visual line on screen, clamped to the last buffer line."""

    @abstractmethod
    def non_normalized_bottom_visual_line(self) -> int:
        """Visual line at the bottom screen row, not clamped to the buffer.

        Must stay separate from ``bottom_visual_line``: the vertical planner
        derives the on-screen line count from this value.
        """

    @abstractmethod
    def approximate_height_in_lines(self) -> int:
        """Screen height divided by the line height, ignoring inlays."""

    @abstractmethod
    def approximate_width_in_columns(self) -> int:
        """Screen width divided by the column width."""

    @abstractmethod
    def left_visual_column(self, line: int) -> int: ...

    @abstractmethod
    def right_visual_column(self, line: int) -> int: ...

    @abstractmethod
    def visual_line_count(self) -> int: ...

    @abstractmethod
    def normalize_visual_column(self, line: int, column: int, allow_end: bool) -> int:
        """Clamp ``column`` to a valid position on ``line``.

        With ``allow_end`` the column just past the last character is valid.
        """


class ViewportScroller(ABC):
    """Host operations that actually move the viewport."""

    @abstractmethod
    def scroll_line_to_top(self, line: int) -> None: ...

    @abstractmethod
    def scroll_line_to_bottom(self, line: int) -> None: ...

    @abstractmethod
    def scroll_line_to_middle(self, line: int) -> None: ...

    @abstractmethod
    def scroll_column_to_left(self, line: int, column: int) -> None: ...

    @abstractmethod
    def scroll_column_to_right(self, line: int, column: int) -> None: ...

    @abstractmethod
    def scroll_column_to_middle(self, line: int, column: int) -> None: ...


def snapshot_viewport(geometry: ViewportGeometryQuery, caret_line: int) -> ViewportState:
    """Read the viewport once; left/right columns are for the caret line."""
    return ViewportState(
        top_visual_line=geometry.top_visual_line(),
        bottom_visual_line=geometry.bottom_visual_line(),
        non_normalized_bottom_visual_line=geometry.non_normalized_bottom_visual_line(),
        approximate_height=geometry.approximate_height_in_lines(),
        approximate_width=geometry.approximate_width_in_columns(),
        left_visual_column=geometry.left_visual_column(caret_line),
        right_visual_column=geometry.right_visual_column(caret_line),
    )


def snapshot_extent(geometry: ViewportGeometryQuery) -> BufferExtent:
    # An empty buffer still has one (empty) visual line
    return BufferExtent(last_visual_line=max(0, geometry.visual_line_count() - 1))
