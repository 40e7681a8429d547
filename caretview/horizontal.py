"""Horizontal half of scrolling the caret into view ('sidescroll')."""

from __future__ import annotations

from typing import Callable, Optional

from .model import (
    AnchorLeft,
    AnchorRight,
    CENTER,
    CaretLocation,
    HorizontalDirective,
    ScrollParameters,
    ViewportState,
)


def plan_horizontal_scroll(
    viewport: ViewportState,
    caret: CaretLocation,
    params: ScrollParameters,
    normalize_column: Optional[Callable[[int], int]] = None,
) -> Optional[HorizontalDirective]:
    """Decide how to move the viewport so the caret column is visible.

    ``normalize_column`` clamps a target column to the caret line, it is
    applied to the AnchorRight column only. 'sidescroll' is used as is;
    unlike 'scrolljump' it has no percentage form.
    """
    caret_column = caret.visual_column
    left_column = viewport.left_visual_column
    right_column = viewport.right_visual_column
    side_scroll_offset = params.side_scroll_offset

    half_width = viewport.approximate_width // 2
    allow_side_scroll = not params.suppress_horizontal_jump
    side_scroll = params.side_scroll

    offset_left = caret_column - (left_column + side_scroll_offset)
    offset_right = caret_column - (right_column - side_scroll_offset)
    if offset_left >= 0 and offset_right <= 0:
        return None

    diff = -offset_left if offset_left < 0 else offset_right

    if (allow_side_scroll and side_scroll == 0) or diff >= half_width or offset_right >= offset_left:
        return CENTER

    if allow_side_scroll and diff < side_scroll:
        diff = side_scroll

    if offset_left < 0:
        return AnchorLeft(max(0, left_column - diff))

    new_right_column = right_column + diff
    if normalize_column is not None:
        new_right_column = normalize_column(new_right_column)
    return AnchorRight(new_right_column)
