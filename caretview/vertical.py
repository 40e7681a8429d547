"""Vertical half of scrolling the caret into view.

This follows Vim's move.c:update_topline, scroll_cursor_top and
scroll_cursor_bot. Vim first optionally scrolls so the caret fits at the top
of the window and then checks the bottom; here both checks are folded into a
single decision with the same results.

Known limitation: Vim counts the screen height of wrapped lines. We work in
visual lines, which handles collapsed folds but treats a soft wrapped line as
a single line.
"""

from __future__ import annotations

import math
from typing import Optional

from .jump import resolve_scroll_jump
from .model import (
    AnchorBottom,
    AnchorTop,
    BufferExtent,
    CENTER,
    CaretLocation,
    ScrollParameters,
    VerticalDirective,
    ViewportState,
)


def _round_half_up(value: float) -> int:
    # Java's Math.round, not Python's round-half-to-even
    return int(math.floor(value + 0.5))


def plan_vertical_scroll(
    viewport: ViewportState,
    caret: CaretLocation,
    extent: BufferExtent,
    params: ScrollParameters,
) -> Optional[VerticalDirective]:
    """Decide how to move the viewport so the caret line is visible.

    Returns None if the caret is already inside the 'scrolloff' margins,
    otherwise one of CENTER, AnchorTop(new top line) or
    AnchorBottom(new bottom line).
    """
    caret_line = caret.visual_line
    top_line = viewport.top_visual_line
    bottom_line = viewport.bottom_visual_line
    scroll_offset = params.scroll_offset

    top_bound = top_line + scroll_offset
    bottom_bound = max(top_bound, bottom_line - scroll_offset)

    # Block inlays can make the pixel height larger than the line count, so
    # use the unclamped bottom line to count what is actually on screen
    height = viewport.non_normalized_bottom_visual_line - top_line + 1

    scroll_jump = resolve_scroll_jump(params.scroll_jump, height, params.suppress_vertical_jump)

    # With tall inlays very few text lines fit on screen, and a modest
    # scrolloff would otherwise always look like more than half a screen
    inlay_aware_min_height = viewport.approximate_height // 2

    if height > inlay_aware_min_height and scroll_offset > height // 2:
        return CENTER

    if caret_line < top_bound:
        return _scroll_up(caret_line, top_line, height, scroll_offset, scroll_jump, extent)

    if caret_line > bottom_bound and bottom_line < extent.last_visual_line:
        return _scroll_down(caret_line, bottom_line, height, scroll_offset, scroll_jump, extent)

    return None


def _scroll_up(
    caret_line: int,
    top_line: int,
    height: int,
    scroll_offset: int,
    scroll_jump: int,
    extent: BufferExtent,
) -> VerticalDirective:
    """Put the caret at the top of the window, minus scrolloff."""
    # Approximation from update_topline, including its half height
    if top_line + scroll_offset - caret_line >= max(2, height // 2 - 1):
        return CENTER

    # The new top line must be scrolloff above the caret. If that is above the
    # current top line we scroll at least scrolljump. A caret already above the
    # top line counts as one line scrolled, so we jump from the caret instead.
    if caret_line < top_line:
        scroll_jump_top_line = max(0, caret_line - scroll_jump + 1)
    else:
        scroll_jump_top_line = max(0, top_line - scroll_jump)
    scroll_offset_top_line = max(0, caret_line - scroll_offset)
    new_top_line = min(scroll_offset_top_line, scroll_jump_top_line)

    # Every visual line has height 1 here
    used_above = caret_line - new_top_line
    used_below = min(scroll_offset, extent.visual_line_count - caret_line)
    used = 1 + used_above + used_below
    if used > height:
        return CENTER
    return AnchorTop(new_top_line)


def _scroll_down(
    caret_line: int,
    bottom_line: int,
    height: int,
    scroll_offset: int,
    scroll_jump: int,
    extent: BufferExtent,
) -> VerticalDirective:
    """Put the caret at the bottom of the window, minus scrolloff."""
    # Quick check from update_topline, starting at the line below the window
    line_count = caret_line - (bottom_line + 1) + 1 + scroll_offset
    if line_count > height:
        return CENTER

    # Vim expands from the caret line by at least scrolljump lines. Expansion
    # above stops at the current bottom line or after scrolljump/2 lines. It
    # expands above first and starts counting at 1, hence (scrolljump + 1) / 2.
    scrolled_above = caret_line - bottom_line
    extra = max(
        scroll_offset,
        scroll_jump - min(scrolled_above, _round_half_up((scroll_jump + 1) / 2.0)),
    )
    scrolled = scrolled_above + extra

    # Lines expanded above and below the caret, capped just past a screenful.
    # The minus one is the caret line itself.
    used_above = scrolled_above
    used_below = min(extent.visual_line_count - caret_line, used_above - 1)
    used = min(height + 1, used_above + used_below)

    line_count = used if used > height else scrolled
    if line_count >= height and line_count > scroll_offset:
        return CENTER
    return AnchorBottom(caret_line + extra)
