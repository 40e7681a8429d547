"""Tests for the vertical scroll planner."""

import pytest

from caretview.model import (
    AnchorBottom,
    AnchorTop,
    BufferExtent,
    CENTER,
    CaretLocation,
    ScrollParameters,
    ViewportState,
)
from caretview.vertical import plan_vertical_scroll


def make_viewport(top, bottom, non_normalized_bottom=None, approximate_height=None):
    if non_normalized_bottom is None:
        non_normalized_bottom = bottom
    if approximate_height is None:
        approximate_height = non_normalized_bottom - top + 1
    return ViewportState(
        top_visual_line=top,
        bottom_visual_line=bottom,
        non_normalized_bottom_visual_line=non_normalized_bottom,
        approximate_height=approximate_height,
        approximate_width=80,
        left_visual_column=0,
        right_visual_column=79,
    )


def plan(caret_line, top=10, bottom=30, last_line=99, scroll_offset=0, scroll_jump=1,
         suppress=False, **viewport_kwargs):
    viewport = make_viewport(top, bottom, **viewport_kwargs)
    params = ScrollParameters(
        scroll_offset=scroll_offset,
        scroll_jump=scroll_jump,
        suppress_vertical_jump=suppress,
    )
    return plan_vertical_scroll(viewport, CaretLocation(caret_line), BufferExtent(last_line), params)


class TestNoScroll:
    def test_caret_inside_margins(self):
        assert plan(20, scroll_offset=5) is None

    def test_caret_on_margin_bounds(self):
        assert plan(15, scroll_offset=5) is None
        assert plan(25, scroll_offset=5) is None

    def test_caret_on_first_and_last_visible_lines(self):
        assert plan(10) is None
        assert plan(30) is None

    def test_end_of_buffer_already_visible(self):
        assert plan(99, top=80, bottom=99, last_line=99, scroll_offset=5) is None

    def test_viewport_past_end_of_buffer(self):
        assert plan(99, top=90, bottom=99, non_normalized_bottom=109, last_line=99) is None


class TestLargeScrollOffset:
    def test_offset_over_half_height_always_centers(self):
        # height 21, fudge 10
        assert plan(20, scroll_offset=11) == CENTER
        assert plan(10, scroll_offset=11) == CENTER

    def test_scrolloff_999_keeps_caret_centred(self):
        assert plan(20, scroll_offset=999) == CENTER

    def test_fudge_guard_with_tall_inlays(self):
        # Only 10 text lines fit on a 40 row screen
        assert plan(16, top=10, bottom=19, approximate_height=40, scroll_offset=6) is None

    def test_without_inlays_same_offset_centers(self):
        assert plan(16, top=10, bottom=19, approximate_height=10, scroll_offset=6) == CENTER


class TestScrollUp:
    def test_caret_inside_window_within_scrolloff(self):
        # topBound 15, quick test 3 < 9, newTop = min(7, 9)
        assert plan(12, scroll_offset=5) == AnchorTop(7)

    def test_scrolljump_moves_at_least_jump_lines(self):
        assert plan(12, scroll_offset=5, scroll_jump=3) == AnchorTop(7)
        assert plan(12, scroll_offset=5, scroll_jump=4) == AnchorTop(6)

    def test_caret_one_line_above_top(self):
        assert plan(9) == AnchorTop(9)

    def test_caret_above_top_counts_as_one_jump(self):
        assert plan(9, scroll_jump=5) == AnchorTop(5)

    def test_far_above_centers(self):
        # 10 - 1 = 9 >= max(2, 21 // 2 - 1)
        assert plan(1) == CENTER

    def test_just_within_quick_test(self):
        assert plan(2) == AnchorTop(2)

    def test_clamped_at_start_of_buffer(self):
        assert plan(3, top=2, bottom=22, scroll_offset=5) == AnchorTop(0)

    def test_used_lines_exceed_height_centers(self):
        # newTop 0, used 1 + 12 + 10 = 23 > 21
        assert plan(12, scroll_offset=10, scroll_jump=15) == CENTER

    def test_used_lines_equal_height_anchors(self):
        # used 1 + 10 + 10 = 21
        assert plan(12, scroll_offset=10, scroll_jump=1) == AnchorTop(2)

    def test_percentage_scrolljump(self):
        # jump = int(21 * 0.5) = 10
        assert plan(29, top=30, bottom=50, scroll_jump=-50) == AnchorTop(20)

    def test_suppressed_scrolljump(self):
        assert plan(29, top=30, bottom=50, scroll_jump=-50, suppress=True) == AnchorTop(29)

    @pytest.mark.parametrize("caret_line", [9, 8, 7, 6, 5, 4, 3, 2])
    @pytest.mark.parametrize("scroll_jump", [1, 3, 5])
    def test_anchor_keeps_scroll_offset_and_jump(self, caret_line, scroll_jump):
        scroll_offset = 2
        result = plan(caret_line, scroll_offset=scroll_offset, scroll_jump=scroll_jump)
        if result == CENTER:
            return
        assert isinstance(result, AnchorTop)
        assert result.line == 0 or caret_line - result.line >= scroll_offset
        assert 10 - result.line >= min(scroll_jump, 10)


class TestScrollDown:
    def test_caret_one_line_below_bottom(self):
        assert plan(21, top=0, bottom=20) == AnchorBottom(21)

    def test_scroll_offset_below_caret(self):
        assert plan(16, top=0, bottom=20, scroll_offset=5) == AnchorBottom(21)

    def test_scrolljump_expands_below(self):
        assert plan(21, top=0, bottom=20, scroll_jump=10) == AnchorBottom(30)

    def test_scrolljump_rounds_half_up(self):
        # round((4 + 1) / 2) is 3, banker's rounding would give 2
        assert plan(23, top=0, bottom=20, scroll_jump=4) == AnchorBottom(24)

    def test_small_scrolljump(self):
        assert plan(21, top=0, bottom=20, scroll_jump=2) == AnchorBottom(22)

    def test_far_below_centers(self):
        assert plan(50, top=0, bottom=20) == CENTER

    def test_more_than_half_screen_centers(self):
        assert plan(31, top=0, bottom=20) == AnchorBottom(31)
        assert plan(32, top=0, bottom=20) == CENTER

    def test_near_end_of_buffer(self):
        assert plan(25, top=0, bottom=20, last_line=25) == AnchorBottom(25)
