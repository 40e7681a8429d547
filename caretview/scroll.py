"""Scroll the caret into view: snapshot, plan both axes, apply."""

from __future__ import annotations

import logging
from functools import partial
from typing import Optional

from .commands import ExecutingCommandFlags
from .geometry import ViewportScroller, snapshot_extent, snapshot_viewport
from .horizontal import plan_horizontal_scroll
from .model import (
    AnchorBottom,
    AnchorLeft,
    AnchorRight,
    AnchorTop,
    CaretLocation,
    Center,
    HorizontalDirective,
    ScrollParameters,
    ScrollPlan,
    VerticalDirective,
)
from .options import OptionProvider
from .vertical import plan_vertical_scroll

logger = logging.getLogger(__name__)


def plan_caret_scroll(
    geometry,
    caret: CaretLocation,
    options: OptionProvider,
    flags: Optional[ExecutingCommandFlags] = None,
) -> ScrollPlan:
    """Compute both directives from one snapshot of the geometry."""
    viewport = snapshot_viewport(geometry, caret.visual_line)
    extent = snapshot_extent(geometry)
    params = ScrollParameters.from_options(options, flags, viewport.approximate_width)

    vertical = plan_vertical_scroll(viewport, caret, extent, params)
    normalize_column = partial(geometry.normalize_visual_column, caret.visual_line, allow_end=False)
    horizontal = plan_horizontal_scroll(viewport, caret, params, normalize_column)
    return ScrollPlan(vertical, horizontal)


def apply_vertical_directive(
    scroller: ViewportScroller,
    caret: CaretLocation,
    directive: Optional[VerticalDirective],
) -> None:
    if directive is None:
        return
    if isinstance(directive, Center):
        scroller.scroll_line_to_middle(caret.visual_line)
    elif isinstance(directive, AnchorTop):
        scroller.scroll_line_to_top(directive.line)
    elif isinstance(directive, AnchorBottom):
        scroller.scroll_line_to_bottom(directive.line)
    else:
        raise TypeError(f"Not a vertical scroll directive: {directive!r}")


def apply_horizontal_directive(
    scroller: ViewportScroller,
    caret: CaretLocation,
    directive: Optional[HorizontalDirective],
) -> None:
    if directive is None:
        return
    if isinstance(directive, Center):
        scroller.scroll_column_to_middle(caret.visual_line, caret.visual_column)
    elif isinstance(directive, AnchorLeft):
        scroller.scroll_column_to_left(caret.visual_line, directive.column)
    elif isinstance(directive, AnchorRight):
        scroller.scroll_column_to_right(caret.visual_line, directive.column)
    else:
        raise TypeError(f"Not a horizontal scroll directive: {directive!r}")


def scroll_caret_into_view(
    host,
    caret: CaretLocation,
    options: OptionProvider,
    flags: Optional[ExecutingCommandFlags] = None,
) -> ScrollPlan:
    """Move ``host`` so the caret is visible and return what was done.

    ``host`` implements both ViewportGeometryQuery and ViewportScroller.
    Both axes are planned before either is applied.
    """
    plan = plan_caret_scroll(host, caret, options, flags)
    if not plan.is_empty:
        logger.debug(
            f"Caret at {caret.visual_line}:{caret.visual_column}: "
            f"vertical={plan.vertical!r} horizontal={plan.horizontal!r}"
        )
    apply_vertical_directive(host, caret, plan.vertical)
    apply_horizontal_directive(host, caret, plan.horizontal)
    return plan
