"""Value types passed into and returned from the scroll planners."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional, Union

from .commands import NO_FLAGS
from .constants import ScrollConstants
from .jump import normalize_side_scroll_offset


@dataclass(frozen=True)
class ViewportState:
    """Snapshot of the visible region.

    ``bottom_visual_line`` is clamped to the buffer, while
    ``non_normalized_bottom_visual_line`` is the line at the bottom screen row
    and may be past the end of the buffer. Callers guarantee
    ``top_visual_line <= bottom_visual_line``.
    """
    top_visual_line: int
    bottom_visual_line: int
    non_normalized_bottom_visual_line: int
    approximate_height: int
    approximate_width: int
    left_visual_column: int = 0
    right_visual_column: int = 0


@dataclass(frozen=True)
class CaretLocation:
    visual_line: int
    visual_column: int = 0


@dataclass(frozen=True)
class BufferExtent:
    last_visual_line: int

    @property
    def visual_line_count(self) -> int:
        return self.last_visual_line + 1


@dataclass(frozen=True)
class ScrollParameters:
    """Option values and command flags for one scroll decision.

    ``scroll_offset`` is deliberately not clamped to half the window, so that
    ``scrolloff=999`` keeps the caret centred. ``side_scroll_offset`` is
    expected to be normalized already (see ``jump.normalize_side_scroll_offset``).
    """
    scroll_offset: int = 0
    scroll_jump: int = 1
    side_scroll_offset: int = 0
    side_scroll: int = 0
    suppress_vertical_jump: bool = False
    suppress_horizontal_jump: bool = False

    @classmethod
    def from_options(cls, options, flags=None, approximate_width: int = 0) -> "ScrollParameters":
        """Read the four scroll options and the executing command's flags."""
        flags = flags if flags is not None else NO_FLAGS
        return cls(
            scroll_offset=options.get_int(ScrollConstants.SCROLLOFF),
            scroll_jump=options.get_int(ScrollConstants.SCROLLJUMP),
            side_scroll_offset=normalize_side_scroll_offset(
                options.get_int(ScrollConstants.SIDESCROLLOFF), approximate_width
            ),
            side_scroll=options.get_int(ScrollConstants.SIDESCROLL),
            suppress_vertical_jump=flags.ignore_scroll_jump,
            suppress_horizontal_jump=flags.ignore_side_scroll_jump,
        )


# --- Directives ---

@dataclass(frozen=True)
class Center:
    """Put the caret in the middle of the viewport on this axis."""


@dataclass(frozen=True)
class AnchorTop:
    line: int


@dataclass(frozen=True)
class AnchorBottom:
    line: int


@dataclass(frozen=True)
class AnchorLeft:
    column: int


@dataclass(frozen=True)
class AnchorRight:
    column: int


CENTER = Center()

VerticalDirective = Union[Center, AnchorTop, AnchorBottom]
HorizontalDirective = Union[Center, AnchorLeft, AnchorRight]


class ScrollPlan(NamedTuple):
    vertical: Optional[VerticalDirective]
    horizontal: Optional[HorizontalDirective]

    @property
    def is_empty(self) -> bool:
        return self.vertical is None and self.horizontal is None
