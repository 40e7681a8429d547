"""Caretview - keep the caret in view with Vim's scrolloff/scrolljump rules."""

from .commands import CommandFlags, CommandFlagSet, ExecutingCommandFlags, NO_FLAGS
from .geometry import ViewportGeometryQuery, ViewportScroller
from .horizontal import plan_horizontal_scroll
from .jump import normalize_side_scroll_offset, resolve_scroll_jump
from .model import (
    AnchorBottom,
    AnchorLeft,
    AnchorRight,
    AnchorTop,
    BufferExtent,
    CENTER,
    CaretLocation,
    Center,
    ScrollParameters,
    ScrollPlan,
    ViewportState,
)
from .options import BufferOptions, InvalidOptionError, OptionProvider
from .scroll import plan_caret_scroll, scroll_caret_into_view
from .vertical import plan_vertical_scroll
from .view import TerminalViewport

__all__ = [
    'AnchorBottom',
    'AnchorLeft',
    'AnchorRight',
    'AnchorTop',
    'BufferExtent',
    'BufferOptions',
    'CENTER',
    'CaretLocation',
    'Center',
    'CommandFlagSet',
    'CommandFlags',
    'ExecutingCommandFlags',
    'InvalidOptionError',
    'NO_FLAGS',
    'OptionProvider',
    'ScrollParameters',
    'ScrollPlan',
    'TerminalViewport',
    'ViewportGeometryQuery',
    'ViewportScroller',
    'ViewportState',
    'normalize_side_scroll_offset',
    'plan_caret_scroll',
    'plan_horizontal_scroll',
    'plan_vertical_scroll',
    'resolve_scroll_jump',
    'scroll_caret_into_view',
]
