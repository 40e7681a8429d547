"""Minimum scroll distances derived from 'scrolljump' and 'sidescrolloff'."""

from .constants import ScrollConstants


def resolve_scroll_jump(raw_value: int, extent: int, suppressed: bool) -> int:
    """Return the minimum number of lines to scroll vertically.

    Zero is a valid option value but is normalized to 1, we always want to
    scroll at least one line. A negative value is a percentage of ``extent``.
    The percentage is computed in floating point and truncated, as Vim does.
    """
    if suppressed:
        return 1
    if raw_value < 0:
        percent = min(ScrollConstants.MAX_JUMP_PERCENT, -raw_value)
        return int(extent * (percent / 100.0))
    return max(1, raw_value)


def normalize_side_scroll_offset(value: int, approximate_width: int) -> int:
    """Clamp 'sidescrolloff' to the range [0, half the window width]."""
    return min(max(0, value), approximate_width // 2)
