"""Flags of the currently executing command that affect scrolling."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable


class CommandFlags(Enum):
    """Command flags relevant to scrolling the caret into view."""
    IGNORE_SCROLL_JUMP = "ignore_scroll_jump"
    IGNORE_SIDE_SCROLL_JUMP = "ignore_side_scroll_jump"


class ExecutingCommandFlags(ABC):
    """Read-only view of the flags set by the executing command."""

    @property
    @abstractmethod
    def ignore_scroll_jump(self) -> bool:
        """True if 'scrolljump' should be treated as 1."""

    @property
    @abstractmethod
    def ignore_side_scroll_jump(self) -> bool:
        """True if 'sidescroll' should not be applied."""


class CommandFlagSet(ExecutingCommandFlags):
    """Flags backed by a frozen set of ``CommandFlags``."""

    def __init__(self, flags: Iterable[CommandFlags] = ()):
        self._flags = frozenset(flags)

    def __contains__(self, flag: CommandFlags) -> bool:
        return flag in self._flags

    def __repr__(self) -> str:
        names = sorted(flag.name for flag in self._flags)
        return f"CommandFlagSet({names})"

    @property
    def ignore_scroll_jump(self) -> bool:
        return CommandFlags.IGNORE_SCROLL_JUMP in self._flags

    @property
    def ignore_side_scroll_jump(self) -> bool:
        return CommandFlags.IGNORE_SIDE_SCROLL_JUMP in self._flags


NO_FLAGS = CommandFlagSet()
