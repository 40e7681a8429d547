"""Buffer-scoped scroll options ('scrolloff', 'scrolljump', ...)."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from .constants import ScrollConstants

logger = logging.getLogger(__name__)


class InvalidOptionError(ValueError):
    """Raised when setting an unknown option or an out-of-range value."""


def canonical_option_name(name: str) -> str:
    """Map a short option name ('so') to its full name ('scrolloff')."""
    full_name = ScrollConstants.ABBREVIATIONS.get(name, name)
    if full_name not in ScrollConstants.DEFAULTS:
        raise InvalidOptionError(f"Unknown option: {name}")
    return full_name


def validate_option(name: str, value: Any) -> bool:
    """Validate an option value.

    Args:
        name: Full or short option name.
        value: Value to validate.

    Returns:
        True if the option exists and the value is in range, False otherwise.
    """
    full_name = ScrollConstants.ABBREVIATIONS.get(name, name)
    if full_name not in ScrollConstants.DEFAULTS:
        return False
    # bool is an int subclass, but 'scrolloff=True' is not a number
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    if full_name == ScrollConstants.SCROLLJUMP:
        return value >= ScrollConstants.MIN_SCROLLJUMP
    return value >= 0


class OptionProvider(ABC):
    """Read-only integer option lookup for one buffer."""

    @abstractmethod
    def get_int(self, name: str) -> int:
        """Return the effective value of the named option."""


class BufferOptions(OptionProvider):
    """Option values local to a buffer, layered over global values.

    Lookup order is local value, then the global options, then the Vim
    default from ``ScrollConstants.DEFAULTS``.
    """

    def __init__(self, global_options: Optional["BufferOptions"] = None, **values: int):
        self._global = global_options
        self._values: Dict[str, int] = {}
        for name, value in values.items():
            self.set(name, value)

    def get_int(self, name: str) -> int:
        full_name = canonical_option_name(name)
        if full_name in self._values:
            return self._values[full_name]
        if self._global is not None:
            return self._global.get_int(full_name)
        return ScrollConstants.DEFAULTS[full_name]

    def set(self, name: str, value: int) -> None:
        full_name = canonical_option_name(name)
        if not validate_option(full_name, value):
            raise InvalidOptionError(f"Invalid value for {full_name}: {value!r}")
        self._values[full_name] = value

    def reset(self, name: str) -> None:
        """Drop the local value so the global or default value applies."""
        self._values.pop(canonical_option_name(name), None)

    def values(self) -> Dict[str, int]:
        """Return a copy of the locally set values."""
        return self._values.copy()

    @classmethod
    def for_document(
        cls,
        document_path: Optional[str],
        persistence=None,
        global_options: Optional["BufferOptions"] = None,
    ) -> "BufferOptions":
        """Create buffer options from the values persisted for a document.

        Invalid persisted values are skipped with a warning.
        """
        if persistence is None:
            from .settings_persistence import get_persistence
            persistence = get_persistence()

        options = cls(global_options)
        for name, value in persistence.load_options(document_path).items():
            if not validate_option(name, value):
                logger.warning(f"Ignoring invalid persisted option {name}={value!r}")
                continue
            options.set(name, value)
        return options
