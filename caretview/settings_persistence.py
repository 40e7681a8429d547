"""Persistent per-document scroll options.

Options are stored as JSON in the OS-appropriate config directory, indexed
by the absolute path of the document they apply to.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import ScrollConstants

logger = logging.getLogger(__name__)


class OptionPersistence:
    """Loads and saves option dictionaries keyed by document path."""

    def __init__(self, config_dir: Optional[Path] = None):
        if config_dir is None:
            config_dir = Path(platformdirs.user_config_dir(ScrollConstants.APP_NAME))
        self._config_dir = Path(config_dir)
        self._settings_file = self._config_dir / ScrollConstants.SETTINGS_FILENAME
        self._settings_cache: Optional[Dict[str, Dict[str, Any]]] = None

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _ensure_config_dir(self) -> None:
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create config directory {self._config_dir}: {e}")

    def _load_all(self) -> Dict[str, Dict[str, Any]]:
        """Load every document's options, or an empty dict if unreadable."""
        if self._settings_cache is not None:
            return self._settings_cache

        if not self._settings_file.exists():
            self._settings_cache = {}
            return self._settings_cache

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load options from {self._settings_file}: {e}")
            self._settings_cache = {}
            return self._settings_cache

        if not isinstance(data, dict):
            logger.warning("Options file has invalid format (not a dict), ignoring")
            data = {}
        self._settings_cache = data
        return self._settings_cache

    def _save_all(self, settings: Dict[str, Dict[str, Any]]) -> bool:
        """Write all options atomically (temp file + rename)."""
        self._ensure_config_dir()
        temp_file = self._settings_file.with_suffix('.tmp')

        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2, sort_keys=True)
            temp_file.replace(self._settings_file)
        except OSError as e:
            logger.warning(f"Could not save options to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False

        self._settings_cache = settings
        return True

    def load_options(self, document_path: Optional[str]) -> Dict[str, Any]:
        """Return the options saved for a document, or an empty dict."""
        if document_path is None:
            return {}

        abs_path = os.path.abspath(document_path)
        doc_options = self._load_all().get(abs_path, {})
        if not isinstance(doc_options, dict):
            logger.warning(f"Options for {abs_path} are not a dict, ignoring")
            return {}
        return doc_options.copy()

    def save_options(self, document_path: Optional[str], options: Dict[str, Any]) -> bool:
        """Save options for a document. Returns True on success."""
        if document_path is None:
            return False

        abs_path = os.path.abspath(document_path)
        all_options = dict(self._load_all())
        all_options[abs_path] = dict(options)
        return self._save_all(all_options)

    def clear_cache(self) -> None:
        self._settings_cache = None


_persistence: Optional[OptionPersistence] = None


def get_persistence() -> OptionPersistence:
    """Return the process-wide OptionPersistence instance."""
    global _persistence
    if _persistence is None:
        _persistence = OptionPersistence()
    return _persistence
