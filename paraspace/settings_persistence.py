"""Settings persistence for per-document display preferences.

Paragraph spacing and line length are stored per document path in a JSON
file in the user's config directory, so a document reopens with the same
layout.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import ParaSpaceConstants
from .units import TextUnit

logger = logging.getLogger(__name__)


class SettingsKeys:
    SPACING = "spacing"  # Stored as text, e.g. "10sp"
    LINE_LENGTH = "line_length"


class SettingsPersistence:
    """Stores settings in a JSON file indexed by absolute document path."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = config_dir or Path(
            platformdirs.user_config_dir(ParaSpaceConstants.APP_NAME)
        )
        self._settings_file = self._config_dir / ParaSpaceConstants.SETTINGS_FILENAME
        self._settings_cache: Optional[Dict[str, Dict[str, Any]]] = None

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _ensure_config_dir(self) -> None:
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create config directory {self._config_dir}: {e}")

    def _load_all_settings(self) -> Dict[str, Dict[str, Any]]:
        """Load all settings from disk, or an empty dict if unreadable."""
        if self._settings_cache is not None:
            return self._settings_cache

        if not self._settings_file.exists():
            self._settings_cache = {}
            return self._settings_cache

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            self._settings_cache = {}
            return self._settings_cache

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            data = {}
        self._settings_cache = data
        return self._settings_cache

    def _save_all_settings(self, settings: Dict[str, Dict[str, Any]]) -> bool:
        """Write settings through a temp file and an atomic rename."""
        self._ensure_config_dir()
        temp_file = self._settings_file.with_suffix('.tmp')

        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            temp_file.replace(self._settings_file)
            self._settings_cache = settings
            return True
        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False

    def load_settings(self, document_path: Optional[str]) -> Dict[str, Any]:
        """Load the valid settings stored for a document.

        Invalid entries are dropped with a warning.

        Args:
            document_path: Path to the document. If None, returns empty dict.

        Returns:
            Dictionary of settings for the document. Empty dict if no settings
            exist or document_path is None.
        """
        if document_path is None:
            return {}

        abs_path = os.path.abspath(document_path)
        doc_settings = self._load_all_settings().get(abs_path, {})
        if not isinstance(doc_settings, dict):
            logger.warning(f"Settings for {abs_path} are not a dict, ignoring")
            return {}

        valid = {}
        for key, value in doc_settings.items():
            if self.validate_setting(key, value):
                valid[key] = value
            else:
                logger.warning(f"Ignoring invalid setting {key}={value!r} for {abs_path}")
        return valid

    def save_settings(self, document_path: Optional[str], settings: Dict[str, Any]) -> bool:
        """Save settings for a specific document.

        Args:
            document_path: Path to the document, made absolute before use.
                If None, nothing is saved.
            settings: Dictionary of settings to save.

        Returns:
            True if save was successful, False otherwise.
        """
        if document_path is None:
            return False

        abs_path = os.path.abspath(document_path)
        all_settings = dict(self._load_all_settings())
        all_settings[abs_path] = settings
        return self._save_all_settings(all_settings)

    def validate_setting(self, key: str, value: Any) -> bool:
        """Validate a setting value.

        Args:
            key: Setting key name.
            value: Setting value to validate.

        Returns:
            True if setting is valid, False otherwise.
        """
        if value is None:
            return True  # None means "not set"

        if key == SettingsKeys.SPACING:
            if not isinstance(value, str):
                return False
            try:
                size = TextUnit.parse(value)
            except ValueError:
                return False
            return size.value <= ParaSpaceConstants.MAX_SPACING_VALUE

        if key == SettingsKeys.LINE_LENGTH:
            # bool is an int subclass
            if not isinstance(value, int) or isinstance(value, bool):
                return False
            return ParaSpaceConstants.MIN_LINE_LENGTH <= value <= ParaSpaceConstants.MAX_LINE_LENGTH

        # Unknown settings are kept for forward compatibility
        return True

    def clear_cache(self) -> None:
        """Clear the in-memory cache of settings."""
        self._settings_cache = None


def spacing_from_settings(settings: Dict[str, Any], default: TextUnit) -> TextUnit:
    """Return the stored spacing, or default when none is stored."""
    value = settings.get(SettingsKeys.SPACING)
    return TextUnit.parse(value) if value else default


_persistence: Optional[SettingsPersistence] = None


def get_persistence() -> SettingsPersistence:
    """Get the global settings persistence instance."""
    global _persistence
    if _persistence is None:
        _persistence = SettingsPersistence()
    return _persistence
