"""
Configuration management for page-notes.

Handles loading and managing configuration from a YAML file and
environment variables.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


logger = logging.getLogger(__name__)


@dataclass
class NotesConfig:
    """Main configuration for page-notes."""

    # Horizontal gap between a reference outline and a new note box
    horizontal_offset: int = 30

    # Glyph marking where the user continues typing
    placeholder: str = "⋯"

    # Quote the selected text into new notes
    quote: bool = True

    log_level: str = "WARNING"

    # Per note type label overrides, keyed by NoteType value
    labels: Dict[str, str] = field(default_factory=dict)


class ConfigManager:
    """Manages page-notes configuration from multiple sources."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = config_dir or Path.home() / '.page-notes'
        self.config_file = self.config_dir / 'config.yaml'
        self._config: Optional[NotesConfig] = None

    def load_config(self) -> NotesConfig:
        """Load configuration from all sources."""
        if self._config:
            return self._config

        config = NotesConfig()

        if self.config_file.exists():
            config = self._merge_configs(config, self._load_from_file())

        config = self._merge_configs(config, self._load_from_env())

        self._config = config
        return config

    def _load_from_file(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Could not load config file: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {self.config_file}: expected a mapping")
            return {}
        return data

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        env_config: Dict[str, Any] = {}

        offset = os.getenv('PAGE_NOTES_OFFSET')
        if offset:
            try:
                env_config['horizontal_offset'] = int(offset)
            except ValueError:
                logger.warning(f"Ignoring PAGE_NOTES_OFFSET={offset!r}: not an integer")

        placeholder = os.getenv('PAGE_NOTES_PLACEHOLDER')
        if placeholder:
            env_config['placeholder'] = placeholder

        quote = os.getenv('PAGE_NOTES_QUOTE')
        if quote:
            env_config['quote'] = quote.lower() in ('true', '1', 'yes', 'on')

        log_level = os.getenv('PAGE_NOTES_LOG_LEVEL')
        if log_level:
            env_config['log_level'] = log_level.upper()

        return env_config

    def _merge_configs(self, base: NotesConfig, override: Dict[str, Any]) -> NotesConfig:
        """Merge an override mapping into the configuration."""
        if 'horizontal_offset' in override:
            base.horizontal_offset = int(override['horizontal_offset'])
        if 'placeholder' in override:
            base.placeholder = str(override['placeholder'])
        if 'quote' in override:
            base.quote = bool(override['quote'])
        if 'log_level' in override:
            base.log_level = str(override['log_level']).upper()
        if 'labels' in override and isinstance(override['labels'], dict):
            base.labels.update({str(k): str(v) for k, v in override['labels'].items()})
        return base

    def save_config(self, config: NotesConfig) -> None:
        """Save configuration to file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

        config_dict = {
            'horizontal_offset': config.horizontal_offset,
            'placeholder': config.placeholder,
            'quote': config.quote,
            'log_level': config.log_level,
            'labels': config.labels,
        }

        try:
            with open(self.config_file, 'w', encoding='utf-8') as f:
                yaml.safe_dump(config_dict, f, default_flow_style=False, indent=2, allow_unicode=True)
        except OSError as e:
            logger.warning(f"Could not save config file: {e}")

    def create_default_config(self) -> Path:
        """Create a default configuration file."""
        self.save_config(NotesConfig())
        return self.config_file


# Global config manager instance
_config_manager: Optional[ConfigManager] = None

def get_config_manager() -> ConfigManager:
    """Get the global config manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager

def load_config() -> NotesConfig:
    """Load the current configuration."""
    return get_config_manager().load_config()
