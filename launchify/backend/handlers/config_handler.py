#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration Handler Module
Handles application settings and configuration
"""

import os
import json
import logging
from pathlib import Path
from typing import Any, Dict

from launchify import __version__
from launchify.shared.paths import get_launchify_config_dir

# Initialize logger
logger = logging.getLogger(__name__)


def _default_settings() -> Dict[str, Any]:
    return {
        "version": __version__,
        "wine_prefix": os.path.expanduser("~/.wine"),
        "steam_root": os.path.expanduser("~/.steam/steam"),
        "install_base_dir": os.path.expanduser("~/Games"),  # Parent of the default launcher destinations
        "extra_wine_paths": [],  # Probed after /usr/bin/wine and /usr/local/bin/wine
        "debug_mode": False,
    }


class ConfigHandler:
    """
    Handles application configuration and settings
    Singleton pattern ensures all code shares the same instance
    """
    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigHandler, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize configuration handler with default settings"""
        # Only initialize once (singleton pattern)
        if ConfigHandler._initialized:
            return
        ConfigHandler._initialized = True

        self.config_dir = str(get_launchify_config_dir())
        self.config_file = os.path.join(self.config_dir, "config.json")
        self.settings = _default_settings()

        # Load configuration if exists, otherwise write the defaults on first run
        if os.path.exists(self.config_file):
            self._load_config()
        else:
            logger.info(f"Creating default configuration at {self.config_file}")
            self.save_config()

    @classmethod
    def reset(cls):
        """Drop the shared instance so the next ConfigHandler() re-reads the environment."""
        cls._instance = None
        cls._initialized = False

    def _load_config(self):
        """Load configuration from file and merge it over the defaults."""
        try:
            if os.path.exists(self.config_file):
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    saved_config = json.load(f)
                if not isinstance(saved_config, dict):
                    logger.error(f"Ignoring malformed configuration in {self.config_file}")
                    return
                # Update settings with saved values while preserving defaults
                self.settings.update(saved_config)
                logger.debug("Loaded configuration from file")
                if saved_config.get("version") != __version__:
                    logger.info(f"Updating configuration from version {saved_config.get('version')} to {__version__}")
                    self.set("version", __version__)
                    self.save_config()
            else:
                logger.debug("No configuration file found, using defaults")
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading configuration: {e}")

    def _create_config_dir(self):
        """Create configuration directory if it doesn't exist"""
        try:
            os.makedirs(self.config_dir, exist_ok=True)
            logger.debug(f"Created configuration directory: {self.config_dir}")
        except OSError as e:
            logger.error(f"Error creating configuration directory: {e}")

    def save_config(self):
        """Save current configuration to file"""
        try:
            self._create_config_dir()
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self.settings, f, indent=2)
            logger.debug("Saved configuration to file")
            return True
        except OSError as e:
            logger.error(f"Error saving configuration: {e}")
            return False

    def get(self, key, default=None):
        """Get a configuration value by key"""
        return self.settings.get(key, default)

    def set(self, key, value):
        """Set a configuration value (in memory; call save_config to persist)"""
        self.settings[key] = value
        return True

    def get_path(self, key) -> Path:
        """Get a path-valued setting with ~ expanded."""
        value = self.settings.get(key) or _default_settings()[key]
        return Path(os.path.expanduser(str(value)))

    def get_wine_prefix(self) -> Path:
        return self.get_path("wine_prefix")

    def get_steam_root(self) -> Path:
        return self.get_path("steam_root")

    def get_install_base_dir(self) -> Path:
        return self.get_path("install_base_dir")

    def get_extra_wine_paths(self):
        """Extra wine binary locations, ignoring anything that isn't a list of strings."""
        paths = self.settings.get("extra_wine_paths") or []
        if not isinstance(paths, list):
            logger.warning("extra_wine_paths is not a list, ignoring it")
            return []
        return [os.path.expanduser(p) for p in paths if isinstance(p, str) and p]
