#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Path Handler Module
Handles Steam library discovery and Proton prefix lookup
"""

import os
import re
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from launchify.backend.errors import LibraryNotFoundError

# Initialize logger
logger = logging.getLogger(__name__)

LIBRARY_PATH_PATTERN = re.compile(r'"path"\s*"([^"]+)"')


class PathHandler:
    """
    Handles Steam library and compatdata path lookups
    """

    @staticmethod
    def _default_steam_root() -> Path:
        from .config_handler import ConfigHandler
        return ConfigHandler().get_steam_root()

    @staticmethod
    def parse_library_paths(text: str) -> List[Path]:
        """
        Pull every `"path" "<value>"` entry out of libraryfolders.vdf text.

        Lines without a well-formed quoted value are skipped. Backslash
        separators (escaped or not) are turned into forward slashes. Order is
        preserved and duplicates are kept.
        """
        libraries = []
        for line in text.splitlines():
            m = LIBRARY_PATH_PATTERN.search(line)
            if not m:
                continue
            value = m.group(1).replace('\\\\', '/').replace('\\', '/')
            libraries.append(Path(value))
        return libraries

    @staticmethod
    def find_steam_libraries(steam_root: Optional[Path] = None) -> List[Path]:
        """
        List the Steam library roots configured for this user.

        Args:
            steam_root: Steam installation root (default: config steam_root,
                falling back to ~/.steam/steam).

        Returns:
            List[Path]: The primary root followed by the library roots in
            file order. Existence is not checked.

        Raises:
            LibraryNotFoundError: If libraryfolders.vdf is missing, unreadable
                or empty.
        """
        root = Path(os.path.expanduser(str(steam_root))) if steam_root else PathHandler._default_steam_root()
        vdf_path = root / "steamapps" / "libraryfolders.vdf"
        logger.debug(f"Reading Steam libraries from {vdf_path}")
        try:
            content = vdf_path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {vdf_path}: {e}")
            raise LibraryNotFoundError(f"Could not read Steam library list at {vdf_path}: {e}")

        if not content.strip():
            logger.error(f"{vdf_path} is empty")
            raise LibraryNotFoundError(f"Steam library list at {vdf_path} is empty")

        libraries = [root] + PathHandler.parse_library_paths(content)
        logger.info(f"Detected Steam libraries: {[str(p) for p in libraries]}")
        return libraries

    @staticmethod
    def find_prefix_path(app_id: str, libraries: Iterable[Path]) -> Optional[Path]:
        """
        Find the Proton prefix (compatdata/<app_id>/pfx) for an AppID.
        The first library holding one wins.
        """
        for library in libraries:
            candidate = Path(library) / "steamapps" / "compatdata" / str(app_id) / "pfx"
            if candidate.is_dir():
                logger.info(f"Found Proton prefix: {candidate}")
                return candidate
            logger.debug(f"No prefix for AppID {app_id} under {library}")
        logger.warning(f"Proton prefix for AppID {app_id} not found.")
        return None
