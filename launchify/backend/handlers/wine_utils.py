#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Wine Utilities Module
Handles locating the system wine and preparing environments for it
"""

import os
import subprocess
import logging
import shutil
from pathlib import Path
from typing import Dict, Iterable, Optional

from launchify.backend.errors import ToolNotFoundError
from launchify.backend.models.launcher import ToolHandle
from .subprocess_utils import get_clean_subprocess_env

# Initialize logger
logger = logging.getLogger(__name__)

CONVENTIONAL_WINE_PATHS = ("/usr/bin/wine", "/usr/local/bin/wine")

WINE_INSTALL_GUIDANCE = (
    "Wine is not installed or not found in PATH.\n"
    "Please install wine using your package manager:\n"
    "  Ubuntu/Debian: sudo apt install wine\n"
    "  Fedora: sudo dnf install wine\n"
    "  Arch: sudo pacman -S wine"
)


class WineUtils:
    """
    Utilities for wine-related operations
    """

    @staticmethod
    def probe_wine_version(path: str) -> Optional[str]:
        """
        Run `<path> --version`.
        Returns the reported version ("unknown" if stdout is empty), or None
        if the binary could not be run or exited non-zero.
        """
        try:
            result = subprocess.run(
                [path, "--version"],
                capture_output=True,
                text=True,
                errors="replace",
                env=get_clean_subprocess_env()
            )
        except OSError as e:
            logger.debug(f"Could not run {path} --version: {e}")
            return None
        if result.returncode != 0:
            logger.debug(f"{path} --version exited with {result.returncode}")
            return None
        return result.stdout.strip() or "unknown"

    @staticmethod
    def find_system_wine(extra_paths: Optional[Iterable[str]] = None) -> ToolHandle:
        """
        Locate a working wine binary on the host.

        The PATH lookup wins; after that the conventional install locations
        are probed, then any configured extra paths.

        Args:
            extra_paths: Additional absolute paths to probe last.

        Returns:
            ToolHandle: Path and reported version of the wine binary.

        Raises:
            ToolNotFoundError: If no candidate exists and reports a version.
        """
        which_wine = shutil.which("wine")
        if which_wine and os.path.exists(which_wine):
            version = WineUtils.probe_wine_version(which_wine)
            if version is not None:
                logger.info(f"Found wine: {version} at {which_wine}")
                return ToolHandle(path=which_wine, version=version)

        candidates = list(CONVENTIONAL_WINE_PATHS)
        candidates.extend(p for p in (extra_paths or []) if p not in candidates)
        for candidate in candidates:
            if not os.path.isfile(candidate):
                continue
            version = WineUtils.probe_wine_version(candidate)
            if version is not None:
                logger.info(f"Found wine: {version} at {candidate}")
                return ToolHandle(path=candidate, version=version)

        logger.error("No usable wine binary found")
        raise ToolNotFoundError(WINE_INSTALL_GUIDANCE)

    @staticmethod
    def get_wineserver_path(tool: ToolHandle) -> str:
        """Return the wineserver next to the wine binary, or bare 'wineserver' for a PATH lookup."""
        sibling = Path(tool.path).parent / "wineserver"
        if sibling.is_file():
            return str(sibling)
        return "wineserver"

    @staticmethod
    def build_installer_env(prefix, interactive: bool = False) -> Dict[str, str]:
        """
        Environment overlay for running an installer under wine.

        The silent overlay disables Mono/Gecko prompts and points DISPLAY at
        a non-existent server so no window is mapped. The interactive
        overlay drops both so the installer UI can show.
        """
        env = {
            "WINEPREFIX": str(prefix),
            "WINEDEBUG": "-all",
            "MANGOHUD": "0",
            "DISABLE_MANGOHUD": "1",
            "DISABLE_LAYER_AMD_SWITCHABLE_GRAPHICS_1": "1",
        }
        if not interactive:
            env["WINEDLLOVERRIDES"] = "mscoree,mshtml="
            env["DISPLAY"] = ":99"
        return env

    @staticmethod
    def kill_wineserver(tool: ToolHandle, prefix) -> None:
        """
        Run `wineserver -k` for the prefix so no installer processes linger.
        Best effort: the exit status and launch failures are ignored.
        """
        wineserver = WineUtils.get_wineserver_path(tool)
        try:
            subprocess.run(
                [wineserver, "-k"],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                env=get_clean_subprocess_env({"WINEPREFIX": str(prefix)})
            )
            logger.debug(f"Stopped wineserver for prefix {prefix}")
        except OSError as e:
            logger.debug(f"Could not run {wineserver} -k: {e}")
