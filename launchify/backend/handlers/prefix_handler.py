#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Prefix Handler Module
Applies post-install tweaks to a Proton prefix
"""

import os
import shutil
import logging
import subprocess
from pathlib import Path

from launchify.backend.errors import ToolError, ToolNotFoundError
from .subprocess_utils import get_clean_subprocess_env

# Initialize logger
logger = logging.getLogger(__name__)

HOST_ROOT_LINK_NAME = "Linux Root"
X11_DRIVER_KEY = r"HKCU\Software\Wine\X11 Driver"


class PrefixHandler:
    """
    Handles tweaks inside an existing Proton prefix
    """

    @staticmethod
    def link_host_root(prefix: Path) -> bool:
        """
        Create `<prefix>/drive_c/Linux Root` pointing at `/`.

        Returns:
            bool: True if the link was created, False if something with that
            name already exists.

        Raises:
            OSError: If the symlink cannot be created.
        """
        link = Path(prefix) / "drive_c" / HOST_ROOT_LINK_NAME
        if os.path.lexists(link):
            logger.warning(f"{link} already exists, leaving it alone")
            return False
        os.symlink("/", link)
        logger.info(f"Created symlink {link} -> /")
        return True

    @staticmethod
    def select_wine_binary() -> str:
        """Prefer wine64, fall back to wine."""
        for name in ("wine64", "wine"):
            path = shutil.which(name)
            if path:
                logger.debug(f"Using {name} at {path} for registry edits")
                return path
        logger.error("Neither wine64 nor wine found in PATH")
        raise ToolNotFoundError("Neither wine64 nor wine was found in PATH.")

    @staticmethod
    def disable_decorations(prefix: Path) -> None:
        """
        Set Decorated=N under the Wine X11 driver key so launcher windows
        are drawn without window-manager decorations.

        Raises:
            ToolNotFoundError: If no wine binary is available.
            ToolError: If `wine reg add` fails.
        """
        wine = PrefixHandler.select_wine_binary()
        cmd = [wine, "reg", "add", X11_DRIVER_KEY, "/v", "Decorated", "/t", "REG_SZ", "/d", "N", "/f"]
        env = get_clean_subprocess_env({"WINEPREFIX": str(prefix), "WINEDEBUG": "-all"})
        logger.debug(f"Running command: {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, errors="replace", env=env)
        except OSError as e:
            logger.error(f"Failed to run {wine}: {e}")
            raise ToolError(f"Failed to run {wine}: {e}")
        if result.returncode != 0:
            logger.error(f"wine reg add exited with code {result.returncode}: {result.stderr.strip()}")
            raise ToolError(f"Failed to disable window decorations (exit code {result.returncode})")
        logger.info(f"Disabled window decorations in {prefix}")
