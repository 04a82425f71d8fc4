#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Protontricks Handler Module
Finds protontricks and reads its list of non-Steam shortcuts
"""

import re
import shutil
import logging
import subprocess
from typing import List, Optional

from launchify.backend.errors import ToolError, ToolNotFoundError
from launchify.backend.models.launcher import SandboxEntry
from .subprocess_utils import get_clean_subprocess_env

# Initialize logger
logger = logging.getLogger(__name__)

FLATPAK_ID = "com.github.Matoking.protontricks"
SHORTCUT_MARKER = "Non-Steam shortcut:"
APPID_PATTERN = re.compile(r"\(([0-9]+)\)$")


class ProtontricksHandler:
    """
    Handles protontricks detection and the `protontricks -l` inventory
    """

    def __init__(self):
        self.which_protontricks = None  # 'flatpak' or 'native'
        self.protontricks_path = None

    @staticmethod
    def extract_appid(line: str) -> Optional[str]:
        """Return the digits in a trailing `(<digits>)`, or None."""
        m = APPID_PATTERN.search(line)
        return m.group(1) if m else None

    def detect_protontricks(self) -> bool:
        """
        Detect if protontricks is installed, native or Flatpak.

        Returns True if protontricks is found, False otherwise.
        """
        logger.debug("Detecting if protontricks is installed...")

        protontricks_path_which = shutil.which("protontricks")
        if protontricks_path_which:
            logger.info(f"Native Protontricks found at {protontricks_path_which}")
            self.which_protontricks = 'native'
            self.protontricks_path = protontricks_path_which
            return True

        if shutil.which("flatpak"):
            try:
                result = subprocess.run(
                    ["flatpak", "list"],
                    capture_output=True,
                    text=True,
                    errors="replace",
                    env=get_clean_subprocess_env()
                )
                if result.returncode == 0 and FLATPAK_ID in result.stdout:
                    logger.info("Flatpak Protontricks is installed")
                    self.which_protontricks = 'flatpak'
                    return True
            except OSError as e:
                logger.warning(f"Could not run flatpak to check for Protontricks: {e}")
        else:
            logger.debug("'flatpak' command not found. Cannot check for Flatpak Protontricks.")

        logger.warning("Protontricks not found (native or flatpak).")
        return False

    def _base_command(self) -> List[str]:
        if self.which_protontricks == 'flatpak':
            return ["flatpak", "run", FLATPAK_ID]
        return [self.protontricks_path]

    def list_non_steam_shortcuts(self) -> List[SandboxEntry]:
        """
        Run `protontricks -l` and return the non-Steam shortcut lines.

        Raises:
            ToolNotFoundError: If protontricks is not installed.
            ToolError: If protontricks fails or prints non-UTF-8 output.
        """
        if not self.which_protontricks and not self.detect_protontricks():
            raise ToolNotFoundError(
                "protontricks is not installed. Please install it with your "
                "package manager or from Flathub (com.github.Matoking.protontricks)."
            )

        cmd = self._base_command() + ["-l"]
        logger.debug(f"Running command: {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, capture_output=True, env=get_clean_subprocess_env())
        except OSError as e:
            logger.error(f"Failed to run protontricks: {e}")
            raise ToolError(f"Failed to run protontricks: {e}")

        if result.returncode != 0:
            stderr = result.stderr.decode('utf-8', errors='replace') if result.stderr else ''
            logger.error(f"protontricks -l exited with code {result.returncode}: {stderr[:500]}")
            raise ToolError(f"protontricks -l failed with exit code {result.returncode}")

        try:
            output = result.stdout.decode('utf-8')
        except UnicodeDecodeError as e:
            logger.error(f"protontricks -l produced invalid UTF-8: {e}")
            raise ToolError("protontricks -l produced output that is not valid UTF-8")

        entries = []
        for line in output.splitlines():
            if SHORTCUT_MARKER in line:
                entry = SandboxEntry(raw=line, app_id=self.extract_appid(line))
                logger.debug(f"Found non-Steam shortcut: '{entry.name}' with AppID {entry.app_id}")
                entries.append(entry)
        if not entries:
            logger.warning("No non-Steam shortcuts found in protontricks output.")
        return entries
