#!/usr/bin/env python3
"""
Post-Setup Service

After a launcher has been added to Steam as a non-Steam game and launched
once, its Proton prefix exists. This service finds that prefix and applies
the tweaks launchers need: a `Linux Root` drive link and undecorated
windows.
"""
import logging
from pathlib import Path
from typing import Optional

from launchify.backend.errors import LaunchifyError, ParseMismatchError, PrefixNotFoundError
from launchify.backend.handlers.path_handler import PathHandler
from launchify.backend.handlers.prefix_handler import PrefixHandler
from launchify.backend.handlers.protontricks_handler import ProtontricksHandler
from launchify.backend.models.launcher import PostSetupResult
from .decision_provider import DecisionProvider

logger = logging.getLogger(__name__)


class PostSetupService:

    def __init__(self, decisions: DecisionProvider,
                 protontricks_handler: Optional[ProtontricksHandler] = None,
                 path_handler: Optional[PathHandler] = None,
                 prefix_handler: Optional[PrefixHandler] = None):
        self.decisions = decisions
        self.protontricks_handler = protontricks_handler or ProtontricksHandler()
        self.path_handler = path_handler or PathHandler()
        self.prefix_handler = prefix_handler or PrefixHandler()

    def select_app_id(self) -> str:
        """Ask which non-Steam shortcut to adjust and return its AppID."""
        entries = self.protontricks_handler.list_non_steam_shortcuts()
        if not entries:
            raise LaunchifyError("No non-Steam games found!")

        labels = [entry.raw.strip() for entry in entries]
        index = self.decisions.choose_entry("shortcut", "Select the game to configure", labels)
        if index is None or not 0 <= index < len(entries):
            raise LaunchifyError("Invalid selection.")

        selected = entries[index]
        if selected.app_id is None:
            logger.error(f"Could not extract AppID from: {selected.raw}")
            raise ParseMismatchError(f"Could not extract AppID from: {selected.raw.strip()}")
        logger.info(f"Selected '{selected.name}' (AppID {selected.app_id})")
        return selected.app_id

    def run(self, app_id: Optional[str] = None, steam_root: Optional[Path] = None) -> PostSetupResult:
        """
        Apply the post-setup tweaks to a shortcut's Proton prefix.

        Raises:
            LaunchifyError: If there is nothing to choose from or the choice is invalid.
            ToolNotFoundError / ToolError: From protontricks or wine.
            LibraryNotFoundError: If Steam's library list cannot be read.
            PrefixNotFoundError: If no library holds a prefix for the AppID.
        """
        if app_id is None:
            app_id = self.select_app_id()

        libraries = self.path_handler.find_steam_libraries(steam_root)
        prefix = self.path_handler.find_prefix_path(app_id, libraries)
        if prefix is None:
            raise PrefixNotFoundError(f"Could not find Proton prefix for AppID {app_id}")

        linked = self.prefix_handler.link_host_root(prefix)
        self.prefix_handler.disable_decorations(prefix)
        logger.info(f"Post-setup complete for AppID {app_id}")
        return PostSetupResult(app_id=app_id, prefix=prefix, linked=linked)
