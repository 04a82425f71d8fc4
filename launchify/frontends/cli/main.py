#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Launchify CLI Frontend - Main Entry Point

Command-line interface for Launchify that uses the backend services.
"""

import sys
import argparse
import logging

from launchify import __version__ as launchify_version
from launchify.backend.data.launchers import LAUNCHER_KEYS, get_launcher_profile
from launchify.backend.errors import LaunchifyError, ToolNotFoundError
from launchify.backend.handlers.config_handler import ConfigHandler
from launchify.backend.handlers.wine_utils import WineUtils
from launchify.backend.services.decision_provider import AutoDecisionProvider
from launchify.backend.services.launcher_install_service import LauncherInstallService
from launchify.backend.services.post_setup_service import PostSetupService
from launchify.shared.colors import COLOR_INFO, COLOR_ERROR, COLOR_RESET, COLOR_SUCCESS, COLOR_WARNING

from .menus.instructions import print_post_setup_reminder, print_steam_instructions, show_post_setup_intro
from .menus.main_menu import MainMenuHandler
from .prompts import TerminalDecisionProvider

logger = logging.getLogger(__name__)

LOGGER_NAME = 'launchify'
LOG_FILE = 'launchify-cli.log'


class LaunchifyCLI:
    """Main application class for Launchify CLI Frontend"""

    def __init__(self, input_func=input):
        """Initialize the LaunchifyCLI frontend.

        Args:
            input_func: Source of interactive answers (defaults to ``input``).
        """
        self.input_func = input_func
        self.args = None
        self.tool = None
        self.config_handler = None
        self.menu = MainMenuHandler()

    def _configure_logging_final(self):
        """Configure logging level based on parsed arguments"""
        from launchify.backend.handlers.logging_handler import LoggingHandler

        logging_handler = LoggingHandler()
        logging_handler.rotate_log_for_logger(LOGGER_NAME, LOG_FILE)
        cli_logger = logging_handler.setup_logger(LOGGER_NAME, LOG_FILE)

        if self.args.debug:
            cli_logger.setLevel(logging.DEBUG)
            print("Debug logging enabled for console and file")
        elif self.args.verbose:
            cli_logger.setLevel(logging.INFO)
            print("Verbose logging enabled for console and file")
        else:
            cli_logger.setLevel(logging.WARNING)

    def _parse_args(self, argv=None):
        parser = argparse.ArgumentParser(
            prog="launchify",
            description="Launchify: install Windows game launchers under Wine and tune their Proton prefixes"
        )
        parser.add_argument("-V", "--version", action="store_true", help="Show Launchify version and exit")
        parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging (implies verbose)")
        parser.add_argument("-v", "--verbose", action="store_true", help="Enable informational logging")

        subparsers = parser.add_subparsers(dest="command", help="Command to run")

        install = subparsers.add_parser("install", help="Download and install a launcher")
        install.add_argument("launcher", choices=LAUNCHER_KEYS, help="Launcher to install")
        install.add_argument("--dest", help="Final install directory (asked for when omitted)")
        install.add_argument("--prefix", help="Wine prefix to run the installer in (default from config, ~/.wine)")
        install.add_argument("-y", "--yes", action="store_true", help="Answer yes to every question")

        post_setup = subparsers.add_parser("post-setup", help="Adjust the Proton prefix of a non-Steam shortcut")
        post_setup.add_argument("--appid", help="Shortcut AppID (skip the protontricks selection)")
        post_setup.add_argument("--steam-root", help="Steam installation root (default from config, ~/.steam/steam)")
        post_setup.add_argument("-y", "--yes", action="store_true", help="Answer yes to every question")

        return parser.parse_args(argv)

    def _decisions(self):
        if getattr(self.args, 'yes', False):
            return AutoDecisionProvider(assume_yes=True)
        return TerminalDecisionProvider(input_func=self.input_func)

    def _resolve_wine(self) -> bool:
        print(f"{COLOR_INFO}Searching for system wine installation...{COLOR_RESET}")
        try:
            self.tool = WineUtils.find_system_wine(self.config_handler.get_extra_wine_paths())
        except ToolNotFoundError as e:
            print(f"{COLOR_ERROR}Error: {e}{COLOR_RESET}")
            return False
        print(f"{COLOR_SUCCESS}Using system wine: {self.tool.path} ({self.tool.version}){COLOR_RESET}")
        return True

    def run(self, argv=None) -> int:
        self.args = self._parse_args(argv)
        if self.args.version:
            print(f"Launchify version {launchify_version}")
            return 0

        self._configure_logging_final()
        logger.debug(f"Parsed args: {self.args}")

        self.config_handler = ConfigHandler()
        if self.config_handler.get('debug_mode', False) and not self.args.debug:
            logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG)

        if not self._resolve_wine():
            return 1

        if self.args.command == "install":
            return self._run_guarded(lambda: self.install(
                self.args.launcher, self._decisions(), destination=self.args.dest, prefix=self.args.prefix
            ))
        if self.args.command == "post-setup":
            return self._run_guarded(lambda: self.post_setup(
                self._decisions(), app_id=self.args.appid, steam_root=self.args.steam_root
            ))
        return self._run_interactive()

    def _run_guarded(self, action) -> int:
        """Run one action, reporting backend failures as a red error line."""
        try:
            action()
        except (LaunchifyError, OSError) as e:
            logger.error(f"Operation failed: {e}")
            print(f"{COLOR_ERROR}Error: {e}{COLOR_RESET}")
            return 1
        print(f"{COLOR_SUCCESS}Operation completed successfully.{COLOR_RESET}")
        return 0

    def _run_interactive(self) -> int:
        """Run one menu action interactively and exit with its status"""
        try:
            choice = self.menu.show_main_menu(self.input_func)
            decisions = TerminalDecisionProvider(input_func=self.input_func)
            if choice in LAUNCHER_KEYS:
                return self._run_guarded(lambda: self.install(choice, decisions))
            if choice == "post_setup":
                if show_post_setup_intro(self.input_func):
                    return self._run_guarded(lambda: self.post_setup(decisions))
                print(f"{COLOR_WARNING}Post-setup cancelled.{COLOR_RESET}")
                return 0
            print(f"{COLOR_WARNING}Exiting.{COLOR_RESET}")
            return 0
        except (KeyboardInterrupt, EOFError):
            print(f"\n{COLOR_INFO}Exiting Launchify...{COLOR_RESET}")
            return 0

    def install(self, key, decisions, destination=None, prefix=None):
        """Install one launcher and print how to add it to Steam."""
        profile = get_launcher_profile(key, install_base=self.config_handler.get_install_base_dir())
        prefix = prefix or self.config_handler.get_wine_prefix()
        print(f"{COLOR_INFO}Preparing to install {profile.display_name}...{COLOR_RESET}")

        service = LauncherInstallService(decisions)
        result = service.install_launcher(profile, self.tool, destination=destination, prefix=prefix)

        if result.discovery_failed:
            print(f"{COLOR_WARNING}Warning: Could not find {profile.display_name} installation directory in Wine C: drive.{COLOR_RESET}")
            print(f"{COLOR_WARNING}Please check if {profile.display_name} was installed correctly.{COLOR_RESET}")
        elif result.relocated:
            print(f"{COLOR_SUCCESS}Files copied to {result.destination}.{COLOR_RESET}")
            if result.original_removed:
                print(f"{COLOR_SUCCESS}Original directory deleted.{COLOR_RESET}")

        print(f"{COLOR_SUCCESS}{profile.display_name} installation completed.{COLOR_RESET}")
        print(f"{COLOR_SUCCESS}Installed to: {result.destination}{COLOR_RESET}")
        print_steam_instructions(profile.display_name, result.destination, profile.executable_name)
        if profile.needs_post_setup:
            print_post_setup_reminder(profile.display_name)
        return result

    def post_setup(self, decisions, app_id=None, steam_root=None):
        """Link the host root and disable window decorations in a shortcut's prefix."""
        print(f"{COLOR_INFO}Detecting non-Steam games (protontricks -l)...{COLOR_RESET}")
        result = PostSetupService(decisions).run(app_id=app_id, steam_root=steam_root)
        print(f"{COLOR_SUCCESS}Found prefix: {result.prefix}{COLOR_RESET}")
        if result.linked:
            print(f"{COLOR_SUCCESS}Symlinked / to {result.prefix / 'drive_c' / 'Linux Root'}{COLOR_RESET}")
        else:
            print(f"{COLOR_WARNING}'Linux Root' already exists in drive_c. Skipping symlink creation.{COLOR_RESET}")
        print(f"{COLOR_SUCCESS}Window decorations disabled for prefix {result.prefix}.{COLOR_RESET}")
        print(f"{COLOR_INFO}You can now reach your Linux filesystem from Windows file dialogs at C:\\Linux Root.{COLOR_RESET}")
        return result


if __name__ == "__main__":
    print("Please use: python -m launchify")
    sys.exit(1)
