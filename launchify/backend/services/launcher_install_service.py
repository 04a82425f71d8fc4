#!/usr/bin/env python3
"""
Launcher Install Service

Downloads a launcher installer, runs it under wine with a silent attempt
followed by an interactive fallback, finds where it put its files and
moves them to the destination the user picked.
"""
import subprocess
import time
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from launchify.backend.errors import InstallAbortedError, InstallerLaunchError
from launchify.backend.handlers.filesystem_handler import FileSystemHandler
from launchify.backend.handlers.subprocess_utils import get_clean_subprocess_env
from launchify.backend.handlers.wine_utils import WineUtils
from launchify.backend.models.launcher import (
    FetchTarget,
    InstallAttempt,
    InstallOutcome,
    InstallResult,
    LauncherProfile,
    ToolHandle,
)
from .decision_provider import DecisionProvider

logger = logging.getLogger(__name__)

WINESERVER_SETTLE_SECONDS = 1


class LauncherInstallService:
    """
    Drives a single launcher install from download to relocation.
    """

    def __init__(self, decisions: DecisionProvider, filesystem_handler: Optional[FileSystemHandler] = None):
        self.decisions = decisions
        self.filesystem_handler = filesystem_handler or FileSystemHandler()

    def _run_attempt(self, attempt: InstallAttempt) -> InstallAttempt:
        logger.debug(f"Running command: {' '.join(attempt.command)}")
        try:
            result = subprocess.run(
                attempt.command,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                env=get_clean_subprocess_env(attempt.env)
            )
        except OSError as e:
            logger.error(f"Failed to launch {attempt.binary}: {e}")
            raise InstallerLaunchError(f"Failed to launch {attempt.binary}: {e}")
        attempt.returncode = result.returncode
        logger.info(f"Installer exited with code {result.returncode}")
        return attempt

    def run_installer(self, tool: ToolHandle, installer_path: Path, silent_args: Sequence[str],
                      prefix: Path) -> Tuple[InstallOutcome, List[InstallAttempt]]:
        """
        Run the installer silently, then interactively if the silent run failed.

        Returns:
            Tuple of the outcome and the attempts made, in order.

        Raises:
            InstallerLaunchError: If the wine binary could not be executed.
        """
        attempts = []
        silent = self._run_attempt(InstallAttempt(
            binary=tool.path,
            installer=Path(installer_path),
            args=list(silent_args),
            env=WineUtils.build_installer_env(prefix),
        ))
        attempts.append(silent)

        if silent.succeeded:
            outcome = InstallOutcome.SUCCEEDED
        else:
            logger.warning("Silent installation failed, trying interactive mode...")
            interactive = self._run_attempt(InstallAttempt(
                binary=tool.path,
                installer=Path(installer_path),
                args=[],
                env=WineUtils.build_installer_env(prefix, interactive=True),
            ))
            attempts.append(interactive)
            if interactive.succeeded:
                outcome = InstallOutcome.SUCCEEDED
            elif self.decisions.confirm(
                "continue_after_installer_error",
                f"Installer exited with code {interactive.returncode}. Would you like to continue anyway?",
                default=False,
            ):
                outcome = InstallOutcome.FAILED_CONTINUED
            else:
                outcome = InstallOutcome.ABORTED

        if outcome is not InstallOutcome.ABORTED:
            WineUtils.kill_wineserver(tool, prefix)
            time.sleep(WINESERVER_SETTLE_SECONDS)
        return outcome, attempts

    @staticmethod
    def discover_install_location(prefix: Path, candidates: Sequence[str]) -> Optional[Path]:
        """Return the first `<prefix>/drive_c/<candidate>` that is a directory."""
        drive_c = Path(prefix) / "drive_c"
        for candidate in candidates:
            path = drive_c / candidate
            if path.is_dir():
                logger.info(f"Found installation at: {path}")
                return path
            logger.debug(f"Not installed at {path}")
        return None

    def relocate(self, source: Path, destination: Path) -> Tuple[bool, bool]:
        """
        Copy the installed files to the destination and offer to remove the originals.

        Returns:
            (relocated, original_removed)

        Raises:
            OSError: If copying fails. Nothing is rolled back.
        """
        if Path(source).resolve() == Path(destination).resolve():
            logger.info(f"Installation is already at {destination}")
            return False, False

        logger.info(f"Copying files from {source} to {destination}...")
        self.filesystem_handler.copy_tree(source, destination)
        logger.info("Files copied successfully")

        original_removed = False
        if self.decisions.confirm(
            "delete_original",
            f"Delete the original installation at {source}?",
            default=False,
        ):
            original_removed = self.filesystem_handler.remove_directory(source)
            if not original_removed:
                logger.warning(f"Could not delete original installation at {source}")
        return True, original_removed

    def install_launcher(self, profile: LauncherProfile, tool: ToolHandle,
                         destination: Optional[Path] = None, prefix: Optional[Path] = None) -> InstallResult:
        """
        Full install workflow for one launcher.

        Args:
            profile: Launcher to install.
            tool: Wine binary from WineUtils.find_system_wine.
            destination: Final location; asked for when omitted.
            prefix: Wine prefix the installer runs in (default ~/.wine).

        Raises:
            FetchError: If the installer download fails.
            InstallerLaunchError: If wine cannot be executed.
            InstallAbortedError: If the user declines to continue after a failed install.
            OSError: On filesystem failures while preparing or copying.
        """
        prefix = Path(prefix) if prefix else Path.home() / ".wine"
        logger.info(f"Installing {profile.display_name} into prefix {prefix}")

        self.filesystem_handler.download_file(FetchTarget(profile.installer_url, profile.installer_path))
        self.filesystem_handler.make_executable(profile.installer_path)

        if destination is None:
            destination = self.decisions.choose_path(
                "install_destination",
                f"Where should {profile.display_name} be installed?",
                profile.default_destination,
            )
        destination = Path(destination).expanduser()
        destination.mkdir(parents=True, exist_ok=True)

        outcome, attempts = self.run_installer(tool, profile.installer_path, profile.silent_args, prefix)
        if outcome is InstallOutcome.ABORTED:
            raise InstallAbortedError(f"{profile.display_name} installation aborted.")

        result = InstallResult(
            launcher=profile.key,
            outcome=outcome,
            destination=destination,
            attempts=attempts,
        )

        discovered = self.discover_install_location(prefix, profile.install_candidates)
        if discovered is None:
            logger.warning(f"Could not find {profile.display_name} installation directory in {prefix / 'drive_c'}")
            return result

        result.discovered_path = discovered
        result.relocated, result.original_removed = self.relocate(discovered, destination)
        logger.info(f"{profile.display_name} installation finished: {outcome.value}")
        return result
