"""
FileSystemHandler module for managing file system operations.
This module handles downloads, recursive copies and cleanup of launcher files.
"""

import os
import shutil
import logging
import subprocess
from pathlib import Path

import requests

from launchify.backend.errors import FetchError
from launchify.backend.models.launcher import FetchTarget
from .subprocess_utils import get_clean_subprocess_env

# Initialize logger for the module
logger = logging.getLogger(__name__)

DOWNLOAD_TIMEOUT = 300


class FileSystemHandler:
    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def download_file(self, target: FetchTarget) -> bool:
        """
        Download target.url to target.destination.

        curl is preferred, then wget, then an in-process HTTP GET. Once a
        strategy has started its result is final; a failing curl is not
        retried with wget.

        Returns:
            bool: True if a transfer happened, False if the destination
            already existed and was left untouched.

        Raises:
            FetchError: If the chosen strategy fails.
        """
        destination = target.destination
        if destination.exists():
            self.logger.info(f"Installer already exists at {destination}, skipping download")
            return False

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self.logger.error(f"Could not create {destination.parent}: {e}")
            raise FetchError(f"Could not create download directory {destination.parent}: {e}")

        self.logger.info(f"Downloading {target.url} to {destination}...")
        curl = shutil.which("curl")
        wget = shutil.which("wget")
        if curl:
            self._download_with_tool([curl, "-L", "-o", str(destination), target.url], "curl", destination)
        elif wget:
            self._download_with_tool([wget, "-O", str(destination), target.url], "wget", destination)
        else:
            self._download_with_requests(target)
        self.logger.info("Download complete.")
        return True

    def _discard_partial(self, destination: Path) -> None:
        """Remove whatever a failed transfer left behind so the next run downloads again."""
        try:
            if destination.exists():
                destination.unlink()
                self.logger.debug(f"Removed partial download {destination}")
        except OSError as e:
            self.logger.warning(f"Could not remove partial download {destination}: {e}")

    def _download_with_tool(self, cmd, name: str, destination: Path) -> None:
        self.logger.debug(f"Running command: {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, env=get_clean_subprocess_env())
        except OSError as e:
            self.logger.error(f"Failed to run {name}: {e}")
            raise FetchError(f"Failed to run {name}: {e}")
        if result.returncode != 0:
            self.logger.error(f"{name} exited with code {result.returncode}")
            self._discard_partial(destination)
            raise FetchError(f"Download failed: {name} exited with code {result.returncode}")

    def _download_with_requests(self, target: FetchTarget) -> None:
        self.logger.debug("Neither curl nor wget found, downloading in-process")
        try:
            response = requests.get(target.url, timeout=DOWNLOAD_TIMEOUT, verify=True)
            response.raise_for_status()
            content = response.content
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Download failed: {e}")
            raise FetchError(f"Download failed for {target.url}: {e}")
        try:
            with open(target.destination, 'wb') as f:
                f.write(content)
        except OSError as e:
            self.logger.error(f"Error writing {target.destination}: {e}")
            self._discard_partial(target.destination)
            raise FetchError(f"Could not write {target.destination}: {e}")

    @staticmethod
    def make_executable(path: Path) -> bool:
        """Set mode 0755 on a downloaded installer."""
        try:
            os.chmod(path, 0o755)
            logger.debug(f"Set permissions 0755 on {path}")
            return True
        except OSError as e:
            logger.warning(f"Failed to make {path} executable: {e}")
            return False

    @staticmethod
    def copy_tree(src: Path, dst: Path) -> None:
        """
        Recursively copy src into dst, creating dst if needed.

        Files are copied with their permission bits; symlinks are followed.
        The first OSError propagates and already-copied files stay in place.
        """
        src = Path(src)
        dst = Path(dst)
        dst.mkdir(parents=True, exist_ok=True)
        for entry in src.iterdir():
            target = dst / entry.name
            if entry.is_dir():
                FileSystemHandler.copy_tree(entry, target)
            else:
                shutil.copy(entry, target)

    def remove_directory(self, path: Path) -> bool:
        """
        Delete a directory tree.

        Returns:
            bool: True if the directory was deleted, False if it was missing
            or could not be removed.
        """
        try:
            if os.path.exists(path):
                shutil.rmtree(path)
                self.logger.info(f"Removed {path}")
                return True
            return False
        except OSError as e:
            self.logger.error(f"Error deleting directory {path}: {e}")
            return False
