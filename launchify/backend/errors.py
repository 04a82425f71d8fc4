"""
Launchify error types.

Every fatal condition raised by the backend is a LaunchifyError carrying a
human-readable message. Filesystem failures stay plain OSError.
"""


class LaunchifyError(Exception):
    """Base class for failures reported to the user as a single message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ToolNotFoundError(LaunchifyError):
    """A required external binary (wine, protontricks) is not installed."""


class FetchError(LaunchifyError):
    """A download strategy started and failed."""


class InstallerLaunchError(LaunchifyError):
    """The wine binary could not be executed at all."""


class InstallAbortedError(LaunchifyError):
    """The user declined to continue after the installer failed."""


class LibraryNotFoundError(LaunchifyError):
    """libraryfolders.vdf is missing, unreadable or empty."""


class ParseMismatchError(LaunchifyError):
    """A decisive value (e.g. the selected shortcut's AppID) could not be parsed."""


class PrefixNotFoundError(LaunchifyError):
    """No Steam library holds a compatdata prefix for the AppID."""


class ToolError(LaunchifyError):
    """protontricks or a wine registry edit exited non-zero."""
