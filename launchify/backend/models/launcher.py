"""
Launcher Data Models

Plain records passed between the tool resolver, the install driver and the
prefix post-setup flow.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class ToolHandle:
    """A discovered wine binary."""
    path: str
    version: Optional[str] = None


@dataclass(frozen=True)
class FetchTarget:
    """A remote resource and where it should land on disk."""
    url: str
    destination: Path

    def __post_init__(self):
        if isinstance(self.destination, str):
            object.__setattr__(self, 'destination', Path(self.destination))


@dataclass
class InstallAttempt:
    """One invocation of an installer under wine.

    ``env`` only holds the overlay; the process gets the cleaned host
    environment with the overlay applied on top.
    """
    binary: str
    installer: Path
    args: List[str]
    env: Dict[str, str]
    returncode: Optional[int] = None

    @property
    def command(self) -> List[str]:
        return [self.binary, str(self.installer), *self.args]

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


class InstallOutcome(Enum):
    """Final verdict of the install driver."""
    SUCCEEDED = "succeeded"
    FAILED_CONTINUED = "failed_continued"
    ABORTED = "aborted"


@dataclass(frozen=True)
class LauncherProfile:
    """Static description of an installable launcher."""
    key: str
    display_name: str
    installer_url: str
    installer_path: Path
    default_destination: Path
    silent_args: Tuple[str, ...] = ()
    # Relative to <prefix>/drive_c, in probe order
    install_candidates: Tuple[str, ...] = ()
    executable_name: str = ""
    needs_post_setup: bool = False


@dataclass
class InstallResult:
    """What an install run produced."""
    launcher: str
    outcome: InstallOutcome
    destination: Path
    discovered_path: Optional[Path] = None
    relocated: bool = False
    original_removed: bool = False
    attempts: List[InstallAttempt] = field(default_factory=list)

    @property
    def discovery_failed(self) -> bool:
        return self.discovered_path is None and self.outcome is not InstallOutcome.ABORTED


@dataclass(frozen=True)
class SandboxEntry:
    """A protontricks listing line for a non-Steam shortcut."""
    raw: str
    app_id: Optional[str] = None

    @property
    def name(self) -> str:
        """Shortcut name without the marker prefix and trailing AppID."""
        text = self.raw.strip()
        if ':' in text:
            text = text.split(':', 1)[1].strip()
        if self.app_id and text.endswith(f"({self.app_id})"):
            text = text[:-len(self.app_id) - 2].rstrip()
        return text


@dataclass
class PostSetupResult:
    app_id: str
    prefix: Path
    linked: bool
