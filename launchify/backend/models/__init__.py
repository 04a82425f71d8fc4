from .launcher import (
    FetchTarget,
    InstallAttempt,
    InstallOutcome,
    InstallResult,
    LauncherProfile,
    PostSetupResult,
    SandboxEntry,
    ToolHandle,
)

__all__ = [
    'FetchTarget',
    'InstallAttempt',
    'InstallOutcome',
    'InstallResult',
    'LauncherProfile',
    'PostSetupResult',
    'SandboxEntry',
    'ToolHandle',
]
