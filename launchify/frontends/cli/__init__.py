"""
Launchify CLI Frontend

Terminal interface for installing game launchers under Wine and running the
Proton prefix post-setup.
"""

from .main import LaunchifyCLI

__all__ = ['LaunchifyCLI']
