"""
Launchify - install Windows game launchers under Wine and tune their Proton prefixes.
"""

__version__ = "0.1.0"
