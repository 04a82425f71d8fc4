"""
CLI Menu Components for Launchify Frontend
"""

from .main_menu import MainMenuHandler
from .instructions import print_post_setup_reminder, print_steam_instructions, show_post_setup_intro

__all__ = [
    'MainMenuHandler',
    'print_post_setup_reminder',
    'print_steam_instructions',
    'show_post_setup_intro',
]
