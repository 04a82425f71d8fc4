"""
Main Menu Handler for Launchify CLI Frontend
"""

import time

from launchify.shared.colors import (
    COLOR_SELECTION, COLOR_RESET, COLOR_ACTION, COLOR_PROMPT, COLOR_ERROR, COLOR_INFO
)


class MainMenuHandler:
    """
    Handles the main interactive menu display and user input routing
    """

    CHOICES = {
        "1": "battlenet",
        "2": "hoyoplay",
        "3": "post_setup",
        "4": "exit",
    }

    def show_main_menu(self, input_func=input) -> str:
        """
        Show the main menu and return user selection

        Returns:
            str: Menu choice ("battlenet", "hoyoplay", "post_setup", "exit")
        """
        while True:
            print(f"\n{COLOR_INFO}===== Game Launcher Installer ====={COLOR_RESET}")
            print(f"{COLOR_SELECTION}1.{COLOR_RESET} Install Battle.net")
            print(f"{COLOR_SELECTION}2.{COLOR_RESET} Install HoYoPlay")
            print(f"{COLOR_SELECTION}3.{COLOR_RESET} Run HoYoPlay Post-Setup")
            print(f"   {COLOR_ACTION}→ Links the Linux filesystem into the prefix and removes window decorations{COLOR_RESET}")
            print(f"{COLOR_SELECTION}4.{COLOR_RESET} Exit")
            choice = input_func(f"\n{COLOR_PROMPT}Enter your selection (1-4): {COLOR_RESET}").strip()

            if choice in self.CHOICES:
                return self.CHOICES[choice]
            print(f"{COLOR_ERROR}Invalid choice. Please enter a number between 1 and 4.{COLOR_RESET}")
            time.sleep(1)
