"""
Follow-up instructions printed after an install, and the post-setup intro.
"""

from launchify.shared.colors import COLOR_INFO, COLOR_PROMPT, COLOR_RESET, COLOR_SUCCESS, COLOR_WARNING


def print_steam_instructions(display_name, install_dir, executable_name):
    print(f"\n{COLOR_INFO}=== How to Add {display_name} to Steam ==={COLOR_RESET}")
    print(f"{COLOR_SUCCESS}1. Open Steam and click on 'Add a Game' in the bottom-left corner{COLOR_RESET}")
    print(f"{COLOR_SUCCESS}2. Select 'Add a Non-Steam Game...'{COLOR_RESET}")
    print(f"{COLOR_SUCCESS}3. Click 'BROWSE' and navigate to your {display_name} installation folder:{COLOR_RESET}")
    print(f"   {COLOR_WARNING}{install_dir}{COLOR_RESET}")
    print(f"{COLOR_SUCCESS}4. Select the '{executable_name}' file and click 'Open'{COLOR_RESET}")
    print(f"{COLOR_SUCCESS}5. Click 'Add Selected Program'{COLOR_RESET}")
    print(f"{COLOR_SUCCESS}6. {display_name} is now ready to use in Steam!{COLOR_RESET}\n")


def print_post_setup_reminder(display_name):
    print(f"{COLOR_WARNING}IMPORTANT: Launch {display_name} once from Steam before running{COLOR_RESET}")
    print(f"{COLOR_WARNING}the 'Run HoYoPlay Post-Setup' option, so its Proton prefix exists.{COLOR_RESET}\n")


def show_post_setup_intro(input_func=input) -> bool:
    """Explain the prerequisites and ask whether to continue."""
    print(f"\n{COLOR_INFO}===== HoYoPlay Post-Setup ====={COLOR_RESET}")
    print(f"{COLOR_WARNING}Before running this tool, make sure you have:{COLOR_RESET}")
    print(f"{COLOR_WARNING}1. Added HoYoPlay to Steam using the instructions provided after installation{COLOR_RESET}")
    print(f"{COLOR_WARNING}2. Launched HoYoPlay from Steam at least once{COLOR_RESET}")
    print(f"{COLOR_WARNING}3. Created a non-Steam shortcut in Steam for the game you want to play{COLOR_RESET}")
    print(f"{COLOR_WARNING}This tool will remove window decorations to give a cleaner gaming experience.{COLOR_RESET}\n")
    answer = input_func(f"{COLOR_PROMPT}Continue with post-setup? (yes/no): {COLOR_RESET}").strip().lower()
    return answer in ("yes", "y")
