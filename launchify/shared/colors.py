"""
ANSI color codes for the terminal frontend.
Presentation only - backend modules must not import this.
"""

COLOR_RESET = "\033[0m"
COLOR_INFO = "\033[0;34m"
COLOR_SUCCESS = "\033[0;32m"
COLOR_WARNING = "\033[0;33m"
COLOR_ERROR = "\033[0;31m"
COLOR_PROMPT = "\033[0;36m"
COLOR_SELECTION = "\033[1;34m"
COLOR_ACTION = "\033[0;32m"
