"""
Terminal implementation of the backend's DecisionProvider.
"""

from pathlib import Path
from typing import Optional, Sequence

from launchify.backend.services.decision_provider import DecisionProvider
from launchify.shared.colors import COLOR_PROMPT, COLOR_RESET, COLOR_WARNING


class TerminalDecisionProvider(DecisionProvider):
    """
    Asks the user on stdin.

    Args:
        input_func: Replaces ``input`` (tests feed scripted answers through it).
        answers: Pre-answered keys that skip the prompt, e.g. from ``-y``.
    """

    def __init__(self, input_func=input, answers=None):
        self.input_func = input_func
        self.answers = dict(answers or {})

    def confirm(self, key: str, message: str, default: bool = False) -> bool:
        if key in self.answers:
            return bool(self.answers[key])
        response = self.input_func(f"{COLOR_PROMPT}{message} (yes/no): {COLOR_RESET}").strip().lower()
        if not response:
            return default
        return response in ("yes", "y")

    def choose_path(self, key: str, message: str, default: Path) -> Path:
        if key in self.answers:
            return Path(self.answers[key]).expanduser()
        response = self.input_func(f"{COLOR_PROMPT}{message} (Default: {default}): {COLOR_RESET}").strip()
        return Path(response).expanduser() if response else Path(default)

    def choose_entry(self, key: str, message: str, options: Sequence[str]) -> Optional[int]:
        if key in self.answers:
            return self.answers[key]
        print(f"{COLOR_WARNING}{message}:{COLOR_RESET}")
        for i, option in enumerate(options, 1):
            print(f"{i:2}) {option}")
        response = self.input_func(f"{COLOR_PROMPT}Enter number: {COLOR_RESET}").strip()
        try:
            return int(response) - 1
        except ValueError:
            return None
