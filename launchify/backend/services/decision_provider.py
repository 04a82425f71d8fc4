#!/usr/bin/env python3
"""
Decision Providers

The backend never prompts on its own. Every question it needs answered
(continue after a failed installer, delete the original files, where to
install, which shortcut to adjust) goes through a DecisionProvider, keyed by
a stable string so non-interactive callers can pre-seed answers.
"""
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

logger = logging.getLogger(__name__)


class DecisionProvider:
    """Interface for answering the questions raised by the backend."""

    def confirm(self, key: str, message: str, default: bool = False) -> bool:
        raise NotImplementedError

    def choose_path(self, key: str, message: str, default: Path) -> Path:
        raise NotImplementedError

    def choose_entry(self, key: str, message: str, options: Sequence[str]) -> Optional[int]:
        """Return the 0-based index of the chosen option, or None."""
        raise NotImplementedError


class AutoDecisionProvider(DecisionProvider):
    """
    Non-interactive provider.

    Args:
        assume_yes: Answer for confirmations that have no explicit entry.
        answers: Per-key answers; these always win.
    """

    def __init__(self, assume_yes: bool = False, answers: Optional[Dict[str, Any]] = None):
        self.assume_yes = assume_yes
        self.answers = dict(answers or {})

    def confirm(self, key: str, message: str, default: bool = False) -> bool:
        if key in self.answers:
            answer = bool(self.answers[key])
        else:
            answer = self.assume_yes
        logger.info(f"{message} -> {'yes' if answer else 'no'} (auto)")
        return answer

    def choose_path(self, key: str, message: str, default: Path) -> Path:
        answer = self.answers.get(key)
        path = Path(answer).expanduser() if answer else Path(default)
        logger.info(f"{message} -> {path} (auto)")
        return path

    def choose_entry(self, key: str, message: str, options: Sequence[str]) -> Optional[int]:
        if key in self.answers:
            return self.answers[key]
        if len(options) == 1:
            logger.info(f"{message} -> {options[0]} (only option)")
            return 0
        logger.info(f"{message} -> no choice made, {len(options)} options available")
        return None
