"""Tests for the decision providers and the launcher catalogue."""

from __future__ import annotations

from pathlib import Path

import pytest

from launchify.backend.data.launchers import LAUNCHER_KEYS, get_launcher_profile
from launchify.backend.services.decision_provider import AutoDecisionProvider
from launchify.frontends.cli.prompts import TerminalDecisionProvider


def _scripted(*answers: str):
    queue = list(answers)
    return lambda prompt="": queue.pop(0)


def test_auto_provider_answers_win_over_assume_yes() -> None:
    decisions = AutoDecisionProvider(assume_yes=True, answers={"delete_original": False})

    assert decisions.confirm("delete_original", "Delete?") is False
    assert decisions.confirm("continue_after_installer_error", "Continue?") is True


def test_auto_provider_paths_and_entries(tmp_path) -> None:
    decisions = AutoDecisionProvider()

    assert decisions.choose_path("install_destination", "Where?", tmp_path) == tmp_path
    assert decisions.choose_entry("shortcut", "Pick", ["only"]) == 0
    assert decisions.choose_entry("shortcut", "Pick", ["a", "b"]) is None


def test_terminal_confirm() -> None:
    decisions = TerminalDecisionProvider(input_func=_scripted("y", "YES", "nope", ""))

    assert decisions.confirm("k", "?") is True
    assert decisions.confirm("k", "?") is True
    assert decisions.confirm("k", "?") is False
    assert decisions.confirm("k", "?", default=True) is True


def test_terminal_choose_path_default(tmp_path) -> None:
    decisions = TerminalDecisionProvider(input_func=_scripted("", str(tmp_path / "x")))

    assert decisions.choose_path("install_destination", "Where?", Path("/default")) == Path("/default")
    assert decisions.choose_path("install_destination", "Where?", Path("/default")) == tmp_path / "x"


def test_terminal_choose_entry_is_one_based(capsys) -> None:
    decisions = TerminalDecisionProvider(input_func=_scripted("2", "abc"))

    assert decisions.choose_entry("shortcut", "Pick", ["a", "b"]) == 1
    assert decisions.choose_entry("shortcut", "Pick", ["a", "b"]) is None
    assert " 1) a" in capsys.readouterr().out


def test_launcher_profiles(tmp_path) -> None:
    profiles = {key: get_launcher_profile(key, home=tmp_path) for key in LAUNCHER_KEYS}

    assert set(profiles) == set(LAUNCHER_KEYS)
    battlenet = profiles["battlenet"]
    assert battlenet.installer_path == tmp_path / ".battlenet" / "Battle.net-Setup.exe"
    assert battlenet.default_destination == tmp_path / "Games" / "Battle.net"
    assert battlenet.silent_args[0] == "--lang=enUS"
    assert profiles["hoyoplay"].silent_args == ()
    assert profiles["hoyoplay"].needs_post_setup


def test_unknown_launcher() -> None:
    with pytest.raises(KeyError):
        get_launcher_profile("epic")
