"""Tests for :mod:`launchify.frontends.cli`."""

from __future__ import annotations

import logging

import pytest

from launchify.backend.errors import FetchError, ToolNotFoundError
from launchify.backend.handlers.wine_utils import WineUtils
from launchify.backend.models import InstallOutcome, InstallResult, ToolHandle
from launchify.backend.services.launcher_install_service import LauncherInstallService
from launchify.frontends.cli.__main__ import main
from launchify.frontends.cli.main import LaunchifyCLI

TOOL = ToolHandle("/usr/bin/wine", "wine-9.0")


@pytest.fixture(autouse=True)
def _detach_cli_logger():
    yield
    logger = logging.getLogger("launchify")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True


@pytest.fixture
def wine_found(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(WineUtils, "find_system_wine", staticmethod(lambda extra_paths=None: TOOL))


def test_version_flag(capsys) -> None:
    assert main(["-V"]) == 0
    assert "Launchify version" in capsys.readouterr().out


def test_missing_wine_exits_1(monkeypatch, capsys) -> None:
    def _missing(extra_paths=None):
        raise ToolNotFoundError("Wine is not installed or not found in PATH.")

    monkeypatch.setattr(WineUtils, "find_system_wine", staticmethod(_missing))

    assert main(["install", "battlenet", "-y"]) == 1
    assert "Error: Wine is not installed" in capsys.readouterr().out


def test_install_prints_steam_steps(tmp_path, wine_found, monkeypatch, capsys) -> None:
    seen = {}

    def fake_install(self, profile, tool, destination=None, prefix=None):
        seen.update(profile=profile, destination=destination, prefix=prefix)
        return InstallResult(profile.key, InstallOutcome.SUCCEEDED, tmp_path / "dest", discovered_path=tmp_path, relocated=True)

    monkeypatch.setattr(LauncherInstallService, "install_launcher", fake_install)

    code = main(["install", "hoyoplay", "--dest", str(tmp_path / "dest"), "--prefix", str(tmp_path / "pfx"), "-y"])

    out = capsys.readouterr().out
    assert code == 0
    assert seen["profile"].key == "hoyoplay"
    assert str(seen["prefix"]) == str(tmp_path / "pfx")
    assert "How to Add HoYoPlay to Steam" in out
    assert "HoYoPlay.exe" in out
    assert "IMPORTANT" in out


def test_install_failure_exits_1(wine_found, monkeypatch, capsys) -> None:
    def failing(self, *args, **kwargs):
        raise FetchError("Download failed: curl exited with code 22")

    monkeypatch.setattr(LauncherInstallService, "install_launcher", failing)

    assert main(["install", "battlenet", "-y"]) == 1
    assert "Error: Download failed" in capsys.readouterr().out


def test_interactive_menu_exit(wine_found, capsys, no_sleep) -> None:
    answers = iter(["9", "4"])
    cli = LaunchifyCLI(input_func=lambda prompt="": next(answers))

    assert cli.run([]) == 0
    assert "Invalid choice" in capsys.readouterr().out


def test_interactive_post_setup_can_be_cancelled(wine_found, capsys, monkeypatch) -> None:
    monkeypatch.setattr("time.sleep", lambda s: None)
    answers = iter(["3", "no"])
    cli = LaunchifyCLI(input_func=lambda prompt="": next(answers))

    assert cli.run([]) == 0
    assert "Post-setup cancelled." in capsys.readouterr().out


def test_log_file_is_created(wine_found, isolated_home) -> None:
    cli = LaunchifyCLI(input_func=lambda prompt="": "4")

    assert cli.run(["-v"]) == 0
    assert (isolated_home / ".local" / "share" / "launchify" / "logs" / "launchify-cli.log").exists()


def test_interactive_install_failure_exits_1(wine_found, monkeypatch, capsys) -> None:
    def failing(self, *args, **kwargs):
        raise FetchError("Download failed: curl exited with code 22")

    monkeypatch.setattr(LauncherInstallService, "install_launcher", failing)
    answers = iter(["1"])
    cli = LaunchifyCLI(input_func=lambda prompt="": next(answers))

    assert cli.run([]) == 1
    assert "Error: Download failed" in capsys.readouterr().out


def test_interactive_install_success_exits_after_one_action(tmp_path, wine_found, monkeypatch, capsys) -> None:
    calls = []

    def fake_install(self, profile, tool, destination=None, prefix=None):
        calls.append(profile.key)
        return InstallResult(profile.key, InstallOutcome.SUCCEEDED, tmp_path / "dest", discovered_path=tmp_path)

    monkeypatch.setattr(LauncherInstallService, "install_launcher", fake_install)
    answers = iter(["2"])
    cli = LaunchifyCLI(input_func=lambda prompt="": next(answers))

    assert cli.run([]) == 0
    assert calls == ["hoyoplay"]
    assert "Operation completed successfully." in capsys.readouterr().out
