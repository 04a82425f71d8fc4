"""Shared pytest fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from subprocess import CompletedProcess

import pytest

from launchify.backend.handlers.config_handler import ConfigHandler


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME and the XDG dirs into tmp_path and reset the config singleton."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(home / ".local" / "share"))
    ConfigHandler.reset()
    yield home
    ConfigHandler.reset()


@dataclass
class FakeRunner:
    """Stand-in for ``subprocess.run`` that records calls and replays results.

    ``results`` is consumed in order; each item is either a return code, a
    ``CompletedProcess`` or an exception instance to raise.
    """

    results: list[object] = field(default_factory=list)
    calls: list[dict[str, object]] = field(default_factory=list)

    def __call__(self, cmd, **kwargs):
        self.calls.append({"cmd": list(cmd), **kwargs})
        result = self.results.pop(0) if self.results else 0
        if isinstance(result, BaseException):
            raise result
        if isinstance(result, CompletedProcess):
            return result
        empty = "" if kwargs.get("text") else b""
        return CompletedProcess(cmd, result, stdout=empty, stderr=empty)

    @property
    def commands(self) -> list[list[str]]:
        return [call["cmd"] for call in self.calls]


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> FakeRunner:
    runner = FakeRunner()
    monkeypatch.setattr("subprocess.run", runner)
    return runner


@pytest.fixture
def which_map(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Control ``shutil.which``: only names present in the returned dict resolve."""
    found: dict[str, str] = {}
    monkeypatch.setattr("shutil.which", lambda name, *a, **kw: found.get(name))
    return found


@pytest.fixture
def no_sleep(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    slept: list[float] = []
    monkeypatch.setattr("time.sleep", slept.append)
    return slept
