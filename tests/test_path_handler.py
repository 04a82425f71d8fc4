"""Tests for :mod:`launchify.backend.handlers.path_handler`."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from launchify.backend.errors import LibraryNotFoundError
from launchify.backend.handlers.path_handler import PathHandler

LIBRARYFOLDERS = r'''"libraryfolders"
{
	"0"
	{
		"path"		"/home/deck/.local/share/Steam"
		"label"		""
		"apps"
		{
			"228980"		"201832182"
		}
	}
	"1"
	{
		"path"		"/run/media/mmcblk0p1"
	}
}
'''


def _write_vdf(root: Path, text: str) -> Path:
    vdf = root / "steamapps" / "libraryfolders.vdf"
    vdf.parent.mkdir(parents=True, exist_ok=True)
    vdf.write_text(text, encoding="utf-8")
    return vdf


def test_parse_keeps_order() -> None:
    assert PathHandler.parse_library_paths(LIBRARYFOLDERS) == [
        Path("/home/deck/.local/share/Steam"),
        Path("/run/media/mmcblk0p1"),
    ]


def test_parse_normalises_backslashes() -> None:
    text = '"path" "D:\\\\SteamLibrary"\n"path" "E:\\Games"\n'

    assert PathHandler.parse_library_paths(text) == [Path("D:/SteamLibrary"), Path("E:/Games")]


def test_parse_skips_malformed_lines() -> None:
    text = '"path" "/unterminated\n"label" "x"\n"path"  "/ok"\n'

    assert PathHandler.parse_library_paths(text) == [Path("/ok")]


def test_parse_keeps_duplicates() -> None:
    text = '"path" "/lib"\n"path" "/lib"\n'

    assert PathHandler.parse_library_paths(text) == [Path("/lib"), Path("/lib")]


def test_find_steam_libraries_reads_explicit_root(tmp_path) -> None:
    _write_vdf(tmp_path, LIBRARYFOLDERS)

    assert PathHandler.find_steam_libraries(tmp_path) == [
        tmp_path,
        Path("/home/deck/.local/share/Steam"),
        Path("/run/media/mmcblk0p1"),
    ]


def test_find_steam_libraries_uses_config_root(tmp_path, isolated_home) -> None:
    steam = tmp_path / "steam"
    _write_vdf(steam, '"path" "/from/config"\n')
    config_dir = isolated_home / ".config" / "launchify"
    config_dir.mkdir(parents=True)
    (config_dir / "config.json").write_text(json.dumps({"steam_root": str(steam)}))

    assert PathHandler.find_steam_libraries() == [steam, Path("/from/config")]


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(LibraryNotFoundError):
        PathHandler.find_steam_libraries(tmp_path)


def test_blank_file_raises(tmp_path) -> None:
    _write_vdf(tmp_path, "  \n\t\n")

    with pytest.raises(LibraryNotFoundError):
        PathHandler.find_steam_libraries(tmp_path)


def test_find_prefix_path_first_match_wins(tmp_path) -> None:
    first = tmp_path / "lib1"
    second = tmp_path / "lib2"
    for lib in (first, second):
        (lib / "steamapps" / "compatdata" / "3141" / "pfx").mkdir(parents=True)

    found = PathHandler.find_prefix_path("3141", [tmp_path / "empty", first, second])

    assert found == first / "steamapps" / "compatdata" / "3141" / "pfx"


def test_find_prefix_path_missing(tmp_path) -> None:
    assert PathHandler.find_prefix_path("42", [tmp_path]) is None


def test_unrelated_keys_and_two_paths_yield_primary_then_paths(tmp_path) -> None:
    text = '"libraryfolders"\n{\n\t"contentstatsid"\t"123"\n\t"path"\t"/X1"\n\t"label"\t"ssd"\n\t"path"\t"/X2"\n}\n'
    _write_vdf(tmp_path, text)

    assert PathHandler.find_steam_libraries(tmp_path) == [tmp_path, Path("/X1"), Path("/X2")]


def test_primary_root_prefix_found_without_listing(tmp_path) -> None:
    _write_vdf(tmp_path, '"path" "/elsewhere"\n')
    prefix = tmp_path / "steamapps" / "compatdata" / "777" / "pfx"
    prefix.mkdir(parents=True)

    libraries = PathHandler.find_steam_libraries(tmp_path)

    assert PathHandler.find_prefix_path("777", libraries) == prefix
