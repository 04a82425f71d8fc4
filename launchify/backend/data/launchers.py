"""
Supported Launchers

Download locations, silent-install flags and the drive_c locations each
installer is known to write to. Candidates are probed in order after the
installer exits, so the most common location goes first.
"""

from pathlib import Path
from typing import Optional

from ..models.launcher import LauncherProfile

BATTLENET_INSTALLER_URL = "https://downloader.battle.net/download/getInstaller?os=win&installer=Battle.net-Setup.exe"
HOYOPLAY_INSTALLER_URL = (
    "https://download-porter.hoyoverse.com/download-porter/2025/02/21/"
    "VYTpXlbWo8_1.4.5.222_1_0_hyp_hoyoverse_prod_202502081529_XFGRLkBk.exe"
    "?trace_key=HoYoPlay_install_ua_5ca9c7368584"
)


def _battlenet(home: Path, install_base: Path) -> LauncherProfile:
    return LauncherProfile(
        key="battlenet",
        display_name="Battle.net",
        installer_url=BATTLENET_INSTALLER_URL,
        installer_path=home / ".battlenet" / "Battle.net-Setup.exe",
        default_destination=install_base / "Battle.net",
        silent_args=(
            "--lang=enUS",
            '--installpath="C:\\Program Files (x86)\\Battle.net"',
        ),
        install_candidates=(
            "Program Files/Battle.net",
            "Program Files (x86)/Battle.net",
            "Games/Battle.net",
            "Blizzard/Battle.net",
        ),
        executable_name="Battle.net.exe",
    )


def _hoyoplay(home: Path, install_base: Path) -> LauncherProfile:
    # The HoYoPlay installer has no silent switch; the fake DISPLAY keeps it headless.
    return LauncherProfile(
        key="hoyoplay",
        display_name="HoYoPlay",
        installer_url=HOYOPLAY_INSTALLER_URL,
        installer_path=home / ".hoyoplay" / "HoYoPlay-Setup.exe",
        default_destination=install_base / "HoYoPlay",
        silent_args=(),
        install_candidates=("Program Files/HoYoPlay",),
        executable_name="HoYoPlay.exe",
        needs_post_setup=True,
    )


_FACTORIES = {
    "battlenet": _battlenet,
    "hoyoplay": _hoyoplay,
}

LAUNCHER_KEYS = tuple(_FACTORIES)


def get_launcher_profile(key: str, home: Optional[Path] = None, install_base: Optional[Path] = None) -> LauncherProfile:
    """Build the profile for ``key``.

    Args:
        key: One of LAUNCHER_KEYS.
        home: Home directory used for installer download paths (default: ~).
        install_base: Parent of the default destination (default: ~/Games).

    Raises:
        KeyError: If ``key`` is not a supported launcher.
    """
    home = home or Path.home()
    install_base = install_base or home / "Games"
    return _FACTORIES[key](home, install_base)
