"""Test module for XDG directory resolution."""

from __future__ import annotations

from deskscan.core.dirs import FALLBACK_DIRS, data_dirs


def test_data_home_and_data_dirs_in_order() -> None:
    env = {
        "HOME": "/home/u",
        "XDG_DATA_HOME": "/data/home",
        "XDG_DATA_DIRS": "/opt/share: /usr/share ::",
    }
    assert data_dirs(env) == [
        "/data/home/applications",
        "/opt/share/applications",
        "/usr/share/applications",
    ]


def test_data_home_defaults_to_local_share() -> None:
    dirs = data_dirs({"HOME": "/home/u", "XDG_DATA_DIRS": "/usr/share"})
    assert dirs[0] == "/home/u/.local/share/applications"


def test_blank_home_falls_back_to_tilde() -> None:
    dirs = data_dirs({"HOME": "  "})
    assert dirs[0] == "~/.local/share/applications"


def test_fallback_system_dirs_when_data_dirs_empty() -> None:
    assert data_dirs({"HOME": "/home/u", "XDG_DATA_DIRS": " : "}) == [
        "/home/u/.local/share/applications",
        *FALLBACK_DIRS,
    ]
    assert FALLBACK_DIRS == ["/usr/local/share/applications", "/usr/share/applications"]


def test_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", "/env/home")
    monkeypatch.setenv("XDG_DATA_DIRS", "/env/share")
    assert data_dirs() == ["/env/home/applications", "/env/share/applications"]
