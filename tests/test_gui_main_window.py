"""Test module for the launcher window and its helpers."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

pytest.importorskip("PyQt6")
pytest.importorskip("pytestqt")

from PyQt6.QtCore import Qt

from deskscan.core.entry import Entry, EntryKind
from deskscan.ui import main_window as mw


def _entries() -> list[Entry]:
    return [
        Entry(kind=EntryKind.APPLICATION, name="Vim", comment="Edit text files", exec="vim", terminal=True),
        Entry(kind=EntryKind.APPLICATION, name="firefox", generic_name="Web Browser", exec="firefox"),
        Entry(kind=EntryKind.LINK, name="Docs", url="https://docs.example"),
    ]


def test_flatten_entries_dedups_and_sorts() -> None:
    vim, firefox, docs = _entries()
    shadowed = Entry(kind=EntryKind.APPLICATION, name="Vim", exec="vim", comment="system copy")

    flat = mw.flatten_entries([[vim, docs], [], [shadowed, firefox, Entry()]])

    assert flat == [docs, firefox, vim]
    assert flat[2].comment == "Edit text files"


def test_filter_entries() -> None:
    vim, firefox, docs = _entries()
    entries = [vim, firefox, docs]

    assert mw.filter_entries(entries, "browser") == [firefox]
    assert mw.filter_entries(entries, "TEXT") == [vim]
    assert mw.filter_entries(entries, kind="Links") == [docs]
    assert mw.filter_entries(entries, show_terminal=False) == [firefox, docs]
    assert mw.filter_entries(entries, "  ") == entries


def test_main_window_lists_scanned_entries(
    qtbot, tmp_path: Path, write_entry, isolated_config, monkeypatch
) -> None:
    apps = tmp_path / "applications"
    write_entry(apps, "b.desktop", "[Desktop Entry]\nType=Application\nName=Beta\nExec=beta\n")
    write_entry(apps, "a.desktop", "[Desktop Entry]\nType=Application\nName=Alpha\nExec=alpha\n")
    write_entry(apps, "h.desktop", "[Desktop Entry]\nName=Hidden\nNoDisplay=true\n")
    monkeypatch.setattr(mw, "data_dirs", lambda: [str(apps)])

    window = mw.MainWindow(SimpleNamespace(config=isolated_config))
    qtbot.addWidget(window)
    qtbot.waitUntil(lambda: window.list.count() == 2, timeout=5000)

    names = [window.list.item(i).text() for i in range(window.list.count())]
    assert names == ["Alpha", "Beta"]
    entry = window.list.item(0).data(Qt.ItemDataRole.UserRole)
    assert entry.exec == "alpha"


def test_activating_item_launches_entry(
    qtbot, tmp_path: Path, write_entry, isolated_config, monkeypatch
) -> None:
    apps = tmp_path / "applications"
    write_entry(apps, "a.desktop", "[Desktop Entry]\nType=Application\nName=Alpha\nExec=alpha %U\n")
    monkeypatch.setattr(mw, "data_dirs", lambda: [str(apps)])
    launched: list[Entry] = []
    monkeypatch.setattr(mw, "launch", lambda entry, terminal="": launched.append(entry))

    window = mw.MainWindow(SimpleNamespace(config=isolated_config))
    qtbot.addWidget(window)
    qtbot.waitUntil(lambda: window.list.count() == 1, timeout=5000)

    window.search.submitted.emit()

    assert [e.name for e in launched] == ["Alpha"]
    assert window.statusBar().currentMessage() == "Launched Alpha"
