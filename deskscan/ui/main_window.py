"""Launcher window: searchable list of scanned desktop entries."""

from __future__ import annotations

from PyQt6.QtCore import Qt, QPoint, QSize
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QListWidget, QListWidgetItem,
    QLabel, QMenu, QStatusBar, QMessageBox,
)

from deskscan.app import DeskscanApp
from deskscan.core.dirs import data_dirs
from deskscan.core.entry import Entry, EntryKind
from deskscan.core.errors import DeskscanError
from deskscan.core.icon_resolver import resolve_icon
from deskscan.core.launcher import launch, launch_action
from deskscan.core.logger import get_logger
from deskscan.core.worker import ScanWorker
from deskscan.ui.widgets.search_bar import SearchBar

_log = get_logger("main_window")

_KIND_FILTERS = {
    "Applications": EntryKind.APPLICATION,
    "Links": EntryKind.LINK,
    "Directories": EntryKind.DIRECTORY,
}


def flatten_entries(result: list[list[Entry]]) -> list[Entry]:
    """Merge per-directory scan results, keeping the first of duplicate entries."""
    seen: set[tuple[str, str, str]] = set()
    entries: list[Entry] = []
    for dir_entries in result:
        for entry in dir_entries:
            if not entry.name:
                continue
            key = (entry.name, entry.exec, entry.url)
            if key in seen:
                continue
            seen.add(key)
            entries.append(entry)
    entries.sort(key=lambda e: e.name.lower())
    return entries


def filter_entries(
    entries: list[Entry],
    query: str = "",
    kind: str = "All",
    show_terminal: bool = True,
) -> list[Entry]:
    """Return the entries matching *query* (name, generic name or comment)."""
    q = query.strip().lower()
    wanted = _KIND_FILTERS.get(kind)
    matched = []
    for entry in entries:
        if wanted is not None and entry.kind is not wanted:
            continue
        if not show_terminal and entry.terminal:
            continue
        if q and not any(q in text.lower() for text in (entry.name, entry.generic_name, entry.comment)):
            continue
        matched.append(entry)
    return matched


class MainWindow(QMainWindow):
    def __init__(self, app: DeskscanApp) -> None:
        super().__init__()
        self.app = app
        self.config = app.config
        self._entries: list[Entry] = []
        self._worker: ScanWorker | None = None

        self.setWindowTitle("deskscan")
        self.setMinimumSize(400, 300)
        self.resize(
            self.config.get("window_width"),
            self.config.get("window_height"),
        )

        central = QWidget()
        central.setObjectName("centralWidget")
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 6)
        layout.setSpacing(8)

        self.search = SearchBar()
        self.search.search_changed.connect(lambda _: self._apply_filter())
        self.search.kind_changed.connect(lambda _: self._apply_filter())
        self.search.submitted.connect(self._launch_current)
        layout.addWidget(self.search)

        self.list = QListWidget()
        self.list.setIconSize(QSize(32, 32))
        self.list.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.list.itemActivated.connect(self._on_activated)
        self.list.customContextMenuRequested.connect(self._show_actions)
        layout.addWidget(self.list, 1)

        self._loading_label = QLabel("Scanning applications...")
        self._loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._loading_label)

        status = QStatusBar()
        self.setStatusBar(status)

        self.refresh()

    # ── Scanning ──
    def directories(self) -> list[str]:
        return data_dirs() + list(self.config.get("extra_dirs") or [])

    def refresh(self) -> None:
        self._loading_label.setVisible(True)
        self.statusBar().showMessage("Scanning...")
        self._worker = ScanWorker(self.directories(), max_line=self.config.get("max_line"))
        self._worker.finished_sig.connect(self._on_scanned)
        self._worker.start()

    def _on_scanned(self, success: bool, result: object) -> None:
        self._loading_label.setVisible(False)
        if not success:
            self.statusBar().showMessage(f"Scan failed: {result}")
            QMessageBox.warning(self, "deskscan", f"Scan failed:\n{result}")
            return
        self._entries = flatten_entries(result)
        self._apply_filter()

    # ── Listing ──
    def _apply_filter(self) -> None:
        shown = filter_entries(
            self._entries,
            self.search.text(),
            self.search.kind_value(),
            self.config.get("show_terminal_apps"),
        )
        self.list.clear()
        for entry in shown:
            item = QListWidgetItem(resolve_icon(entry.icon), entry.name)
            item.setToolTip(entry.comment or entry.generic_name)
            item.setData(Qt.ItemDataRole.UserRole, entry)
            self.list.addItem(item)
        if shown:
            self.list.setCurrentRow(0)
        self.statusBar().showMessage(f"{len(shown)} of {len(self._entries)} entries")

    # ── Launching ──
    def _launch_current(self) -> None:
        item = self.list.currentItem()
        if item is not None:
            self._on_activated(item)

    def _on_activated(self, item: QListWidgetItem) -> None:
        entry: Entry = item.data(Qt.ItemDataRole.UserRole)
        self._run(lambda: launch(entry, terminal=self.config.get("terminal")), entry.name)

    def _show_actions(self, pos: QPoint) -> None:
        item = self.list.itemAt(pos)
        if item is None:
            return
        entry: Entry = item.data(Qt.ItemDataRole.UserRole)
        menu = QMenu(self)
        menu.addAction("Launch").triggered.connect(lambda checked=False: self._on_activated(item))
        if entry.actions:
            menu.addSeparator()
        for action in entry.actions:
            act = menu.addAction(resolve_icon(action.icon or entry.icon), action.name or "(unnamed)")
            act.triggered.connect(
                lambda checked=False, a=action: self._run(
                    lambda: launch_action(entry, a, terminal=self.config.get("terminal")),
                    a.name,
                )
            )
        menu.exec(self.list.mapToGlobal(pos))

    def _run(self, start, label: str) -> None:
        try:
            start()
        except DeskscanError as e:
            _log.warning("Launch of %s failed: %s", label, e)
            QMessageBox.warning(self, "deskscan", str(e))
            return
        self.statusBar().showMessage(f"Launched {label}")

    def closeEvent(self, event) -> None:
        self.config.set("window_width", self.width())
        self.config.set("window_height", self.height())
        if self._worker is not None:
            self._worker.wait()
        super().closeEvent(event)
