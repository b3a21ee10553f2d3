"""Search bar widget with entry type filter."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal, QTimer
from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLineEdit, QComboBox

KIND_FILTERS = ["All", "Applications", "Links", "Directories"]


class SearchBar(QWidget):
    """Search input with debounced signal and type dropdown."""

    search_changed = pyqtSignal(str)
    kind_changed = pyqtSignal(str)
    submitted = pyqtSignal()

    def __init__(self, placeholder: str = "Search applications...", parent=None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(10)

        self.search_input = QLineEdit()
        self.search_input.setObjectName("searchBar")
        self.search_input.setPlaceholderText(placeholder)
        self.search_input.setClearButtonEnabled(True)
        layout.addWidget(self.search_input, 1)

        self.kind_combo = QComboBox()
        self.kind_combo.addItems(KIND_FILTERS)
        layout.addWidget(self.kind_combo)

        self._debounce = QTimer(self)
        self._debounce.setSingleShot(True)
        self._debounce.setInterval(150)
        self._debounce.timeout.connect(lambda: self.search_changed.emit(self.search_input.text()))

        self.search_input.textChanged.connect(lambda _: self._debounce.start())
        self.search_input.returnPressed.connect(self.submitted.emit)
        self.kind_combo.currentTextChanged.connect(self.kind_changed.emit)

    def text(self) -> str:
        return self.search_input.text()

    def kind_value(self) -> str:
        return self.kind_combo.currentText()
