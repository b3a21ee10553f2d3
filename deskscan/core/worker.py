"""QThread wrapper running a desktop entry scan off the GUI thread."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Sequence

from PyQt6.QtCore import QThread, pyqtSignal

from deskscan.core.entry import BUFFER_SIZE
from deskscan.core.errors import DeskscanError
from deskscan.core.logger import get_logger
from deskscan.core.scan import scan

_log = get_logger("worker")


class ScanWorker(QThread):
    """Scans directories in a background thread.

    Signals:
        finished_sig(bool, object) - (success, list[list[Entry]] or the error)
    """

    finished_sig = pyqtSignal(bool, object)

    def __init__(
        self,
        directories: Sequence[str | Path],
        max_line: int = BUFFER_SIZE,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self._directories = list(directories)
        self._max_line = max_line

    def run(self) -> None:
        _log.info("ScanWorker: scanning %d directories", len(self._directories))
        start = time.monotonic()
        try:
            result = scan(self._directories, max_line=self._max_line)
        except DeskscanError as e:
            _log.error("ScanWorker: %s", e)
            self.finished_sig.emit(False, e)
            return
        _log.info("ScanWorker: done in %.3fs", time.monotonic() - start)
        self.finished_sig.emit(True, result)
