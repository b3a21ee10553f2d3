"""QApplication subclass handling configuration and single-instance locking."""

from PyQt6.QtCore import QLockFile, QStandardPaths
from PyQt6.QtWidgets import QApplication

from deskscan import __app_name__, __version__
from deskscan.core.config import Config


class DeskscanApp(QApplication):
    """Main application for deskscan."""

    def __init__(self, argv: list[str]) -> None:
        super().__init__(argv)
        self.setApplicationName(__app_name__)
        self.setApplicationVersion(__version__)
        self.setDesktopFileName("deskscan")
        self.config = Config()

    # ── Lock file for single instance ──
    def acquire_lock(self) -> bool:
        tmp = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.TempLocation)
        self._lock = QLockFile(f"{tmp}/deskscan.lock")
        return self._lock.tryLock(100)
