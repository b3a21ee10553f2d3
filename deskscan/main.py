"""Entry point for deskscan."""

from __future__ import annotations

import argparse
import sys

from deskscan import __app_name__, __version__
from deskscan.core.config import Config
from deskscan.core.dirs import data_dirs
from deskscan.core.errors import DeskscanError
from deskscan.core.logger import get_logger, setup_logging
from deskscan.core.scan import scan

_log = get_logger("main")


def list_entries(directories: list[str], max_line: int) -> int:
    """Print every visible entry grouped by directory; return the exit code."""
    try:
        result = scan(directories, max_line=max_line)
    except DeskscanError as e:
        _log.error("Scan failed: %s", e)
        print(f"{__app_name__}: {e}", file=sys.stderr)
        return 1

    for directory, entries in zip(directories, result):
        if not entries:
            continue
        print(directory)
        for entry in entries:
            target = entry.url if entry.url else entry.exec
            print(f"  {entry.name}\t[{entry.kind}]\t{target}")
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog=__app_name__, description="Desktop entry launcher")
    parser.add_argument("--list", action="store_true", help="print scanned entries and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="echo the log to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args, qt_args = parser.parse_known_args(argv)

    setup_logging(verbose=args.verbose)
    if args.list:
        config = Config()
        directories = data_dirs() + list(config.get("extra_dirs") or [])
        sys.exit(list_entries(directories, config.get("max_line")))

    from deskscan.app import DeskscanApp
    from deskscan.ui.main_window import MainWindow

    app = DeskscanApp([sys.argv[0]] + qt_args)

    if not app.acquire_lock():
        from PyQt6.QtWidgets import QMessageBox
        QMessageBox.warning(None, "deskscan", "deskscan is already running.")
        sys.exit(1)

    window = MainWindow(app)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
