"""Concurrent scan of desktop entry directories.

One thread lists each directory and opens its candidate files; a shared pool
of worker threads parses them. Results keep the order of the input
directories, while entries inside a directory follow completion order.
The first error aborts the whole scan.
"""

from __future__ import annotations

import os
import queue
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Sequence

from deskscan.core.entry import BUFFER_SIZE, Entry, parse
from deskscan.core.errors import DeskscanError, ListError, OpenError
from deskscan.core.logger import get_logger

_log = get_logger("scan")

DESKTOP_SUFFIX = ".desktop"


@dataclass
class _ScanTask:
    index: int
    path: str
    file: BinaryIO


class _Scan:
    """Shared state of one scan() call."""

    def __init__(self, dir_count: int) -> None:
        self.entries: list[list[Entry]] = [[] for _ in range(dir_count)]
        self.tasks: queue.Queue[_ScanTask | None] = queue.Queue()
        self.error: DeskscanError | None = None
        self.finished = threading.Event()
        self._lock = threading.Lock()
        self._pending = 0
        self._pending_lock = threading.Lock()
        self._workers = 0

    # ── Pending work accounting ──
    def add(self, n: int = 1) -> None:
        with self._pending_lock:
            self._pending += n

    def done(self) -> None:
        with self._pending_lock:
            self._pending -= 1
            if self._pending:
                return
        self.finished.set()
        for _ in range(self._workers):
            self.tasks.put(None)

    def fail(self, exc: DeskscanError) -> None:
        with self._lock:
            if self.error is None:
                self.error = exc
        self.finished.set()

    @property
    def failed(self) -> bool:
        return self.error is not None

    # ── Workers ──
    def start_workers(self, count: int, max_line: int) -> None:
        self._workers = count
        for n in range(count):
            threading.Thread(
                target=self._work,
                args=(max_line,),
                name=f"deskscan-worker-{n}",
                daemon=True,
            ).start()

    def _work(self, max_line: int) -> None:
        while True:
            task = self.tasks.get()
            if task is None:
                return
            try:
                if self.failed:
                    continue
                try:
                    entry = parse(task.file, max_line)
                except DeskscanError as exc:
                    _log.warning("Failed to parse %s: %s", task.path, exc)
                    self.fail(exc)
                    continue
                if entry is None:
                    continue
                with self._lock:
                    self.entries[task.index].append(entry)
            finally:
                task.file.close()
                self.done()

    # ── Directory listing ──
    def list_dir(self, index: int, directory: str) -> None:
        try:
            self._list_dir(index, directory)
        except DeskscanError as exc:
            _log.warning("%s", exc)
            self.fail(exc)
        finally:
            self.done()

    def _list_dir(self, index: int, directory: str) -> None:
        try:
            with os.scandir(directory) as it:
                candidates = [
                    e.path for e in it
                    if e.name.lower().endswith(DESKTOP_SUFFIX) and e.is_file()
                ]
        except FileNotFoundError:
            _log.debug("Skipping missing directory %s", directory)
            return
        except OSError as exc:
            raise ListError(directory, exc) from exc

        for path in candidates:
            if self.failed:
                return
            try:
                f = open(path, "rb")
            except FileNotFoundError:
                continue
            except OSError as exc:
                raise OpenError(path, exc) from exc
            self.add()
            self.tasks.put(_ScanTask(index, path, f))


def scan(
    directories: Sequence[str | Path],
    workers: int | None = None,
    max_line: int = BUFFER_SIZE,
) -> list[list[Entry]]:
    """Non-recursively scan *directories* for desktop entries and parse them.

    Returns one list of entries per directory, in the order given. Missing
    directories yield an empty list. Hidden entries are left out.
    Raises the first ListError, OpenError, FormatError or ReadError hit.
    """
    s = _Scan(len(directories))
    if not directories:
        return s.entries

    s.start_workers(workers or os.cpu_count() or 1, max_line)

    s.add(len(directories))
    for i, directory in enumerate(directories):
        threading.Thread(
            target=s.list_dir,
            args=(i, os.fspath(directory)),
            name=f"deskscan-list-{i}",
            daemon=True,
        ).start()

    s.finished.wait()
    if s.error is not None:
        raise s.error

    _log.debug(
        "Scanned %d directories: %d entries",
        len(directories), sum(len(e) for e in s.entries),
    )
    return s.entries
