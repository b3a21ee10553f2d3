"""Start parsed desktop entries: applications, links and directories."""

from __future__ import annotations

import shlex
import shutil
import subprocess
from typing import Sequence

from deskscan.core.entry import ActionEntry, Entry, EntryKind, unquote_exec
from deskscan.core.errors import LaunchError
from deskscan.core.logger import get_logger
from deskscan.core.run_script import run_script

_log = get_logger("launcher")

TERMINAL_CANDIDATES = [
    ("x-terminal-emulator", ["-e"]),
    ("gnome-terminal", ["--"]),
    ("konsole", ["-e"]),
    ("xfce4-terminal", ["-x"]),
    ("alacritty", ["-e"]),
    ("xterm", ["-e"]),
]


def build_command(target: Entry | ActionEntry, args: str = "") -> str:
    """Fill the field codes of an entry or action Exec value and resolve its escapes."""
    return unquote_exec(target.expand_exec(args))


def find_terminal(preferred: str = "") -> list[str] | None:
    """Return the argv prefix of a terminal emulator, or None if none is installed.

    *preferred* is a command line such as ``"kitty -e"``; it wins when its
    program exists.
    """
    if preferred:
        parts = shlex.split(preferred)
        if parts and shutil.which(parts[0]):
            return parts
    for term, prefix in TERMINAL_CANDIDATES:
        if shutil.which(term):
            return [term] + prefix
    return None


def _spawn(argv: Sequence[str], cwd: str | None = None) -> subprocess.Popen:
    _log.info("Launching %s", " ".join(argv))
    try:
        return subprocess.Popen(
            list(argv),
            cwd=cwd or None,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        raise LaunchError(f"Failed to start {argv[0]}: {exc}") from exc


def _run_command(command: str, terminal: bool, cwd: str, preferred_terminal: str) -> subprocess.Popen:
    try:
        script = run_script(command)
    except OSError as exc:
        raise LaunchError(f"Failed to write run script: {exc}") from exc

    argv = [script]
    if terminal:
        prefix = find_terminal(preferred_terminal)
        if prefix is None:
            raise LaunchError("No terminal emulator found")
        argv = prefix + argv
    return _spawn(argv, cwd)


def launch(entry: Entry, args: str = "", terminal: str = "") -> subprocess.Popen:
    """Start *entry* with *args* filling its file/URL field codes.

    *terminal* overrides the terminal emulator used for Terminal=true entries.
    """
    if entry.kind is EntryKind.LINK:
        if not entry.url:
            raise LaunchError(f"{entry.name or 'Link'} has no URL")
        return _spawn(["xdg-open", entry.url])
    if entry.kind is EntryKind.DIRECTORY:
        if not entry.path:
            raise LaunchError(f"{entry.name or 'Directory'} has no path")
        return _spawn(["xdg-open", entry.path])
    if entry.kind is not EntryKind.APPLICATION:
        raise LaunchError(f"Cannot launch entry of type {entry.kind}")
    if not entry.exec:
        raise LaunchError(f"{entry.name or 'Application'} has no command")

    return _run_command(build_command(entry, args), entry.terminal, entry.path, terminal)


def launch_action(entry: Entry, action: ActionEntry, args: str = "", terminal: str = "") -> subprocess.Popen:
    """Start one of *entry*'s actions, inheriting its terminal and working directory."""
    if not action.exec:
        raise LaunchError(f"Action {action.name or '?'} has no command")
    return _run_command(build_command(action, args), entry.terminal, entry.path, terminal)
