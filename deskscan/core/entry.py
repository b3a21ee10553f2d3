""".desktop file parser - turns one desktop entry into an Entry record.

Parsing is a single forward pass over the raw bytes:

  * blank lines and ``#`` comments are skipped
  * the first section header must be ``[Desktop Entry]`` (any case)
  * every later header opens a new action section; ``Name=``, ``Icon=`` and
    ``Exec=`` then belong to the latest action
  * ``NoDisplay=true`` / ``Hidden=true`` stop parsing and suppress the entry

Localized keys (``Name[de]=``) are not recognized.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import BinaryIO, Iterator

from deskscan.core.errors import FormatError, ReadError

BUFFER_SIZE = 32 * 1024  # longest accepted line, in bytes

_ENTRY_HEADER = b"[desktop entry]"
_TERMINAL = b"terminal=true"
_NO_DISPLAY = b"nodisplay=true"
_HIDDEN = b"hidden=true"

# Keys shared by the main section and action sections
_ACTION_KEYS = {b"name": "name", b"icon": "icon", b"exec": "exec"}
# Keys that always land on the main entry
_ENTRY_KEYS = {
    b"genericname": "generic_name",
    b"comment": "comment",
    b"path": "path",
    b"url": "url",
}

# Literal replacements resolving the escapes allowed in Exec values.
_EXEC_QUOTES = (
    ("%%", "%"),
    (r"\\\\\\\\", r"\\\\"),
    ("\\\\\\\\\\", "\\\\\\"),
    (r"\\\\ ", r"\\ "),
    (r"\\\\`", r"\\`"),
    (r"\\\\$", r"\\$"),
    (r"\\\\(", r"\\("),
    (r"\\\\)", r"\\)"),
)

_FIELD_CODES = ("%F", "%f", "%U", "%u")


class EntryKind(enum.IntEnum):
    """Value of the Type= key."""

    UNSPECIFIED = 0  # absent or unrecognized
    APPLICATION = 1  # execute a command
    LINK = 2  # open a URL
    DIRECTORY = 3  # open a file manager

    def __str__(self) -> str:
        return self.name.title()


_KINDS = {
    "application": EntryKind.APPLICATION,
    "link": EntryKind.LINK,
    "directory": EntryKind.DIRECTORY,
}


def _expand(template: str, args: str) -> str:
    for code in _FIELD_CODES:
        template = template.replace(code, args)
    return template


@dataclass
class ActionEntry:
    """One ``[Desktop Action ...]`` section."""
    name: str = ""
    icon: str = ""
    exec: str = ""

    def expand_exec(self, args: str) -> str:
        return _expand(self.exec, args)


@dataclass
class Entry:
    """Parsed fields of a desktop entry. Empty strings mean the key was absent.

    ``action_names`` comes from the ``Actions=`` key while ``actions`` holds
    the action sections actually present in the file; the two are filled
    independently and may disagree.
    """
    kind: EntryKind = EntryKind.UNSPECIFIED
    name: str = ""
    generic_name: str = ""
    comment: str = ""
    icon: str = ""
    path: str = ""
    exec: str = ""
    url: str = ""
    terminal: bool = False
    action_names: list[str] = field(default_factory=list)
    actions: list[ActionEntry] = field(default_factory=list)

    def expand_exec(self, args: str) -> str:
        """Fill the %F, %f, %U and %u field codes of Exec with *args*."""
        return _expand(self.exec, args)


def unquote_exec(value: str) -> str:
    """Resolve the escape sequences of a raw Exec value."""
    for quoted, unquoted in _EXEC_QUOTES:
        value = value.replace(quoted, unquoted)
    return value


def _lines(content: BinaryIO, max_line: int) -> Iterator[bytes]:
    while True:
        line = content.readline(max_line + 2)
        if not line:
            return
        if len(line.rstrip(b"\r\n")) > max_line:
            raise ReadError("token too long")
        yield line


def parse(content: BinaryIO, max_line: int = BUFFER_SIZE) -> Entry | None:
    """Parse a desktop entry read from the binary stream *content*.

    Returns None when the entry is hidden (NoDisplay=true or Hidden=true).
    Raises FormatError when the main section header is missing and ReadError
    when the stream fails or a line is longer than *max_line* bytes.
    """
    entry = Entry()
    found_header = False
    action: ActionEntry | None = None

    try:
        for raw in _lines(content, max_line):
            line = raw.strip()
            if not line or line.startswith(b"#"):
                continue

            if line.startswith(b"["):
                if not found_header:
                    if line.lower() != _ENTRY_HEADER:
                        raise FormatError()
                    found_header = True
                else:
                    action = ActionEntry()
                    entry.actions.append(action)
                continue

            lowered = line.lower()
            if lowered == _NO_DISPLAY or lowered == _HIDDEN:
                return None
            if lowered == _TERMINAL:
                entry.terminal = True
                continue

            key, sep, value = lowered.partition(b"=")
            if not sep or not value:
                continue
            # keep the original case of the value
            text = line[len(key) + 1:].decode("utf-8", errors="replace")

            if key == b"type":
                if entry.kind is EntryKind.UNSPECIFIED:
                    entry.kind = _KINDS.get(text.lower(), EntryKind.UNSPECIFIED)
            elif key in _ACTION_KEYS:
                target = action if action is not None else entry
                attr = _ACTION_KEYS[key]
                if not getattr(target, attr):
                    setattr(target, attr, text)
            elif key in _ENTRY_KEYS:
                attr = _ENTRY_KEYS[key]
                if not getattr(entry, attr):
                    setattr(entry, attr, text)
            elif key == b"actions":
                if not entry.action_names:
                    # the list ends with a mandatory ';'
                    entry.action_names = text.split(";")[:-1]
    except OSError as exc:
        raise ReadError(exc) from exc

    if not found_header:
        raise FormatError()
    return entry
