"""XDG data directory resolution for desktop entries."""

from __future__ import annotations

import os
from typing import Mapping

FALLBACK_DIRS = ["/usr/local/share/applications", "/usr/share/applications"]


def data_dirs(environ: Mapping[str, str] | None = None) -> list[str]:
    """Return the directories holding desktop entries, most important first.

    The user directory ($XDG_DATA_HOME/applications) always comes first,
    followed by every $XDG_DATA_DIRS entry. When $XDG_DATA_DIRS yields
    nothing the standard system locations are used instead.
    """
    if environ is None:
        environ = os.environ

    home = environ.get("HOME", "")
    if not home.strip():
        home = "~/"
    data_home = environ.get("XDG_DATA_HOME", "")
    if not data_home:
        data_home = os.path.join(home, ".local/share")

    dirs = [os.path.join(data_home, "applications")]
    for data_dir in environ.get("XDG_DATA_DIRS", "").split(":"):
        data_dir = data_dir.strip()
        if not data_dir:
            continue
        dirs.append(os.path.join(data_dir, "applications"))

    if len(dirs) == 1:
        dirs.extend(FALLBACK_DIRS)
    return dirs
